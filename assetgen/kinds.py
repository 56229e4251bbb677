"""Asset kinds supported by the generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DECLARATION_TEMPLATE = (
    'static let {{ identifier }} = {{ type_name }}(rawValue: "{{ raw_value | swift_string }}")'
)


@dataclass(frozen=True)
class AssetKind:
    """Everything needed to run the generation pipeline for one asset type."""

    name: str
    type_suffix: str
    type_name: str
    definition_template: str
    default_output_file_name: str
    declaration_template: str = DECLARATION_TEMPLATE


IMAGE_KIND = AssetKind(
    name="image",
    type_suffix=".imageset",
    type_name="AppImage",
    definition_template="image_definition.swift.j2",
    default_output_file_name="AppImage+Generated.swift",
)

COLOR_KIND = AssetKind(
    name="color",
    type_suffix=".colorset",
    type_name="AppColor",
    definition_template="color_definition.swift.j2",
    default_output_file_name="AppColor+Generated.swift",
)

BUILTIN_KINDS: Tuple[AssetKind, ...] = (IMAGE_KIND, COLOR_KIND)


__all__ = [
    "AssetKind",
    "BUILTIN_KINDS",
    "COLOR_KIND",
    "DECLARATION_TEMPLATE",
    "IMAGE_KIND",
]
