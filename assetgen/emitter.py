"""Renders discovered asset items into Swift source."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence, Set

from jinja2 import Environment, FileSystemLoader, Template

from .config import GenerationConfig
from .kinds import AssetKind
from .logging import get_logger
from .models import AssetItem
from .naming import sanitize_identifier, sanitize_path

INDENT = "    "
BANNER_TEMPLATE = "extension.swift.j2"


def empty_placeholder(kind_name: str) -> str:
    """Comment emitted in place of the extension block when nothing was found."""
    return f"// No {kind_name} assets found in the asset catalog"


def swift_string(value: object) -> str:
    """Escape a value for use inside a Swift string literal."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


@dataclass
class _FolderNode:
    """One namespace container in the folder tree."""

    items: List[AssetItem] = field(default_factory=list)
    children: Dict[str, "_FolderNode"] = field(default_factory=dict)


class CodeEmitter:
    """Turns sorted asset items into the generated source for one kind."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._env = self._create_env(templates_dir)
        self._declaration_templates: Dict[str, Template] = {}
        self.logger = get_logger("emitter")

    def emit(self, items: Sequence[AssetItem], config: GenerationConfig, kind: AssetKind) -> str:
        """Return the preamble followed by the extension block for ``items``."""
        if config.use_namespacing:
            blocks = self._namespaced_blocks(items, config, kind)
            body = "\n\n".join(blocks)
        else:
            lines = self._flat_lines(items, config, kind)
            body = "\n".join(lines)

        definition = self._env.get_template(kind.definition_template).render()
        if not body:
            self.logger.info("No %s assets found", kind.name)
            return definition + "\n" + empty_placeholder(kind.name)

        extension = self._env.get_template(BANNER_TEMPLATE).render(
            modifier=config.access_level.modifier,
            type_name=kind.type_name,
            body=body,
        )
        return definition + "\n" + extension

    def declaration(self, kind: AssetKind, identifier: str, raw_value: str) -> str:
        """Render a single constant declaration."""
        template = self._declaration_templates.get(kind.declaration_template)
        if template is None:
            template = self._env.from_string(kind.declaration_template)
            self._declaration_templates[kind.declaration_template] = template
        return template.render(
            identifier=identifier,
            raw_value=raw_value,
            type_name=kind.type_name,
        )

    def _flat_lines(
        self, items: Sequence[AssetItem], config: GenerationConfig, kind: AssetKind
    ) -> List[str]:
        def raw_value(item: AssetItem) -> str:
            if config.include_folder_paths and item.folder is not None:
                return f"{item.folder}/{item.name}"
            return item.name

        return self._declarations(items, config, kind, raw_value, depth=1)

    def _namespaced_blocks(
        self, items: Sequence[AssetItem], config: GenerationConfig, kind: AssetKind
    ) -> List[str]:
        root_items: List[AssetItem] = []
        by_folder: Dict[str, List[AssetItem]] = {}
        for item in items:
            if not item.folder:
                root_items.append(item)
            else:
                by_folder.setdefault(item.folder, []).append(item)

        blocks: List[str] = []
        root_lines = self._declarations(
            root_items, config, kind, lambda item: item.name, depth=1
        )
        if root_lines:
            blocks.append("\n".join(root_lines))

        # Segments are keyed by their sanitized form so that folders which
        # sanitize alike share one container.
        tree = _FolderNode()
        for folder in sorted(by_folder):
            node = tree
            for segment in sanitize_path(folder):
                node = node.children.setdefault(segment, _FolderNode())
            node.items.extend(by_folder[folder])

        for name, node in tree.children.items():
            lines = self._render_namespace(name, node, config, kind, depth=1)
            if lines:
                blocks.append("\n".join(lines))
        return blocks

    def _render_namespace(
        self,
        name: str,
        node: _FolderNode,
        config: GenerationConfig,
        kind: AssetKind,
        depth: int,
    ) -> List[str]:
        indent = INDENT * depth

        def raw_value(item: AssetItem) -> str:
            if config.include_folder_paths:
                return f"{item.folder}/{item.name}"
            return item.name

        # Merged folders keep first-sorted-name-wins across the container.
        items = sorted(node.items, key=lambda item: item.name)
        lines = [f"{indent}enum {name} {{"]
        lines.extend(self._declarations(items, config, kind, raw_value, depth=depth + 1))
        for child_name, child in node.children.items():
            lines.extend(self._render_namespace(child_name, child, config, kind, depth + 1))
        lines.append(f"{indent}}}")
        return lines

    def _declarations(
        self,
        items: Sequence[AssetItem],
        config: GenerationConfig,
        kind: AssetKind,
        raw_value,
        *,
        depth: int,
    ) -> List[str]:
        # Deduplication is scoped to one call: first sorted name wins.
        seen: Set[str] = set()
        lines: List[str] = []
        indent = INDENT * depth
        for item in items:
            identifier = sanitize_identifier(item.name)
            name = config.name_mapping.get(item.name, identifier)
            if name in seen:
                self.logger.debug(
                    "Dropping duplicate %s identifier %s for %s", kind.name, name, item.full_path
                )
                continue
            seen.add(name)
            lines.append(indent + self.declaration(kind, name, raw_value(item)))
        return lines

    def _create_env(self, templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["swift_string"] = swift_string
        return env


__all__ = ["CodeEmitter", "empty_placeholder", "swift_string"]
