"""Tests for assetgen.orchestrator."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from assetgen.config import GenerationConfig
from assetgen.kinds import COLOR_KIND, IMAGE_KIND, AssetKind
from assetgen.orchestrator import Orchestrator
from tests._fixtures.catalog_builder import CatalogBuilder


def _seed_catalogs(builder: CatalogBuilder) -> list[Path]:
    assets = builder.catalog("Assets.xcassets", parent="Sources/App")
    builder.add(
        assets,
        [
            "logo.imageset",
            "check-circle.imageset",
            "Icons/arrow-up.imageset",
            "Icons/Small/dot.imageset",
            "accent.colorset",
        ],
    )
    colors = builder.catalog("Colors.xcassets", parent="Sources/App")
    builder.add(colors, ["Brand/primary.colorset", "logo.imageset"])
    return [assets, colors]


def test_generate_produces_unit_per_kind(catalog_builder: CatalogBuilder) -> None:
    roots = _seed_catalogs(catalog_builder)

    units = Orchestrator().generate(GenerationConfig(), roots)

    assert list(units) == ["image", "color"]
    image = units["image"]
    assert image.output_file_name == "AppImage+Generated.swift"
    assert 'static let checkCircle = AppImage(rawValue: "check-circle")' in image.source
    assert 'static let arrowUp = AppImage(rawValue: "arrow-up")' in image.source
    assert image.source.count("static let logo =") == 1

    color = units["color"]
    assert 'static let accent = AppColor(rawValue: "accent")' in color.source
    assert 'static let primary = AppColor(rawValue: "primary")' in color.source
    assert image.output_path is None


def test_generate_tracks_every_catalog_file(catalog_builder: CatalogBuilder) -> None:
    roots = _seed_catalogs(catalog_builder)

    units = Orchestrator().generate(GenerationConfig(), roots)
    input_files = units["color"].input_files

    assert input_files == units["image"].input_files
    assert str(roots[0]) in input_files
    assert str(roots[1]) in input_files
    assert str(roots[0] / "Icons" / "Small" / "dot.imageset" / "Contents.json") in input_files
    assert str(roots[1] / "logo.imageset") in input_files


def test_generate_namespaces_per_catalog(catalog_builder: CatalogBuilder) -> None:
    roots = _seed_catalogs(catalog_builder)
    config = GenerationConfig(use_namespacing=True, include_folder_paths=True)

    units = Orchestrator().generate(config, roots)
    source = units["image"].source

    assert "    enum Assets {" in source
    assert "        enum Icons {" in source
    assert "            enum Small {" in source
    assert 'static let dot = AppImage(rawValue: "Assets/Icons/Small/dot")' in source
    assert "    enum Colors {" in source
    assert 'static let logo = AppImage(rawValue: "Colors/logo")' in source
    assert 'static let logo = AppImage(rawValue: "Assets/logo")' in source


def test_generate_skips_disabled_kinds(catalog_builder: CatalogBuilder) -> None:
    roots = _seed_catalogs(catalog_builder)

    units = Orchestrator().generate(GenerationConfig(generate_images=False), roots)

    assert list(units) == ["color"]


def test_generate_reports_empty_kind_with_placeholder(catalog_builder: CatalogBuilder) -> None:
    catalog = catalog_builder.catalog()
    catalog_builder.add(catalog, ["only.imageset"])

    units = Orchestrator().generate(GenerationConfig(), [catalog])

    assert units["color"].source.endswith("// No color assets found in the asset catalog")


def test_generate_without_catalogs_returns_empty_mapping() -> None:
    assert Orchestrator().generate(GenerationConfig(), []) == {}


def test_generate_writes_outputs(catalog_builder: CatalogBuilder, tmp_path: Path) -> None:
    roots = _seed_catalogs(catalog_builder)
    output_dir = tmp_path / "out"
    config = GenerationConfig(image_output_file_name="Images.swift")

    units = Orchestrator().generate(config, roots, output_dir=output_dir)

    image_path = output_dir / "Images.swift"
    assert units["image"].output_path == image_path
    assert image_path.read_text(encoding="utf-8") == units["image"].source
    assert (output_dir / "AppColor+Generated.swift").exists()


def test_generate_omits_kind_when_write_fails(
    catalog_builder: CatalogBuilder, tmp_path: Path, monkeypatch, caplog
) -> None:
    roots = _seed_catalogs(catalog_builder)
    output_dir = tmp_path / "out"
    (output_dir / "AppImage+Generated.swift").mkdir(parents=True)
    monkeypatch.setattr(logging.getLogger("assetgen"), "propagate", True)

    with caplog.at_level("ERROR", logger="assetgen"):
        units = Orchestrator().generate(GenerationConfig(), roots, output_dir=output_dir)

    assert list(units) == ["color"]
    assert (output_dir / "AppColor+Generated.swift").exists()
    assert any(
        "Error generating AppImage+Generated.swift" in record.getMessage()
        and record.kind == "image"
        for record in caplog.records
    )


def test_generation_is_deterministic(catalog_builder: CatalogBuilder, tmp_path: Path) -> None:
    roots = _seed_catalogs(catalog_builder)
    config = GenerationConfig(use_namespacing=True)

    first = Orchestrator().generate(config, roots, output_dir=tmp_path / "first")
    second = Orchestrator().generate(config, roots, output_dir=tmp_path / "second")

    for kind in ("image", "color"):
        first_bytes = first[kind].output_path.read_bytes()  # type: ignore[union-attr]
        second_bytes = second[kind].output_path.read_bytes()  # type: ignore[union-attr]
        assert first_bytes == second_bytes


def test_generate_accepts_custom_kinds(catalog_builder: CatalogBuilder) -> None:
    catalog = catalog_builder.catalog()
    catalog_builder.add(catalog, ["body-text.symbolset"])
    symbol_kind = AssetKind(
        name="symbol",
        type_suffix=".symbolset",
        type_name="AppSymbol",
        definition_template=IMAGE_KIND.definition_template,
        default_output_file_name="AppSymbol+Generated.swift",
    )

    units = Orchestrator().generate(GenerationConfig(), [catalog], kinds=[symbol_kind, COLOR_KIND])

    assert units["symbol"].output_file_name == "AppSymbol+Generated.swift"
    assert 'static let bodyText = AppSymbol(rawValue: "body-text")' in units["symbol"].source


def test_run_discovers_catalogs_and_reads_config(catalog_builder: CatalogBuilder, tmp_path: Path) -> None:
    _seed_catalogs(catalog_builder)
    project = catalog_builder.path()
    (project / "assets-constant.json").write_text(
        json.dumps({"generateColors": False, "accessLevel": "internal"}),
        encoding="utf-8",
    )

    units = Orchestrator().run(project, tmp_path / "out")

    assert list(units) == ["image"]
    assert "\nextension AppImage {" in units["image"].source
    assert (tmp_path / "out" / "AppImage+Generated.swift").exists()


def test_run_falls_back_to_defaults_on_bad_config(
    catalog_builder: CatalogBuilder, tmp_path: Path
) -> None:
    _seed_catalogs(catalog_builder)
    project = catalog_builder.path()
    (project / "assets-constant.json").write_text("{not json", encoding="utf-8")

    units = Orchestrator().run(project, tmp_path / "out")

    assert list(units) == ["image", "color"]
    assert "public extension AppImage {" in units["image"].source


def test_run_uses_explicit_catalogs(catalog_builder: CatalogBuilder) -> None:
    roots = _seed_catalogs(catalog_builder)

    units = Orchestrator().run(catalog_builder.path(), None, catalogs=[roots[1]])

    assert "accent" not in units["color"].source
    assert 'static let primary = AppColor(rawValue: "primary")' in units["color"].source
