"""Pipeline orchestration: scan catalogs, emit sources, persist them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .catalog_scanner import (
    CatalogScanner,
    aggregate,
    collect_input_files,
    find_asset_catalogs,
)
from .config import ConfigError, GenerationConfig, load_config
from .emitter import CodeEmitter
from .kinds import BUILTIN_KINDS, AssetKind
from .logging import get_kind_logger, get_logger
from .models import GeneratedUnit


class Orchestrator:
    """Runs the scan/aggregate/emit pipeline once per asset kind."""

    def __init__(
        self,
        scanner: CatalogScanner | None = None,
        emitter: CodeEmitter | None = None,
    ) -> None:
        self.scanner = scanner or CatalogScanner()
        self.emitter = emitter or CodeEmitter()
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        output_dir: str | Path | None = None,
        *,
        config_path: str | Path | None = None,
        catalogs: Optional[Sequence[str | Path]] = None,
    ) -> Dict[str, GeneratedUnit]:
        """Load configuration, discover catalogs under ``path`` and generate."""
        search_root = Path(path).expanduser().resolve()
        self.logger.info("Starting generation run for %s", search_root)
        config = self._load_config(Path(config_path) if config_path else search_root)

        if catalogs:
            catalog_roots = [Path(catalog).expanduser().resolve() for catalog in catalogs]
        else:
            catalog_roots = find_asset_catalogs(search_root)
        self.logger.debug("Using %d asset catalogs", len(catalog_roots))

        target_dir = Path(output_dir).expanduser() if output_dir is not None else None
        return self.generate(config, catalog_roots, output_dir=target_dir)

    def generate(
        self,
        config: GenerationConfig,
        catalog_roots: Sequence[str | Path],
        kinds: Optional[Iterable[AssetKind]] = None,
        *,
        output_dir: Path | None = None,
    ) -> Dict[str, GeneratedUnit]:
        """Generate one source unit per enabled kind.

        Kinds whose output cannot be written to ``output_dir`` are left out of
        the returned mapping; the remaining kinds still run.
        """
        if not catalog_roots:
            self.logger.warning("No asset catalogs to process")
            return {}

        selected = list(kinds) if kinds is not None else list(BUILTIN_KINDS)
        input_files = collect_input_files(catalog_roots)

        units: Dict[str, GeneratedUnit] = {}
        for kind in selected:
            if not config.is_enabled(kind.name):
                self.logger.debug("Skipping disabled kind %s", kind.name)
                continue

            kind_logger = get_kind_logger(kind.name, "orchestrator")
            unit = self._generate_kind(config, catalog_roots, kind, input_files, kind_logger)
            if output_dir is not None:
                try:
                    unit.output_path = self._write_unit(output_dir, unit, kind_logger)
                except OSError as exc:
                    self._log_exception(
                        f"Error generating {unit.output_file_name}", exc, kind_logger
                    )
                    continue
            units[kind.name] = unit
        return units

    def _generate_kind(
        self,
        config: GenerationConfig,
        catalog_roots: Sequence[str | Path],
        kind: AssetKind,
        input_files: List[str],
        logger: logging.LoggerAdapter,
    ) -> GeneratedUnit:
        per_root = self.scanner.scan_all(catalog_roots, kind.type_suffix, config.track_folders)
        items = aggregate(per_root)
        logger.debug("Aggregated %d %s items", len(items), kind.name)

        source = self.emitter.emit(items, config, kind)
        output_file_name = config.output_file_name_for(kind.name) or kind.default_output_file_name
        return GeneratedUnit(
            kind=kind.name,
            output_file_name=output_file_name,
            source=source,
            input_files=list(input_files),
        )

    def _write_unit(
        self, output_dir: Path, unit: GeneratedUnit, logger: logging.LoggerAdapter
    ) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / unit.output_file_name
        output_path.write_text(unit.source, encoding="utf-8")
        logger.info("Generated %s", output_path)
        return output_path

    def _load_config(self, config_path: Path) -> GenerationConfig:
        try:
            return load_config(config_path)
        except ConfigError as exc:
            self.logger.warning("Falling back to default configuration: %s", exc)
            return GenerationConfig()

    def _log_exception(
        self, message: str, exc: Exception, logger: logging.LoggerAdapter
    ) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("%s: %s", message, exc)
        else:
            logger.error("%s: %s", message, exc)


__all__ = ["Orchestrator"]
