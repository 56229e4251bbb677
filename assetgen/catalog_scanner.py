"""Asset catalog traversal and item aggregation utilities."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .logging import get_logger
from .models import AssetItem

CATALOG_SUFFIX = ".xcassets"

_logger = get_logger("catalog_scanner")


def _list_children(path: Path) -> List[str]:
    return sorted(os.listdir(path))


def _determine_folder(path: Path, folder: Optional[str], track_folders: bool) -> Optional[str]:
    # One catalog root maps to one top-level namespace.
    if not track_folders or folder is not None:
        return folder
    if path.name.endswith(CATALOG_SUFFIX):
        return path.name[: -len(CATALOG_SUFFIX)]
    return folder


def _child_folder(current: Optional[str], child: str, track_folders: bool) -> Optional[str]:
    if not track_folders:
        return current
    if current is None:
        return child
    return f"{current}/{child}"


class CatalogScanner:
    """Walks asset catalogs and collects entries of one asset kind."""

    def __init__(self) -> None:
        self.logger = _logger

    def scan(self, root: str | Path, type_suffix: str, track_folders: bool) -> List[AssetItem]:
        """Return every entry below ``root`` whose name ends with ``type_suffix``."""
        root_path = Path(root).expanduser().absolute()
        items = self._scan_directory(root_path, type_suffix, track_folders, None)
        self.logger.debug(
            "Found %d %s entries in %s", len(items), type_suffix, root_path
        )
        return items

    def scan_all(
        self, roots: Iterable[str | Path], type_suffix: str, track_folders: bool
    ) -> List[List[AssetItem]]:
        """Scan each root independently, preserving root order."""
        return [self.scan(root, type_suffix, track_folders) for root in roots]

    def _scan_directory(
        self,
        path: Path,
        type_suffix: str,
        track_folders: bool,
        folder: Optional[str],
    ) -> List[AssetItem]:
        try:
            children = _list_children(path)
        except OSError as exc:
            self.logger.warning("Could not read contents of %s: %s", path, exc)
            return []

        current_folder = _determine_folder(path, folder, track_folders)

        results: List[AssetItem] = []
        for child in children:
            child_path = path / child
            if child.endswith(type_suffix):
                name = child.replace(type_suffix, "")
                if not name:
                    self.logger.debug("Skipping unnamed entry %s", child_path)
                    continue
                results.append(
                    AssetItem(name=name, folder=current_folder, full_path=str(child_path))
                )
            elif child_path.is_dir():
                results.extend(
                    self._scan_directory(
                        child_path,
                        type_suffix,
                        track_folders,
                        _child_folder(current_folder, child, track_folders),
                    )
                )
        return results


def aggregate(per_root_results: Iterable[Sequence[AssetItem]]) -> List[AssetItem]:
    """Merge per-root scan results and stable-sort them by name."""
    merged: List[AssetItem] = []
    for items in per_root_results:
        merged.extend(items)
    return sorted(merged, key=lambda item: item.name)


def collect_input_files(roots: Iterable[str | Path]) -> List[str]:
    """Return every catalog root followed by all entries nested below it."""
    collected: List[str] = []
    for root in roots:
        root_path = Path(root).expanduser().absolute()
        collected.append(str(root_path))
        _collect_recursively(root_path, collected)
    return collected


def _collect_recursively(directory: Path, collected: List[str]) -> None:
    try:
        children = _list_children(directory)
    except OSError:
        return

    for child in children:
        child_path = directory / child
        if not child_path.exists():
            continue
        collected.append(str(child_path))
        if child_path.is_dir():
            _collect_recursively(child_path, collected)


def find_asset_catalogs(search_root: str | Path) -> List[Path]:
    """Locate ``*.xcassets`` directories below ``search_root``."""
    root_path = Path(search_root).expanduser().absolute()
    if root_path.name.endswith(CATALOG_SUFFIX) and root_path.is_dir():
        return [root_path]

    catalogs: List[Path] = []
    _search_catalogs(root_path, catalogs)
    return catalogs


def _search_catalogs(directory: Path, results: List[Path]) -> None:
    try:
        children = _list_children(directory)
    except OSError:
        return

    for child in children:
        if child.startswith("."):
            continue
        child_path = directory / child
        if not child_path.is_dir():
            continue
        if child.endswith(CATALOG_SUFFIX):
            results.append(child_path)
            continue
        _search_catalogs(child_path, results)


__all__ = [
    "CATALOG_SUFFIX",
    "CatalogScanner",
    "aggregate",
    "collect_input_files",
    "find_asset_catalogs",
]
