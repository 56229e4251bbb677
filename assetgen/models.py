"""Core data models shared across assetgen components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class AssetItem:
    """A typed entry discovered inside an asset catalog."""

    name: str
    folder: Optional[str]
    full_path: str


@dataclass
class GeneratedUnit:
    """Generated source for one asset kind plus the inputs it was built from."""

    kind: str
    output_file_name: str
    source: str
    input_files: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None
