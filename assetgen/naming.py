"""Identifier sanitization for generated asset constants."""

from __future__ import annotations

from typing import List


def sanitize_identifier(raw: str) -> str:
    """Convert a catalog entry name into a lowerCamelCase identifier.

    Hyphens are treated like underscores. The first component is kept verbatim
    and every following component gets its first character upper-cased, so
    ``check-circle`` becomes ``checkCircle`` and ``a_b_c`` becomes ``aBC``.
    """
    components = raw.replace("-", "_").split("_")
    if not components:
        return raw

    first, rest = components[0], components[1:]
    return first + "".join(_capitalize_first(part) for part in rest)


def sanitize_path(folder: str) -> List[str]:
    """Sanitize every ``/``-separated segment of a folder path."""
    return [sanitize_identifier(segment) for segment in folder.split("/") if segment]


def _capitalize_first(part: str) -> str:
    return part[:1].upper() + part[1:]


__all__ = ["sanitize_identifier", "sanitize_path"]
