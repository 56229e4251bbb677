"""Logging utilities for assetgen runs."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "assetgen"
_NO_KIND = "-"


class _KindFilter(logging.Filter):
    """Fill in the asset kind for records logged outside a kind pipeline."""

    def filter(self, record: logging.LogRecord) -> bool:
        kind = getattr(record, "kind", None) or _NO_KIND
        record.kind = kind
        record.kind_prefix = "" if kind == _NO_KIND else f"{kind}: "
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the assetgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def get_kind_logger(kind: str, name: str | None = None) -> logging.LoggerAdapter:
    """Return a logger whose records carry the asset kind being generated."""
    return logging.LoggerAdapter(get_logger(name), {"kind": kind})


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the assetgen logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.addFilter(_KindFilter())
    stream_handler.setFormatter(
        logging.Formatter("[assetgen] %(levelname)s %(kind_prefix)s%(message)s")
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.addFilter(_KindFilter())
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(kind)s]: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_kind_logger", "get_logger"]
