# fnvhash/utils/logging.py
"""
Logging Utilities — Consistent Logs for the fnvhash package

Intent
- Provide consistent logging across modules with a single configuration entrypoint.

What this module guarantees
- **Idempotent root configuration:** `configure_logging()` avoids duplicating handlers across repeated calls.
- **Stable log format:** timestamps + level + logger name + message.
- **Optional log-to-file:** add a FileHandler without breaking stream logging.

Key concepts
- Root handlers carry formatting (modules should not attach handlers).
- Hash engines never log per byte; only file hashing and config loading emit records.

Primary API
- `configure_logging(level="INFO", log_file=None) -> None`
- `configure_logging_from_params(params) -> None`
  Applies the `logging` block of a loaded ParametersConfig
  (called by fnvhash.utils.hashing.load_hashing_config).
- `get_logger(name: str) -> logging.Logger`
  Lazily configures logging with defaults if not configured yet.

External dependencies
- Python stdlib: `logging`, `pathlib`
"""


from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED = False


def _has_stream_handler(root: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    )


def _has_file_handler(root: logging.Logger, path: str) -> bool:
    target = Path(path).resolve()
    return any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename).resolve() == target
        for h in root.handlers
    )


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging (idempotent for handlers).
    If log_file is provided, adds a FileHandler in addition to the StreamHandler.
    """
    global _CONFIGURED

    root = logging.getLogger()
    root_level = getattr(logging, str(level).upper(), None)
    if not isinstance(root_level, int):
        raise ValueError(f"Invalid log level: {level}")
    root.setLevel(root_level)

    formatter = logging.Formatter(fmt=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)

    if not _has_stream_handler(root):
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        root.addHandler(sh)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        if not _has_file_handler(root, log_file):
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            root.addHandler(fh)

    _CONFIGURED = True


def configure_logging_from_params(params: Any) -> None:
    """
    Apply `params.logging.level` / `params.logging.log_file`.
    """
    configure_logging(level=params.logging.level, log_file=params.logging.log_file)


def get_logger(name: str) -> logging.Logger:
    """
    Module logger; configures logging with INFO defaults on first use.
    """
    if not _CONFIGURED:
        configure_logging(level="INFO", log_file=None)
    return logging.getLogger(name)


__all__ = ["get_logger", "configure_logging", "configure_logging_from_params"]
