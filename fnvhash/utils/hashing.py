# fnvhash/utils/hashing.py
"""
Hashing utilities (deterministic FNV fingerprints)

Intent
- Small, reusable helpers for stable fingerprints of bytes, text and files.
- Defaults (variant, width, text encoding, chunk size, output form) come from HashingConfig.
  load_hashing_config() reads it from configs/parameters.yaml and applies the logging block;
  pass the result as cfg=.
- Without cfg, HashingConfig defaults apply (fnv1a, 64-bit, utf-8, hex output).

Notes
- FNV is for *fingerprinting* and hash tables, not security.
- Hex output is zero-padded to width/4 characters (8 / 16 / 32).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from fnvhash.core.constants import VariantLike, WidthLike, as_width
from fnvhash.core.engine import BytesLike, FnvEngine
from fnvhash.io.readers import iter_file_chunks
from fnvhash.utils.config import HashingConfig, load_parameters
from fnvhash.utils.logging import configure_logging_from_params, get_logger

PathLike = Union[str, Path]
Digest = Union[int, str]


def load_hashing_config(path: PathLike = "configs/parameters.yaml") -> HashingConfig:
    """
    Load parameters.yaml, configure logging from its logging block, return its hashing block.
    """
    params = load_parameters(path)
    configure_logging_from_params(params)
    return params.hashing


def format_digest(value: int, width: WidthLike) -> str:
    """
    Zero-padded lowercase hex of a digest.
    """
    w = as_width(width)
    return f"{value:0{int(w) // 4}x}"


def _resolve(
    cfg: Optional[HashingConfig],
    variant: Optional[VariantLike],
    width: Optional[WidthLike],
) -> tuple[HashingConfig, FnvEngine]:
    c = cfg if cfg is not None else HashingConfig()
    engine = FnvEngine(
        c.variant if variant is None else variant,
        c.width if width is None else width,
    )
    return c, engine


def _output(engine: FnvEngine, hex_digest: bool) -> Digest:
    value = engine.finish()
    if hex_digest:
        return format_digest(value, engine.width)
    return value


def fnv_bytes(
    data: BytesLike,
    variant: Optional[VariantLike] = None,
    width: Optional[WidthLike] = None,
    *,
    cfg: Optional[HashingConfig] = None,
) -> int:
    """
    Integer FNV digest of raw bytes.
    """
    _, engine = _resolve(cfg, variant, width)
    engine.write(data)
    return engine.finish()


def fnv_text(
    s: str,
    variant: Optional[VariantLike] = None,
    width: Optional[WidthLike] = None,
    *,
    cfg: Optional[HashingConfig] = None,
    hex_digest: Optional[bool] = None,
) -> Digest:
    """
    FNV digest of a text string (encoded with cfg.text_encoding / cfg.text_errors).
    """
    c, engine = _resolve(cfg, variant, width)
    engine.write(s.encode(c.text_encoding, errors=c.text_errors))
    return _output(engine, c.hex_digest if hex_digest is None else hex_digest)


def fnv_file(
    path: PathLike,
    variant: Optional[VariantLike] = None,
    width: Optional[WidthLike] = None,
    *,
    cfg: Optional[HashingConfig] = None,
    hex_digest: Optional[bool] = None,
) -> Digest:
    """
    FNV digest of a file's raw bytes, read incrementally in cfg.chunk_size chunks.
    """
    logger = get_logger(__name__)
    c, engine = _resolve(cfg, variant, width)

    n_bytes = 0
    for chunk in iter_file_chunks(path, c.chunk_size):
        engine.write(chunk)
        n_bytes += len(chunk)

    logger.debug("Hashed %s (%d bytes) with %s", path, n_bytes, engine.name)
    return _output(engine, c.hex_digest if hex_digest is None else hex_digest)


__all__ = ["load_hashing_config", "format_digest", "fnv_bytes", "fnv_text", "fnv_file"]
