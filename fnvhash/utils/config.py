# fnvhash/utils/config.py
"""
Config Loader — fnvhash (Typed YAML Configs)

Intent
- Load + validate configs/parameters.yaml into typed configuration objects (Pydantic).
- Provide the default algorithm / text / file-reading knobs used by fnvhash.utils.hashing.

What this module guarantees
- **Strict validation:** invalid configs fail fast with actionable Pydantic errors.
- **Unicode whitespace hardening:** NBSP/BOM/narrow NBSP are normalized before YAML parsing.
- **Backwards compatibility (limited):**
  - top-level `hash` -> `hashing` remap
  - `hashing.variant` accepts "FNV-1a" / "fnv_1a" spellings
  - `hashing.width` accepts numeric strings
- **Deterministic defaults:** if a key is omitted, model defaults apply.

Config models
- HashingConfig: variant, width, text_encoding, text_errors, chunk_size, hex_digest
- LoggingConfig: level, log_file
- ParametersConfig: hashing, logging

Primary functions
- load_parameters(path="configs/parameters.yaml") -> ParametersConfig

External dependencies
- PyYAML: yaml.safe_load
- Pydantic v2: BaseModel, validators, model_validate
- Local: fnvhash.utils.logging.get_logger
"""


from __future__ import annotations

import codecs
import logging as _stdlib_logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from fnvhash.core.constants import as_variant, as_width
from fnvhash.utils.logging import get_logger

_TEXT_ERRORS = ("strict", "replace", "ignore", "backslashreplace", "surrogateescape", "xmlcharrefreplace")


# -----------------------------
# Parameter models
# -----------------------------
class HashingConfig(BaseModel):
    variant: Literal["fnv1", "fnv1a"] = "fnv1a"
    width: Literal[32, 64, 128] = 64

    # text -> bytes
    text_encoding: str = "utf-8"
    text_errors: str = "replace"

    # file reading
    chunk_size: int = 65536

    # helper output: zero-padded hex string (True) or int (False)
    hex_digest: bool = True

    @field_validator("variant", mode="before")
    @classmethod
    def _normalize_variant(cls, v: Any) -> Any:
        if v is None:
            return "fnv1a"
        try:
            return as_variant(v).value
        except ValueError as e:
            raise ValueError(f"hashing.variant: {e}") from e

    @field_validator("width", mode="before")
    @classmethod
    def _normalize_width(cls, v: Any) -> Any:
        if v is None:
            return 64
        if isinstance(v, bool):
            raise ValueError("hashing.width must be 32, 64 or 128")
        try:
            return int(as_width(v))
        except ValueError as e:
            raise ValueError(f"hashing.width: {e}") from e

    @field_validator("text_encoding")
    @classmethod
    def _validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"hashing.text_encoding is not a known codec: {v}") from e
        return v

    @field_validator("text_errors")
    @classmethod
    def _validate_errors(cls, v: str) -> str:
        if v not in _TEXT_ERRORS:
            raise ValueError(f"hashing.text_errors must be one of {list(_TEXT_ERRORS)}")
        return v

    @field_validator("chunk_size")
    @classmethod
    def _validate_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("hashing.chunk_size must be > 0")
        return v


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        lv = str(v).strip().upper()
        if not isinstance(getattr(_stdlib_logging, lv, None), int):
            raise ValueError(f"logging.level is not a valid level name: {v}")
        return lv


class ParametersConfig(BaseModel):
    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="before")
    @classmethod
    def _backward_compat_keys(cls, data: Any) -> Any:
        """
        Backward compatibility:
        - allow older config to use top-level 'hash' instead of 'hashing'
        """
        if not isinstance(data, dict):
            return data

        if "hashing" not in data and "hash" in data and isinstance(data["hash"], dict):
            data = dict(data)
            data["hashing"] = data.pop("hash")

        return data


# -----------------------------
# YAML helpers
# -----------------------------
def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with p.open("r", encoding="utf-8") as f:
        text = f.read()

    # sanitize BEFORE YAML parse (fix NBSP / BOM / narrow NBSP)
    for ch in ["\u00A0", "\u2007", "\u202F", "\uFEFF"]:
        text = text.replace(ch, " ")

    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/object: {path}")
    return data


def load_parameters(path: Union[str, Path] = "configs/parameters.yaml") -> ParametersConfig:
    """
    Load and validate parameters.yaml into a typed ParametersConfig.
    """
    logger = get_logger(__name__)
    raw = _load_yaml(path)
    try:
        params = ParametersConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid parameters.yaml: %s", e)
        raise
    logger.debug(
        "Loaded %s: variant=%s width=%s",
        path,
        params.hashing.variant,
        params.hashing.width,
    )
    return params


__all__ = [
    "HashingConfig",
    "LoggingConfig",
    "ParametersConfig",
    "load_parameters",
]
