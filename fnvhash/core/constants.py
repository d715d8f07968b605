# fnvhash/core/constants.py
"""
FNV Constants — Widths, Variants, Offset Bases, Primes

Intent
- Keep every published FNV constant in one table so engines never re-derive them.
- Model the supported (variant, width) space as closed enumerations.

Constant table (canonical FNV values)
- 32-bit : offset 0x811c9dc5                          prime 0x01000193
- 64-bit : offset 0xcbf29ce484222325                  prime 0x00000100000001b3
- 128-bit: offset 0x6c62272e07bb014262b821756295c58d  prime 2**88 + 0x13b

Notes
- The offset basis of every width is the FNV-0 digest of FNV0_BASIS_SEED
  (see fnvhash.core.engine.derive_offset_basis).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Literal, Union


class Width(IntEnum):
    W32 = 32
    W64 = 64
    W128 = 128


class Variant(str, Enum):
    FNV0 = "fnv0"
    FNV1 = "fnv1"
    FNV1A = "fnv1a"


WidthLike = Union[Width, Literal[32, 64, 128]]
VariantLike = Union[Variant, Literal["fnv0", "fnv1", "fnv1a"]]


@dataclass(frozen=True)
class FnvParams:
    width: Width
    offset_basis: int
    prime: int

    @property
    def mask(self) -> int:
        return (1 << int(self.width)) - 1

    @property
    def digest_size(self) -> int:
        return int(self.width) // 8


FNV_PARAMS: Dict[Width, FnvParams] = {
    Width.W32: FnvParams(
        width=Width.W32,
        offset_basis=0x811C9DC5,
        prime=0x01000193,
    ),
    Width.W64: FnvParams(
        width=Width.W64,
        offset_basis=0xCBF29CE484222325,
        prime=0x00000100_000001B3,
    ),
    Width.W128: FnvParams(
        width=Width.W128,
        offset_basis=0x6C62272E_07BB0142_62B82175_6295C58D,
        prime=0x00000000_01000000_00000000_0000013B,
    ),
}

FNV0_BASIS_SEED = b"chongo <Landon Curt Noll> /\\../\\"


def as_width(width: WidthLike) -> Width:
    """
    Coerce 32/64/128 (int, digit str or Width) into Width.
    Raises ValueError for anything else, including bools and floats.
    """
    value = None
    if isinstance(width, int) and not isinstance(width, bool):
        value = int(width)
    elif isinstance(width, str) and width.strip().isdigit():
        value = int(width.strip())

    if value is None or value not in {int(w) for w in Width}:
        supported = ", ".join(str(int(w)) for w in Width)
        raise ValueError(f"Unsupported FNV width {width!r}; expected one of: {supported}")
    return Width(value)


def as_variant(variant: VariantLike) -> Variant:
    """
    Coerce a variant name into Variant.
    Accepts the canonical names plus "FNV-1a" / "fnv_1a" style spellings.
    """
    if isinstance(variant, Variant):
        return variant
    key = str(variant).strip().lower().replace("-", "").replace("_", "")
    try:
        return Variant(key)
    except ValueError:
        supported = ", ".join(v.value for v in Variant)
        raise ValueError(f"Unsupported FNV variant {variant!r}; expected one of: {supported}") from None


def params_for(width: WidthLike) -> FnvParams:
    return FNV_PARAMS[as_width(width)]


__all__ = [
    "Width",
    "Variant",
    "WidthLike",
    "VariantLike",
    "FnvParams",
    "FNV_PARAMS",
    "FNV0_BASIS_SEED",
    "as_width",
    "as_variant",
    "params_for",
]
