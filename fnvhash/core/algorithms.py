# fnvhash/core/algorithms.py
"""
Algorithm registry + one-shot helpers (hashlib-style)

Intent
- Name every supported (variant, width) pair the way hashlib names algorithms
  ("fnv1a_64", "fnv1_128", ...), and construct engines by name.
- Offer one-shot integer digests and a dict/set key adapter.

Primary API
- algorithms_available: frozenset[str]
- new(name, data=b"") -> FnvEngine
- fnv1_32 / fnv1_64 / fnv1_128 / fnv1a_32 / fnv1a_64 / fnv1a_128 (data -> int)
- FnvKey(data): bytes wrapper hashed with FNV-1a 64 for use as a dict/set key
- bucket_index(data, n_buckets, variant="fnv1a", width=64) -> int
"""

from __future__ import annotations

from typing import Dict, Tuple

from fnvhash.core.constants import Variant, VariantLike, Width, WidthLike, as_variant, as_width
from fnvhash.core.engine import BytesLike, FnvEngine

_ALGORITHMS: Dict[str, Tuple[Variant, Width]] = {
    f"{v.value}_{int(w)}": (v, w) for v in Variant for w in Width
}

algorithms_available = frozenset(_ALGORITHMS)


def new(name: str, data: BytesLike = b"") -> FnvEngine:
    """
    Construct an engine by algorithm name (case-insensitive), optionally fed with data.
    """
    key = str(name).strip().lower()
    if key not in _ALGORITHMS:
        raise ValueError(
            f"Unsupported FNV algorithm {name!r}; expected one of: {sorted(algorithms_available)}"
        )
    variant, width = _ALGORITHMS[key]
    engine = FnvEngine(variant, width)
    engine.write(data)
    return engine


def fnv_digest(data: BytesLike, variant: VariantLike = Variant.FNV1A, width: WidthLike = Width.W64) -> int:
    engine = FnvEngine(variant, width)
    engine.write(data)
    return engine.finish()


def fnv1_32(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1, Width.W32)


def fnv1_64(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1, Width.W64)


def fnv1_128(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1, Width.W128)


def fnv1a_32(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1A, Width.W32)


def fnv1a_64(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1A, Width.W64)


def fnv1a_128(data: BytesLike) -> int:
    return fnv_digest(data, Variant.FNV1A, Width.W128)


class FnvKey:
    """
    Immutable byte key whose hash() is the FNV-1a 64-bit digest.

    Equality is plain byte equality, so two keys with equal bytes always land
    in the same dict/set slot.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: BytesLike) -> None:
        if isinstance(data, str):
            raise TypeError("FnvKey wraps bytes; encode str first")
        self._data = bytes(data)
        self._hash = fnv1a_64(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def digest(self) -> int:
        return self._hash

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FnvKey):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"FnvKey({self._data!r})"


def bucket_index(
    data: BytesLike,
    n_buckets: int,
    variant: VariantLike = Variant.FNV1A,
    width: WidthLike = Width.W64,
) -> int:
    """
    Map data to a bucket in [0, n_buckets).
    """
    if n_buckets <= 0:
        raise ValueError("n_buckets must be > 0")
    return fnv_digest(data, as_variant(variant), as_width(width)) % n_buckets


__all__ = [
    "algorithms_available",
    "new",
    "fnv_digest",
    "fnv1_32",
    "fnv1_64",
    "fnv1_128",
    "fnv1a_32",
    "fnv1a_64",
    "fnv1a_128",
    "FnvKey",
    "bucket_index",
]
