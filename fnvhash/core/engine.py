# fnvhash/core/engine.py
"""
Hash Engine — FNV-0 / FNV-1 / FNV-1a over 32/64/128-bit registers

Intent
- One generic engine holding a single mutable digest register.
- Width and variant are fixed at construction (closed enums); constants come from
  fnvhash.core.constants so every width shares the same update loop.

Update rule (per input byte b, arithmetic mod 2**W)
- FNV-0 / FNV-1: h = (h * PRIME) mod 2**W ; h = h XOR b
- FNV-1a       : h = h XOR b ; h = (h * PRIME) mod 2**W
FNV-0 is FNV-1 starting from 0 instead of the offset basis; it is only kept to derive
the offset basis itself.

Primary API
- FnvEngine(variant="fnv1a", width=64)
  - write(data) / finish() / reset()
  - hashlib-style: update(), digest(), hexdigest(), copy(), name, digest_size, block_size
- Fnv1_32 / Fnv1_64 / Fnv1_128 / Fnv1a_32 / Fnv1a_64 / Fnv1a_128
  - engines with the (variant, width) pair bound at class level; optional initial data
- derive_offset_basis(width) -> int

Concurrency
- Engines are not synchronized. Use one engine per thread, or copy() a shared prefix.
"""

from __future__ import annotations

from typing import Union

from fnvhash.core.constants import (
    FNV0_BASIS_SEED,
    FnvParams,
    Variant,
    VariantLike,
    Width,
    WidthLike,
    as_variant,
    params_for,
)

BytesLike = Union[bytes, bytearray, memoryview]


def _byte_view(data: BytesLike) -> memoryview:
    if isinstance(data, str):
        raise TypeError("FNV engines hash bytes; encode str first (see fnvhash.utils.hashing.fnv_text)")
    view = memoryview(data)
    if not view.c_contiguous:
        # strided / sliced buffers cannot be cast in place
        view = memoryview(view.tobytes())
    return view.cast("B")


class FnvEngine:
    """
    Running FNV hash of a growing byte sequence.

    finish() never mutates the register, so it can be interleaved with write() to read
    intermediate digests. write(a); write(b) is equivalent to write(a + b).
    """

    block_size = 1

    def __init__(self, variant: VariantLike = Variant.FNV1A, width: WidthLike = Width.W64) -> None:
        self._variant = as_variant(variant)
        self._params: FnvParams = params_for(width)
        self._hash = self._initial()

    def _initial(self) -> int:
        if self._variant is Variant.FNV0:
            return 0
        return self._params.offset_basis

    # ----- core -----

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def width(self) -> Width:
        return self._params.width

    def write(self, data: BytesLike) -> None:
        view = _byte_view(data)
        if not view:
            return

        h = self._hash
        prime = self._params.prime
        mask = self._params.mask

        if self._variant is Variant.FNV1A:
            for b in view:
                h = ((h ^ b) * prime) & mask
        else:
            for b in view:
                h = ((h * prime) & mask) ^ b

        self._hash = h

    def finish(self) -> int:
        return self._hash

    def reset(self) -> None:
        self._hash = self._initial()

    # ----- hashlib-style surface -----

    @property
    def name(self) -> str:
        return f"{self._variant.value}_{int(self._params.width)}"

    @property
    def digest_size(self) -> int:
        return self._params.digest_size

    def update(self, data: BytesLike) -> None:
        self.write(data)

    def digest(self) -> bytes:
        """Big-endian bytes of the register, digest_size long."""
        return self._hash.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "FnvEngine":
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        return other

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(variant={self._variant.value!r}, "
            f"width={int(self._params.width)}, digest=0x{self.hexdigest()})"
        )


class _BoundEngine(FnvEngine):
    """
    FnvEngine with the (variant, width) pair selected by the class itself.
    """

    VARIANT: Variant = Variant.FNV1A
    WIDTH: Width = Width.W64

    def __init__(self, data: BytesLike = b"") -> None:
        super().__init__(self.VARIANT, self.WIDTH)
        self.write(data)


class Fnv1_32(_BoundEngine):
    VARIANT = Variant.FNV1
    WIDTH = Width.W32


class Fnv1_64(_BoundEngine):
    VARIANT = Variant.FNV1
    WIDTH = Width.W64


class Fnv1_128(_BoundEngine):
    VARIANT = Variant.FNV1
    WIDTH = Width.W128


class Fnv1a_32(_BoundEngine):
    VARIANT = Variant.FNV1A
    WIDTH = Width.W32


class Fnv1a_64(_BoundEngine):
    VARIANT = Variant.FNV1A
    WIDTH = Width.W64


class Fnv1a_128(_BoundEngine):
    VARIANT = Variant.FNV1A
    WIDTH = Width.W128


def derive_offset_basis(width: WidthLike) -> int:
    """
    FNV-0 digest of the historical seed string; equals the published offset basis.
    """
    engine = FnvEngine(Variant.FNV0, width)
    engine.write(FNV0_BASIS_SEED)
    return engine.finish()


__all__ = [
    "BytesLike",
    "FnvEngine",
    "Fnv1_32",
    "Fnv1_64",
    "Fnv1_128",
    "Fnv1a_32",
    "Fnv1a_64",
    "Fnv1a_128",
    "derive_offset_basis",
]
