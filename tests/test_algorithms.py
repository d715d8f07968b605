# tests/test_algorithms.py

from __future__ import annotations

import pytest

from fnvhash.core.algorithms import (
    FnvKey,
    algorithms_available,
    bucket_index,
    fnv1_32,
    fnv1_64,
    fnv1_128,
    fnv1a_32,
    fnv1a_64,
    fnv1a_128,
    fnv_digest,
    new,
)
from fnvhash.core.constants import Variant, Width
from fnvhash.core.engine import FnvEngine


def test_algorithms_available_lists_every_pair():
    assert algorithms_available == {
        "fnv0_32",
        "fnv0_64",
        "fnv0_128",
        "fnv1_32",
        "fnv1_64",
        "fnv1_128",
        "fnv1a_32",
        "fnv1a_64",
        "fnv1a_128",
    }


def test_new_by_name_with_initial_data():
    e = new("fnv1a_32", b"foobar")
    assert isinstance(e, FnvEngine)
    assert e.name == "fnv1a_32"
    assert e.finish() == 0xBF9CF968


def test_new_is_case_insensitive():
    assert new(" FNV1A_64 ").name == "fnv1a_64"


def test_new_unknown_name_raises():
    with pytest.raises(ValueError) as e:
        new("fnv1a_16")
    msg = str(e.value).lower()
    assert "unsupported fnv algorithm" in msg
    assert "fnv1a_64" in msg


def test_one_shot_functions_match_engines():
    data = b"Binary Refinery"
    assert fnv1_32(data) == 0xE6A31132
    assert fnv1_64(data) == 0x0AB104D8DC2BDA52
    assert fnv1_128(data) == 0x49D0158DC76800C40F445F5EEAF4E3AA
    assert fnv1a_32(data) == 0xB5772BEC
    assert fnv1a_64(data) == 0x33FB62ED8C29C76C
    assert fnv1a_128(data) == 0xC1554AACCB9C92213E001D3679BFD5CC


def test_fnv_digest_defaults_to_fnv1a_64():
    assert fnv_digest(b"a") == 0xAF63DC4C8601EC8C
    assert fnv_digest(b"a", Variant.FNV1, Width.W64) == 0xAF63BD4C8601B7BE


def test_fnv_key_equality_and_hash():
    a = FnvKey(b"foobar")
    b = FnvKey(bytearray(b"foobar"))
    c = FnvKey(b"foobaz")

    assert a == b
    assert a != c
    assert a.digest == 0x85944171F73967E8
    assert hash(a) == hash(b)
    assert hash(a) == hash(a.digest)
    assert a.data == b"foobar"
    assert a != b"foobar"


def test_fnv_key_in_dict_and_set():
    d = {FnvKey(b"k1"): 1, FnvKey(b"k2"): 2}
    assert d[FnvKey(b"k1")] == 1
    assert d[FnvKey(b"k2")] == 2

    s = {FnvKey(b"x"), FnvKey(b"x"), FnvKey(b"y")}
    assert len(s) == 2


def test_fnv_key_rejects_str():
    with pytest.raises(TypeError):
        FnvKey("text")  # type: ignore[arg-type]


def test_bucket_index_range_and_stability():
    for i in range(200):
        key = f"key-{i}".encode("utf-8")
        idx = bucket_index(key, 16)
        assert 0 <= idx < 16
        assert idx == bucket_index(key, 16)
        assert idx == fnv1a_64(key) % 16


def test_bucket_index_with_explicit_algorithm():
    assert bucket_index(b"foobar", 1000, "fnv1a", 32) == 0xBF9CF968 % 1000


@pytest.mark.parametrize("n", [0, -1])
def test_bucket_index_rejects_non_positive_buckets(n):
    with pytest.raises(ValueError):
        bucket_index(b"x", n)
