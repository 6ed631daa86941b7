import pytest
from gmpy2 import mpz

from rsa_engine.converters import BigIntConverter


def test_from_int_is_least_significant_limb_first():
    buf = BigIntConverter.from_int(0x00000003_00000002_00000001, 4)
    assert list(buf) == [1, 2, 3, 0]


def test_from_int_accepts_mpz():
    assert list(BigIntConverter.from_int(mpz(0xFFFFFFFF_FFFFFFFF), 2)) == [0xFFFFFFFF, 0xFFFFFFFF]


def test_from_int_rejects_values_wider_than_buffer():
    with pytest.raises(ValueError, match="does not fit in 64 bits"):
        BigIntConverter.from_int(1 << 64, 2)


def test_from_int_rejects_negative_values():
    with pytest.raises(ValueError):
        BigIntConverter.from_int(-1, 2)


def test_to_int_returns_mpz():
    value = BigIntConverter.to_int([0x89ABCDEF, 0x01234567])
    assert isinstance(value, type(mpz(0)))
    assert value == 0x01234567_89ABCDEF


def test_bytes_are_big_endian():
    buf = BigIntConverter.from_bytes(bytes.fromhex("0102030405"), 2)
    assert list(buf) == [0x02030405, 0x01]
    assert BigIntConverter.to_bytes(buf) == bytes.fromhex("0000000102030405")


def test_bytes_with_leading_zero_padding_fit():
    """Test that a wire-width value with zero padding still fits."""
    data = bytes(4) + bytes.fromhex("deadbeef")
    assert list(BigIntConverter.from_bytes(data, 1)) == [0xDEADBEEF]


def test_hex_with_and_without_prefix():
    assert list(BigIntConverter.from_hex("0x1_0000_0000", 2)) == [0, 1]
    assert list(BigIntConverter.from_hex("100000000", 2)) == [0, 1]
    assert BigIntConverter.to_hex([0, 1]) == "100000000"
    assert BigIntConverter.to_hex([0, 0]) == "0"
