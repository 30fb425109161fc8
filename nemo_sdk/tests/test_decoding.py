from __future__ import annotations

from decimal import Decimal

import pytest

from nemo_sdk.core.errors import DecodeError, ValidationError
from nemo_sdk.core.utils.bcs import decode_u64, decode_u128, decode_uint, encode_uint
from nemo_sdk.core.utils.simulation import ReturnValue
from nemo_sdk.core.utils.clmm import i32_from_bits, liquidity_for_amount_b
from nemo_sdk.core.utils.units import (
    U64_MAX,
    to_base_units,
    to_display_value,
    u64_amount,
)


def test_decode_u64_little_endian():
    data = bytes([0x39, 0x30, 0, 0, 0, 0, 0, 0])
    assert decode_u64(ReturnValue(data, "u64")) == 12345


def test_decode_u128_max():
    data = b"\xff" * 16
    assert decode_u128(ReturnValue(data, "u128")) == 2**128 - 1


def test_decode_accepts_raw_bytes():
    assert decode_u64(encode_uint(7, "u64")) == 7


def test_decode_rejects_tag_mismatch():
    value = ReturnValue(encode_uint(1, "u128"), "u128")
    with pytest.raises(DecodeError, match="expected u64 return value, got u128"):
        decode_u64(value, operation="query_lp_out")


def test_decode_rejects_wrong_width():
    with pytest.raises(DecodeError, match="expected 8 bytes"):
        decode_u64(ReturnValue(b"\x01\x02", "u64"))


def test_decode_rejects_unknown_type():
    with pytest.raises(DecodeError, match="unsupported integer type"):
        decode_uint(b"\x00", "i8")


def test_decode_is_deterministic():
    value = ReturnValue(encode_uint(987654321, "u64"), "u64")
    assert {decode_u64(value) for _ in range(5)} == {987654321}


@pytest.mark.parametrize("decimals", range(0, 19))
def test_display_value_scales_exactly(decimals: int):
    raw = 123456789012345678
    expected = Decimal(raw) / (Decimal(10) ** decimals)
    assert Decimal(to_display_value(raw, decimals)) == expected
    assert "E" not in to_display_value(raw, decimals)


@pytest.mark.parametrize(
    ("raw", "decimals", "expected"),
    [
        ("0", 9, "0"),
        ("1500000000", 9, "1.5"),
        ("1000", 0, "1000"),
        ("1000000000000", 9, "1000"),
        ("1", 18, "0.000000000000000001"),
    ],
)
def test_display_value_normalises(raw: str, decimals: int, expected: str):
    assert to_display_value(raw, decimals) == expected


def test_display_value_rejects_garbage():
    with pytest.raises(ValueError, match="Invalid raw amount"):
        to_display_value("abc", 9)


def test_to_base_units_rounds_down():
    assert to_base_units("1.0000000019", 9) == 1000000001
    assert to_base_units(2, 6) == 2_000_000


def test_to_base_units_rejects_negative():
    with pytest.raises(ValueError, match="non-negative"):
        to_base_units("-1", 9)


@pytest.mark.parametrize(
    ("raw", "expected"), [("42", 42), (" 7 ", 7), (0, 0), (str(U64_MAX), U64_MAX)]
)
def test_u64_amount_parses_integers(raw, expected: int):
    assert u64_amount(raw) == expected


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("1.5", "integer amount"),
        ("abc", "integer amount"),
        (True, "integer amount"),
        ("-1", "not be negative"),
        (str(U64_MAX + 1), "fit in a u64"),
    ],
)
def test_u64_amount_rejects(raw, message: str):
    with pytest.raises(ValidationError, match=message) as exc_info:
        u64_amount(raw, "pt_amount", operation="query_pt_value")
    assert exc_info.value.fields == ("pt_amount",)
    assert exc_info.value.operation == "query_pt_value"


def test_u64_amount_positive():
    with pytest.raises(ValidationError, match="must be positive"):
        u64_amount("0", positive=True)


def test_i32_from_bits():
    assert i32_from_bits(100) == 100
    assert i32_from_bits("4294967196") == -100
    assert i32_from_bits(2**31) == -(2**31)


def test_liquidity_outside_range():
    price = 2**64
    # Price below the range: the whole input is swapped to coin A.
    below = liquidity_for_amount_b(1000, price, 10, 20)
    # Price above the range: coin B alone fills it.
    above = liquidity_for_amount_b(1000, price, -20, -10)
    assert below > 0
    assert above > 0
    with pytest.raises(DecodeError, match="invalid tick range"):
        liquidity_for_amount_b(1, price, 5, 5)
