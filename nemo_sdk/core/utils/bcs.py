from __future__ import annotations

from nemo_sdk.core.errors import DecodeError
from nemo_sdk.core.utils.simulation import ReturnValue

_WIDTHS = {"u8": 1, "u16": 2, "u32": 4, "u64": 8, "u128": 16, "u256": 32}


def decode_uint(
    value: ReturnValue | bytes,
    type_tag: str,
    *,
    operation: str | None = None,
) -> int:
    """Decode a little-endian unsigned integer of the width named by ``type_tag``.

    When ``value`` is a ``ReturnValue`` its own tag must match ``type_tag``.
    """
    width = _WIDTHS.get(type_tag)
    if width is None:
        raise DecodeError(f"unsupported integer type {type_tag}", operation=operation)

    if isinstance(value, ReturnValue):
        if value.type_tag != type_tag:
            raise DecodeError(
                f"expected {type_tag} return value, got {value.type_tag}",
                operation=operation,
            )
        data = value.data
    else:
        data = bytes(value)

    if len(data) != width:
        raise DecodeError(
            f"expected {width} bytes for {type_tag}, got {len(data)}",
            operation=operation,
        )
    return int.from_bytes(data, "little", signed=False)


def decode_u64(value: ReturnValue | bytes, *, operation: str | None = None) -> int:
    return decode_uint(value, "u64", operation=operation)


def decode_u128(value: ReturnValue | bytes, *, operation: str | None = None) -> int:
    return decode_uint(value, "u128", operation=operation)


def encode_uint(value: int, type_tag: str) -> bytes:
    width = _WIDTHS[type_tag]
    return int(value).to_bytes(width, "little", signed=False)


def decode_price_voucher(
    value: ReturnValue | bytes, *, operation: str | None = None
) -> int:
    """Price carried by a ``PriceVoucher<SY>`` return value.

    The voucher serializes as a single u128, so a real dry run tags it with
    the struct type rather than ``u128``. Only the width is enforced.
    """
    if isinstance(value, ReturnValue):
        tag = value.type_tag
        if tag != "u128" and "::PriceVoucher<" not in tag:
            raise DecodeError(
                f"expected a price voucher return value, got {tag}",
                operation=operation,
            )
        value = value.data
    return decode_uint(value, "u128", operation=operation)
