from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext

from nemo_sdk.core.errors import ValidationError

U64_MAX = 2**64 - 1

# Enough digits for a u256 scaled by any supported decimal count.
_PRECISION = 100


def _to_decimal(value: str | int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    return Decimal(str(value).strip())


def to_display_value(raw: str | int, decimals: int) -> str:
    """Scale a base-unit integer down by ``10**decimals``.

    Output is a plain decimal string with no trailing zeros and no exponent
    notation (``"0"``, ``"1.5"``, ``"1000"``).
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            amount = _to_decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid raw amount: {raw}") from exc
        scaled = (amount / (Decimal(10) ** decimals)).normalize()
        text = format(scaled, "f")
    return "0" if text in ("-0", "0") else text


def to_base_units(amount: str | int | float | Decimal, decimals: int) -> int:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            amt = _to_decimal(amount)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid token amount: {amount}") from exc
        if amt < 0:
            raise ValueError("Amount must be non-negative")
        scale = Decimal(10) ** int(decimals)
        return int((amt * scale).to_integral_value(rounding=ROUND_DOWN))


def u64_amount(
    value: str | int,
    name: str = "amount",
    *,
    operation: str | None = None,
    positive: bool = False,
) -> int:
    """Parse a base-unit integer amount that fits in a u64.

    Decimal strings (``"1.5"``), negatives and overflowing values raise
    ``ValidationError`` naming ``name``.
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{name} must be an integer amount", operation=operation, fields=[name]
        )
    try:
        amount = int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(
            f"{name} must be an integer amount", operation=operation, fields=[name]
        ) from exc
    if amount < 0:
        raise ValidationError(
            f"{name} must not be negative", operation=operation, fields=[name]
        )
    if positive and amount == 0:
        raise ValidationError(
            f"{name} must be positive", operation=operation, fields=[name]
        )
    if amount > U64_MAX:
        raise ValidationError(
            f"{name} does not fit in a u64", operation=operation, fields=[name]
        )
    return amount
