from __future__ import annotations

from decimal import Decimal, localcontext

from nemo_sdk.core.errors import DecodeError

Q64 = Decimal(2) ** 64
TICK_BASE = Decimal("1.0001")
_PRECISION = 60


def i32_from_bits(bits: int | str) -> int:
    """Signed tick index from the two's-complement ``bits`` of a Move ``I32``."""
    value = int(bits)
    return value - (1 << 32) if value >= (1 << 31) else value


def tick_to_sqrt_price(tick: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return +(TICK_BASE.sqrt() ** tick)


def liquidity_for_amount_b(
    amount_b: str | int,
    sqrt_price_x64: str | int,
    tick_lower: int,
    tick_upper: int,
) -> Decimal:
    """Liquidity a range gains from a deposit of coin B alone.

    Part of the input is treated as swapped into coin A at the current price
    so both sides fill the range in proportion. Swap fees and price impact
    are left to the caller's slippage tolerance.
    """
    if tick_lower >= tick_upper:
        raise DecodeError(
            f"invalid tick range [{tick_lower}, {tick_upper}]",
            operation="liquidity_for_amount_b",
        )
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        amount = Decimal(int(amount_b))
        sp = Decimal(int(sqrt_price_x64)) / Q64
        sa = tick_to_sqrt_price(tick_lower)
        sb = tick_to_sqrt_price(tick_upper)
        if sp <= sa:
            # Below the range: only coin A is held.
            return amount / (sp * sp) / (1 / sa - 1 / sb)
        if sp >= sb:
            return amount / (sb - sa)
        return amount / ((sp - sa) + sp * sp * (1 / sp - 1 / sb))
