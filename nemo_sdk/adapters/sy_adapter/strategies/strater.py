from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import (
    CLOCK,
    COIN_FROM_BALANCE_TARGET,
    COIN_INTO_BALANCE_TARGET,
)
from nemo_sdk.core.utils.transaction import Argument

PROVIDER = Provider.STRATER
REQUIRED_FIELDS = ("coin_type", "underlying_coin_type")


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    vault = ctx.obj(ctx.contract(PROVIDER, "vault"))

    balance = ctx.call(
        COIN_INTO_BALANCE_TARGET, [ctx.underlying_coin_type], [("coin", coin)]
    )
    s_balance = ctx.call(
        ctx.contract(PROVIDER, "deposit"),
        [],
        [("vault", vault), ("balance", balance), ("clock", ctx.obj(CLOCK))],
    )
    return ctx.call(
        COIN_FROM_BALANCE_TARGET, [ctx.coin_type], [("balance", s_balance)]
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    """Withdraw through the saving vault's ticket flow.

    ``withdraw`` hands back a ticket which must be redeemed in the same
    sequence before the underlying balance can be turned into a coin.
    """
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    vault = ctx.obj(ctx.contract(PROVIDER, "vault"))

    s_balance = ctx.call(
        COIN_INTO_BALANCE_TARGET, [ctx.coin_type], [("coin", s_coin)]
    )
    ticket = ctx.call(
        ctx.contract(PROVIDER, "withdraw"),
        [ctx.underlying_coin_type, ctx.coin_type],
        [("vault", vault), ("balance", s_balance), ("clock", ctx.obj(CLOCK))],
    )
    balance = ctx.call(
        ctx.contract(PROVIDER, "redeem_withdraw_ticket"),
        [ctx.underlying_coin_type, ctx.coin_type],
        [("vault", vault), ("ticket", ticket)],
    )
    return ctx.call(
        COIN_FROM_BALANCE_TARGET, [ctx.underlying_coin_type], [("balance", balance)]
    )
