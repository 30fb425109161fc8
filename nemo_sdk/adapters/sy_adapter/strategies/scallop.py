from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.utils.transaction import Argument

PROVIDER = Provider.SCALLOP
REQUIRED_FIELDS = ("coin_type", "underlying_coin_type")


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    """Lend ``coin`` to Scallop and convert the market coin into an sCoin."""
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    treasury = ctx.tables.scallop_treasury(ctx.coin_type)

    market_coin = ctx.call(
        ctx.contract(PROVIDER, "mint"),
        [ctx.underlying_coin_type],
        [
            ("version", ctx.obj(ctx.contract(PROVIDER, "version"))),
            ("market", ctx.obj(ctx.contract(PROVIDER, "market"))),
            ("amount", coin),
            ("clock", ctx.obj(CLOCK)),
        ],
    )
    return ctx.call(
        ctx.contract(PROVIDER, "mint_s_coin"),
        [ctx.coin_type, ctx.underlying_coin_type],
        [("treasury", ctx.obj(treasury)), ("market_coin", market_coin)],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    treasury = ctx.tables.scallop_treasury(ctx.coin_type)

    market_coin = ctx.call(
        ctx.contract(PROVIDER, "burn_s_coin"),
        [ctx.coin_type, ctx.underlying_coin_type],
        [("treasury", ctx.obj(treasury)), ("s_coin", s_coin)],
    )
    return ctx.call(
        ctx.contract(PROVIDER, "redeem"),
        [ctx.underlying_coin_type],
        [
            ("version", ctx.obj(ctx.contract(PROVIDER, "version"))),
            ("market", ctx.obj(ctx.contract(PROVIDER, "market"))),
            ("market_coin", market_coin),
            ("clock", ctx.obj(CLOCK)),
        ],
    )
