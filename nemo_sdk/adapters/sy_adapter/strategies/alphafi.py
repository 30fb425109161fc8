from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import SUI_SYSTEM_STATE
from nemo_sdk.core.utils.transaction import Argument

PROVIDER = Provider.ALPHAFI
REQUIRED_FIELDS = ("coin_type",)


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    return ctx.call(
        ctx.contract(PROVIDER, "mint"),
        [ctx.coin_type],
        [
            (
                "liquid_staking_info",
                ctx.obj(ctx.contract(PROVIDER, "liquid_staking_info")),
            ),
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("coin", coin),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    return ctx.call(
        ctx.contract(PROVIDER, "redeem"),
        [ctx.coin_type],
        [
            (
                "liquid_staking_info",
                ctx.obj(ctx.contract(PROVIDER, "liquid_staking_info")),
            ),
            ("s_coin", s_coin),
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
        ],
    )
