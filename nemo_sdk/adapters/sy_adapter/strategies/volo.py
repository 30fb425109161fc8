from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import SUI_SYSTEM_STATE
from nemo_sdk.core.utils.transaction import Argument

PROVIDER = Provider.VOLO
REQUIRED_FIELDS = ("coin_type",)


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    return ctx.call(
        ctx.contract(PROVIDER, "stake"),
        [],
        [
            ("native_pool", ctx.obj(ctx.contract(PROVIDER, "native_pool"))),
            ("metadata", ctx.obj(ctx.contract(PROVIDER, "metadata"))),
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("coin", coin),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    return ctx.call(
        ctx.contract(PROVIDER, "unstake"),
        [],
        [
            ("native_pool", ctx.obj(ctx.contract(PROVIDER, "native_pool"))),
            ("metadata", ctx.obj(ctx.contract(PROVIDER, "metadata"))),
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("s_coin", s_coin),
        ],
    )
