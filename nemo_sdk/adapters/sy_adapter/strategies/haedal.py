from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.haedal_contracts import HAWAL_COIN_TYPE
from nemo_sdk.core.constants.sui import SUI_SYSTEM_STATE, ZERO_ADDRESS
from nemo_sdk.core.utils.transaction import Argument, PureArg

PROVIDER = Provider.HAEDAL
REQUIRED_FIELDS = ("coin_type",)


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    """Stake into haWAL when the wrapped coin is haWAL, otherwise into haSUI."""
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    if ctx.coin_type == HAWAL_COIN_TYPE:
        return ctx.call(
            ctx.contract(PROVIDER, "hawal_stake"),
            [],
            [
                ("walrus_staking", ctx.obj(ctx.contract(PROVIDER, "walrus_staking"))),
                ("hawal_staking", ctx.obj(ctx.contract(PROVIDER, "hawal_staking"))),
                ("coin", coin),
                ("validator", ctx.obj(ctx.contract(PROVIDER, "hawal_validator"))),
            ],
        )

    return ctx.call(
        ctx.contract(PROVIDER, "hasui_stake"),
        [],
        [
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("haedal_staking", ctx.obj(ctx.contract(PROVIDER, "haedal_staking"))),
            ("coin", coin),
            ("validator", PureArg(ZERO_ADDRESS, "address")),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    ctx.reject_burn(PROVIDER)
    return ctx.call(
        ctx.contract(PROVIDER, "hasui_unstake"),
        [],
        [
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("haedal_staking", ctx.obj(ctx.contract(PROVIDER, "haedal_staking"))),
            ("s_coin", s_coin),
        ],
    )
