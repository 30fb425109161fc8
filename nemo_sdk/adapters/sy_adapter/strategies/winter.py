"""Winter (Blizzard) liquid-staked WAL.

Burning does not return WAL directly: ``burn_lst`` yields the remaining LST
coin plus a vector of StakedWal objects which are sent to the sender.
"""

from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.utils.coins import coin_value
from nemo_sdk.core.utils.transaction import Argument, PureArg, Result

PROVIDER = Provider.WINTER
REQUIRED_FIELDS = ("coin_type",)


def _allowed_versions(ctx: StrategyContext) -> Result:
    return ctx.call(
        ctx.contract(PROVIDER, "get_allowed_versions"),
        [],
        [
            (
                "blizzard_av",
                ctx.obj(ctx.contract(PROVIDER, "blizzard_allowed_versions")),
            )
        ],
    )


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    blizzard = ctx.tables.blizzard_staking(ctx.coin_type)

    allowed = _allowed_versions(ctx)
    return ctx.call(
        ctx.contract(PROVIDER, "mint"),
        [ctx.coin_type],
        [
            ("blizzard_staking", ctx.obj(blizzard)),
            ("walrus_staking", ctx.obj(ctx.contract(PROVIDER, "walrus_staking"))),
            ("coin", coin),
            ("validator", ctx.obj(ctx.contract(PROVIDER, "validator"))),
            ("allowed_versions", allowed),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    ctx.reject_burn(PROVIDER)
    blizzard = ctx.tables.blizzard_staking(ctx.coin_type)
    sender = ctx.require_sender("burn")
    walrus = ctx.obj(ctx.contract(PROVIDER, "walrus_staking"))

    value = coin_value(ctx.sequence, s_coin, ctx.coin_type)
    fcfs = ctx.call(
        ctx.contract(PROVIDER, "fcfs"),
        [ctx.coin_type],
        [
            ("blizzard_staking", ctx.obj(blizzard)),
            ("walrus_staking", walrus),
            ("amount", value),
        ],
    )
    ix_vector = fcfs[1]
    allowed = _allowed_versions(ctx)
    burned = ctx.call(
        ctx.contract(PROVIDER, "burn_lst"),
        [ctx.coin_type],
        [
            ("blizzard_staking", ctx.obj(blizzard)),
            ("walrus_staking", walrus),
            ("s_coin", s_coin),
            ("ix_vector", ix_vector),
            ("allowed_versions", allowed),
        ],
    )
    ctx.call(
        ctx.contract(PROVIDER, "vector_transfer_staked_wal"),
        [],
        [
            ("walrus_staking", walrus),
            ("staked_wals", burned[1]),
            ("address", PureArg(sender, "address")),
        ],
    )
    return burned[0]
