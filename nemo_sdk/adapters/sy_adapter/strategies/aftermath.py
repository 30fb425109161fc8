from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import SUI_SYSTEM_STATE
from nemo_sdk.core.utils.transaction import Argument, PureArg

PROVIDER = Provider.AFTERMATH
REQUIRED_FIELDS = ("coin_type",)


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    return ctx.call(
        ctx.contract(PROVIDER, "request_stake"),
        [],
        [
            ("staked_sui_vault", ctx.obj(ctx.contract(PROVIDER, "staked_sui_vault"))),
            ("safe", ctx.obj(ctx.contract(PROVIDER, "safe"))),
            ("system_state", ctx.obj(SUI_SYSTEM_STATE)),
            ("referral_vault", ctx.obj(ctx.contract(PROVIDER, "referral_vault"))),
            ("coin", coin),
            ("validator", PureArg(ctx.contract(PROVIDER, "validator"), "address")),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    return ctx.call(
        ctx.contract(PROVIDER, "request_unstake_atomic"),
        [],
        [
            ("staked_sui_vault", ctx.obj(ctx.contract(PROVIDER, "staked_sui_vault"))),
            ("safe", ctx.obj(ctx.contract(PROVIDER, "safe"))),
            ("referral_vault", ctx.obj(ctx.contract(PROVIDER, "referral_vault"))),
            ("treasury", ctx.obj(ctx.contract(PROVIDER, "treasury"))),
            ("s_coin", s_coin),
        ],
    )
