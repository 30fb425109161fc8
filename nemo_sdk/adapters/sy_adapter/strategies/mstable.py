from __future__ import annotations

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.mstable_contracts import MSTABLE_AMOUNT_LIMIT
from nemo_sdk.core.utils.transaction import Argument, PureArg

PROVIDER = Provider.MSTABLE
REQUIRED_FIELDS = ("coin_type", "underlying_coin_type")


def _cap(ctx: StrategyContext, key: str) -> Argument:
    return ctx.call(
        ctx.contract(PROVIDER, key),
        [ctx.coin_type],
        [
            (
                "meta_vault_sui_integration",
                ctx.obj(ctx.contract(PROVIDER, "meta_vault_sui_integration")),
            ),
            ("vault", ctx.obj(ctx.contract(PROVIDER, "vault"))),
            ("registry", ctx.obj(ctx.contract(PROVIDER, "registry"))),
        ],
    )


def _vault_call(
    ctx: StrategyContext, key: str, cap: Argument, coin_name: str, coin: Argument
) -> Argument:
    return ctx.call(
        ctx.contract(PROVIDER, key),
        [ctx.coin_type, ctx.underlying_coin_type],
        [
            ("vault", ctx.obj(ctx.contract(PROVIDER, "vault"))),
            ("version", ctx.obj(ctx.contract(PROVIDER, "version"))),
            ("cap", cap),
            (coin_name, coin),
            ("amount_limit", PureArg(MSTABLE_AMOUNT_LIMIT, "u64")),
        ],
    )


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    cap = _cap(ctx, "create_deposit_cap")
    return _vault_call(ctx, "deposit", cap, "coin", coin)


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    ctx.require(*REQUIRED_FIELDS, operation="burn")
    cap = _cap(ctx, "create_withdraw_cap")
    return _vault_call(ctx, "withdraw", cap, "s_coin", s_coin)
