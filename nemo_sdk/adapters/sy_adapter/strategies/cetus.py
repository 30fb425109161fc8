from __future__ import annotations

from dataclasses import replace

from loguru import logger

from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.errors import ProtocolUnsupportedError, ValidationError
from nemo_sdk.core.utils.transaction import Argument, PureArg

PROVIDER = Provider.CETUS
REQUIRED_FIELDS = ("coin_type", "underlying_coin_type")


async def mint(ctx: StrategyContext, coin: Argument, amount: str) -> Argument:
    """Deposit one side of the pair into the Cetus vault for its LP token.

    The minimum LP amount comes from a quote over the vault's on-chain
    state, so this is the only strategy that waits on the network while
    building. The deposit targets the package the quote reports unless the
    tables pin one.
    """
    ctx.require(*REQUIRED_FIELDS, operation="mint")
    vault = ctx.tables.cetus_vault(ctx.coin_type)
    if ctx.vault_id:
        vault = replace(vault, vault_id=ctx.vault_id)
    if ctx.quoter is None:
        raise ValidationError(
            "a deposit quoter is required for Cetus",
            operation="mint",
            fields=["quoter"],
        )

    quote = await ctx.quoter.calculate_deposit_amount(
        vault, ctx.coin_type, amount, ctx.slippage
    )
    package = (
        ctx.tables.contracts.get(PROVIDER, {}).get("vaults_package")
        or quote.package_id
    )
    if not package:
        raise ProtocolUnsupportedError(
            "contract 'vaults_package' is not configured",
            provider=str(PROVIDER),
            coin_type=ctx.coin_type,
            operation="mint",
        )
    logger.debug(
        f"Cetus quote for {vault.vault_id}: "
        f"lp={quote.lp_amount} min={quote.min_lp_amount}"
    )
    return ctx.call(
        f"{package}::vaults::deposit",
        [ctx.coin_type, ctx.underlying_coin_type],
        [
            ("vault", ctx.obj(vault.vault_id)),
            ("pool", ctx.obj(vault.pool_id)),
            ("coin", coin),
            ("min_lp_amount", PureArg(quote.min_lp_amount, "u64")),
            ("clock", ctx.obj(CLOCK)),
        ],
    )


async def burn(ctx: StrategyContext, s_coin: Argument) -> Argument:
    raise ProtocolUnsupportedError(
        "vault LP tokens cannot be redeemed through the SY burn path",
        provider=str(PROVIDER),
        coin_type=ctx.coin_type,
        operation="burn",
    )
