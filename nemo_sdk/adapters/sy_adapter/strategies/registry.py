from __future__ import annotations

from typing import TypeVar

from nemo_sdk.adapters.sy_adapter.strategies import (
    aftermath,
    alphafi,
    cetus,
    haedal,
    mstable,
    scallop,
    springsui,
    strater,
    volo,
    winter,
)
from nemo_sdk.adapters.sy_adapter.strategies.context import (
    BurnStrategy,
    MintStrategy,
    StrategyContext,
)
from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.errors import ProtocolUnsupportedError
from nemo_sdk.core.utils.transaction import Argument

_MODULES = (
    scallop,
    strater,
    aftermath,
    springsui,
    volo,
    haedal,
    alphafi,
    mstable,
    winter,
    cetus,
)

MINT_STRATEGIES: dict[Provider, MintStrategy] = {
    m.PROVIDER: m.mint for m in _MODULES
}
BURN_STRATEGIES: dict[Provider, BurnStrategy] = {
    m.PROVIDER: m.burn for m in _MODULES
}
REQUIRED_FIELDS: dict[Provider, tuple[str, ...]] = {
    m.PROVIDER: m.REQUIRED_FIELDS for m in _MODULES
}

_missing = [
    p for p in Provider if p not in MINT_STRATEGIES or p not in BURN_STRATEGIES
]
if _missing:
    raise ImportError(
        f"providers without mint/burn strategies: {', '.join(map(str, _missing))}"
    )


S = TypeVar("S")


def _lookup(
    table: dict[Provider, S], provider: Provider | str, operation: str
) -> S:
    try:
        return table[Provider(provider)]
    except (KeyError, ValueError) as exc:
        raise ProtocolUnsupportedError(
            "unknown provider", provider=str(provider), operation=operation
        ) from exc


async def mint(
    provider: Provider | str, ctx: StrategyContext, coin: Argument, amount: str
) -> Argument:
    strategy = _lookup(MINT_STRATEGIES, provider, "mint")
    return await strategy(ctx, coin, amount)


async def burn(
    provider: Provider | str, ctx: StrategyContext, s_coin: Argument
) -> Argument:
    strategy = _lookup(BURN_STRATEGIES, provider, "burn")
    return await strategy(ctx, s_coin)
