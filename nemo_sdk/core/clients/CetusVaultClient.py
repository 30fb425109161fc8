from __future__ import annotations

from collections import deque
from decimal import ROUND_DOWN
from typing import Any

from aiocache import Cache
from loguru import logger

from nemo_sdk.core.clients.LedgerClient import DepositQuote
from nemo_sdk.core.clients.SuiRpcClient import SuiRpcClient
from nemo_sdk.core.constants.base import CETUS_QUOTE_CACHE_TTL_S
from nemo_sdk.core.constants.tables import CetusVault
from nemo_sdk.core.errors import DecodeError
from nemo_sdk.core.utils.clmm import i32_from_bits, liquidity_for_amount_b


def find_field(fields: Any, name: str) -> Any:
    """Shallowest value stored under ``name`` in nested Move object content."""
    queue = deque([fields])
    while queue:
        node = queue.popleft()
        if isinstance(node, dict):
            if name in node:
                return node[name]
            queue.extend(node.values())
        elif isinstance(node, list):
            queue.extend(node)
    return None


def _required(fields: Any, name: str, object_id: str) -> Any:
    value = find_field(fields, name)
    if value is None:
        raise DecodeError(
            f"object {object_id} has no field '{name}'",
            operation="calculate_deposit_amount",
        )
    return value


def _tick(fields: Any, name: str, object_id: str) -> int:
    value = _required(fields, name, object_id)
    bits = find_field(value, "bits") if isinstance(value, dict) else value
    if bits is None:
        raise DecodeError(
            f"object {object_id} has no bits for '{name}'",
            operation="calculate_deposit_amount",
        )
    return i32_from_bits(bits)


class CetusVaultClient:
    """Quotes one-sided Cetus vault deposits from on-chain state.

    Reads the vault, its CLMM pool and the LP token supply through
    ``SuiRpcClient``. The package that defines the vault type is reported
    with the quote so the deposit can target it. Quotes are cached briefly
    per ``(vault, amount, slippage)``.
    """

    def __init__(
        self,
        rpc: SuiRpcClient | None = None,
        *,
        cache_ttl_s: int = CETUS_QUOTE_CACHE_TTL_S,
    ):
        self.rpc = rpc or SuiRpcClient()
        self.cache_ttl_s = cache_ttl_s
        self._cache = Cache(Cache.MEMORY)

    async def calculate_deposit_amount(
        self,
        vault: CetusVault,
        lp_coin_type: str,
        input_amount: str,
        slippage: str,
    ) -> DepositQuote:
        cache_key = f"cetus:deposit:{vault.vault_id}:{input_amount}:{slippage}"
        cached = await self._cache.get(cache_key)
        if cached:
            return cached

        vault_obj = await self.rpc.get_object(vault.vault_id)
        pool_obj = await self.rpc.get_object(vault.pool_id)
        supply = await self.rpc.get_total_supply(lp_coin_type)

        vault_fields = (vault_obj.get("content") or {}).get("fields", {})
        pool_fields = (pool_obj.get("content") or {}).get("fields", {})
        vault_liquidity = int(_required(vault_fields, "liquidity", vault.vault_id))
        added = liquidity_for_amount_b(
            input_amount,
            _required(pool_fields, "current_sqrt_price", vault.pool_id),
            _tick(vault_fields, "tick_lower_index", vault.vault_id),
            _tick(vault_fields, "tick_upper_index", vault.vault_id),
        )
        if vault_liquidity and supply:
            added = added * supply / vault_liquidity
        lp_amount = added.to_integral_value(rounding=ROUND_DOWN)

        quote = DepositQuote(
            vault_id=vault.vault_id,
            input_amount=str(input_amount),
            lp_amount=str(int(lp_amount)),
            slippage=str(slippage),
            package_id=str(vault_obj.get("type", "")).split("::", 1)[0],
        )
        logger.debug(
            f"Cetus quote for {vault.vault_id}: "
            f"{input_amount} -> {quote.lp_amount} LP"
        )
        await self._cache.set(cache_key, quote, ttl=self.cache_ttl_s)
        return quote

    async def close(self) -> None:
        await self.rpc.close()
