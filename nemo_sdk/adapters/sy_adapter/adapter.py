from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from nemo_sdk.adapters.sy_adapter.strategies import registry
from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext
from nemo_sdk.core.adapters.BaseAdapter import BaseAdapter
from nemo_sdk.core.adapters.models import (
    CoinData,
    MintValueResult,
    ProtocolConfig,
    Provider,
)
from nemo_sdk.core.clients.LedgerClient import DepositQuoter, LedgerClient
from nemo_sdk.core.config import get_default_slippage
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.bcs import decode_u64
from nemo_sdk.core.utils.coins import coin_value, split_coins
from nemo_sdk.core.utils.contracts import CallOptions, CallResult, append_call
from nemo_sdk.core.utils.transaction import Argument, CallSequence, ObjectArg
from nemo_sdk.core.utils.units import to_display_value, u64_amount

# Providers with a minimum mint size: mint once and split the wrapped coin.
LIMITED_MINT_PROVIDERS = frozenset(
    {Provider.WINTER, Provider.SPRING_SUI, Provider.CETUS}
)


class SyAdapter(BaseAdapter):
    """Wraps and unwraps yield-bearing coins into the market's SY coin."""

    adapter_type = "SY"

    def __init__(
        self,
        config: ProtocolConfig | dict[str, Any] | None = None,
        *,
        ledger: LedgerClient | None = None,
        tables: ProviderTables | None = None,
        quoter: DepositQuoter | None = None,
    ) -> None:
        super().__init__("sy_adapter", config, ledger=ledger, tables=tables)
        self.quoter = quoter

    def context(
        self,
        sequence: CallSequence,
        *,
        sender: str | None = None,
        vault_id: str | None = None,
        slippage: str | None = None,
    ) -> StrategyContext:
        return StrategyContext(
            sequence=sequence,
            config=self.config,
            tables=self.tables,
            sender=sender or sequence.sender,
            slippage=slippage or get_default_slippage(),
            vault_id=vault_id,
            quoter=self.quoter,
        )

    async def mint_sy_coin(
        self,
        sequence: CallSequence,
        coin: Argument,
        amount: str,
        *,
        sender: str | None = None,
        vault_id: str | None = None,
        slippage: str | None = None,
    ) -> Argument:
        """Turn an underlying coin into the provider's yield-bearing coin."""
        provider = self.config.require_provider("mint")
        ctx = self.context(
            sequence, sender=sender, vault_id=vault_id, slippage=slippage
        )
        self.logger.debug(
            f"Minting {amount} via {provider} for {self.config.coin_type}"
        )
        return await registry.mint(provider, ctx, coin, amount)

    async def burn_sy_coin(
        self,
        sequence: CallSequence,
        s_coin: Argument,
        *,
        sender: str | None = None,
    ) -> Argument:
        provider = self.config.require_provider("burn")
        ctx = self.context(sequence, sender=sender)
        self.logger.debug(f"Burning {self.config.coin_type} via {provider}")
        return await registry.burn(provider, ctx, s_coin)

    async def mint_many(
        self,
        sequence: CallSequence,
        coin_data: Sequence[CoinData],
        amounts: Sequence[str],
        *,
        limited: bool | None = None,
        coin_amount: str | int | None = None,
        sender: str | None = None,
        vault_id: str | None = None,
        slippage: str | None = None,
    ) -> list[Argument]:
        """Mint one wrapped coin per entry in ``amounts``.

        In limited mode a single mint of ``amounts[0]`` is split into parts
        proportional to ``amounts``, scaled to ``coin_amount`` (the expected
        minted amount, see ``query_mint_value``). The remainder of the wrapped
        coin is appended as the last element.
        """
        operation = "mint_many"
        if not amounts:
            raise ValidationError("no amounts to mint", operation=operation)
        parsed = [
            u64_amount(a, "amounts", operation=operation, positive=True)
            for a in amounts
        ]
        provider = self.config.require_provider(operation)
        if limited is None:
            limited = provider in LIMITED_MINT_PROVIDERS
        mint_kwargs = {"sender": sender, "vault_id": vault_id, "slippage": slippage}
        underlying = self.config.underlying_coin_type

        if not limited or len(amounts) == 1:
            coins = split_coins(sequence, coin_data, parsed, underlying)
            return [
                await self.mint_sy_coin(sequence, coin, str(amount), **mint_kwargs)
                for coin, amount in zip(coins, parsed, strict=True)
            ]

        if coin_amount is None:
            raise ValidationError(
                "coin_amount is required for a limited mint",
                operation=operation,
                fields=["coin_amount"],
            )
        expected = u64_amount(coin_amount, "coin_amount", operation=operation)
        total = Decimal(sum(parsed))

        [coin] = split_coins(sequence, coin_data, parsed[:1], underlying)
        s_coin = await self.mint_sy_coin(
            sequence, coin, str(parsed[0]), **mint_kwargs
        )
        parts = [
            int(
                (Decimal(a) / total * expected).quantize(
                    Decimal(1), rounding=ROUND_HALF_UP
                )
            )
            for a in parsed
        ]
        return [*sequence.split_coins(s_coin, parts), s_coin]

    def _sy_call(
        self,
        sequence: CallSequence,
        function: str,
        coin_name: str,
        coin: Argument,
        coin_type: str | None,
    ) -> Argument:
        self.config.require(
            "contract_id", "version", "sy_state_id", "sy_coin_type", operation=function
        )
        coin_type = coin_type or self.config.coin_type
        if not coin_type:
            raise ValidationError(
                "coin type is required", operation=function, fields=["coin_type"]
            )
        return append_call(
            sequence,
            f"{self.config.contract_id}::sy::{function}",
            [coin_type, self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                (coin_name, coin),
                ("sy_state", ObjectArg(self.config.sy_state_id)),
            ],
        )

    def deposit(
        self, sequence: CallSequence, coin: Argument, coin_type: str | None = None
    ) -> Argument:
        return self._sy_call(sequence, "deposit", "coin", coin, coin_type)

    def redeem(
        self, sequence: CallSequence, sy_coin: Argument, coin_type: str | None = None
    ) -> Argument:
        return self._sy_call(sequence, "redeem", "sy_coin", sy_coin, coin_type)

    async def query_mint_value(
        self,
        amount: str,
        coin_data: Sequence[CoinData],
        sender: str,
        *,
        vault_id: str | None = None,
        slippage: str | None = None,
        options: CallOptions | None = None,
    ) -> CallResult[MintValueResult]:
        """Dry-run a mint of ``amount`` and report the wrapped amount it yields."""
        operation = "query_mint_value"
        sender = self._require_address(sender, operation)
        u64_amount(amount, operation=operation, positive=True)
        self.config.require("coin_type", operation=operation)
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=sender)
        [coin] = split_coins(
            sequence, coin_data, [amount], self.config.underlying_coin_type
        )
        s_coin = await self.mint_sy_coin(
            sequence, coin, amount, sender=sender, vault_id=vault_id, slippage=slippage
        )
        value_call = coin_value(sequence, s_coin, self.config.coin_type)

        outcome, value = await simulator.simulate_value(
            sequence, sender, value_call, operation=operation
        )
        raw = decode_u64(value, operation=operation)
        result = MintValueResult(
            amount=str(raw), value=to_display_value(raw, self.config.decimal)
        )
        return self._query_result(result, sequence, outcome, options)
