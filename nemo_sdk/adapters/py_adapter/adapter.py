from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from nemo_sdk.adapters.oracle_adapter import resolver
from nemo_sdk.adapters.py_adapter import lifecycle
from nemo_sdk.adapters.py_adapter.lifecycle import PositionHandle
from nemo_sdk.adapters.sy_adapter import SyAdapter
from nemo_sdk.core.adapters.BaseAdapter import BaseAdapter
from nemo_sdk.core.adapters.models import (
    Position,
    ProtocolConfig,
    QueryYieldResult,
    ReceivingType,
)
from nemo_sdk.core.clients.LedgerClient import DepositQuoter, LedgerClient
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.bcs import decode_u64
from nemo_sdk.core.utils.coins import coin_value
from nemo_sdk.core.utils.contracts import CallOptions, CallResult, append_call
from nemo_sdk.core.utils.transaction import Argument, CallSequence, ObjectArg, Result
from nemo_sdk.core.utils.units import to_display_value, u64_amount


class PyAdapter(BaseAdapter):
    """Principal/yield token positions: minting, redeeming and yield claims."""

    adapter_type = "PY"

    def __init__(
        self,
        config: ProtocolConfig | dict[str, Any] | None = None,
        *,
        ledger: LedgerClient | None = None,
        tables: ProviderTables | None = None,
        quoter: DepositQuoter | None = None,
    ) -> None:
        super().__init__("py_adapter", config, ledger=ledger, tables=tables)
        self.sy = SyAdapter(
            self.config, ledger=ledger, tables=self.tables, quoter=quoter
        )

    def _yield_factory_call(
        self,
        sequence: CallSequence,
        function: str,
        arguments: Sequence[tuple[str, Argument]],
    ) -> Result:
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "yield_factory_config_id",
            "sy_coin_type",
            operation=function,
        )
        return append_call(
            sequence,
            f"{self.config.contract_id}::yield_factory::{function}",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                *arguments,
                ("py_state", ObjectArg(self.config.py_state_id)),
                (
                    "yield_factory_config",
                    ObjectArg(self.config.yield_factory_config_id),
                ),
                ("clock", ObjectArg(CLOCK)),
            ],
        )

    def mint_py(
        self,
        sequence: CallSequence,
        sy_coin: Argument,
        voucher: Argument,
        handle: PositionHandle,
    ) -> Result:
        """Split an SY coin into PT and YT credited to ``handle``."""
        return self._yield_factory_call(
            sequence,
            "mint_py",
            [
                ("sy_coin", sy_coin),
                ("price_voucher", voucher),
                ("py_position", handle.argument),
            ],
        )

    def redeem_py(
        self,
        sequence: CallSequence,
        yt_amount: str | int,
        pt_amount: str | int,
        voucher: Argument,
        handle: PositionHandle,
    ) -> Result:
        return self._yield_factory_call(
            sequence,
            "redeem_py",
            [
                (
                    "yt_amount",
                    CallSequence.pure_u64(
                        u64_amount(yt_amount, "yt_amount", operation="redeem_py")
                    ),
                ),
                (
                    "pt_amount",
                    CallSequence.pure_u64(
                        u64_amount(pt_amount, "pt_amount", operation="redeem_py")
                    ),
                ),
                ("price_voucher", voucher),
                ("py_position", handle.argument),
            ],
        )

    def redeem_due_interest(
        self, sequence: CallSequence, handle: PositionHandle, voucher: Argument
    ) -> Result:
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "yield_factory_config_id",
            "sy_coin_type",
            operation="redeem_due_interest",
        )
        return append_call(
            sequence,
            f"{self.config.contract_id}::yield_factory::redeem_due_interest",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("py_position", handle.argument),
                ("py_state", ObjectArg(self.config.py_state_id)),
                ("price_voucher", voucher),
                (
                    "yield_factory_config",
                    ObjectArg(self.config.yield_factory_config_id),
                ),
                ("clock", ObjectArg(CLOCK)),
            ],
        )

    async def query_yield(
        self,
        address: str,
        yt_balance: str,
        positions: Sequence[Position] | None = None,
        receiving_type: ReceivingType = "sy",
        *,
        options: CallOptions | None = None,
    ) -> CallResult[QueryYieldResult]:
        """Dry-run a yield claim and report what the holder would receive.

        ``receiving_type="underlying"`` also burns the redeemed coin through
        the market's provider, so the reported amount is in the underlying
        coin and is scaled by ``underlying_decimal`` when configured. A
        position is created (and handed back to ``address``) when
        ``positions`` is empty.
        """
        operation = "query_yield"
        address = self._require_address(address, operation)
        if receiving_type not in ("sy", "underlying"):
            raise ValidationError(
                f"unknown receiving type {receiving_type!r}",
                operation=operation,
                fields=["receiving_type"],
            )
        balance = str(yt_balance or "").strip()
        if not balance or u64_amount(balance, "yt_balance", operation=operation) == 0:
            raise ValidationError(
                "No YT balance to claim", operation=operation, fields=["yt_balance"]
            )
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "yield_factory_config_id",
            "sy_state_id",
            "sy_coin_type",
            "coin_type",
            operation=operation,
        )
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=address)
        handle = lifecycle.init_or_reuse(sequence, self.config, positions)
        voucher = resolver.get_price_voucher(sequence, self.config, self.tables)
        sy_coin = self.redeem_due_interest(sequence, handle, voucher)
        coin = self.sy.redeem(sequence, sy_coin)

        value_type = self.config.coin_type
        decimals = self.config.decimal
        if receiving_type == "underlying":
            coin = await self.sy.burn_sy_coin(sequence, coin, sender=address)
            value_type = self.config.underlying_coin_type or value_type
            decimals = self.config.underlying_decimals
        value_call = coin_value(sequence, coin, value_type)
        lifecycle.finalize(sequence, handle, address)

        outcome, value = await simulator.simulate_value(
            sequence, address, value_call, operation=operation
        )
        raw = decode_u64(value, operation=operation)
        self.logger.debug(f"{operation}: {raw} of {value_type} for {address}")
        result = QueryYieldResult(
            output_amount=str(raw),
            output_value=to_display_value(raw, decimals),
        )
        return self._query_result(result, sequence, outcome, options)

    async def query_pt_value(
        self,
        pt_amount: str | int,
        sender: str,
        *,
        options: CallOptions | None = None,
    ) -> CallResult[str]:
        """SY value of ``pt_amount`` principal tokens at the current market state."""
        operation = "query_pt_value"
        sender = self._require_address(sender, operation)
        pt = u64_amount(pt_amount, "pt_amount", operation=operation)
        self.config.require(
            "contract_id", "market_state_id", "sy_coin_type", operation=operation
        )
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=sender)
        call = append_call(
            sequence,
            f"{self.config.contract_id}::market::get_pt_value",
            [self.config.sy_coin_type],
            [
                ("pt_amount", CallSequence.pure_u64(pt)),
                ("market_state", ObjectArg(self.config.market_state_id)),
            ],
        )
        outcome, value = await simulator.simulate_value(
            sequence, sender, call, operation=operation
        )
        amount = str(decode_u64(value, operation=operation))
        return self._query_result(amount, sequence, outcome, options)
