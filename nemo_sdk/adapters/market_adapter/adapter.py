from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any, Literal

from nemo_sdk.adapters.oracle_adapter import resolver
from nemo_sdk.adapters.py_adapter import PositionHandle, PyAdapter, lifecycle
from nemo_sdk.core.adapters.BaseAdapter import BaseAdapter
from nemo_sdk.core.adapters.models import (
    CoinData,
    LpPosition,
    Position,
    ProtocolConfig,
    ReceivingType,
)
from nemo_sdk.core.clients.LedgerClient import DepositQuoter, LedgerClient
from nemo_sdk.core.constants.market import NO_UNDERLYING_COIN_TYPES
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.errors import ProtocolUnsupportedError, ValidationError
from nemo_sdk.core.utils.bcs import decode_u64
from nemo_sdk.core.utils.contracts import CallOptions, CallResult, append_call
from nemo_sdk.core.utils.transaction import (
    Argument,
    CallSequence,
    NestedResult,
    ObjectArg,
    PureArg,
    Result,
)
from nemo_sdk.core.utils.units import u64_amount

RemoveAction = Literal["swap", "redeem"]


def _u64(value: str | int, name: str, operation: str) -> PureArg:
    return CallSequence.pure_u64(u64_amount(value, name, operation=operation))


class MarketAdapter(BaseAdapter):
    """LP side of a market: liquidity, rewards and LP quotes."""

    adapter_type = "MARKET"

    def __init__(
        self,
        config: ProtocolConfig | dict[str, Any] | None = None,
        *,
        ledger: LedgerClient | None = None,
        tables: ProviderTables | None = None,
        quoter: DepositQuoter | None = None,
    ) -> None:
        super().__init__("market_adapter", config, ledger=ledger, tables=tables)
        self.py = PyAdapter(
            self.config, ledger=ledger, tables=self.tables, quoter=quoter
        )

    def merge_lp_positions(
        self, sequence: CallSequence, position_ids: Sequence[str]
    ) -> ObjectArg:
        return lifecycle.merge_lp_positions(sequence, self.config, position_ids)

    def mint_lp(
        self,
        sequence: CallSequence,
        sy_coin: Argument,
        pt_amount: Argument,
        min_lp_amount: str | int,
        voucher: Argument,
        handle: PositionHandle,
    ) -> tuple[NestedResult, NestedResult]:
        """Deposit SY and PT; returns ``(remaining_sy_coin, market_position)``."""
        operation = "mint_lp"
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "market_state_id",
            "sy_coin_type",
            operation=operation,
        )
        result = append_call(
            sequence,
            f"{self.config.contract_id}::market::mint_lp",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("sy_coin", sy_coin),
                ("pt_amount", pt_amount),
                ("min_lp_amount", _u64(min_lp_amount, "min_lp_amount", operation)),
                ("price_voucher", voucher),
                ("py_position", handle.argument),
                ("py_state", ObjectArg(self.config.py_state_id)),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )
        remaining_sy, market_position = result.outputs(2)
        return remaining_sy, market_position

    def add_liquidity_single_sy(
        self,
        sequence: CallSequence,
        sy_coin: Argument,
        pt_value: str | int,
        min_lp_amount: str | int,
        voucher: Argument,
        handle: PositionHandle,
    ) -> Result:
        operation = "add_liquidity_single_sy"
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "market_factory_config_id",
            "market_state_id",
            "sy_coin_type",
            operation=operation,
        )
        return append_call(
            sequence,
            f"{self.config.contract_id}::router::add_liquidity_single_sy",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("sy_coin", sy_coin),
                ("pt_value", _u64(pt_value, "pt_value", operation)),
                ("min_lp_amount", _u64(min_lp_amount, "min_lp_amount", operation)),
                ("price_voucher", voucher),
                ("py_position", handle.argument),
                ("py_state", ObjectArg(self.config.py_state_id)),
                (
                    "market_factory_config",
                    ObjectArg(self.config.market_factory_config_id),
                ),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )

    def seed_liquidity(
        self,
        sequence: CallSequence,
        sy_coin: Argument,
        min_lp_amount: str | int,
        voucher: Argument,
        handle: PositionHandle,
    ) -> NestedResult:
        """First deposit into an empty market; returns the LP position."""
        operation = "seed_liquidity"
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "yield_factory_config_id",
            "market_state_id",
            "sy_coin_type",
            operation=operation,
        )
        result = append_call(
            sequence,
            f"{self.config.contract_id}::market::seed_liquidity",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("sy_coin", sy_coin),
                ("min_lp_amount", _u64(min_lp_amount, "min_lp_amount", operation)),
                ("price_voucher", voucher),
                ("py_position", handle.argument),
                ("py_state", ObjectArg(self.config.py_state_id)),
                (
                    "yield_factory_config",
                    ObjectArg(self.config.yield_factory_config_id),
                ),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )
        return result[0]

    def claim_reward(
        self, sequence: CallSequence, lp_position: Argument, reward_coin_type: str
    ) -> Result:
        self.config.require(
            "contract_id",
            "version",
            "market_state_id",
            "sy_coin_type",
            operation="claim_reward",
        )
        return append_call(
            sequence,
            f"{self.config.contract_id}::market::claim_reward",
            [self.config.sy_coin_type, reward_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("lp_position", lp_position),
                ("clock", ObjectArg(CLOCK)),
            ],
        )

    def burn_lp(
        self,
        sequence: CallSequence,
        lp_amount: str | int,
        handle: PositionHandle,
        lp_position: Argument,
    ) -> NestedResult:
        """Burn ``lp_amount`` from ``lp_position``; returns the SY coin."""
        operation = "burn_lp"
        self.config.require(
            "contract_id",
            "version",
            "market_state_id",
            "sy_coin_type",
            operation=operation,
        )
        result = append_call(
            sequence,
            f"{self.config.contract_id}::market::burn_lp",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("lp_amount", _u64(lp_amount, "lp_amount", operation)),
                ("py_position", handle.argument),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("market_position", lp_position),
                ("clock", ObjectArg(CLOCK)),
            ],
        )
        return result[0]

    def swap_exact_pt_for_sy(
        self,
        sequence: CallSequence,
        pt_amount: str | int,
        handle: PositionHandle,
        voucher: Argument,
        min_sy_out: str | int = 0,
    ) -> Result:
        operation = "swap_exact_pt_for_sy"
        self.config.require(
            "contract_id",
            "version",
            "py_state_id",
            "market_factory_config_id",
            "market_state_id",
            "sy_coin_type",
            operation=operation,
        )
        return append_call(
            sequence,
            f"{self.config.contract_id}::market::swap_exact_pt_for_sy",
            [self.config.sy_coin_type],
            [
                ("version", ObjectArg(self.config.version)),
                ("pt_amount", _u64(pt_amount, "pt_amount", operation)),
                ("min_sy_out", _u64(min_sy_out, "min_sy_out", operation)),
                ("py_position", handle.argument),
                ("py_state", ObjectArg(self.config.py_state_id)),
                ("price_voucher", voucher),
                (
                    "market_factory_config",
                    ObjectArg(self.config.market_factory_config_id),
                ),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )

    def _expired(self, now_ms: int | None) -> bool:
        if not self.config.maturity:
            return False
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        maturity = u64_amount(
            self.config.maturity, "maturity", operation="remove_liquidity"
        )
        return maturity < now_ms

    async def _pay_out(
        self,
        sequence: CallSequence,
        coin: Argument,
        receiving_type: ReceivingType,
        address: str,
    ) -> None:
        if receiving_type == "underlying":
            coin = await self.py.sy.burn_sy_coin(sequence, coin, sender=address)
        sequence.transfer_objects([coin], address)

    async def remove_liquidity(
        self,
        sequence: CallSequence,
        address: str,
        lp_amount: str | int,
        lp_positions: Sequence[LpPosition],
        *,
        py_positions: Sequence[Position] | None = None,
        yt_balance: str | int = "0",
        action: RemoveAction = "redeem",
        receiving_type: ReceivingType = "underlying",
        reward_coin_types: Sequence[str] = (),
        pt_amount: str | int | None = None,
        min_sy_out: str | int = 0,
        now_ms: int | None = None,
    ) -> CallSequence:
        """Withdraw ``lp_amount`` LP and pay everything out to ``address``.

        Rewards listed in ``reward_coin_types`` are claimed first and any due
        YT interest is redeemed. After maturity the PT released by the burn
        (``pt_amount``) is redeemed for SY; before maturity ``action="swap"``
        sells it for SY instead and ``"redeem"`` leaves it on the position.
        """
        operation = "remove_liquidity"
        address = self._require_address(address, operation)
        lp = u64_amount(lp_amount, "lp_amount", operation=operation, positive=True)
        if not lp_positions:
            raise ValidationError(
                "no LP positions supplied",
                operation=operation,
                fields=["lp_positions"],
            )
        if action not in ("swap", "redeem"):
            raise ValidationError(
                f"unknown action {action!r}", operation=operation, fields=["action"]
            )
        if receiving_type not in ("sy", "underlying"):
            raise ValidationError(
                f"unknown receiving type {receiving_type!r}",
                operation=operation,
                fields=["receiving_type"],
            )
        self.config.require("coin_type", operation=operation)
        if (
            receiving_type == "underlying"
            and self.config.coin_type in NO_UNDERLYING_COIN_TYPES
        ):
            raise ProtocolUnsupportedError(
                "Underlying protocol error, try to withdraw to sy",
                provider=str(self.config.provider or ""),
                coin_type=self.config.coin_type,
                operation=operation,
            )
        expired = self._expired(now_ms)
        if (expired or action == "swap") and pt_amount is None:
            raise ValidationError(
                "pt_amount is required to redeem or swap the released PT",
                operation=operation,
                fields=["pt_amount"],
            )

        selected = lifecycle.select_lp_positions(lp_positions, lp)
        merged = self.merge_lp_positions(sequence, [p.id for p in selected])

        rewards = [self.claim_reward(sequence, merged, t) for t in reward_coin_types]
        if rewards:
            sequence.transfer_objects(rewards, address)

        handle = lifecycle.init_or_reuse(sequence, self.config, py_positions)

        if u64_amount(yt_balance or 0, "yt_balance", operation=operation) > 0:
            voucher = resolver.get_price_voucher(sequence, self.config, self.tables)
            interest = self.py.redeem_due_interest(sequence, handle, voucher)
            coin = self.py.sy.redeem(sequence, interest)
            await self._pay_out(sequence, coin, receiving_type, address)

        sy_coin = self.burn_lp(sequence, lp, handle, merged)

        if expired:
            voucher = resolver.get_price_voucher(sequence, self.config, self.tables)
            sy_from_pt = self.py.redeem_py(sequence, 0, pt_amount, voucher, handle)
            coin = self.py.sy.redeem(sequence, sy_from_pt)
            await self._pay_out(sequence, coin, receiving_type, address)
        elif action == "swap":
            voucher = resolver.get_price_voucher(sequence, self.config, self.tables)
            swapped = self.swap_exact_pt_for_sy(
                sequence, pt_amount, handle, voucher, min_sy_out
            )
            sequence.merge_coins(sy_coin, [swapped])

        coin = self.py.sy.redeem(sequence, sy_coin)
        await self._pay_out(sequence, coin, receiving_type, address)
        lifecycle.finalize(sequence, handle, address)
        self.logger.debug(
            f"{operation}: {lp} LP from {len(selected)} position(s), "
            f"expired={expired} action={action}"
        )
        return sequence

    async def query_lp_out(
        self,
        pt_value: str | int,
        sy_value: str | int,
        sender: str,
        *,
        options: CallOptions | None = None,
    ) -> CallResult[str]:
        """LP amount minted for depositing ``pt_value`` PT and ``sy_value`` SY."""
        operation = "query_lp_out"
        sender = self._require_address(sender, operation)
        pt = _u64(pt_value, "pt_value", operation)
        sy = _u64(sy_value, "sy_value", operation)
        self.config.require(
            "contract_id", "market_state_id", "sy_coin_type", operation=operation
        )
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=sender)
        call = append_call(
            sequence,
            f"{self.config.contract_id}::router::get_lp_out_from_mint_lp",
            [self.config.sy_coin_type],
            [
                ("pt_value", pt),
                ("sy_value", sy),
                ("market_state", ObjectArg(self.config.market_state_id)),
            ],
        )
        outcome, value = await simulator.simulate_value(
            sequence, sender, call, operation=operation
        )
        lp_amount = str(decode_u64(value, operation=operation))
        self.logger.debug(f"{operation}: pt={pt.value} sy={sy.value} -> {lp_amount}")
        return self._query_result(lp_amount, sequence, outcome, options)

    async def query_add_liquidity_single_pt(
        self,
        address: str,
        net_sy_in: str | int,
        coin_data: Sequence[CoinData],
        *,
        options: CallOptions | None = None,
    ) -> CallResult[str]:
        """PT amount produced when adding ``net_sy_in`` SY as single-sided liquidity."""
        operation = "query_add_liquidity_single_pt"
        address = self._require_address(address, operation)
        if not coin_data:
            raise ValidationError(
                "no coins supplied", operation=operation, fields=["coin_data"]
            )
        net_sy = _u64(net_sy_in, "net_sy_in", operation)
        self.config.require(
            "contract_id",
            "py_state_id",
            "market_state_id",
            "market_factory_config_id",
            "sy_coin_type",
            operation=operation,
        )
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=address)
        voucher = resolver.get_price_voucher(sequence, self.config, self.tables)
        call = append_call(
            sequence,
            f"{self.config.contract_id}::offchain::single_liquidity_add_pt_out",
            [self.config.sy_coin_type],
            [
                ("net_sy_in", net_sy),
                ("price_voucher", voucher),
                (
                    "market_factory_config",
                    ObjectArg(self.config.market_factory_config_id),
                ),
                ("py_state", ObjectArg(self.config.py_state_id)),
                ("market_state", ObjectArg(self.config.market_state_id)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )
        outcome, value = await simulator.simulate_value(
            sequence, address, call, operation=operation
        )
        pt_out = str(decode_u64(value, operation=operation))
        return self._query_result(pt_out, sequence, outcome, options)
