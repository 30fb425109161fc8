from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nemo_sdk.core.constants.tables import CetusVault
    from nemo_sdk.core.utils.simulation import SimulationOutcome
    from nemo_sdk.core.utils.transaction import CallSequence


@runtime_checkable
class LedgerClient(Protocol):
    async def simulate(
        self, sequence: CallSequence, sender: str
    ) -> SimulationOutcome: ...


@runtime_checkable
class TransactionEncoder(Protocol):
    """Serializes a sequence into BCS ``TransactionKind`` bytes."""

    def encode(self, sequence: CallSequence) -> bytes: ...


@dataclass(frozen=True)
class DepositQuote:
    vault_id: str
    input_amount: str
    lp_amount: str
    slippage: str
    # Package defining the vault type; empty when the quoter cannot tell.
    package_id: str = ""

    @property
    def min_lp_amount(self) -> int:
        lp = Decimal(self.lp_amount)
        floor = lp * (Decimal(1) - Decimal(self.slippage))
        return int(floor.to_integral_value(rounding=ROUND_DOWN))


@runtime_checkable
class DepositQuoter(Protocol):
    async def calculate_deposit_amount(
        self,
        vault: CetusVault,
        lp_coin_type: str,
        input_amount: str,
        slippage: str,
    ) -> DepositQuote: ...
