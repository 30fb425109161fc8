from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from nemo_sdk.core.adapters.models import ProtocolConfig, Provider
from nemo_sdk.core.clients.LedgerClient import DepositQuoter
from nemo_sdk.core.constants.base import DEFAULT_SLIPPAGE
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.errors import ProtocolUnsupportedError, ValidationError
from nemo_sdk.core.utils.contracts import append_call
from nemo_sdk.core.utils.transaction import Argument, CallSequence, ObjectArg, Result


@dataclass
class StrategyContext:
    """Everything a mint or burn strategy may read while appending calls."""

    sequence: CallSequence
    config: ProtocolConfig
    tables: ProviderTables
    sender: str | None = None
    slippage: str = DEFAULT_SLIPPAGE
    vault_id: str | None = None
    quoter: DepositQuoter | None = None

    @property
    def coin_type(self) -> str:
        return self.config.coin_type

    @property
    def underlying_coin_type(self) -> str:
        return self.config.underlying_coin_type

    def contract(self, provider: Provider, key: str) -> str:
        return self.tables.contract(provider, key)

    def obj(self, object_id: str) -> ObjectArg:
        return ObjectArg(object_id)

    def call(
        self,
        target: str,
        type_arguments: Sequence[str],
        arguments: Sequence[tuple[str, Argument]],
    ) -> Result:
        return append_call(self.sequence, target, type_arguments, arguments)

    def require(self, *fields: str, operation: str) -> None:
        self.config.require(*fields, operation=operation)

    def require_sender(self, operation: str) -> str:
        if not self.sender:
            raise ValidationError(
                "sender address is required", operation=operation, fields=["sender"]
            )
        return self.sender

    def reject_burn(self, provider: Provider) -> None:
        redirect = self.tables.burn_rejection(provider, self.coin_type)
        if redirect:
            raise ProtocolUnsupportedError(
                f"Underlying protocol error, try to withdraw to {redirect}.",
                provider=str(provider),
                coin_type=self.coin_type,
                operation="burn",
            )


MintStrategy = Callable[[StrategyContext, Argument, str], Awaitable[Argument]]
BurnStrategy = Callable[[StrategyContext, Argument], Awaitable[Argument]]
