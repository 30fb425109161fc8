from __future__ import annotations

from abc import ABC
from typing import Any, TypeVar

from loguru import logger

from nemo_sdk.core.adapters.models import ProtocolConfig
from nemo_sdk.core.clients.LedgerClient import LedgerClient
from nemo_sdk.core.config import get_table_overrides
from nemo_sdk.core.constants.tables import DEFAULT_PROVIDER_TABLES, ProviderTables
from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.contracts import CallOptions, CallResult
from nemo_sdk.core.utils.simulation import DryRunSimulator, SimulationOutcome
from nemo_sdk.core.utils.transaction import CallSequence

T = TypeVar("T")


class BaseAdapter(ABC):
    adapter_type: str | None = None

    def __init__(
        self,
        name: str,
        config: ProtocolConfig | dict[str, Any] | None = None,
        *,
        ledger: LedgerClient | None = None,
        tables: ProviderTables | None = None,
    ):
        self.name = name
        if not isinstance(config, ProtocolConfig):
            config = ProtocolConfig.model_validate(config or {})
        self.config = config
        self.ledger = ledger
        self.tables = tables or DEFAULT_PROVIDER_TABLES.with_overrides(
            get_table_overrides()
        )
        self.logger = logger.bind(adapter=self.__class__.__name__)

    def _require_address(self, address: str | None, operation: str) -> str:
        if not address or not str(address).strip():
            raise ValidationError(
                "address is required", operation=operation, fields=["address"]
            )
        return str(address).strip()

    def _simulator(self, operation: str) -> DryRunSimulator:
        if self.ledger is None:
            raise ValidationError(
                "no ledger client configured", operation=operation, fields=["ledger"]
            )
        return DryRunSimulator(self.ledger)

    @staticmethod
    def _query_result(
        value: T,
        sequence: CallSequence,
        outcome: SimulationOutcome,
        options: CallOptions | None,
    ) -> CallResult[T]:
        if options is None or not options.debug:
            return CallResult(value)
        return CallResult(
            value, simulation=outcome, descriptors=sequence.descriptors
        )

    async def close(self) -> None:
        close = getattr(self.ledger, "close", None)
        if close is not None:
            await close()
