from __future__ import annotations

from typing import Any

from nemo_sdk.adapters.oracle_adapter import resolver
from nemo_sdk.core.adapters.BaseAdapter import BaseAdapter
from nemo_sdk.core.adapters.models import ProtocolConfig
from nemo_sdk.core.clients.LedgerClient import LedgerClient
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.utils.bcs import decode_price_voucher
from nemo_sdk.core.utils.contracts import CallOptions, CallResult
from nemo_sdk.core.utils.transaction import CallSequence, Result


class OracleAdapter(BaseAdapter):
    adapter_type = "ORACLE"

    def __init__(
        self,
        config: ProtocolConfig | dict[str, Any] | None = None,
        *,
        ledger: LedgerClient | None = None,
        tables: ProviderTables | None = None,
    ) -> None:
        super().__init__("oracle_adapter", config, ledger=ledger, tables=tables)

    def get_price_voucher(
        self, sequence: CallSequence, config: ProtocolConfig | None = None
    ) -> Result:
        return resolver.get_price_voucher(sequence, config or self.config, self.tables)

    def get_price(
        self,
        sequence: CallSequence,
        voucher: Result,
        config: ProtocolConfig | None = None,
    ) -> Result:
        return resolver.get_price(sequence, config or self.config, voucher)

    async def query_price_voucher(
        self,
        sender: str,
        config: ProtocolConfig | None = None,
        *,
        options: CallOptions | None = None,
    ) -> CallResult[str]:
        """Dry-run the voucher call alone and decode its u128 price."""
        operation = "query_price_voucher"
        sender = self._require_address(sender, operation)
        simulator = self._simulator(operation)

        sequence = CallSequence(sender=sender)
        voucher = self.get_price_voucher(sequence, config)
        outcome, value = await simulator.simulate_value(
            sequence, sender, voucher, operation=operation
        )
        price = str(decode_price_voucher(value, operation=operation))
        self.logger.debug(f"{operation}: {price}")
        return self._query_result(price, sequence, outcome, options)
