from __future__ import annotations

import base64
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from nemo_sdk.core.errors import SimulationError

if TYPE_CHECKING:
    from nemo_sdk.core.clients.LedgerClient import LedgerClient
    from nemo_sdk.core.utils.transaction import CallSequence, Result


@dataclass(frozen=True)
class ReturnValue:
    data: bytes
    type_tag: str

    @classmethod
    def from_rpc(cls, entry: Sequence[Any]) -> ReturnValue:
        raw, type_tag = entry
        if isinstance(raw, str):
            data = base64.b64decode(raw)
        else:
            data = bytes(raw)
        return cls(data=data, type_tag=str(type_tag))


@dataclass(frozen=True)
class CommandResult:
    return_values: tuple[ReturnValue, ...] = ()


@dataclass(frozen=True)
class SimulationOutcome:
    error: str | None = None
    results: tuple[CommandResult, ...] = ()
    raw: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def return_value(self, call_index: int, value_index: int = 0) -> ReturnValue | None:
        if not 0 <= call_index < len(self.results):
            return None
        values = self.results[call_index].return_values
        if not 0 <= value_index < len(values):
            return None
        return values[value_index]

    def summary(self) -> str:
        if self.error:
            return f"error={self.error!r}, results={len(self.results)}"
        return f"ok, results={len(self.results)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error,
            "results": [
                {
                    "returnValues": [
                        [list(v.data), v.type_tag] for v in result.return_values
                    ]
                }
                for result in self.results
            ],
        }

    @classmethod
    def from_rpc(cls, payload: dict[str, Any]) -> SimulationOutcome:
        """Build an outcome from a ``sui_devInspectTransactionBlock`` result."""
        error = payload.get("error")
        status = (payload.get("effects") or {}).get("status") or {}
        if not error and status.get("status") == "failure":
            error = status.get("error") or "execution failed"

        results = tuple(
            CommandResult(
                return_values=tuple(
                    ReturnValue.from_rpc(entry)
                    for entry in (item.get("returnValues") or [])
                )
            )
            for item in (payload.get("results") or [])
        )
        return cls(error=error or None, results=results, raw=payload)


class DryRunSimulator:
    """Submits a built sequence to the non-committing simulation endpoint."""

    def __init__(self, ledger: LedgerClient):
        self.ledger = ledger

    async def simulate(
        self, sequence: CallSequence, sender: str, *, operation: str
    ) -> SimulationOutcome:
        logger.debug(
            f"{operation}: simulating {len(sequence)} command(s) as {sender}"
        )
        outcome = await self.ledger.simulate(sequence, sender)
        if outcome.error is not None:
            raise SimulationError(
                outcome.error,
                operation=operation,
                outcome=outcome,
                descriptors=sequence.descriptors,
            )
        return outcome

    async def simulate_value(
        self,
        sequence: CallSequence,
        sender: str,
        at: Result,
        *,
        operation: str,
        value_index: int = 0,
    ) -> tuple[SimulationOutcome, ReturnValue]:
        """Simulate and fetch the return value produced by the call ``at``."""
        outcome = await self.simulate(sequence, sender, operation=operation)
        value = outcome.return_value(at.index, value_index)
        if value is None:
            raise SimulationError(
                "missing return value",
                operation=operation,
                outcome=outcome,
                descriptors=sequence.descriptors,
            )
        return outcome, value
