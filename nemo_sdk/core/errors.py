from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nemo_sdk.core.utils.contracts import ContractCallDescriptor
    from nemo_sdk.core.utils.simulation import SimulationOutcome


class NemoError(RuntimeError):
    """Base class for every error raised while building or simulating calls."""


class ValidationError(NemoError):
    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        fields: Iterable[str] = (),
    ):
        self.operation = operation
        self.fields = tuple(fields)
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}{message}")


class ProtocolUnsupportedError(NemoError):
    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        coin_type: str | None = None,
        operation: str | None = None,
    ):
        self.provider = provider
        self.coin_type = coin_type
        self.operation = operation
        parts = [p for p in (operation, provider) if p]
        prefix = f"{' '.join(parts)}: " if parts else ""
        suffix = f" (coin_type={coin_type})" if coin_type else ""
        super().__init__(f"{prefix}{message}{suffix}")


class SimulationError(NemoError):
    """The dry run failed or did not produce the expected return value.

    Carries the raw outcome and the descriptor trail of everything appended to
    the simulated sequence so the failure can be reproduced externally.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        outcome: SimulationOutcome | None = None,
        descriptors: Sequence[ContractCallDescriptor] = (),
    ):
        self.operation = operation
        self.outcome = outcome
        self.descriptors = tuple(descriptors)
        detail = ""
        if outcome is not None:
            detail = f" [raw outcome: {outcome.summary()}]"
        super().__init__(f"{operation} error: {message}{detail}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "message": str(self),
            "outcome": self.outcome.to_dict() if self.outcome is not None else None,
            "descriptors": [d.to_dict() for d in self.descriptors],
        }


class DecodeError(NemoError):
    def __init__(self, message: str, *, operation: str | None = None):
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}{message}")
