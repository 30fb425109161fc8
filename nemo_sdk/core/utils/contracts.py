"""Move call construction with a descriptor trail.

Every call appended through :func:`append_call` is recorded on the owning
``CallSequence`` as an immutable :class:`ContractCallDescriptor` so failed
simulations can be reported with the exact target, argument names and type
arguments that produced them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from loguru import logger

from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.transaction import (
    Argument,
    CallSequence,
    GasCoin,
    MoveCall,
    NestedResult,
    ObjectArg,
    PureArg,
    Result,
)

if TYPE_CHECKING:
    from nemo_sdk.core.clients.LedgerClient import LedgerClient
    from nemo_sdk.core.utils.simulation import SimulationOutcome

TARGET_RE = re.compile(r"^0x[0-9a-fA-F]+::\w+::\w+$")


@dataclass(frozen=True)
class CallArgument:
    name: str
    value: Argument


@dataclass(frozen=True)
class ContractCallDescriptor:
    target: str
    arguments: tuple[CallArgument, ...]
    type_arguments: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "arguments": [
                {"name": a.name, "value": describe_argument(a.value)}
                for a in self.arguments
            ],
            "typeArguments": list(self.type_arguments),
        }


def describe_argument(arg: Argument) -> str:
    match arg:
        case ObjectArg(object_id=object_id):
            return object_id
        case PureArg(value=value, type_tag=type_tag):
            return f"{value}: {type_tag}"
        case GasCoin():
            return "gas"
        case NestedResult(index=index, result_index=result_index, label=label):
            suffix = f" ({label})" if label else ""
            return f"result[{index}][{result_index}]{suffix}"
        case Result(index=index, label=label):
            suffix = f" ({label})" if label else ""
            return f"result[{index}]{suffix}"
    return repr(arg)


def validate_target(target: str) -> None:
    if not TARGET_RE.match(target or ""):
        raise ValidationError(
            f"invalid call target '{target}', expected <address>::<module>::<function>",
            fields=["target"],
        )


def append_call(
    sequence: CallSequence,
    target: str,
    type_arguments: Sequence[str],
    arguments: Sequence[tuple[str, Argument]],
) -> Result:
    """Append one Move call and return a handle to its outputs."""
    validate_target(target)
    for type_arg in type_arguments:
        if not type_arg:
            raise ValidationError(
                f"empty type argument for {target}", fields=["type_arguments"]
            )

    descriptor = ContractCallDescriptor(
        target=target,
        arguments=tuple(CallArgument(name, value) for name, value in arguments),
        type_arguments=tuple(type_arguments),
    )
    result = sequence.add(
        MoveCall(
            target=target,
            type_arguments=descriptor.type_arguments,
            arguments=tuple(value for _, value in arguments),
        ),
        label=target.rsplit("::", 1)[-1],
    )
    sequence.record(descriptor)
    logger.debug(f"Appended call #{result.index}: {descriptor.to_dict()}")
    return result


@dataclass(frozen=True)
class CallOptions:
    debug: bool = False
    # Sender to dry-run an isolated single call as; None skips it.
    simulate: str | None = None


T = TypeVar("T")


@dataclass(frozen=True)
class CallResult(Generic[T]):
    value: T
    simulation: SimulationOutcome | None = None
    descriptors: tuple[ContractCallDescriptor, ...] | None = field(default=None)


class ContractCallBuilder:
    def __init__(self, ledger: LedgerClient | None = None):
        self.ledger = ledger

    def append(
        self,
        sequence: CallSequence,
        target: str,
        type_arguments: Sequence[str],
        arguments: Sequence[tuple[str, Argument]],
    ) -> Result:
        return append_call(sequence, target, type_arguments, arguments)

    async def call(
        self,
        sequence: CallSequence,
        target: str,
        type_arguments: Sequence[str],
        arguments: Sequence[tuple[str, Argument]],
        *,
        options: CallOptions | None = None,
    ) -> CallResult[Result]:
        options = options or CallOptions()
        result = self.append(sequence, target, type_arguments, arguments)

        simulation = None
        if options.simulate:
            simulation = await self.dry_run(
                target, type_arguments, arguments, sender=options.simulate
            )
        descriptors = (sequence.descriptors[-1],) if options.debug else None
        return CallResult(result, simulation=simulation, descriptors=descriptors)

    async def dry_run(
        self,
        target: str,
        type_arguments: Sequence[str],
        arguments: Sequence[tuple[str, Argument]],
        *,
        sender: str,
    ) -> SimulationOutcome:
        """Dry-run ``target`` alone in a fresh sequence.

        Only literal object and pure arguments can be carried into the dry run;
        results of earlier calls have no meaning outside their sequence.
        """
        if self.ledger is None:
            raise ValidationError("no ledger client configured", operation="dry_run")
        chained = [
            name
            for name, value in arguments
            if not isinstance(value, ObjectArg | PureArg)
        ]
        if chained:
            raise ValidationError(
                f"dry run of {target} requires object or pure arguments",
                operation="dry_run",
                fields=chained,
            )

        isolated = CallSequence(sender=sender)
        append_call(isolated, target, type_arguments, arguments)
        return await self.ledger.simulate(isolated, sender)
