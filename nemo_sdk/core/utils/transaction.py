from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from nemo_sdk.core.utils.units import u64_amount

if TYPE_CHECKING:
    from nemo_sdk.core.utils.contracts import ContractCallDescriptor


@dataclass(frozen=True)
class ObjectArg:
    object_id: str


@dataclass(frozen=True)
class PureArg:
    value: Any
    type_tag: str


@dataclass(frozen=True)
class GasCoin:
    pass


@dataclass(frozen=True)
class NestedResult:
    index: int
    result_index: int
    label: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Result:
    """Handle to every output of the command at ``index``.

    Single-output calls are passed on as-is; multi-output calls are indexed
    (``result[1]``) to reference one output.
    """

    index: int
    label: str | None = field(default=None, compare=False)

    def __getitem__(self, result_index: int) -> NestedResult:
        if result_index < 0:
            raise IndexError("result index must be non-negative")
        return NestedResult(self.index, result_index, label=self.label)

    def outputs(self, count: int) -> tuple[NestedResult, ...]:
        return tuple(self[i] for i in range(count))


Argument = ObjectArg | PureArg | GasCoin | Result | NestedResult


@dataclass(frozen=True)
class MoveCall:
    target: str
    type_arguments: tuple[str, ...]
    arguments: tuple[Argument, ...]

    def inputs(self) -> tuple[Argument, ...]:
        return self.arguments


@dataclass(frozen=True)
class SplitCoins:
    coin: Argument
    amounts: tuple[Argument, ...]

    def inputs(self) -> tuple[Argument, ...]:
        return (self.coin, *self.amounts)


@dataclass(frozen=True)
class MergeCoins:
    destination: Argument
    sources: tuple[Argument, ...]

    def inputs(self) -> tuple[Argument, ...]:
        return (self.destination, *self.sources)


@dataclass(frozen=True)
class TransferObjects:
    objects: tuple[Argument, ...]
    address: Argument

    def inputs(self) -> tuple[Argument, ...]:
        return (*self.objects, self.address)


Command = MoveCall | SplitCoins | MergeCoins | TransferObjects


def _coerce_u64(amount: Argument | str | int) -> Argument:
    if isinstance(amount, ObjectArg | PureArg | GasCoin | Result | NestedResult):
        return amount
    return PureArg(u64_amount(amount), "u64")


class CallSequence:
    """Ordered, append-only list of pending commands.

    Owned by the orchestrator that created it and mutated only through
    sequential appends. Later commands may reference earlier outputs.
    """

    def __init__(self, sender: str | None = None):
        self.sender = sender
        self._commands: list[Command] = []
        self._descriptors: list[ContractCallDescriptor] = []

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def descriptors(self) -> tuple[ContractCallDescriptor, ...]:
        return tuple(self._descriptors)

    @property
    def gas(self) -> GasCoin:
        return GasCoin()

    @staticmethod
    def object(object_id: str) -> ObjectArg:
        return ObjectArg(object_id)

    @staticmethod
    def pure(value: Any, type_tag: str) -> PureArg:
        return PureArg(value, type_tag)

    @staticmethod
    def pure_u64(value: str | int) -> PureArg:
        return PureArg(u64_amount(value), "u64")

    @staticmethod
    def pure_address(address: str) -> PureArg:
        return PureArg(address, "address")

    def add(self, command: Command, *, label: str | None = None) -> Result:
        self._commands.append(command)
        return Result(len(self._commands) - 1, label=label)

    def record(self, descriptor: ContractCallDescriptor) -> None:
        self._descriptors.append(descriptor)

    def split_coins(
        self, coin: Argument, amounts: Sequence[Argument | str | int]
    ) -> list[NestedResult]:
        result = self.add(
            SplitCoins(coin=coin, amounts=tuple(_coerce_u64(a) for a in amounts)),
            label="splitCoins",
        )
        return list(result.outputs(len(amounts)))

    def merge_coins(self, destination: Argument, sources: Iterable[Argument]) -> Result:
        return self.add(
            MergeCoins(destination=destination, sources=tuple(sources)),
            label="mergeCoins",
        )

    def transfer_objects(
        self, objects: Iterable[Argument], address: str | Argument
    ) -> Result:
        if isinstance(address, str):
            address = self.pure_address(address)
        return self.add(
            TransferObjects(objects=tuple(objects), address=address),
            label="transferObjects",
        )

    def unresolved_references(self) -> list[tuple[int, Argument]]:
        """``(command_index, argument)`` pairs pointing at no earlier command."""
        unresolved: list[tuple[int, Argument]] = []
        for position, command in enumerate(self._commands):
            for arg in command.inputs():
                if isinstance(arg, Result | NestedResult) and not (
                    0 <= arg.index < position
                ):
                    unresolved.append((position, arg))
        return unresolved

    def to_dict(self) -> dict[str, Any]:
        return {
            "sender": self.sender,
            "commands": [_command_to_dict(c) for c in self._commands],
        }


def argument_to_dict(arg: Argument) -> dict[str, Any]:
    match arg:
        case ObjectArg(object_id=object_id):
            return {"Object": object_id}
        case PureArg(value=value, type_tag=type_tag):
            return {"Pure": {"value": str(value), "type": type_tag}}
        case GasCoin():
            return {"GasCoin": True}
        case Result(index=index):
            return {"Result": index}
        case NestedResult(index=index, result_index=result_index):
            return {"NestedResult": [index, result_index]}
    raise TypeError(f"Unsupported argument: {arg!r}")


def _command_to_dict(command: Command) -> dict[str, Any]:
    match command:
        case MoveCall():
            return {
                "MoveCall": {
                    "target": command.target,
                    "typeArguments": list(command.type_arguments),
                    "arguments": [argument_to_dict(a) for a in command.arguments],
                }
            }
        case SplitCoins():
            return {
                "SplitCoins": {
                    "coin": argument_to_dict(command.coin),
                    "amounts": [argument_to_dict(a) for a in command.amounts],
                }
            }
        case MergeCoins():
            return {
                "MergeCoins": {
                    "destination": argument_to_dict(command.destination),
                    "sources": [argument_to_dict(a) for a in command.sources],
                }
            }
        case TransferObjects():
            return {
                "TransferObjects": {
                    "objects": [argument_to_dict(a) for a in command.objects],
                    "address": argument_to_dict(command.address),
                }
            }
    raise TypeError(f"Unsupported command: {command!r}")
