from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from loguru import logger

from nemo_sdk.core.adapters.models import LpPosition, Position, ProtocolConfig
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.contracts import append_call
from nemo_sdk.core.utils.transaction import Argument, CallSequence, ObjectArg, Result


@dataclass(frozen=True)
class PositionHandle:
    """A position to thread through a sequence.

    ``position`` is either the caller's existing ``Position`` (reused as-is)
    or the ``Result`` of ``init_py_position`` appended to the sequence.
    """

    position: Position | Result
    created: bool

    @property
    def argument(self) -> Argument:
        if isinstance(self.position, Position):
            return ObjectArg(self.position.id)
        return self.position


def init_or_reuse(
    sequence: CallSequence,
    config: ProtocolConfig,
    positions: Sequence[Position] | None = None,
) -> PositionHandle:
    if positions:
        return PositionHandle(position=positions[0], created=False)

    config.require(
        "contract_id",
        "version",
        "py_state_id",
        "sy_coin_type",
        operation="init_py_position",
    )
    result = append_call(
        sequence,
        f"{config.contract_id}::py::init_py_position",
        [config.sy_coin_type],
        [
            ("version", ObjectArg(config.version)),
            ("py_state", ObjectArg(config.py_state_id)),
            ("clock", ObjectArg(CLOCK)),
        ],
    )
    logger.debug(f"Creating PY position at command #{result.index}")
    return PositionHandle(position=result, created=True)


def finalize(sequence: CallSequence, handle: PositionHandle, owner: str) -> None:
    """Hand a freshly created position to ``owner``; reused positions stay put."""
    if handle.created:
        sequence.transfer_objects([handle.argument], owner)


def merge_lp_positions(
    sequence: CallSequence,
    config: ProtocolConfig,
    position_ids: Sequence[str],
) -> ObjectArg:
    """Join every LP market position into the first one and return it."""
    config.require("contract_id", "sy_coin_type", operation="merge_lp_positions")
    if not position_ids:
        raise ValidationError(
            "no LP positions to merge",
            operation="merge_lp_positions",
            fields=["position_ids"],
        )
    target = ObjectArg(position_ids[0])
    for other in position_ids[1:]:
        append_call(
            sequence,
            f"{config.contract_id}::market_position::join",
            [],
            [
                ("position", target),
                ("other", ObjectArg(other)),
                ("clock", ObjectArg(CLOCK)),
            ],
        )
    return target


def select_lp_positions(
    positions: Sequence[LpPosition], lp_amount: int
) -> list[LpPosition]:
    """Largest positions first, as few as needed to cover ``lp_amount``."""
    selected: list[LpPosition] = []
    accumulated = Decimal(0)
    for position in sorted(positions, key=lambda p: Decimal(p.lp_amount), reverse=True):
        accumulated += Decimal(position.lp_amount)
        selected.append(position)
        if accumulated >= lp_amount:
            return selected
    raise ValidationError(
        "Insufficient LP balance",
        operation="merge_lp_positions",
        fields=["lp_amount"],
    )
