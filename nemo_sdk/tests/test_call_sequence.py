from __future__ import annotations

import pytest

from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.contracts import (
    CallOptions,
    ContractCallBuilder,
    append_call,
    describe_argument,
)
from nemo_sdk.core.utils.transaction import (
    CallSequence,
    GasCoin,
    MoveCall,
    NestedResult,
    ObjectArg,
    PureArg,
    Result,
    SplitCoins,
)
from nemo_sdk.testing import FakeLedger

PKG = "0xabc"


def test_append_call_records_move_call_and_descriptor():
    seq = CallSequence(sender="0x1")
    result = append_call(
        seq,
        f"{PKG}::market::get_pt_value",
        ["0x2::sy::SY"],
        [("pt_amount", PureArg(10, "u64")), ("market_state", ObjectArg("0x9"))],
    )

    assert result == Result(0)
    assert result.label == "get_pt_value"
    [command] = seq.commands
    assert isinstance(command, MoveCall)
    assert command.arguments == (PureArg(10, "u64"), ObjectArg("0x9"))

    [descriptor] = seq.descriptors
    assert descriptor.target == f"{PKG}::market::get_pt_value"
    assert descriptor.type_arguments == ("0x2::sy::SY",)
    assert [a.name for a in descriptor.arguments] == ["pt_amount", "market_state"]
    assert descriptor.to_dict()["arguments"][0] == {
        "name": "pt_amount",
        "value": "10: u64",
    }


@pytest.mark.parametrize(
    "target", ["", "market::get", "0xabc::market", "abc::m::f", "0xabc::m::f::g"]
)
def test_append_call_rejects_malformed_target(target: str):
    seq = CallSequence()
    with pytest.raises(ValidationError, match="invalid call target"):
        append_call(seq, target, [], [])
    assert len(seq) == 0


def test_append_call_rejects_empty_type_argument():
    seq = CallSequence()
    with pytest.raises(ValidationError, match="empty type argument"):
        append_call(seq, f"{PKG}::m::f", [""], [])
    assert seq.descriptors == ()


def test_result_indexing_and_outputs():
    result = Result(3, label="burn_lst")
    assert result[1] == NestedResult(3, 1)
    assert result.outputs(2) == (NestedResult(3, 0), NestedResult(3, 1))
    with pytest.raises(IndexError):
        result[-1]


def test_split_coins_from_gas():
    seq = CallSequence()
    parts = seq.split_coins(seq.gas, ["5", 6])
    assert parts == [NestedResult(0, 0), NestedResult(0, 1)]
    [command] = seq.commands
    assert command == SplitCoins(
        coin=GasCoin(), amounts=(PureArg(5, "u64"), PureArg(6, "u64"))
    )
    # Native commands leave no descriptor.
    assert seq.descriptors == ()


@pytest.mark.parametrize("amount", ["1.5", "-1", 2**64])
def test_u64_arguments_reject_invalid_amounts(amount):
    with pytest.raises(ValidationError):
        CallSequence.pure_u64(amount)
    with pytest.raises(ValidationError):
        CallSequence().split_coins(GasCoin(), [amount])


def test_unresolved_references_detects_forward_reference():
    seq = CallSequence()
    append_call(seq, f"{PKG}::m::a", [], [("x", Result(1))])
    append_call(seq, f"{PKG}::m::b", [], [("y", Result(0)[0])])

    assert seq.unresolved_references() == [(0, Result(1))]


def test_transfer_objects_wraps_address():
    seq = CallSequence()
    seq.transfer_objects([Result(0)], "0xfeed")
    assert seq.to_dict()["commands"][0] == {
        "TransferObjects": {
            "objects": [{"Result": 0}],
            "address": {"Pure": {"value": "0xfeed", "type": "address"}},
        }
    }


def test_describe_argument_includes_labels():
    assert describe_argument(NestedResult(2, 1, label="fcfs")) == "result[2][1] (fcfs)"
    assert describe_argument(GasCoin()) == "gas"


@pytest.mark.asyncio
async def test_builder_call_debug_attaches_descriptor_only():
    seq = CallSequence()
    builder = ContractCallBuilder()

    plain = await builder.call(seq, f"{PKG}::m::f", [], [])
    assert plain.simulation is None
    assert plain.descriptors is None

    debug = await builder.call(
        seq, f"{PKG}::m::g", [], [], options=CallOptions(debug=True)
    )
    assert debug.value == Result(1)
    assert debug.descriptors == (seq.descriptors[1],)
    assert debug.simulation is None


@pytest.mark.asyncio
async def test_builder_dry_run_simulates_isolated_call():
    ledger = FakeLedger()
    ledger.on_call("::m::f", 42)
    builder = ContractCallBuilder(ledger)
    seq = CallSequence()
    append_call(seq, f"{PKG}::m::setup", [], [])

    result = await builder.call(
        seq,
        f"{PKG}::m::f",
        [],
        [("obj", ObjectArg("0x9"))],
        options=CallOptions(simulate="0xsender"),
    )

    assert len(seq) == 2
    isolated, sender = ledger.calls[0]
    assert sender == "0xsender"
    assert len(isolated) == 1
    assert result.simulation is not None
    assert result.simulation.return_value(0).type_tag == "u64"


@pytest.mark.asyncio
async def test_builder_dry_run_rejects_chained_arguments():
    builder = ContractCallBuilder(FakeLedger())
    seq = CallSequence()
    with pytest.raises(ValidationError) as exc_info:
        await builder.call(
            seq,
            f"{PKG}::m::f",
            [],
            [("coin", Result(0)), ("obj", ObjectArg("0x9"))],
            options=CallOptions(simulate="0xsender"),
        )
    assert exc_info.value.fields == ("coin",)


@pytest.mark.asyncio
async def test_builder_dry_run_requires_ledger():
    with pytest.raises(ValidationError, match="no ledger client"):
        await ContractCallBuilder().dry_run(f"{PKG}::m::f", [], [], sender="0x1")
