from __future__ import annotations

import pytest

from nemo_sdk.adapters.market_adapter import MarketAdapter
from nemo_sdk.adapters.py_adapter import PositionHandle
from nemo_sdk.core.adapters.models import CoinData, LpPosition, Position
from nemo_sdk.core.constants.haedal_contracts import HASUI_COIN_TYPE, HAWAL_COIN_TYPE
from nemo_sdk.core.constants.sui import SUI_COIN_TYPE
from nemo_sdk.core.errors import (
    DecodeError,
    ProtocolUnsupportedError,
    SimulationError,
    ValidationError,
)
from nemo_sdk.core.utils.contracts import CallOptions
from nemo_sdk.core.utils.transaction import (
    CallSequence,
    MergeCoins,
    MoveCall,
    NestedResult,
    ObjectArg,
    PureArg,
    Result,
    TransferObjects,
)

SENDER = "0x" + "a" * 64
NEMO = "0x" + "b" * 64
SY_COIN_TYPE = f"{NEMO}::sy::SY"

MARKET = {
    "contract_id": NEMO,
    "version": "0xversion",
    "py_state_id": "0xpystate",
    "sy_coin_type": SY_COIN_TYPE,
    "sy_state_id": "0xsystate",
    "market_state_id": "0xmarketstate",
    "market_factory_config_id": "0xmfconfig",
    "coin_type": HASUI_COIN_TYPE,
    "provider": "Haedal",
    "oracle_package_id": "0x" + "c" * 64,
    "price_oracle_config_id": "0xoracleconfig",
    "oracle_ticket": "0xticket",
}

COINS = [CoinData(coin_object_id="0xsy", balance="1000", coin_type=SY_COIN_TYPE)]
LP_MARKET = {**MARKET, "yield_factory_config_id": "0xyf"}

PY_POSITION = Position(id="0xpyposition")
HANDLE = PositionHandle(PY_POSITION, created=False)
VOUCHER = "haedal::get_price_voucher_from_haSui"


def names(seq: CallSequence) -> list[str]:
    return [
        c.target.rsplit("::", 2)[-2] + "::" + c.target.rsplit("::", 1)[-1]
        if isinstance(c, MoveCall)
        else type(c).__name__
        for c in seq.commands
    ]


def args(seq: CallSequence, index: int) -> dict:
    return {a.name: a.value for a in seq.descriptors[index].arguments}


class TestMarketAdapter:
    def test_adapter_type(self):
        assert MarketAdapter(config={}).adapter_type == "MARKET"

    @pytest.mark.asyncio
    async def test_query_lp_out(self, fake_ledger):
        fake_ledger.on_call("::router::get_lp_out_from_mint_lp", 12345)
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)

        result = await adapter.query_lp_out("100", "200", SENDER)

        assert result.value == "12345"
        assert result.descriptors is None
        [descriptor] = fake_ledger.last_sequence.descriptors
        assert [(a.name, a.value) for a in descriptor.arguments] == [
            ("pt_value", PureArg(100, "u64")),
            ("sy_value", PureArg(200, "u64")),
            ("market_state", ObjectArg("0xmarketstate")),
        ]
        assert descriptor.type_arguments == (SY_COIN_TYPE,)

    @pytest.mark.asyncio
    async def test_query_lp_out_debug_has_single_descriptor(self, fake_ledger):
        fake_ledger.on_call("::router::get_lp_out_from_mint_lp", 12345)
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)

        result = await adapter.query_lp_out(
            "100", "200", SENDER, options=CallOptions(debug=True)
        )

        assert result.value == "12345"
        [descriptor] = result.descriptors
        assert descriptor.target == f"{NEMO}::router::get_lp_out_from_mint_lp"
        assert result.simulation.return_value(0).type_tag == "u64"

    @pytest.mark.asyncio
    async def test_query_lp_out_rejects_bad_amounts(self, fake_ledger):
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)
        with pytest.raises(ValidationError) as exc_info:
            await adapter.query_lp_out("1.5", "200", SENDER)
        assert exc_info.value.fields == ("pt_value",)
        with pytest.raises(ValidationError, match="negative"):
            await adapter.query_lp_out("1", "-2", SENDER)
        assert fake_ledger.calls == []

    @pytest.mark.asyncio
    async def test_query_lp_out_wrong_return_type(self, fake_ledger):
        fake_ledger.on_call("::router::get_lp_out_from_mint_lp", 1, type_tag="u128")
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)
        with pytest.raises(DecodeError, match="expected u64"):
            await adapter.query_lp_out("100", "200", SENDER)

    @pytest.mark.asyncio
    async def test_query_lp_out_simulation_error(self, fake_ledger):
        fake_ledger.fail_with("MoveAbort(9)")
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)
        with pytest.raises(SimulationError) as exc_info:
            await adapter.query_lp_out("100", "200", SENDER)
        assert exc_info.value.operation == "query_lp_out"
        assert len(exc_info.value.descriptors) == 1

    @pytest.mark.asyncio
    async def test_query_add_liquidity_single_pt(self, fake_ledger):
        fake_ledger.on_call("::get_price_voucher_from_haSui", 7, type_tag="u128")
        fake_ledger.on_call("::offchain::single_liquidity_add_pt_out", 4321)
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)

        result = await adapter.query_add_liquidity_single_pt(SENDER, "500", COINS)

        assert result.value == "4321"
        voucher, add = fake_ledger.last_sequence.descriptors
        assert voucher.target.endswith("::haedal::get_price_voucher_from_haSui")
        assert add.target == f"{NEMO}::offchain::single_liquidity_add_pt_out"
        assert [a.name for a in add.arguments] == [
            "net_sy_in",
            "price_voucher",
            "market_factory_config",
            "py_state",
            "market_state",
            "clock",
        ]
        assert add.arguments[0].value == PureArg(500, "u64")

    @pytest.mark.asyncio
    async def test_query_add_liquidity_validation(self, fake_ledger):
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)
        with pytest.raises(ValidationError, match="address is required"):
            await adapter.query_add_liquidity_single_pt("", "500", COINS)
        with pytest.raises(ValidationError, match="no coins supplied"):
            await adapter.query_add_liquidity_single_pt(SENDER, "500", [])
        assert fake_ledger.calls == []

    @pytest.mark.asyncio
    async def test_query_add_liquidity_simulation_error(self, fake_ledger):
        fake_ledger.fail_with("MoveAbort(5)")
        adapter = MarketAdapter(MARKET, ledger=fake_ledger)
        with pytest.raises(SimulationError) as exc_info:
            await adapter.query_add_liquidity_single_pt(SENDER, "500", COINS)
        assert len(exc_info.value.descriptors) == 2

    def test_merge_lp_positions(self):
        seq = CallSequence()
        merged = MarketAdapter(MARKET).merge_lp_positions(seq, ["0x1", "0x2"])
        assert merged == ObjectArg("0x1")
        assert len(seq) == 1


class TestLiquidityBuilders:
    def test_mint_lp_returns_remaining_sy_and_position(self):
        seq = CallSequence()
        remaining, position = MarketAdapter(MARKET).mint_lp(
            seq, ObjectArg("0xsy"), Result(9), "5", Result(8), HANDLE
        )

        assert (remaining, position) == (NestedResult(0, 0), NestedResult(0, 1))
        [descriptor] = seq.descriptors
        assert descriptor.target == f"{NEMO}::market::mint_lp"
        assert descriptor.type_arguments == (SY_COIN_TYPE,)
        assert [a.name for a in descriptor.arguments] == [
            "version",
            "sy_coin",
            "pt_amount",
            "min_lp_amount",
            "price_voucher",
            "py_position",
            "py_state",
            "market_state",
            "clock",
        ]
        assert args(seq, 0)["min_lp_amount"] == PureArg(5, "u64")
        assert args(seq, 0)["py_position"] == ObjectArg("0xpyposition")

    def test_add_liquidity_single_sy(self):
        seq = CallSequence()
        MarketAdapter(MARKET).add_liquidity_single_sy(
            seq, ObjectArg("0xsy"), "300", 10, Result(0), HANDLE
        )

        [descriptor] = seq.descriptors
        assert descriptor.target == f"{NEMO}::router::add_liquidity_single_sy"
        assert [a.name for a in descriptor.arguments] == [
            "version",
            "sy_coin",
            "pt_value",
            "min_lp_amount",
            "price_voucher",
            "py_position",
            "py_state",
            "market_factory_config",
            "market_state",
            "clock",
        ]
        assert args(seq, 0)["pt_value"] == PureArg(300, "u64")
        assert args(seq, 0)["market_factory_config"] == ObjectArg("0xmfconfig")

    def test_add_liquidity_single_sy_rejects_fractional_pt_value(self):
        with pytest.raises(ValidationError) as exc_info:
            MarketAdapter(MARKET).add_liquidity_single_sy(
                CallSequence(), ObjectArg("0xsy"), "1.5", 0, Result(0), HANDLE
            )
        assert exc_info.value.fields == ("pt_value",)

    def test_seed_liquidity(self):
        adapter = MarketAdapter({**MARKET, "yield_factory_config_id": "0xyf"})
        seq = CallSequence()
        lp = adapter.seed_liquidity(seq, ObjectArg("0xsy"), "0", Result(0), HANDLE)

        assert lp == NestedResult(0, 0)
        assert seq.descriptors[0].target == f"{NEMO}::market::seed_liquidity"
        assert args(seq, 0)["yield_factory_config"] == ObjectArg("0xyf")

    def test_seed_liquidity_requires_yield_factory_config(self):
        with pytest.raises(ValidationError) as exc_info:
            MarketAdapter(MARKET).seed_liquidity(
                CallSequence(), ObjectArg("0xsy"), "0", Result(0), HANDLE
            )
        assert exc_info.value.fields == ("yield_factory_config_id",)

    def test_claim_reward_type_arguments(self):
        seq = CallSequence()
        MarketAdapter(MARKET).claim_reward(seq, ObjectArg("0xlp"), SUI_COIN_TYPE)

        [descriptor] = seq.descriptors
        assert descriptor.target == f"{NEMO}::market::claim_reward"
        assert descriptor.type_arguments == (SY_COIN_TYPE, SUI_COIN_TYPE)
        assert [a.name for a in descriptor.arguments] == [
            "version",
            "market_state",
            "lp_position",
            "clock",
        ]

    def test_burn_lp_and_swap(self):
        adapter = MarketAdapter(MARKET)
        seq = CallSequence()
        sy_coin = adapter.burn_lp(seq, "100", HANDLE, ObjectArg("0xlp"))
        adapter.swap_exact_pt_for_sy(seq, "40", HANDLE, Result(0), "39")

        assert sy_coin == NestedResult(0, 0)
        assert args(seq, 0)["lp_amount"] == PureArg(100, "u64")
        assert args(seq, 0)["market_position"] == ObjectArg("0xlp")
        swap = args(seq, 1)
        assert (swap["pt_amount"], swap["min_sy_out"]) == (
            PureArg(40, "u64"),
            PureArg(39, "u64"),
        )


class TestRemoveLiquidity:
    @pytest.mark.asyncio
    async def test_redeem_merges_claims_and_pays_out_sy(self):
        positions = [
            LpPosition(id="0xa", lp_amount="30"),
            LpPosition.model_validate({"id": {"id": "0xb"}, "lpAmount": "80"}),
            LpPosition(id="0xc", lp_amount="50"),
        ]
        seq = CallSequence(sender=SENDER)

        await MarketAdapter(LP_MARKET).remove_liquidity(
            seq,
            SENDER,
            "100",
            positions,
            py_positions=[PY_POSITION],
            receiving_type="sy",
            reward_coin_types=[SUI_COIN_TYPE],
        )

        assert names(seq) == [
            "market_position::join",
            "market::claim_reward",
            "TransferObjects",
            "market::burn_lp",
            "sy::redeem",
            "TransferObjects",
        ]
        assert args(seq, 0)["position"] == ObjectArg("0xb")
        assert args(seq, 0)["other"] == ObjectArg("0xc")
        assert args(seq, 1)["lp_position"] == ObjectArg("0xb")
        assert args(seq, 2)["market_position"] == ObjectArg("0xb")
        assert args(seq, 2)["py_position"] == ObjectArg("0xpyposition")
        assert seq.commands[-1].objects == (Result(4),)
        assert seq.unresolved_references() == []

    @pytest.mark.asyncio
    async def test_swap_claims_interest_and_returns_new_position(self):
        seq = CallSequence(sender=SENDER)

        await MarketAdapter(LP_MARKET).remove_liquidity(
            seq,
            SENDER,
            "100",
            [LpPosition(id="0xa", lp_amount="500")],
            yt_balance="7",
            action="swap",
            receiving_type="sy",
            pt_amount="40",
            min_sy_out="38",
        )

        assert names(seq) == [
            "py::init_py_position",
            VOUCHER,
            "yield_factory::redeem_due_interest",
            "sy::redeem",
            "TransferObjects",
            "market::burn_lp",
            VOUCHER,
            "market::swap_exact_pt_for_sy",
            "MergeCoins",
            "sy::redeem",
            "TransferObjects",
            "TransferObjects",
        ]
        merge = seq.commands[8]
        assert isinstance(merge, MergeCoins)
        assert merge.destination == NestedResult(5, 0)
        assert merge.sources == (Result(7),)
        last = seq.commands[-1]
        assert isinstance(last, TransferObjects)
        assert last.objects == (Result(0),)
        assert seq.unresolved_references() == []

    @pytest.mark.asyncio
    async def test_expired_market_redeems_released_pt(self):
        adapter = MarketAdapter({**LP_MARKET, "maturity": "1000"})
        seq = CallSequence(sender=SENDER)

        await adapter.remove_liquidity(
            seq,
            SENDER,
            "100",
            [LpPosition(id="0xa", lp_amount="100")],
            py_positions=[PY_POSITION],
            receiving_type="sy",
            pt_amount="40",
            now_ms=2000,
        )

        assert names(seq) == [
            "market::burn_lp",
            VOUCHER,
            "yield_factory::redeem_py",
            "sy::redeem",
            "TransferObjects",
            "sy::redeem",
            "TransferObjects",
        ]
        redeem = args(seq, 2)
        assert redeem["yt_amount"] == PureArg(0, "u64")
        assert redeem["pt_amount"] == PureArg(40, "u64")

    @pytest.mark.asyncio
    async def test_underlying_burns_before_transfer(self):
        seq = CallSequence(sender=SENDER)

        await MarketAdapter(LP_MARKET).remove_liquidity(
            seq,
            SENDER,
            "100",
            [LpPosition(id="0xa", lp_amount="100")],
            py_positions=[PY_POSITION],
        )

        assert names(seq)[-3:] == [
            "sy::redeem",
            "hasui_staking::unstake",
            "TransferObjects",
        ]
        assert seq.commands[-1].objects == (Result(len(seq) - 2),)

    @pytest.mark.asyncio
    async def test_validation(self):
        adapter = MarketAdapter(LP_MARKET)
        positions = [LpPosition(id="0xa", lp_amount="100")]
        with pytest.raises(ValidationError, match="Insufficient LP balance"):
            await adapter.remove_liquidity(
                CallSequence(), SENDER, "101", positions, receiving_type="sy"
            )
        with pytest.raises(ValidationError) as exc_info:
            await adapter.remove_liquidity(
                CallSequence(), SENDER, "10", positions, action="swap"
            )
        assert exc_info.value.fields == ("pt_amount",)
        with pytest.raises(ValidationError) as exc_info:
            await adapter.remove_liquidity(CallSequence(), SENDER, "1.5", positions)
        assert exc_info.value.fields == ("lp_amount",)
        with pytest.raises(ValidationError, match="no LP positions"):
            await adapter.remove_liquidity(CallSequence(), SENDER, "10", [])

    @pytest.mark.asyncio
    async def test_no_underlying_coin_must_withdraw_to_sy(self):
        adapter = MarketAdapter(
            {**LP_MARKET, "coin_type": HAWAL_COIN_TYPE, "provider": "Haedal"}
        )
        seq = CallSequence()
        with pytest.raises(ProtocolUnsupportedError, match="withdraw to sy"):
            await adapter.remove_liquidity(
                seq, SENDER, "10", [LpPosition(id="0xa", lp_amount="10")]
            )
        assert len(seq) == 0
