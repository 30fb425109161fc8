from __future__ import annotations

import pytest

from nemo_sdk.adapters.oracle_adapter import OracleAdapter, resolver
from nemo_sdk.core.adapters.models import ProtocolConfig, Provider
from nemo_sdk.core.constants.cetus_contracts import HAEDAL_CETUS_LP_COIN_TYPE
from nemo_sdk.core.constants.haedal_contracts import HAWAL_COIN_TYPE
from nemo_sdk.core.constants.oracle_contracts import VoucherShape
from nemo_sdk.core.constants.springsui_contracts import SPRING_SUI_STAKING_INFO
from nemo_sdk.core.constants.strater_contracts import ST_SBUCK_COIN_TYPE
from nemo_sdk.core.constants.tables import DEFAULT_PROVIDER_TABLES
from nemo_sdk.core.errors import DecodeError, SimulationError, ValidationError
from nemo_sdk.core.utils.bcs import encode_uint
from nemo_sdk.core.utils.contracts import CallOptions
from nemo_sdk.core.utils.simulation import ReturnValue
from nemo_sdk.core.utils.transaction import CallSequence, ObjectArg

SENDER = "0x" + "a" * 64
ORACLE = "0x" + "c" * 64
SY_COIN_TYPE = "0xbbb::sy::SY"
SPRING_COIN_TYPE = next(iter(SPRING_SUI_STAKING_INFO))


def oracle_config(**overrides) -> ProtocolConfig:
    return ProtocolConfig.model_validate(
        {
            "oracle_package_id": ORACLE,
            "oracle_voucher_package_id": "0x" + "d" * 64,
            "price_oracle_config_id": "0xconfig",
            "oracle_ticket": "0xticket",
            "sy_coin_type": SY_COIN_TYPE,
            "sy_state_id": "0xsystate",
            "coin_type": SPRING_COIN_TYPE,
            "provider": Provider.SPRING_SUI,
            **overrides,
        }
    )


def test_every_shape_has_a_builder():
    assert set(resolver.VOUCHER_BUILDERS) == set(VoucherShape)


@pytest.mark.parametrize(
    ("overrides", "shape"),
    [
        ({}, VoucherShape.SPRING_SUI),
        (
            {"provider": "Winter", "coin_type": "0x1::x::X"},
            VoucherShape.WINTER_BLIZZARD,
        ),
        ({"provider": "Haedal", "coin_type": HAWAL_COIN_TYPE}, VoucherShape.HAWAL),
        (
            {"provider": "Cetus", "coin_type": HAEDAL_CETUS_LP_COIN_TYPE},
            VoucherShape.CETUS_HAEDAL,
        ),
        ({"provider": "Strater", "coin_type": ST_SBUCK_COIN_TYPE}, VoucherShape.SSBUCK),
        ({"provider": "Scallop", "coin_type": "0x1::x::X"}, VoucherShape.X_ORACLE),
        ({"provider": None, "coin_type": "0x1::x::X"}, VoucherShape.X_ORACLE),
    ],
)
def test_resolve_shape(overrides: dict, shape: VoucherShape):
    config = oracle_config(**overrides)
    assert resolver.resolve_shape(config, DEFAULT_PROVIDER_TABLES) is shape


def test_spring_sui_voucher_call():
    seq = CallSequence()
    voucher = resolver.get_price_voucher(seq, oracle_config(), DEFAULT_PROVIDER_TABLES)

    assert voucher.index == 0
    [descriptor] = seq.descriptors
    assert descriptor.target == f"{ORACLE}::spring::get_price_voucher_from_spring"
    assert descriptor.type_arguments == (SY_COIN_TYPE, SPRING_COIN_TYPE)
    assert [(a.name, a.value) for a in descriptor.arguments] == [
        ("price_oracle_config", ObjectArg("0xconfig")),
        ("price_ticket_cap", ObjectArg("0xticket")),
        ("lst_info", ObjectArg(SPRING_SUI_STAKING_INFO[SPRING_COIN_TYPE])),
        ("sy_state", ObjectArg("0xsystate")),
    ]


def test_cetus_voucher_call_carries_yield_token_type():
    config = oracle_config(
        provider="Cetus",
        coin_type=HAEDAL_CETUS_LP_COIN_TYPE,
        yield_token_type="0x1::hasui::HASUI",
    )
    seq = CallSequence()
    resolver.get_price_voucher(seq, config, DEFAULT_PROVIDER_TABLES)

    [descriptor] = seq.descriptors
    assert descriptor.type_arguments == (
        SY_COIN_TYPE,
        "0x1::hasui::HASUI",
        HAEDAL_CETUS_LP_COIN_TYPE,
    )
    names = [a.name for a in descriptor.arguments]
    assert names[:3] == ["price_oracle_config", "price_ticket_cap", "haedal_staking"]
    assert names[-3:] == ["vault", "pool", "sy_state"]


def test_ssbuck_voucher_does_not_need_sy_state():
    config = oracle_config(
        provider="Strater", coin_type=ST_SBUCK_COIN_TYPE, sy_state_id=""
    )
    seq = CallSequence()
    resolver.get_price_voucher(seq, config, DEFAULT_PROVIDER_TABLES)
    assert seq.descriptors[0].target.endswith("::buck::get_price_voucher_from_ssbuck")


def test_x_oracle_fallback_reports_missing_fields():
    config = oracle_config(provider="Scallop", coin_type="0x1::x::X")
    seq = CallSequence()
    with pytest.raises(ValidationError) as exc_info:
        resolver.get_price_voucher(seq, config, DEFAULT_PROVIDER_TABLES)

    assert set(exc_info.value.fields) == {
        "underlying_coin_type",
        "provider_version",
        "provider_market",
    }
    assert len(seq) == 0


def test_get_price_appends_voucher_reader():
    seq = CallSequence()
    config = oracle_config()
    voucher = resolver.get_price_voucher(seq, config, DEFAULT_PROVIDER_TABLES)
    price = resolver.get_price(seq, config, voucher)

    assert price.index == 1
    descriptor = seq.descriptors[1]
    assert descriptor.target.endswith("::oracle_voucher::get_price")
    assert descriptor.arguments[0].value == voucher


class TestOracleAdapter:
    def test_adapter_type(self):
        assert OracleAdapter(config={}).adapter_type == "ORACLE"

    @pytest.mark.asyncio
    async def test_query_price_voucher(self, fake_ledger):
        fake_ledger.on_call("::get_price_voucher_from_spring", 2**70, type_tag="u128")
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)

        result = await adapter.query_price_voucher(SENDER)

        assert result.value == str(2**70)
        assert result.descriptors is None

    @pytest.mark.asyncio
    async def test_query_price_voucher_accepts_struct_tag(self, fake_ledger):
        voucher_type = f"{ORACLE}::oracle_voucher::PriceVoucher<{SY_COIN_TYPE}>"
        fake_ledger.on_call_values(
            "::get_price_voucher_from_spring",
            ReturnValue(encode_uint(10**18, "u128"), voucher_type),
        )
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)

        result = await adapter.query_price_voucher(SENDER)
        assert result.value == str(10**18)

    @pytest.mark.asyncio
    async def test_query_price_voucher_rejects_wrong_width(self, fake_ledger):
        voucher_type = f"{ORACLE}::oracle_voucher::PriceVoucher<{SY_COIN_TYPE}>"
        fake_ledger.on_call_values(
            "::get_price_voucher_from_spring",
            ReturnValue(encode_uint(7, "u64"), voucher_type),
        )
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)
        with pytest.raises(DecodeError, match="16 bytes"):
            await adapter.query_price_voucher(SENDER)

    @pytest.mark.asyncio
    async def test_query_price_voucher_rejects_other_types(self, fake_ledger):
        fake_ledger.on_call("::get_price_voucher_from_spring", 1, type_tag="u64")
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)
        with pytest.raises(DecodeError, match="price voucher"):
            await adapter.query_price_voucher(SENDER)

    @pytest.mark.asyncio
    async def test_query_price_voucher_debug(self, fake_ledger):
        fake_ledger.on_call("::get_price_voucher_from_spring", 1, type_tag="u128")
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)

        result = await adapter.query_price_voucher(
            SENDER, options=CallOptions(debug=True)
        )

        assert len(result.descriptors) == 1
        assert result.simulation is not None and result.simulation.ok

    @pytest.mark.asyncio
    async def test_query_price_voucher_with_explicit_config(self, fake_ledger):
        fake_ledger.on_call("::get_haWAL_price_voucher", 5, type_tag="u128")
        adapter = OracleAdapter(ledger=fake_ledger)
        config = oracle_config(provider="Haedal", coin_type=HAWAL_COIN_TYPE)

        result = await adapter.query_price_voucher(SENDER, config)
        assert result.value == "5"

    @pytest.mark.asyncio
    async def test_query_price_voucher_simulation_error(self, fake_ledger):
        fake_ledger.fail_with("MoveAbort(2)")
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)
        with pytest.raises(SimulationError) as exc_info:
            await adapter.query_price_voucher(SENDER)
        assert exc_info.value.operation == "query_price_voucher"

    @pytest.mark.asyncio
    async def test_query_price_voucher_requires_sender(self, fake_ledger):
        adapter = OracleAdapter(oracle_config(), ledger=fake_ledger)
        with pytest.raises(ValidationError, match="address is required"):
            await adapter.query_price_voucher("  ")
        assert fake_ledger.calls == []
