from __future__ import annotations

import pytest

from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.oracle_contracts import VoucherShape
from nemo_sdk.core.constants.tables import (
    DEFAULT_PROVIDER_TABLES,
    CetusVault,
    ProviderTables,
)
from nemo_sdk.core.constants.winter_contracts import WWAL_COIN_TYPE
from nemo_sdk.core.errors import ProtocolUnsupportedError


def test_every_provider_has_contracts():
    assert set(DEFAULT_PROVIDER_TABLES.contracts) == set(Provider)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_PROVIDER_TABLES.scallop_treasuries["0x1::x::X"] = "0x2"
    with pytest.raises(TypeError):
        DEFAULT_PROVIDER_TABLES.contracts[Provider.VOLO]["stake"] = "0x3::m::f"


def test_lookup_names_coin_type():
    with pytest.raises(ProtocolUnsupportedError) as exc_info:
        DEFAULT_PROVIDER_TABLES.scallop_treasury("0x1::unknown::UNKNOWN")
    assert exc_info.value.provider == "Scallop"
    assert exc_info.value.coin_type == "0x1::unknown::UNKNOWN"


def test_unconfigured_contract_is_unsupported():
    with pytest.raises(ProtocolUnsupportedError, match="vaults_package"):
        DEFAULT_PROVIDER_TABLES.contract(Provider.CETUS, "vaults_package")


def test_with_overrides_returns_new_tables():
    tables = DEFAULT_PROVIDER_TABLES.with_overrides(
        {
            "contracts": {"Cetus": {"vaults_package": "0xcafe"}},
            "cetus_vaults": {"0x9::lp::LP": {"vault": "0xv", "pool": "0xp"}},
            "voucher_shape_by_coin_type": {"0x9::lp::LP": VoucherShape.CETUS_VOLO},
        }
    )

    assert tables is not DEFAULT_PROVIDER_TABLES
    assert tables.contract(Provider.CETUS, "vaults_package") == "0xcafe"
    assert tables.cetus_vault("0x9::lp::LP") == CetusVault("0xv", "0xp")
    assert DEFAULT_PROVIDER_TABLES.contracts[Provider.CETUS]["vaults_package"] == ""
    # Untouched entries survive the merge.
    assert tables.contract(Provider.AFTERMATH, "safe")
    assert tables.scallop_treasuries == DEFAULT_PROVIDER_TABLES.scallop_treasuries


def test_with_overrides_rejects_unknown_table():
    with pytest.raises(KeyError, match="Unknown provider table"):
        DEFAULT_PROVIDER_TABLES.with_overrides({"nope": {}})


def test_burn_rejections():
    tables = DEFAULT_PROVIDER_TABLES
    assert tables.burn_rejection(Provider.WINTER, WWAL_COIN_TYPE) == "wWAL"
    assert tables.burn_rejection(Provider.SCALLOP, "0x1::a::A") is None


def test_default_is_stable():
    assert ProviderTables.default() == DEFAULT_PROVIDER_TABLES
