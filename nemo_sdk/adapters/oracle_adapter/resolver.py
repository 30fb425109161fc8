"""Price-voucher call selection.

Dispatch is two-level: the provider table wins (SpringSui and Winter price
every LST through one entry point), then the exact coin type, and anything
left falls back to Scallop's x-oracle. Each branch appends exactly one call
whose first two arguments are the price-oracle config and the ticket cap.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from nemo_sdk.core.adapters.models import ProtocolConfig, Provider
from nemo_sdk.core.constants.oracle_contracts import VoucherShape
from nemo_sdk.core.constants.sui import CLOCK
from nemo_sdk.core.constants.tables import ProviderTables
from nemo_sdk.core.utils.contracts import append_call
from nemo_sdk.core.utils.transaction import CallSequence, ObjectArg, Result

BASE_FIELDS = (
    "oracle_package_id",
    "price_oracle_config_id",
    "oracle_ticket",
    "sy_coin_type",
    "coin_type",
)
# Every shape except the sSBUCK one also passes the SY state object.
SHAPE_FIELDS: dict[VoucherShape, tuple[str, ...]] = {
    VoucherShape.SSBUCK: (),
    VoucherShape.CETUS_HAEDAL: ("sy_state_id", "yield_token_type"),
    VoucherShape.CETUS_AFTERMATH: ("sy_state_id", "yield_token_type"),
    VoucherShape.CETUS_VOLO: ("sy_state_id", "yield_token_type"),
    VoucherShape.X_ORACLE: (
        "sy_state_id",
        "underlying_coin_type",
        "provider_version",
        "provider_market",
    ),
}


@dataclass(frozen=True)
class VoucherCall:
    target: str
    type_arguments: tuple[str, ...]
    # (name, object id) in call order, after the oracle config and ticket.
    objects: tuple[tuple[str, str], ...]


def resolve_shape(config: ProtocolConfig, tables: ProviderTables) -> VoucherShape:
    if config.provider is not None:
        shape = tables.voucher_shape_by_provider.get(config.provider)
        if shape is not None:
            return shape
    return tables.voucher_shape_by_coin_type.get(
        config.coin_type, VoucherShape.X_ORACLE
    )


def _spring_sui(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::spring::get_price_voucher_from_spring",
        (c.sy_coin_type, c.coin_type),
        (("lst_info", t.spring_sui_info(c.coin_type)), ("sy_state", c.sy_state_id)),
    )


def _winter(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::haedal::get_price_voucher_from_blizzard",
        (c.sy_coin_type, c.coin_type),
        (
            ("blizzard_staking", t.blizzard_staking(c.coin_type)),
            ("walrus_staking", t.contract(Provider.WINTER, "walrus_staking")),
            ("sy_state", c.sy_state_id),
        ),
    )


def _hawal(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::haedal::get_haWAL_price_voucher",
        (c.sy_coin_type, c.coin_type),
        (
            ("staking", t.contract(Provider.HAEDAL, "hawal_staking")),
            ("sy_state", c.sy_state_id),
        ),
    )


def _cetus(
    module: str, provider_objects: Callable[[ProviderTables], tuple]
) -> Callable[[ProtocolConfig, ProviderTables], VoucherCall]:
    def build(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
        vault = t.cetus_vault(c.coin_type)
        return VoucherCall(
            f"{c.oracle_package_id}::{module}::get_price_voucher_from_cetus_vault",
            (c.sy_coin_type, c.yield_token_type, c.coin_type),
            (
                *provider_objects(t),
                ("vault", vault.vault_id),
                ("pool", vault.pool_id),
                ("sy_state", c.sy_state_id),
            ),
        )

    return build


def _ssbuck(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::buck::get_price_voucher_from_ssbuck",
        (c.sy_coin_type, c.coin_type),
        (("vault", t.contract(Provider.STRATER, "vault")), ("clock", CLOCK)),
    )


def _volo_cert(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::volo::get_price_voucher_from_volo",
        (c.sy_coin_type,),
        (
            ("native_pool", t.contract(Provider.VOLO, "native_pool")),
            ("metadata", t.contract(Provider.VOLO, "metadata")),
            ("sy_state", c.sy_state_id),
        ),
    )


def _super_sui(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{t.super_sui['package']}::aftermath::get_meta_coin_price_voucher",
        (c.sy_coin_type, c.coin_type),
        (
            ("registry", t.super_sui["registry"]),
            ("vault", t.super_sui["vault"]),
            ("sy_state", c.sy_state_id),
        ),
    )


def _afsui(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::aftermath::get_price_voucher_from_aftermath",
        (c.sy_coin_type, c.coin_type),
        (
            (
                "aftermath_staked_sui_vault",
                t.contract(Provider.AFTERMATH, "staked_sui_vault"),
            ),
            ("aftermath_safe", t.contract(Provider.AFTERMATH, "safe")),
            ("sy_state", c.sy_state_id),
        ),
    )


def _hasui(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::haedal::get_price_voucher_from_haSui",
        (c.sy_coin_type, c.coin_type),
        (
            ("haedal_staking", t.contract(Provider.HAEDAL, "haedal_staking")),
            ("sy_state", c.sy_state_id),
        ),
    )


def _stsui(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::alphafi::get_price_voucher_from_spring",
        (c.sy_coin_type, c.coin_type),
        (
            (
                "liquid_staking_info",
                t.contract(Provider.ALPHAFI, "liquid_staking_info"),
            ),
            ("sy_state", c.sy_state_id),
        ),
    )


def _x_oracle(c: ProtocolConfig, t: ProviderTables) -> VoucherCall:
    return VoucherCall(
        f"{c.oracle_package_id}::scallop::get_price_voucher_from_x_oracle",
        (c.sy_coin_type, c.underlying_coin_type),
        (
            ("provider_version", c.provider_version),
            ("provider_market", c.provider_market),
            ("sy_state", c.sy_state_id),
            ("clock", CLOCK),
        ),
    )


VoucherBuilder = Callable[[ProtocolConfig, ProviderTables], VoucherCall]

VOUCHER_BUILDERS: dict[VoucherShape, VoucherBuilder] = {
    VoucherShape.SPRING_SUI: _spring_sui,
    VoucherShape.WINTER_BLIZZARD: _winter,
    VoucherShape.HAWAL: _hawal,
    VoucherShape.CETUS_HAEDAL: _cetus(
        "haedal",
        lambda t: (("haedal_staking", t.contract(Provider.HAEDAL, "haedal_staking")),),
    ),
    VoucherShape.CETUS_AFTERMATH: _cetus(
        "aftermath",
        lambda t: (
            (
                "aftermath_staked_sui_vault",
                t.contract(Provider.AFTERMATH, "staked_sui_vault"),
            ),
            ("aftermath_safe", t.contract(Provider.AFTERMATH, "safe")),
        ),
    ),
    VoucherShape.CETUS_VOLO: _cetus(
        "volo",
        lambda t: (
            ("native_pool", t.contract(Provider.VOLO, "native_pool")),
            ("metadata", t.contract(Provider.VOLO, "metadata")),
        ),
    ),
    VoucherShape.SSBUCK: _ssbuck,
    VoucherShape.VOLO_CERT: _volo_cert,
    VoucherShape.SUPER_SUI: _super_sui,
    VoucherShape.AFTERMATH_AFSUI: _afsui,
    VoucherShape.HAEDAL_HASUI: _hasui,
    VoucherShape.ALPHAFI_STSUI: _stsui,
    VoucherShape.X_ORACLE: _x_oracle,
}

_unhandled = set(VoucherShape) - set(VOUCHER_BUILDERS)
if _unhandled:
    raise ImportError(f"voucher shapes without a builder: {sorted(_unhandled)}")


def required_fields(shape: VoucherShape) -> tuple[str, ...]:
    return BASE_FIELDS + SHAPE_FIELDS.get(shape, ("sy_state_id",))


def build_voucher_call(config: ProtocolConfig, tables: ProviderTables) -> VoucherCall:
    shape = resolve_shape(config, tables)
    config.require(*required_fields(shape), operation="get_price_voucher")
    return VOUCHER_BUILDERS[shape](config, tables)


def get_price_voucher(
    sequence: CallSequence, config: ProtocolConfig, tables: ProviderTables
) -> Result:
    """Append the oracle call pricing ``config.coin_type`` and return the voucher."""
    call = build_voucher_call(config, tables)
    logger.debug(f"Price voucher for {config.coin_type} via {call.target}")
    return append_call(
        sequence,
        call.target,
        call.type_arguments,
        [
            ("price_oracle_config", ObjectArg(config.price_oracle_config_id)),
            ("price_ticket_cap", ObjectArg(config.oracle_ticket)),
            *((name, ObjectArg(object_id)) for name, object_id in call.objects),
        ],
    )


def get_price(
    sequence: CallSequence, config: ProtocolConfig, voucher: Result
) -> Result:
    config.require(
        "oracle_voucher_package_id", "sy_coin_type", operation="get_price"
    )
    return append_call(
        sequence,
        f"{config.oracle_voucher_package_id}::oracle_voucher::get_price",
        [config.sy_coin_type],
        [("price_voucher", voucher)],
    )
