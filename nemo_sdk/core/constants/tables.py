from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from nemo_sdk.core.adapters.models import Provider
from nemo_sdk.core.constants.aftermath_contracts import (
    AFTERMATH_CONTRACTS,
    SUPER_SUI_CONTRACTS,
)
from nemo_sdk.core.constants.alphafi_contracts import ALPHAFI_CONTRACTS
from nemo_sdk.core.constants.cetus_contracts import CETUS_CONTRACTS, CETUS_VAULTS
from nemo_sdk.core.constants.haedal_contracts import HAEDAL_CONTRACTS, HAWAL_COIN_TYPE
from nemo_sdk.core.constants.mstable_contracts import MSTABLE_CONTRACTS
from nemo_sdk.core.constants.oracle_contracts import (
    VOUCHER_SHAPE_BY_COIN_TYPE,
    VOUCHER_SHAPE_BY_PROVIDER,
    VoucherShape,
)
from nemo_sdk.core.constants.scallop_contracts import (
    SCALLOP_CONTRACTS,
    SCALLOP_S_COIN_TREASURIES,
)
from nemo_sdk.core.constants.springsui_contracts import (
    SPRING_SUI_CONTRACTS,
    SPRING_SUI_STAKING_INFO,
)
from nemo_sdk.core.constants.strater_contracts import STRATER_CONTRACTS
from nemo_sdk.core.constants.volo_contracts import VOLO_CONTRACTS
from nemo_sdk.core.constants.winter_contracts import (
    WINTER_BLIZZARD_STAKING,
    WINTER_CONTRACTS,
    WWAL_COIN_TYPE,
)
from nemo_sdk.core.errors import ProtocolUnsupportedError


@dataclass(frozen=True)
class CetusVault:
    vault_id: str
    pool_id: str


def _freeze(mapping: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(
        {
            k: _freeze(v) if isinstance(v, Mapping) else v
            for k, v in mapping.items()
        }
    )


@dataclass(frozen=True)
class ProviderTables:
    """Read-only addresses and coin-type lookups shared by every adapter.

    Built once (``ProviderTables.default()``) and passed by reference; tests
    and alternate deployments derive a variant with ``with_overrides``.
    """

    contracts: Mapping[Provider, Mapping[str, str]]
    scallop_treasuries: Mapping[str, str]
    spring_sui_staking_info: Mapping[str, str]
    winter_blizzard_staking: Mapping[str, str]
    cetus_vaults: Mapping[str, CetusVault]
    super_sui: Mapping[str, str]
    voucher_shape_by_provider: Mapping[Provider, VoucherShape]
    voucher_shape_by_coin_type: Mapping[str, VoucherShape]
    # provider -> {coin_type: asset to withdraw to instead}
    burn_rejections: Mapping[Provider, Mapping[str, str]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        for name in (
            "contracts",
            "scallop_treasuries",
            "spring_sui_staking_info",
            "winter_blizzard_staking",
            "cetus_vaults",
            "super_sui",
            "voucher_shape_by_provider",
            "voucher_shape_by_coin_type",
            "burn_rejections",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _freeze(value))

    @classmethod
    def default(cls) -> ProviderTables:
        return cls(
            contracts={
                Provider.SCALLOP: SCALLOP_CONTRACTS,
                Provider.STRATER: STRATER_CONTRACTS,
                Provider.AFTERMATH: AFTERMATH_CONTRACTS,
                Provider.SPRING_SUI: SPRING_SUI_CONTRACTS,
                Provider.VOLO: VOLO_CONTRACTS,
                Provider.HAEDAL: HAEDAL_CONTRACTS,
                Provider.ALPHAFI: ALPHAFI_CONTRACTS,
                Provider.MSTABLE: MSTABLE_CONTRACTS,
                Provider.WINTER: WINTER_CONTRACTS,
                Provider.CETUS: CETUS_CONTRACTS,
            },
            scallop_treasuries=SCALLOP_S_COIN_TREASURIES,
            spring_sui_staking_info=SPRING_SUI_STAKING_INFO,
            winter_blizzard_staking=WINTER_BLIZZARD_STAKING,
            cetus_vaults={
                coin_type: CetusVault(vault_id=v["vault"], pool_id=v["pool"])
                for coin_type, v in CETUS_VAULTS.items()
            },
            super_sui=SUPER_SUI_CONTRACTS,
            voucher_shape_by_provider={
                Provider(name): shape
                for name, shape in VOUCHER_SHAPE_BY_PROVIDER.items()
            },
            voucher_shape_by_coin_type=VOUCHER_SHAPE_BY_COIN_TYPE,
            burn_rejections={
                Provider.HAEDAL: {HAWAL_COIN_TYPE: "HAWAL"},
                Provider.WINTER: {WWAL_COIN_TYPE: "wWAL"},
            },
        )

    def with_overrides(self, overrides: Mapping[str, Any] | None) -> ProviderTables:
        """Return a copy with ``overrides`` merged in.

        ``overrides`` mirrors the field names. ``contracts`` merges per
        provider key; other tables merge per coin type. ``cetus_vaults``
        entries accept either ``CetusVault`` or ``{"vault": .., "pool": ..}``.
        """
        if not overrides:
            return self

        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if name not in self.__dataclass_fields__:
                raise KeyError(f"Unknown provider table: {name}")
            current = getattr(self, name)
            if name == "contracts":
                merged = {p: dict(v) for p, v in current.items()}
                for provider, entries in value.items():
                    merged.setdefault(Provider(provider), {}).update(entries)
                changes[name] = merged
            elif name == "cetus_vaults":
                merged_vaults = dict(current)
                for coin_type, entry in value.items():
                    if not isinstance(entry, CetusVault):
                        entry = CetusVault(
                            vault_id=entry["vault"], pool_id=entry["pool"]
                        )
                    merged_vaults[coin_type] = entry
                changes[name] = merged_vaults
            else:
                changes[name] = {**current, **value}
        return replace(self, **changes)

    def contract(self, provider: Provider, key: str) -> str:
        value = self.contracts.get(provider, {}).get(key)
        if not value:
            raise ProtocolUnsupportedError(
                f"contract '{key}' is not configured", provider=str(provider)
            )
        return value

    def scallop_treasury(self, coin_type: str) -> str:
        return self._lookup(
            self.scallop_treasuries, Provider.SCALLOP, coin_type, "sCoin treasury"
        )

    def spring_sui_info(self, coin_type: str) -> str:
        return self._lookup(
            self.spring_sui_staking_info,
            Provider.SPRING_SUI,
            coin_type,
            "liquid staking info",
        )

    def blizzard_staking(self, coin_type: str) -> str:
        return self._lookup(
            self.winter_blizzard_staking,
            Provider.WINTER,
            coin_type,
            "blizzard staking",
        )

    def cetus_vault(self, coin_type: str) -> CetusVault:
        return self._lookup(self.cetus_vaults, Provider.CETUS, coin_type, "vault")

    def burn_rejection(self, provider: Provider, coin_type: str) -> str | None:
        return self.burn_rejections.get(provider, {}).get(coin_type)

    @staticmethod
    def _lookup(
        table: Mapping[str, Any], provider: Provider, coin_type: str, what: str
    ) -> Any:
        value = table.get(coin_type)
        if value is None:
            raise ProtocolUnsupportedError(
                f"{what} not found", provider=str(provider), coin_type=coin_type
            )
        return value


DEFAULT_PROVIDER_TABLES = ProviderTables.default()
