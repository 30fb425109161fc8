from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from nemo_sdk.core.constants.base import DEFAULT_DECIMAL
from nemo_sdk.core.errors import ValidationError


class Provider(StrEnum):
    SCALLOP = "Scallop"
    STRATER = "Strater"
    AFTERMATH = "Aftermath"
    SPRING_SUI = "SpringSui"
    VOLO = "Volo"
    HAEDAL = "Haedal"
    ALPHAFI = "AlphaFi"
    MSTABLE = "Mstable"
    WINTER = "Winter"
    CETUS = "Cetus"


ReceivingType = Literal["sy", "underlying"]


class ProtocolConfig(BaseModel):
    """Static per-market configuration.

    Every identifier defaults to empty because each provider and each query
    needs a different subset. Call ``require`` with the fields an operation
    consumes before appending anything to a sequence.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    contract_id: str = Field(
        default="",
        validation_alias=AliasChoices("contractId", "nemoContractId", "contract_id"),
    )
    version: str = ""
    py_state_id: str = Field(
        default="",
        validation_alias=AliasChoices("pyStateId", "principalStateId", "py_state_id"),
    )
    sy_coin_type: str = Field(
        default="",
        validation_alias=AliasChoices(
            "syCoinType", "syntheticYieldCoinType", "sy_coin_type"
        ),
    )
    sy_state_id: str = Field(
        default="",
        validation_alias=AliasChoices(
            "syStateId", "syntheticYieldStateId", "sy_state_id"
        ),
    )
    yield_factory_config_id: str = ""
    market_state_id: str = ""
    market_factory_config_id: str = ""
    coin_type: str = ""
    underlying_coin_type: str = ""
    # Milliseconds since the epoch; empty when the market never expires.
    maturity: str = ""
    decimal: int = Field(default=DEFAULT_DECIMAL, ge=0, le=36)
    # Decimals of underlying_coin_type when they differ from the wrapped coin.
    underlying_decimal: int | None = Field(default=None, ge=0, le=36)
    provider: Provider | None = Field(
        default=None,
        validation_alias=AliasChoices("provider", "underlyingProtocol"),
    )
    price_oracle_config_id: str = ""
    oracle_package_id: str = ""
    oracle_ticket: str = ""
    oracle_voucher_package_id: str = ""
    yield_token_type: str = ""
    provider_version: str = ""
    provider_market: str = ""

    @property
    def underlying_decimals(self) -> int:
        if self.underlying_decimal is None:
            return self.decimal
        return self.underlying_decimal

    def require(self, *fields: str, operation: str | None = None) -> None:
        missing = [name for name in fields if not getattr(self, name, None)]
        if missing:
            raise ValidationError(
                f"missing required config field(s): {', '.join(missing)}",
                operation=operation,
                fields=missing,
            )

    def require_provider(self, operation: str | None = None) -> Provider:
        if self.provider is None:
            raise ValidationError(
                "missing required config field(s): provider",
                operation=operation,
                fields=["provider"],
            )
        return self.provider


class Position(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    maturity: str = ""
    pt_balance: str = "0"
    yt_balance: str = "0"
    py_state_id: str = ""


class LpPosition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    lp_amount: str = "0"
    market_state_id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _unwrap_uid(cls, value: Any) -> Any:
        # Objects read from the ledger nest the id as {"id": "0x.."}.
        if isinstance(value, dict):
            return value.get("id")
        return value


class CoinData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    coin_object_id: str
    balance: str
    coin_type: str = ""


class QueryYieldResult(BaseModel):
    output_amount: str
    output_value: str


class MintValueResult(BaseModel):
    amount: str
    value: str
