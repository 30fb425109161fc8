from nemo_sdk.core.constants.sui import (
    CLOCK,
    SUI_COIN_TYPE,
    SUI_COIN_TYPES,
    SUI_SYSTEM_STATE,
    ZERO_ADDRESS,
)

__all__ = [
    "CLOCK",
    "SUI_COIN_TYPE",
    "SUI_COIN_TYPES",
    "SUI_SYSTEM_STATE",
    "ZERO_ADDRESS",
]
