# Well-known Sui framework objects and types.
CLOCK = "0x6"
SUI_SYSTEM_STATE = "0x5"
ZERO_ADDRESS = "0x" + "0" * 64

SUI_COIN_TYPE = "0x2::sui::SUI"
SUI_COIN_TYPE_LONG = (
    "0x0000000000000000000000000000000000000000000000000000000000000002::sui::SUI"
)
SUI_COIN_TYPES = frozenset({SUI_COIN_TYPE, SUI_COIN_TYPE_LONG})

COIN_VALUE_TARGET = "0x2::coin::value"
COIN_INTO_BALANCE_TARGET = "0x2::coin::into_balance"
COIN_FROM_BALANCE_TARGET = "0x2::coin::from_balance"
