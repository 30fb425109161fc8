# AlphaFi liquid staking (stSUI).
ALPHAFI_PACKAGE = "0x059f94b85c07eb74d2847f8255d8cc0a67c9a8dcc039eabf9f8b9e23a0de2700"

ALPHAFI_CONTRACTS: dict[str, str] = {
    "mint": f"{ALPHAFI_PACKAGE}::liquid_staking::mint",
    "redeem": f"{ALPHAFI_PACKAGE}::liquid_staking::redeem",
    "liquid_staking_info": "0x1adb343ab351458e151bc392fbf1558b3332467f23bda45ae67cd355a57fd5f5",
}

STSUI_COIN_TYPE = (
    "0xd1b72982e40348d069bb1ff701e634c117bb5f741f44dff91e472d3b01461e55::stsui::STSUI"
)
