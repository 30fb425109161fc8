# Cetus CLMM vaults. The SY coin is the vault's LP token; each LP token maps to
# a vault object and the CLMM pool it manages.
CETUS_CONTRACTS: dict[str, str] = {
    # Package exposing `vaults::deposit`. Left empty so the package that
    # defines the vault object's type is used; set it under "tables" to pin.
    "vaults_package": "",
}

HAEDAL_CETUS_LP_COIN_TYPE = (
    "0x828b452d2aa239d48e4120c24f4a59f451b8cd8ac76706129f4ac3bd78ac8809::lp_token::LP_TOKEN"
)
AFTERMATH_CETUS_LP_COIN_TYPE = (
    "0x0c8a5fcbe32b9fc88fe1d758d33dd32586143998f68656f43f3a6ced95ea4dc3::lp_token::LP_TOKEN"
)
VOLO_CETUS_LP_COIN_TYPE = (
    "0xb490d6fa9ead588a9d72da07a02914da42f6b5b1339b8118a90011a42b67a44f::lp_token::LP_TOKEN"
)

# LP coin type -> {"vault": ..., "pool": ...}
CETUS_VAULTS: dict[str, dict[str, str]] = {
    HAEDAL_CETUS_LP_COIN_TYPE: {
        "vault": "0xde97452e63505df696440f86f0b805263d8659b77b8c316739106009d514c270",
        "pool": "0x871d8a227114f375170f149f7e9d45be822dd003eba225e83c05ac80828596bc",
    },
    AFTERMATH_CETUS_LP_COIN_TYPE: {
        "vault": "0xff4cc0af0ad9d50d4a3264dfaafd534437d8b66c8ebe9f92b4c39d898d6870a3",
        "pool": "0xa528b26eae41bcfca488a9feaa3dca614b2a1d9b9b5c78c256918ced051d4c50",
    },
    VOLO_CETUS_LP_COIN_TYPE: {
        "vault": "0x5732b81e659bd2db47a5b55755743dde15be99490a39717abc80d62ec812bcb6",
        "pool": "0x6c545e78638c8c1db7a48b282bb8ca79da107993fcb185f75cedc1f5adb2f535",
    },
}
