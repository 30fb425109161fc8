# Volo liquid staking (vSUI / CERT).
VOLO_PACKAGE = "0x68d22cf8bdbcd11ecba1e094922873e4080d4d11133e2443fddda0bfd11dae20"

VOLO_CONTRACTS: dict[str, str] = {
    "stake": f"{VOLO_PACKAGE}::stake_pool::stake",
    "unstake": f"{VOLO_PACKAGE}::stake_pool::unstake",
    "native_pool": "0x2d914e23d82fedef1b5f56a32d5c64bdcc3087ccfea2b4d6ea51a71f587840e5",
    "metadata": "0x680cd26af32b2bde8d3361e804c53ec1d1cfe24c7f039eb7f549e8dfde389a60",
}

CERT_COIN_TYPE = (
    "0x549e8b69270defbfafd4f94e17ec44cdbdd99820b33bda2278dea3b9a32d3f55::cert::CERT"
)
