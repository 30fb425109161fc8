# Aftermath staked SUI vault (afSUI) and the SuperSUI meta vault.
AFTERMATH_PACKAGE = "0x7f6ce7ade63857c4fd16ef7783fed2dfc4d7fb7e40615abdb653030b76aef0c6"

AFTERMATH_CONTRACTS: dict[str, str] = {
    "request_stake": f"{AFTERMATH_PACKAGE}::staked_sui_vault::request_stake",
    "request_unstake_atomic": f"{AFTERMATH_PACKAGE}::staked_sui_vault::request_unstake_atomic",
    "staked_sui_vault": "0x2f8f6d5da7f13ea37daa397724280483ed062769813b6f31e9788e59cc88994d",
    "safe": "0xeb685899830dd5837b47007809c76d91a098d52aabbf61e8ac467c59e5cc4610",
    "referral_vault": "0x4ce9a19b594599536c53edb25d22532f82f18038dc8ef618afd00fbbfb9845ef",
    "treasury": "0xd2b95022244757b0ab9f74e2ee2fb2c3bf29dce5590fa6993a85d64bd219d7e8",
    # Mysten Labs validator used for new stakes.
    "validator": "0xcb7efe4253a0fe58df608d8a2d3c0eea94b4b40a8738c8daae4eb77830c16cd7",
}

AFSUI_COIN_TYPE = (
    "0xf325ce1300e8dac124071d3152c5c5ee6174914f8bc2161e88329cf579246efc::afsui::AFSUI"
)

SUPER_SUI_CONTRACTS: dict[str, str] = {
    "package": "0x83949cdb90510f02ed3aee7a686cd0b1390de073afcadad9aa41d3016eb13463",
    "registry": "0x5ff2396592a20f7bf6ff291963948d6fc2abec279e11f50ee74d193c4cf0bba8",
    "vault": "0x3062285974a5e517c88cf3395923aac788dce74f3640029a01e25d76c4e76f5d",
}

SUPER_SUI_COIN_TYPE = (
    "0x790f258062909e3a0ffc78b3c53ac2f62d7084c3bab95644bdeb05add7250001::super_sui::SUPER_SUI"
)
