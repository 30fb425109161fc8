# mStable meta vault (SuperSUI). Deposits and withdrawals go through a
# single-use cap minted by the exchange-rate module.
MSTABLE_CONTRACTS: dict[str, str] = {
    "create_deposit_cap": "0x8e9aa615cd18d263cfea43d68e2519a2de2d39075756a05f67ae6cee2794ff06::exchange_rate::create_deposit_cap",
    "create_withdraw_cap": "0x8e9aa615cd18d263cfea43d68e2519a2de2d39075756a05f67ae6cee2794ff06::exchange_rate::create_withdraw_cap",
    "deposit": "0x74ecdeabc36974da37a3e2052592b2bc2c83e878bbd74690e00816e91f93a505::vault::deposit",
    "withdraw": "0x74ecdeabc36974da37a3e2052592b2bc2c83e878bbd74690e00816e91f93a505::vault::withdraw",
    "meta_vault_sui_integration": "0x408618719d06c44a12e9c6f7fdf614a9c2fb79f262932c6f2da7621c68c7bcfa",
    "vault": "0x3062285974a5e517c88cf3395923aac788dce74f3640029a01e25d76c4e76f5d",
    "registry": "0x5ff2396592a20f7bf6ff291963948d6fc2abec279e11f50ee74d193c4cf0bba8",
    "version": "0x4696559327b35ff2ab26904e7426a1646312e9c836d5c6cff6709a5ccc30915c",
}

# Minimum amount out passed to vault::deposit / vault::withdraw.
MSTABLE_AMOUNT_LIMIT = 0
