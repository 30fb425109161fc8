# Haedal liquid staking: haSUI (SUI) and haWAL (WAL).
HAEDAL_PACKAGE = "0x83094bb1de70e10c5329cf2b0e0b6b900cc59f0dd3b31e4c74a1b8b4fc20df8e"

HAEDAL_CONTRACTS: dict[str, str] = {
    "hasui_stake": f"{HAEDAL_PACKAGE}::hasui_staking::stake",
    "hasui_unstake": f"{HAEDAL_PACKAGE}::hasui_staking::unstake",
    "hawal_stake": f"{HAEDAL_PACKAGE}::hawal_staking::stake",
    "haedal_staking": "0x47b224762220393057ebf4f70501b6e657c3e56684737568439a04f80849b2ca",
    "hawal_staking": "0x9e5f6537be1a5b658ec7eed23160df0b28c799563f6c41e9becc9ad633cb592b",
    "walrus_staking": "0x10b9d30c28448939ce6c4d6c6e0ffce4a7f8a4ada8248bdad09ef8b70e4a3904",
    "hawal_validator": "0xc65c406c4a23c088888a97ec80bd8b11a5b6cc9b1e7ca2dc7a9d88f0f8c7f7b7",
}

HASUI_COIN_TYPE = (
    "0xbde4ba4c2e274a60ce15c1cfff9e5c42e41654ac8b6d906a57efa4bd3c29f47d::hasui::HASUI"
)
HAWAL_COIN_TYPE = (
    "0x8b4d553839b219c3fd47608a0cc3d5fcc572cb25d41b7df3833208586a8d2470::hawal::HAWAL"
)
