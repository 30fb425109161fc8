# Winter Walrus (Blizzard) liquid staking for WAL. Each LST has its own
# BlizzardStaking object; the coin type selects it.
BLIZZARD_PACKAGE = "0x29ba7f7bc53e776f27a6d1289555ded2f407b4b1a799224f06b26addbcd1c33d"

WINTER_CONTRACTS: dict[str, str] = {
    "get_allowed_versions": f"{BLIZZARD_PACKAGE}::blizzard_allowed_versions::get_allowed_versions",
    "mint": f"{BLIZZARD_PACKAGE}::blizzard_protocol::mint",
    "burn_lst": f"{BLIZZARD_PACKAGE}::blizzard_protocol::burn_lst",
    "fcfs": "0x10a7c91b25090b81a4de1e3a3912c994feb446529a308b7aa549eea259b11842::blizzard_hooks::fcfs",
    "vector_transfer_staked_wal": "0x3e12a9b6dbe7997b441b5fd6cf5e953cf2f3521a8f353f33e7f297cf7dac0ecc::blizzard_utils::vector_transfer_staked_wal",
    "blizzard_allowed_versions": "0x4199e3c5349075a98ec0b6100c7f1785242d97ba1f9311ce7a3a021a696f9e4a",
    "walrus_staking": "0x10b9d30c28448939ce6c4d6c6e0ffce4a7f8a4ada8248bdad09ef8b70e4a3904",
    "validator": "0xe2b5df873dbcddfea64dcd16f0b581e3b9893becf991649dacc9541895c898cb",
}

WWAL_COIN_TYPE = (
    "0xb1b0650a8862e30e3f604fd6c5838bc25464b8d3d827fbd58af7cb9685b832bf::wwal::WWAL"
)

WINTER_BLIZZARD_STAKING: dict[str, str] = {
    WWAL_COIN_TYPE: "0xccf034524a2bdc65295e212128f77428bb6860d757250c43323aa38b3d04df6d",
    "0xd8b855d48fb4d8ffbb5c4a3ecac27b00f3712ce58626deb5a16a290e0c6edf84::nwal::NWAL": "0x75c4a3d4f78aa3157e2ab6e8dfb2230432272c23ab9392b10a2212e4b2fcc9f9",
    "0x0f03158a2caec1b656ee929007d08e58d620eeabeacac90ea7657d8b386b00b9::pwal::PWAL": "0xd355b8e62f16418a02879de9bc4ab15c4dad9dd2966d15645e1674689bfbc8b9",
    "0x5f70820b716a1d83580e5cf36dd0d0915b8763e1b85e3ef3db821ff40846be44::bread_wal::BREAD_WAL": "0xc75f916f5cdc94664f58f5e8284a70ef69f973d62cd9841584bc70200a98a8b7",
    "0xa8ad8c2720f064676856f4999894974a129e3d15386b3d0a27f3a7f85811c64a::tr_wal::TR_WAL": "0x76d5f7309ac302c10aa91d72ab7d48252a840816c39764293e986ce90c3c4a0d",
    "0x615b29e7cf458a4e29363a966a01d6a6bf5026349bb4e957daa61ca9ffff639d::up_wal::UP_WAL": "0xa3d69fdb63cbeaec068e8739fe7bda05a184f82999d1e76f0c0f5e9a29e297ed",
    "0x64e081287af3fb4eb5720137348661493203d48535f582577177fcd3b253805f::mwal::MWAL": "0x1c98a3851302351913b34491a07930e83b1bd502cf1c6e9428b1c5d690d1e074",
}
