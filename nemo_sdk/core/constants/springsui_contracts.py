# SpringSui liquid staking. Every LST issued through SpringSui has its own
# LiquidStakingInfo object; the coin type selects it.
SPRING_SUI_PACKAGE = "0x82e6f4f75441eae97d2d5850f41a09d28c7b64a05b067d37748d471f43aaf3f7"

SPRING_SUI_CONTRACTS: dict[str, str] = {
    "mint": f"{SPRING_SUI_PACKAGE}::liquid_staking::mint",
    "redeem": f"{SPRING_SUI_PACKAGE}::liquid_staking::redeem",
}

SPRING_SUI_STAKING_INFO: dict[str, str] = {
    "0x83556891f4a0f233ce7b05cfe7f957d4020492a34f5405b2cb9377d060bef4bf::spring_sui::SPRING_SUI": "0x15eda7330c8f99c30e430b4d82fd7ab2af3ead4ae17046fcb224aa9bad394f6b",
    "0xe68fad47384e18cd79040cb8d72b7f64d267eebb73a0b8d54711aa860570f404::upsui::UPSUI": "0x0ee341383a760c3af14337f134d96a5502073b897f551895e92f74aa07de0905",
    "0xc5c4bc11427315926cf0cc284504d8e5693a10da75500a5198bdee23f47f4254::lofi_sui::LOFI_SUI": "0xeb784ecfc02515248b71f45b069310592e07f934107a0377cc5919200288e513",
    "0x285b49635f4ed253967a2a4a5f0c5aea2cbd9dd0fc427b4086f3fad7ccef2c29::i_sui::I_SUI": "0x4c19387aae1ce9baec9f53d7e7a1dcae348a2fd5614785a7047b0b8cbc5494d7",
    "0x83f1bb8c91ecd1fd313344058b0eed94d63c54e41d8d1ae5bff1353443517d65::yap_sui::YAP_SUI": "0x55f3108cf195481de42d6c44469d0c870c08f3e8ea00c59452ad46445da88fcf",
    "0x41ff228bfd566f0c707173ee6413962a77e3929588d010250e4e76f0d1cc0ad4::ksui::KSUI": "0x03583e2c4d5a66299369214012564d72c4a141afeefce50c349cd56b5f8a6955",
    "0x0f26f0dced338b538e027fca6ac24019791a7578e7eb2e81840e268970fbfbd6::para_sui::PARA_SUI": "0x8f50587e228c3d4217293ea85406827d6755f598613a0697b2cb19dac297e993",
    "0x02358129a7d66f943786a10b518fdc79145f1fc8d23420d9948c4aeea190f603::fud_sui::FUD_SUI": "0x7b4406fd4de96e08711729516f826e36f3268c2fefe6de985abc41192b02b871",
    "0x502867b177303bf1bf226245fcdd3403c177e78d175a55a56c0602c7ff51c7fa::trevin_sui::TREVIN_SUI": "0x1ec3b836fe8095152741ae5425ca4c35606ba5622c76291962d8fd9daba961db",
    "0x922d15d7f55c13fd790f6e54397470ec592caa2b508df292a2e8553f3d3b274f::msui::MSUI": "0x985dd33bc2a8b5390f2c30a18d32e9a63a993a5b52750c6fe2e6ac8baeb69f48",
}
