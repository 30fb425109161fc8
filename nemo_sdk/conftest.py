pytest_plugins = ["nemo_sdk.testing.ledger"]
