from nemo_sdk.testing.ledger import FakeLedger

__all__ = ["FakeLedger"]
