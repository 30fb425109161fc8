from nemo_sdk.adapters.oracle_adapter.adapter import OracleAdapter

__all__ = ["OracleAdapter"]
