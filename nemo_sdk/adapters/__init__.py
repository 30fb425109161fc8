from nemo_sdk.adapters.market_adapter import MarketAdapter
from nemo_sdk.adapters.oracle_adapter import OracleAdapter
from nemo_sdk.adapters.py_adapter import PyAdapter
from nemo_sdk.adapters.sy_adapter import SyAdapter

__all__ = ["MarketAdapter", "OracleAdapter", "PyAdapter", "SyAdapter"]
