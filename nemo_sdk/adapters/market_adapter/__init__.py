from nemo_sdk.adapters.market_adapter.adapter import MarketAdapter

__all__ = ["MarketAdapter"]
