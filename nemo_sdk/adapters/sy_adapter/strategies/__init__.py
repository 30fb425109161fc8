from nemo_sdk.adapters.sy_adapter.strategies.context import StrategyContext

__all__ = ["StrategyContext"]
