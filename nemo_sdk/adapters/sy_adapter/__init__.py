from nemo_sdk.adapters.sy_adapter.adapter import LIMITED_MINT_PROVIDERS, SyAdapter

__all__ = ["LIMITED_MINT_PROVIDERS", "SyAdapter"]
