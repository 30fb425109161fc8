from nemo_sdk.adapters.py_adapter.adapter import PyAdapter
from nemo_sdk.adapters.py_adapter.lifecycle import PositionHandle

__all__ = ["PositionHandle", "PyAdapter"]
