__version__ = "0.1.0"

from nemo_sdk.adapters import MarketAdapter, OracleAdapter, PyAdapter, SyAdapter
from nemo_sdk.core import (
    BaseAdapter,
    NemoError,
    ProtocolConfig,
    ProtocolUnsupportedError,
    Provider,
    SimulationError,
    ValidationError,
)
from nemo_sdk.core.utils import CallOptions, CallResult, CallSequence

__all__ = [
    "__version__",
    "BaseAdapter",
    "CallOptions",
    "CallResult",
    "CallSequence",
    "MarketAdapter",
    "NemoError",
    "OracleAdapter",
    "ProtocolConfig",
    "ProtocolUnsupportedError",
    "Provider",
    "PyAdapter",
    "SimulationError",
    "SyAdapter",
    "ValidationError",
]
