from nemo_sdk.core.adapters.BaseAdapter import BaseAdapter
from nemo_sdk.core.adapters.models import (
    CoinData,
    MintValueResult,
    Position,
    ProtocolConfig,
    Provider,
    QueryYieldResult,
)
from nemo_sdk.core.errors import (
    DecodeError,
    NemoError,
    ProtocolUnsupportedError,
    SimulationError,
    ValidationError,
)

__all__ = [
    "BaseAdapter",
    "CoinData",
    "DecodeError",
    "MintValueResult",
    "NemoError",
    "Position",
    "ProtocolConfig",
    "ProtocolUnsupportedError",
    "Provider",
    "QueryYieldResult",
    "SimulationError",
    "ValidationError",
]
