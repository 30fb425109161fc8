from nemo_sdk.core.utils.contracts import (
    CallOptions,
    CallResult,
    ContractCallBuilder,
    ContractCallDescriptor,
    append_call,
)
from nemo_sdk.core.utils.simulation import DryRunSimulator, SimulationOutcome
from nemo_sdk.core.utils.transaction import (
    Argument,
    CallSequence,
    GasCoin,
    NestedResult,
    ObjectArg,
    PureArg,
    Result,
)

__all__ = [
    "Argument",
    "CallOptions",
    "CallResult",
    "CallSequence",
    "ContractCallBuilder",
    "ContractCallDescriptor",
    "DryRunSimulator",
    "GasCoin",
    "NestedResult",
    "ObjectArg",
    "PureArg",
    "Result",
    "SimulationOutcome",
    "append_call",
]
