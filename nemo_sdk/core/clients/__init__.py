from nemo_sdk.core.clients.CetusVaultClient import CetusVaultClient
from nemo_sdk.core.clients.LedgerClient import (
    DepositQuote,
    DepositQuoter,
    LedgerClient,
    TransactionEncoder,
)
from nemo_sdk.core.clients.SuiRpcClient import RpcError, SuiRpcClient

__all__ = [
    "CetusVaultClient",
    "DepositQuote",
    "DepositQuoter",
    "LedgerClient",
    "RpcError",
    "SuiRpcClient",
    "TransactionEncoder",
]
