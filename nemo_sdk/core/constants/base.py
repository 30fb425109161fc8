DEFAULT_HTTP_TIMEOUT = 30.0  # HTTP client timeout (seconds)
DEFAULT_SUI_RPC_URL = "https://fullnode.mainnet.sui.io:443"

DEFAULT_DECIMAL = 9
# Cetus vault deposits take slippage as a fraction (0.01 == 1%).
DEFAULT_SLIPPAGE = "0.01"

DEFAULT_RPC_MAX_RETRIES = 3
CETUS_QUOTE_CACHE_TTL_S = 20
