from nemo_sdk.core.constants.aftermath_contracts import SUPER_SUI_COIN_TYPE
from nemo_sdk.core.constants.cetus_contracts import (
    HAEDAL_CETUS_LP_COIN_TYPE,
    VOLO_CETUS_LP_COIN_TYPE,
)
from nemo_sdk.core.constants.haedal_contracts import HAWAL_COIN_TYPE
from nemo_sdk.core.constants.winter_contracts import WWAL_COIN_TYPE

# Withdrawals of these coins can only be paid out in SY.
NO_UNDERLYING_COIN_TYPES = frozenset(
    {
        SUPER_SUI_COIN_TYPE,
        HAEDAL_CETUS_LP_COIN_TYPE,
        VOLO_CETUS_LP_COIN_TYPE,
        WWAL_COIN_TYPE,
        HAWAL_COIN_TYPE,
    }
)
