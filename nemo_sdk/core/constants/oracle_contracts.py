from __future__ import annotations

from enum import StrEnum

from nemo_sdk.core.constants.aftermath_contracts import (
    AFSUI_COIN_TYPE,
    SUPER_SUI_COIN_TYPE,
)
from nemo_sdk.core.constants.alphafi_contracts import STSUI_COIN_TYPE
from nemo_sdk.core.constants.cetus_contracts import (
    AFTERMATH_CETUS_LP_COIN_TYPE,
    HAEDAL_CETUS_LP_COIN_TYPE,
    VOLO_CETUS_LP_COIN_TYPE,
)
from nemo_sdk.core.constants.haedal_contracts import HASUI_COIN_TYPE, HAWAL_COIN_TYPE
from nemo_sdk.core.constants.strater_contracts import ST_SBUCK_COIN_TYPE
from nemo_sdk.core.constants.volo_contracts import CERT_COIN_TYPE


class VoucherShape(StrEnum):
    """Every oracle call shape the price-voucher resolver can emit."""

    SPRING_SUI = "spring_sui"
    WINTER_BLIZZARD = "winter_blizzard"
    HAWAL = "hawal"
    CETUS_HAEDAL = "cetus_haedal"
    CETUS_AFTERMATH = "cetus_aftermath"
    CETUS_VOLO = "cetus_volo"
    SSBUCK = "ssbuck"
    VOLO_CERT = "volo_cert"
    SUPER_SUI = "super_sui"
    AFTERMATH_AFSUI = "aftermath_afsui"
    HAEDAL_HASUI = "haedal_hasui"
    ALPHAFI_STSUI = "alphafi_stsui"
    X_ORACLE = "x_oracle"


# Provider name -> shape. Checked before the coin-type table.
VOUCHER_SHAPE_BY_PROVIDER: dict[str, VoucherShape] = {
    "SpringSui": VoucherShape.SPRING_SUI,
    "Winter": VoucherShape.WINTER_BLIZZARD,
}

VOUCHER_SHAPE_BY_COIN_TYPE: dict[str, VoucherShape] = {
    HAWAL_COIN_TYPE: VoucherShape.HAWAL,
    HAEDAL_CETUS_LP_COIN_TYPE: VoucherShape.CETUS_HAEDAL,
    AFTERMATH_CETUS_LP_COIN_TYPE: VoucherShape.CETUS_AFTERMATH,
    VOLO_CETUS_LP_COIN_TYPE: VoucherShape.CETUS_VOLO,
    ST_SBUCK_COIN_TYPE: VoucherShape.SSBUCK,
    CERT_COIN_TYPE: VoucherShape.VOLO_CERT,
    SUPER_SUI_COIN_TYPE: VoucherShape.SUPER_SUI,
    AFSUI_COIN_TYPE: VoucherShape.AFTERMATH_AFSUI,
    HASUI_COIN_TYPE: VoucherShape.HAEDAL_HASUI,
    STSUI_COIN_TYPE: VoucherShape.ALPHAFI_STSUI,
}
