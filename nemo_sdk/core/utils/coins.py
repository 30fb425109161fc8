from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from loguru import logger

from nemo_sdk.core.adapters.models import CoinData
from nemo_sdk.core.constants.sui import (
    COIN_VALUE_TARGET,
    SUI_COIN_TYPES,
)
from nemo_sdk.core.errors import ValidationError
from nemo_sdk.core.utils.contracts import append_call
from nemo_sdk.core.utils.transaction import (
    Argument,
    CallSequence,
    ObjectArg,
    Result,
)
from nemo_sdk.core.utils.units import u64_amount


def is_sui(coin_type: str | None) -> bool:
    return not coin_type or coin_type in SUI_COIN_TYPES


def split_coins(
    sequence: CallSequence,
    coin_data: Sequence[CoinData],
    amounts: Sequence[str | int],
    coin_type: str | None = None,
) -> list[Argument]:
    """Produce one coin argument per entry in ``amounts``.

    SUI is split from the gas coin. Other coins come from the first owned
    coin when it covers the total, otherwise from enough owned coins merged
    into the first one.
    """
    if not amounts:
        raise ValidationError("no amounts to split", operation="split_coins")
    amounts = [
        u64_amount(a, "amounts", operation="split_coins", positive=True)
        for a in amounts
    ]
    total = sum(amounts)
    label = coin_type or "SUI"

    if is_sui(coin_type):
        balance = sum((Decimal(c.balance) for c in coin_data), Decimal(0))
        if balance < total:
            raise ValidationError(
                f"{label} insufficient balance", operation="split_coins"
            )
        return list(sequence.split_coins(sequence.gas, amounts))

    if not coin_data:
        raise ValidationError(
            f"no coins supplied for {label}",
            operation="split_coins",
            fields=["coin_data"],
        )

    first = coin_data[0]
    first_balance = Decimal(first.balance)
    if first_balance >= total:
        if first_balance == total and len(amounts) == 1:
            return [ObjectArg(first.coin_object_id)]
        return list(sequence.split_coins(ObjectArg(first.coin_object_id), amounts))

    used: list[str] = []
    accumulated = Decimal(0)
    for coin in coin_data:
        accumulated += Decimal(coin.balance)
        used.append(coin.coin_object_id)
        if accumulated >= total:
            break
    if accumulated < total:
        raise ValidationError(f"{label} insufficient balance", operation="split_coins")

    logger.debug(f"Merging {len(used)} {label} coins to cover {total}")
    destination = ObjectArg(used[0])
    sequence.merge_coins(destination, [ObjectArg(i) for i in used[1:]])
    return list(sequence.split_coins(destination, amounts))


def coin_value(sequence: CallSequence, coin: Argument, coin_type: str) -> Result:
    return append_call(
        sequence, COIN_VALUE_TARGET, [coin_type], [("coin", coin)]
    )
