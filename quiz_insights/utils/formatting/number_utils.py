"""Rounding helpers matching the dashboard's half-up display rules"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """Round .5 away from zero instead of to even; int when digits == 0"""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits <= 0:
        return int(rounded)
    return float(rounded)
