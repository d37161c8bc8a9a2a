"""
Price-movement classification.

Each daily bar maps to one digit:
    0: flat or down   (change <= 0%)
    1: up             (0% < change < 10%)
    2: limit-up       (change >= 10%)

A ticker's movement string is those digits concatenated in bar order.
"""

from enum import IntEnum
from typing import Iterable

from stock_pattern.domain.entities.daily_bar import DailyBar

LIMIT_UP_THRESHOLD = 10.0


class MovementCode(IntEnum):
    FLAT_OR_DOWN = 0
    UP = 1
    LIMIT_UP = 2


def classify(bar: DailyBar) -> MovementCode:
    change = bar.percent_change
    if change >= LIMIT_UP_THRESHOLD:
        return MovementCode.LIMIT_UP
    if change > 0:
        return MovementCode.UP
    return MovementCode.FLAT_OR_DOWN


def movement_string(bars: Iterable[DailyBar]) -> str:
    """Concatenate the movement code of every bar, oldest first, no separator."""
    return "".join(str(int(classify(bar))) for bar in bars)
