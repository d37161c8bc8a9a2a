"""
Use-case: retrieve the daily bars of one ticker over a date range.
Depends only on Domain ports and entities, no infrastructure imports.

This is the per-ticker failure boundary: a TransportError is logged and
turned into an empty result so a batch can move on to the next ticker.
"""

import logging
from datetime import date

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.domain.exceptions import TransportError
from stock_pattern.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)


class GetDailyBarsUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(self, code: str, start: date, end: date) -> list[DailyBar]:
        """Fetch daily bars for *code*, oldest first.

        Args:
            code:  Ticker code, bare (``600519``) or prefixed (``sh600519``).
            start: First calendar day of the range.
            end:   Last calendar day of the range.

        Returns:
            The bars, or an empty list if the provider could not be reached.

        Raises:
            ValueError: if *code* is blank or *start* is after *end*.
        """
        if not code or not code.strip():
            raise ValueError("code must be a non-empty string")
        if start > end:
            raise ValueError(f"start date {start} is after end date {end}")
        try:
            return self._provider.get_daily_bars(code.strip(), start, end)
        except TransportError as exc:
            logger.warning("No data for %s: %s", code, exc)
            return []
