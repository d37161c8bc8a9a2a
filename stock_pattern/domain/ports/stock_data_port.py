"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. SinaStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import date

from stock_pattern.domain.entities.daily_bar import DailyBar


class IStockDataProvider(ABC):
    @abstractmethod
    def get_daily_bars(self, code: str, start: date, end: date) -> list[DailyBar]:
        """Return the daily bars of *code* between *start* and *end*, oldest first.

        Raises:
            TransportError: if the provider cannot be reached.
        """
        ...
