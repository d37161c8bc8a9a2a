"""
Ports (interfaces) for the CSV outputs.
Infrastructure adapters (e.g. CsvMovementRecordWriter) must implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.domain.entities.ticker import TickerRecord, WriteMode


class IMovementRecordWriter(ABC):
    @abstractmethod
    def append_record(self, path: str, record: TickerRecord, mode: WriteMode) -> None:
        """Write one aggregate row to *path*, preceded by the header when *mode* requires it.

        Raises:
            FileWriteError: if the file cannot be written.
        """
        ...


class IDailyBarWriter(ABC):
    @abstractmethod
    def write_daily_bars(self, path: str, bars: Sequence[DailyBar]) -> None:
        """Dump *bars* to *path*, replacing any previous content.

        Raises:
            FileWriteError: if the file cannot be written.
        """
        ...
