"""
Infrastructure adapter: per-ticker CSV dump → IDailyBarWriter.
"""

from typing import Sequence

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.domain.exceptions import FileWriteError
from stock_pattern.domain.ports.record_writer_port import IDailyBarWriter
from stock_pattern.infrastructure.csv_output.file_ops import atomic_write_text

HEADER = "date,open,high,low,close,volume"


class CsvDailyBarWriter(IDailyBarWriter):
    def write_daily_bars(self, path: str, bars: Sequence[DailyBar]) -> None:
        lines = [HEADER]
        lines.extend(
            f"{bar.date},{bar.open},{bar.high},{bar.low},{bar.close},{bar.volume}"
            for bar in bars
        )
        try:
            atomic_write_text(path, "\n".join(lines) + "\n")
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc
