"""
Infrastructure adapter: aggregate CSV file → IMovementRecordWriter.

One row per ticker (code, name, movement string) under a single header line.
Rows are comma-joined without quoting; ticker names must not contain commas.
"""

import os

from stock_pattern.domain.entities.ticker import TickerRecord, WriteMode
from stock_pattern.domain.exceptions import FileWriteError
from stock_pattern.domain.ports.record_writer_port import IMovementRecordWriter
from stock_pattern.infrastructure.csv_output.file_ops import append_text, atomic_write_text
from stock_pattern.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

HEADER = "股票代码,股票名称,涨跌字符串"


def _is_missing_or_empty(path: str) -> bool:
    return not os.path.exists(path) or os.path.getsize(path) == 0


class CsvMovementRecordWriter(IMovementRecordWriter):
    """Writes TickerRecord rows to a shared, append-only CSV file."""

    def append_record(self, path: str, record: TickerRecord, mode: WriteMode) -> None:
        """Write *record* to *path*.

        FIRST_WRITE replaces the file with the header and this row. APPEND adds
        the row to an existing file, or writes the header first if the file is
        missing or empty, so the header is written exactly once either way.

        Raises:
            FileWriteError: on any filesystem failure.
        """
        line = record.to_line() + "\n"
        try:
            if mode is WriteMode.FIRST_WRITE or _is_missing_or_empty(path):
                atomic_write_text(path, HEADER + "\n" + line)
            else:
                append_text(path, line)
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc
        logger.info("Saved movement string of %s to %s", record.code, path)
