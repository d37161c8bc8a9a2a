"""
Domain entities for tickers and their aggregated movement rows.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TickerInfo:
    code: str
    name: str


@dataclass(frozen=True)
class TickerRecord:
    """One row of the aggregate CSV: a ticker and its movement string."""

    code: str
    name: str
    movement_string: str

    def to_line(self) -> str:
        return f"{self.code},{self.name},{self.movement_string}"


class WriteMode(Enum):
    """How a record writer treats the target file.

    FIRST_WRITE: start the file over, header first.
    APPEND:      add one row; the header is only written if the file is missing.
    """

    FIRST_WRITE = "first_write"
    APPEND = "append"
