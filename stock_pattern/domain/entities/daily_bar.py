"""
Domain entities for daily price data.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyBar:
    """One trading day of OHLCV data for one ticker."""

    date: str
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0

    @property
    def percent_change(self) -> float:
        """Close-vs-open change in percent; 0.0 when the open price is zero."""
        if self.open == 0:
            return 0.0
        return (self.close - self.open) / self.open * 100
