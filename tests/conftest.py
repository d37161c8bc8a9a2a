import pytest

from stock_pattern.domain.entities.daily_bar import DailyBar


def make_bar(open_: float, close: float, day: str = "2024-01-02") -> DailyBar:
    return DailyBar(date=day, open=open_, high=max(open_, close), low=min(open_, close), close=close, volume=1000)


@pytest.fixture
def scenario_bars() -> list[DailyBar]:
    return [
        make_bar(100.0, 105.0, "2023-01-01"),
        make_bar(100.0, 90.0, "2023-01-02"),
        make_bar(100.0, 110.0, "2023-01-03"),
        make_bar(100.0, 100.0, "2023-01-04"),
    ]
