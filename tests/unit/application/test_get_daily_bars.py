from datetime import date

import pytest

from stock_pattern.application.use_cases.get_daily_bars import GetDailyBarsUseCase
from stock_pattern.domain.entities.daily_bar import DailyBar

from fakes import FakeStockDataProvider, unavailable

START = date(2024, 1, 1)
END = date(2024, 1, 31)
BAR = DailyBar("2024-01-02", 10.0, 11.0, 9.8, 10.5, 100)


def test_returns_provider_bars_for_stripped_code() -> None:
    provider = FakeStockDataProvider({"600519": [BAR]})

    assert GetDailyBarsUseCase(provider).execute("  600519 ", START, END) == [BAR]
    assert provider.calls == [("600519", START, END)]


def test_transport_error_becomes_empty_result(caplog: pytest.LogCaptureFixture) -> None:
    provider = FakeStockDataProvider({"600519": unavailable("600519")})

    with caplog.at_level("WARNING"):
        assert GetDailyBarsUseCase(provider).execute("600519", START, END) == []
    assert "600519" in caplog.text


@pytest.mark.parametrize("code", ["", "   "])
def test_blank_code_is_rejected(code: str) -> None:
    with pytest.raises(ValueError):
        GetDailyBarsUseCase(FakeStockDataProvider({})).execute(code, START, END)


def test_inverted_range_is_rejected() -> None:
    with pytest.raises(ValueError):
        GetDailyBarsUseCase(FakeStockDataProvider({})).execute("600519", END, START)


def test_single_day_range_is_allowed() -> None:
    provider = FakeStockDataProvider({"600519": [BAR]})
    assert GetDailyBarsUseCase(provider).execute("600519", START, START) == [BAR]
