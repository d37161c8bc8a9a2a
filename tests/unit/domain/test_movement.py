import pytest

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.domain.services.movement import MovementCode, classify, movement_string


def _bar(open_: float, close: float) -> DailyBar:
    return DailyBar(date="2024-01-02", open=open_, close=close)


@pytest.mark.parametrize("price", [0.0, 1.0, 9.87, 100.0, 1850.5])
def test_unchanged_close_is_flat(price: float) -> None:
    assert classify(_bar(price, price)) is MovementCode.FLAT_OR_DOWN


@pytest.mark.parametrize(
    ("open_", "close"),
    [(100.0, 110.0), (100.0, 120.0), (10.0, 11.0), (5.0, 7.5)],
)
def test_gain_of_ten_percent_or_more_is_limit_up(open_: float, close: float) -> None:
    assert classify(_bar(open_, close)) is MovementCode.LIMIT_UP


@pytest.mark.parametrize(
    ("open_", "close"),
    [(100.0, 100.01), (100.0, 105.0), (100.0, 109.99), (10.0, 10.5)],
)
def test_gain_below_ten_percent_is_up(open_: float, close: float) -> None:
    assert classify(_bar(open_, close)) is MovementCode.UP


@pytest.mark.parametrize(("open_", "close"), [(100.0, 90.0), (100.0, 99.99), (10.0, 0.0)])
def test_decline_is_flat_or_down(open_: float, close: float) -> None:
    assert classify(_bar(open_, close)) is MovementCode.FLAT_OR_DOWN


def test_zero_open_is_treated_as_no_change() -> None:
    assert classify(_bar(0.0, 12.0)) is MovementCode.FLAT_OR_DOWN


def test_percent_change() -> None:
    assert _bar(100.0, 105.0).percent_change == pytest.approx(5.0)
    assert _bar(0.0, 5.0).percent_change == 0.0


def test_movement_string_of_no_bars_is_empty() -> None:
    assert movement_string([]) == ""


def test_movement_string_scenario(scenario_bars) -> None:
    assert movement_string(scenario_bars) == "1020"


def test_movement_string_has_one_digit_per_bar(scenario_bars) -> None:
    bars = scenario_bars * 3
    result = movement_string(bars)
    assert len(result) == len(bars)
    assert set(result) <= {"0", "1", "2"}
