from datetime import date

from stock_pattern.infrastructure.stock_data.request_builder import build_request
from stock_pattern.infrastructure.stock_data.sina_config import ProviderConfig


def test_embeds_normalized_code_and_daily_params() -> None:
    request = build_request("600000", date(2024, 1, 2), date(2024, 2, 1))

    assert "_sh600000_day_data" in request.url
    assert request.url.startswith("https://quotes.sina.cn/cn/api/jsonp_v2.php/")
    assert request.url.endswith("/CN_MarketDataService.getKLineData")
    assert request.params == (
        ("symbol", "sh600000"),
        ("scale", "240"),
        ("ma", "5"),
        ("datalen", "60"),
        ("from", "2024-01-02"),
        ("to", "2024-02-01"),
    )
    assert request.headers == {"User-Agent": "Mozilla/5.0"}


def test_prefixed_code_is_kept() -> None:
    request = build_request("sz000001", date(2024, 3, 9), date(2024, 3, 9))
    assert dict(request.params)["symbol"] == "sz000001"
    assert "_sz000001_day_data" in request.url


def test_alternate_provider_config() -> None:
    config = ProviderConfig(
        endpoint_template="https://quotes.example.test/kline/{code}",
        date_pattern="%Y%m%d",
        max_records=10,
        user_agent="test-agent",
    )
    request = build_request("000858", date(2024, 5, 6), date(2024, 6, 7), config)

    assert request.url == "https://quotes.example.test/kline/sz000858"
    params = dict(request.params)
    assert params["datalen"] == "10"
    assert params["from"] == "20240506"
    assert params["to"] == "20240607"
    assert request.headers["User-Agent"] == "test-agent"
    assert request.full_url.startswith("https://quotes.example.test/kline/sz000858?symbol=sz000858&scale=240")
