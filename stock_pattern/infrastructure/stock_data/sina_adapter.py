"""
Infrastructure adapter: Sina Finance k-line endpoint → IStockDataProvider.
All Sina-specific details (code prefixes, query knobs, JSONP body) are confined
here and in the sibling modules; the rest of the codebase depends only on
IStockDataProvider.
"""

from datetime import date
from typing import Optional

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.domain.ports.quote_transport_port import IQuoteTransport
from stock_pattern.domain.ports.stock_data_port import IStockDataProvider
from stock_pattern.infrastructure.logging.logger import get_logger
from stock_pattern.infrastructure.stock_data.httpx_transport import HttpxQuoteTransport
from stock_pattern.infrastructure.stock_data.request_builder import build_request
from stock_pattern.infrastructure.stock_data.response_parser import parse_daily_bars
from stock_pattern.infrastructure.stock_data.sina_config import ProviderConfig

logger = get_logger(__name__)


class SinaStockDataProvider(IStockDataProvider):
    """Fetches daily bars for Shanghai/Shenzhen tickers from Sina Finance."""

    def __init__(
        self,
        transport: Optional[IQuoteTransport] = None,
        config: Optional[ProviderConfig] = None,
    ) -> None:
        self._config = config or ProviderConfig()
        self._transport = transport or HttpxQuoteTransport(timeout=self._config.timeout)

    def get_daily_bars(self, code: str, start: date, end: date) -> list[DailyBar]:
        request = build_request(code, start, end, self._config)
        body = self._transport.fetch(request)
        bars = parse_daily_bars(body, self._config)
        logger.info("Fetched %d daily bar(s) for %s", len(bars), code)
        return bars
