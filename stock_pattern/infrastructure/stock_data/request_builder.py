"""
Builds the k-line request for one ticker and date range.
"""

from datetime import date
from typing import Optional

from stock_pattern.domain.entities.quote_request import QuoteRequest
from stock_pattern.domain.services.ticker_codes import normalize
from stock_pattern.infrastructure.stock_data.sina_config import ProviderConfig


def build_request(
    code: str,
    start: date,
    end: date,
    config: Optional[ProviderConfig] = None,
) -> QuoteRequest:
    """Return the request for daily bars of *code* from *start* to *end*.

    *code* may be bare (``600000``) or prefixed (``sh600000``); it is
    normalized before being embedded in the endpoint path and the query.
    """
    config = config or ProviderConfig()
    symbol = normalize(code)
    params = (
        ("symbol", symbol),
        ("scale", str(config.scale)),
        ("ma", str(config.moving_average)),
        ("datalen", str(config.max_records)),
        ("from", start.strftime(config.date_pattern)),
        ("to", end.strftime(config.date_pattern)),
    )
    return QuoteRequest(
        url=config.endpoint_template.format(code=symbol),
        params=params,
        headers={"User-Agent": config.user_agent},
    )
