"""
Provider configuration for the Sina Finance k-line endpoint.

Everything provider-specific (endpoint template, query knobs, date pattern,
record field names) lives in ProviderConfig so the request builder and the
response parser can be pointed at an alternate provider, e.g. in tests.

from_env() reads overrides from the process environment; the composition
root calls load_dotenv() first so a local .env file is honoured.
"""

import os
from dataclasses import dataclass, field

SINA_KLINE_ENDPOINT = (
    "https://quotes.sina.cn/cn/api/jsonp_v2.php/var%20_{code}_day_data=%20"
    "/CN_MarketDataService.getKLineData"
)


@dataclass(frozen=True)
class RecordFields:
    """Names of the keys carried by each record in the provider payload."""

    date: str = "day"
    open: str = "open"
    high: str = "high"
    low: str = "low"
    close: str = "close"
    volume: str = "volume"


@dataclass(frozen=True)
class ProviderConfig:
    endpoint_template: str = SINA_KLINE_ENDPOINT
    date_pattern: str = "%Y-%m-%d"
    scale: int = 240  # minutes per bar; 240 is one trading day
    moving_average: int = 5
    max_records: int = 60
    user_agent: str = "Mozilla/5.0"
    timeout: float = 10.0
    fields: RecordFields = field(default_factory=RecordFields)

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Build a config from SINA_* / QUOTE_* environment variables.

        Variables that are unset or empty keep their default.

        Raises:
            ValueError: if a numeric variable is set but not a number.
        """
        defaults = cls()
        return cls(
            endpoint_template=os.environ.get("SINA_KLINE_ENDPOINT") or defaults.endpoint_template,
            moving_average=int(os.environ.get("SINA_KLINE_MA") or defaults.moving_average),
            max_records=int(os.environ.get("SINA_KLINE_DATALEN") or defaults.max_records),
            user_agent=os.environ.get("QUOTE_USER_AGENT") or defaults.user_agent,
            timeout=float(os.environ.get("QUOTE_HTTP_TIMEOUT") or defaults.timeout),
        )
