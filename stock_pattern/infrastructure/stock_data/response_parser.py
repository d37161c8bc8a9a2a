"""
Tolerant decoder for the k-line JSONP response.

The body looks like ``var _sh600000_day_data=([{"day":"2024-01-02",...},...]);``
and is not guaranteed to be strict JSON (keys are sometimes bare), so the
array is decoded as a run of flat ``{key:value,...}`` records instead of being
handed to json.loads.

Lenient by contract:
  - no array in the body → no bars;
  - missing field → empty string → numeric default (0.0 / 0);
  - unparseable number → numeric default;
  - record without a date → dropped.
Values containing braces are not supported.
"""

import re
from typing import Optional

from stock_pattern.domain.entities.daily_bar import DailyBar
from stock_pattern.infrastructure.logging.logger import get_logger
from stock_pattern.infrastructure.stock_data.sina_config import ProviderConfig, RecordFields

logger = get_logger(__name__)

_RECORD_RE = re.compile(r"\{([^{}]*)\}")
_PAIR_RE = re.compile(r'"?([A-Za-z_]\w*)"?\s*:\s*(?:"([^"]*)"|([^,"\s]+))')


def extract_payload(raw: str) -> str:
    """Return the outermost ``[...]`` span of *raw*, or an empty string."""
    start = raw.find("[")
    end = raw.rfind("]")
    if start < 0 or end < start:
        return ""
    return raw[start : end + 1]


def decode_records(payload: str) -> list[dict[str, str]]:
    """Split *payload* into flat key/value records, preserving their order."""
    records = []
    for match in _RECORD_RE.finditer(payload):
        record: dict[str, str] = {}
        for pair in _PAIR_RE.finditer(match.group(1)):
            key = pair.group(1)
            value = pair.group(2) if pair.group(2) is not None else pair.group(3)
            record.setdefault(key, value)
        records.append(record)
    return records


def to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def to_daily_bar(record: dict[str, str], fields: RecordFields) -> Optional[DailyBar]:
    day = record.get(fields.date, "")
    if not day:
        return None
    return DailyBar(
        date=day,
        open=to_float(record.get(fields.open, "")),
        high=to_float(record.get(fields.high, "")),
        low=to_float(record.get(fields.low, "")),
        close=to_float(record.get(fields.close, "")),
        volume=to_int(record.get(fields.volume, "")),
    )


def parse_daily_bars(raw: str, config: Optional[ProviderConfig] = None) -> list[DailyBar]:
    """Decode *raw* response text into daily bars in payload order. Never raises."""
    fields = (config or ProviderConfig()).fields
    payload = extract_payload(raw)
    if not payload:
        return []

    bars: list[DailyBar] = []
    records = decode_records(payload)
    for record in records:
        bar = to_daily_bar(record, fields)
        if bar is not None:
            bars.append(bar)

    dropped = len(records) - len(bars)
    if dropped:
        logger.debug("Dropped %d record(s) without a %r field", dropped, fields.date)
    return bars
