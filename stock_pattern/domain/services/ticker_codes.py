"""
Ticker-code normalization for the Shanghai / Shenzhen exchanges.

Shanghai listings start with 6 and take the ``sh`` prefix; Shenzhen listings
start with 0 or 3 and take ``sz``. Anything else passes through untouched and
will simply come back empty from the provider.
"""

MARKET_PREFIXES = ("sh", "sz")

_EXCHANGE_BY_LEADING_DIGIT = {
    "6": "sh",
    "0": "sz",
    "3": "sz",
}


def normalize(code: str) -> str:
    """Return *code* in the market-prefixed form the quote provider expects."""
    if code.startswith(MARKET_PREFIXES):
        return code
    prefix = _EXCHANGE_BY_LEADING_DIGIT.get(code[:1])
    if prefix is None:
        return code
    return prefix + code
