"""
Reads the ticker list consumed by the batch runner.

Format: UTF-8 text, one ``code,name`` pair per line. Blank lines are ignored,
a leading header line (code column ``code`` or ``股票代码``) is skipped, and a
line with only a code uses the code as its name.
"""

from stock_pattern.domain.entities.ticker import TickerInfo

_HEADER_CODES = {"code", "股票代码"}


def load_tickers(path: str) -> list[TickerInfo]:
    tickers: list[TickerInfo] = []
    with open(path, encoding="utf-8-sig") as fh:
        for line_no, line in enumerate(fh):
            line = line.strip()
            if not line:
                continue
            code, _, name = (part.strip() for part in line.partition(","))
            if line_no == 0 and code.lower() in _HEADER_CODES:
                continue
            if not code:
                continue
            tickers.append(TickerInfo(code=code, name=name or code))
    return tickers
