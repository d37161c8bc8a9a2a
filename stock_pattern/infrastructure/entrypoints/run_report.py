"""
CLI entry point for the movement report batch.

This script is the Composition Root for the report use-case: it loads .env,
wires infrastructure adapters (HttpxQuoteTransport, SinaStockDataProvider,
CSV writers) to BuildMovementReportUseCase and runs it once.

    python -m stock_pattern.infrastructure.entrypoints.run_report \\
        --tickers tickers.csv --months 1 --per-ticker-dir data/daily

Without --output the aggregate file is ``./<yyyyMMdd>_all_stocks_pattern.csv``.
"""

import argparse
import calendar
import logging
import os
import sys
from datetime import date
from typing import Optional

import httpx
from dotenv import load_dotenv

from stock_pattern.application.use_cases.build_movement_report import BuildMovementReportUseCase
from stock_pattern.application.use_cases.get_daily_bars import GetDailyBarsUseCase
from stock_pattern.domain.entities.ticker import TickerInfo
from stock_pattern.domain.exceptions import FileWriteError
from stock_pattern.infrastructure.csv_output.daily_bar_csv_writer import CsvDailyBarWriter
from stock_pattern.infrastructure.csv_output.movement_csv_writer import CsvMovementRecordWriter
from stock_pattern.infrastructure.logging.logger import setup_logger
from stock_pattern.infrastructure.stock_data.httpx_transport import HttpxQuoteTransport
from stock_pattern.infrastructure.stock_data.sina_adapter import SinaStockDataProvider
from stock_pattern.infrastructure.stock_data.sina_config import ProviderConfig
from stock_pattern.infrastructure.ticker_list.csv_ticker_list import load_tickers

DEFAULT_TICKERS = [
    TickerInfo("sh000001", "上证指数"),
    TickerInfo("sz399001", "深证成指"),
    TickerInfo("sh601318", "中国平安"),
    TickerInfo("sh600519", "贵州茅台"),
    TickerInfo("sz000858", "五粮液"),
]


def months_before(day: date, months: int) -> date:
    """Same day *months* earlier, clamped to the end of a shorter month."""
    month_index = day.year * 12 + day.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse *argv* and resolve ``start``/``end`` to concrete dates."""
    parser = argparse.ArgumentParser(
        description="Classify daily price movements and aggregate them into one CSV."
    )
    parser.add_argument("--tickers", help="CSV file of code,name lines (default: built-in sample)")
    parser.add_argument("--start", type=date.fromisoformat, help="First day, YYYY-MM-DD")
    parser.add_argument("--end", type=date.fromisoformat, help="Last day, YYYY-MM-DD (default: today)")
    parser.add_argument(
        "--months", type=non_negative_int, default=1, help="Range length when --start is omitted"
    )
    parser.add_argument("--output", help="Aggregate CSV path")
    parser.add_argument("--per-ticker-dir", help="Also dump each ticker's bars into this directory")
    parser.add_argument("--append", action="store_true", help="Add rows to an existing output file")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-dir", help="Directory for a dated log file")
    args = parser.parse_args(argv)

    args.end = args.end or date.today()
    args.start = args.start or months_before(args.end, args.months)
    if args.start > args.end:
        parser.error(f"--start {args.start.isoformat()} is after --end {args.end.isoformat()}")
    return args


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logger = setup_logger(
        "stock_pattern", level=getattr(logging, args.log_level.upper(), logging.INFO), log_dir=args.log_dir
    )

    start, end = args.start, args.end
    output_path = args.output or os.path.join(".", f"{end.strftime('%Y%m%d')}_all_stocks_pattern.csv")
    tickers = load_tickers(args.tickers) if args.tickers else DEFAULT_TICKERS
    if args.per_ticker_dir:
        os.makedirs(args.per_ticker_dir, exist_ok=True)

    logger.info("Date range: %s to %s, %d ticker(s)", start.isoformat(), end.isoformat(), len(tickers))

    config = ProviderConfig.from_env()
    with httpx.Client() as client:
        provider = SinaStockDataProvider(
            transport=HttpxQuoteTransport(client=client, timeout=config.timeout),
            config=config,
        )
        use_case = BuildMovementReportUseCase(
            get_daily_bars=GetDailyBarsUseCase(provider),
            record_writer=CsvMovementRecordWriter(),
            bar_writer=CsvDailyBarWriter(),
        )
        try:
            summary = use_case.execute(
                tickers,
                start,
                end,
                output_path,
                append_to_existing=args.append,
                per_ticker_dir=args.per_ticker_dir,
            )
        except FileWriteError as exc:
            logger.error("Aborting batch, could not write output: %s", exc)
            return 1

    logger.info(
        "Done: %d written, %d skipped, saved to %s",
        len(summary.written),
        len(summary.skipped),
        summary.output_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
