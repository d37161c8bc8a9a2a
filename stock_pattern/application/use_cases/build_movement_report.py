"""
Use-case: build the aggregate movement CSV for a list of tickers.
Depends only on Domain ports, entities and services, no infrastructure imports.

Tickers are processed one at a time in the order given. A ticker that yields
no bars (provider failure, unknown code, empty range) is skipped. A
FileWriteError is not caught: it aborts the batch and reaches the caller.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from stock_pattern.application.use_cases.get_daily_bars import GetDailyBarsUseCase
from stock_pattern.domain.entities.ticker import TickerInfo, TickerRecord, WriteMode
from stock_pattern.domain.ports.record_writer_port import IDailyBarWriter, IMovementRecordWriter
from stock_pattern.domain.services.movement import movement_string

logger = logging.getLogger(__name__)


@dataclass
class ReportSummary:
    output_path: str
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class BuildMovementReportUseCase:
    def __init__(
        self,
        get_daily_bars: GetDailyBarsUseCase,
        record_writer: IMovementRecordWriter,
        bar_writer: Optional[IDailyBarWriter] = None,
    ) -> None:
        """
        Args:
            get_daily_bars: Per-ticker fetch use-case.
            record_writer:  Writer for the aggregate CSV.
            bar_writer:     Optional writer for per-ticker bar dumps; required
                            only when execute() is given a *per_ticker_dir*.
        """
        self._get_daily_bars = get_daily_bars
        self._record_writer = record_writer
        self._bar_writer = bar_writer

    def execute(
        self,
        tickers: Iterable[TickerInfo],
        start: date,
        end: date,
        output_path: str,
        append_to_existing: bool = False,
        per_ticker_dir: Optional[str] = None,
    ) -> ReportSummary:
        """Fetch, classify and write one aggregate row per ticker.

        Args:
            tickers:            Tickers to process, in output order.
            start:              First calendar day of the range.
            end:                Last calendar day of the range.
            output_path:        Aggregate CSV path.
            append_to_existing: Keep an existing *output_path* and add rows to
                                it instead of starting it over.
            per_ticker_dir:     If set, also dump each ticker's bars to
                                ``<dir>/<code>_daily_data.csv``.

        Raises:
            FileWriteError: if an output file cannot be written.
            ValueError:     if per_ticker_dir is set without a bar writer.
        """
        if per_ticker_dir and self._bar_writer is None:
            raise ValueError("per_ticker_dir requires a bar writer")

        summary = ReportSummary(output_path=output_path)
        mode = WriteMode.APPEND if append_to_existing else WriteMode.FIRST_WRITE

        for index, ticker in enumerate(tickers):
            logger.info("[%d] Fetching daily bars of %s (%s)", index, ticker.name, ticker.code)
            bars = self._get_daily_bars.execute(ticker.code, start, end)
            if not bars:
                logger.warning("No data retrieved for %s (%s), skipping", ticker.name, ticker.code)
                summary.skipped.append(ticker.code)
                continue

            if per_ticker_dir:
                self._bar_writer.write_daily_bars(
                    os.path.join(per_ticker_dir, f"{ticker.code}_daily_data.csv"), bars
                )

            record = TickerRecord(
                code=ticker.code,
                name=ticker.name,
                movement_string=movement_string(bars),
            )
            self._record_writer.append_record(output_path, record, mode)
            mode = WriteMode.APPEND
            summary.written.append(ticker.code)

        return summary
