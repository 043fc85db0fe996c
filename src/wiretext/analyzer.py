"""Entry points of the analysis engine."""

from __future__ import annotations

import os
from typing import IO, Iterable, List, Optional

from .core.decorators import handle_analysis_errors, log_performance
from .core.models import AnalysisResult, PacketRecord
from .logging import get_logger
from .metrics.aggregator import StatsAggregator
from .metrics_builder import MetricsBuilder
from .parsers.detector import Dialect, detect_dialect
from .parsers.factory import AccumulatorFactory
from .progress import ProgressCallback, ProgressReporter
from .reader import read_capture_lines, split_lines

logger = get_logger(__name__)


@handle_analysis_errors
def analyze_lines(
    lines: Iterable[str],
    on_progress: Optional[ProgressCallback] = None,
    *,
    dialect: Optional[Dialect] = None,
    progress_interval: Optional[int] = None,
) -> AnalysisResult:
    """Scan ``lines`` once and return the packets with their aggregates.

    Parameters
    ----------
    lines:
        Capture export lines in file order. Trailing line breaks are ignored.
    on_progress:
        Optional callback receiving a percentage. It reaches 100 exactly
        once, after the last packet is flushed.
    dialect:
        Skip detection and scan with this dialect.
    progress_interval:
        Lines between progress signals; defaults to the configured value.
    """
    lines = [line.rstrip("\r\n") for line in lines]
    if dialect is None:
        dialect = detect_dialect(lines)

    accumulator = AccumulatorFactory.create(dialect)
    aggregator = StatsAggregator()
    progress = ProgressReporter(on_progress, progress_interval)
    packets: List[PacketRecord] = []

    def _emit(record: Optional[PacketRecord]) -> None:
        if record is not None:
            packets.append(record)
            aggregator.add(record)

    total = len(lines)
    for index, line in enumerate(lines):
        progress.update(index, total)
        _emit(accumulator.feed(line))
    _emit(accumulator.finish())

    logger.info("Parsed %s packets", len(packets))
    progress.complete()
    return MetricsBuilder(aggregator).build_result(packets, dialect=dialect.value)


def analyze_text(
    text: str,
    on_progress: Optional[ProgressCallback] = None,
    **kwargs,
) -> AnalysisResult:
    """Analyze an already decoded capture export."""
    return analyze_lines(split_lines(text), on_progress, **kwargs)


@log_performance
def analyze_file(
    source: str | os.PathLike | IO[bytes],
    on_progress: Optional[ProgressCallback] = None,
    **kwargs,
) -> AnalysisResult:
    """Read, decode and analyze ``source``.

    Raises
    ------
    CaptureReadError
        If the source cannot be read. No partial result is returned.
    """
    logger.info("Parsing capture: %s", source)
    return analyze_lines(read_capture_lines(source), on_progress, **kwargs)


__all__ = ["analyze_lines", "analyze_text", "analyze_file"]
