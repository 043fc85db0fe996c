"""Dialect detection for textual capture exports."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Sequence

from ..core.config import settings
from ..logging import get_logger

logger = get_logger(__name__)


class Dialect(str, Enum):
    """Textual export styles the engine knows how to scan."""

    SUMMARY_EXPORT = "summary-export"
    VERBOSE = "verbose"
    GENERIC = "generic"


# "No.     Time           Source                Destination ..."
SUMMARY_HEADER_RE = re.compile(r"^No\.\s+Time\s+Source")
# "Frame 1: 74 bytes on wire (592 bits), 74 bytes captured (592 bits)"
FRAME_ON_WIRE_RE = re.compile(r"^Frame\s+\d+:.*bytes on wire")
DEEP_INDENT_FIELD_RE = re.compile(r"^\s{4,}\S[^:]*:")


def detect_dialect(lines: Sequence[str], sample_size: Optional[int] = None) -> Dialect:
    """Classify ``lines`` by looking at the leading sample only."""
    limit = settings.detect_sample_lines if sample_size is None else sample_size
    sample = lines[:limit]

    if any(SUMMARY_HEADER_RE.match(line) for line in sample):
        dialect = Dialect.SUMMARY_EXPORT
    else:
        first_frame = next(
            (idx for idx, line in enumerate(sample) if FRAME_ON_WIRE_RE.match(line)),
            None,
        )
        if first_frame is None:
            dialect = Dialect.GENERIC
        elif any(DEEP_INDENT_FIELD_RE.match(line) for line in sample[first_frame + 1:]):
            dialect = Dialect.VERBOSE
        else:
            dialect = Dialect.SUMMARY_EXPORT

    logger.info("Detected format: %s", dialect.value)
    return dialect


__all__ = ["Dialect", "detect_dialect", "SUMMARY_HEADER_RE", "FRAME_ON_WIRE_RE"]
