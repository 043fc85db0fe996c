"""Input acquisition: read a capture export and decode it to text."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import IO, List

from .core.decorators import handle_read_errors
from .exceptions import CaptureReadError
from .logging import get_logger

logger = get_logger(__name__)

BOM_UTF16_LE = b"\xff\xfe"
BOM_UTF16_BE = b"\xfe\xff"
BOM_UTF8 = b"\xef\xbb\xbf"

_LINE_BREAK_RE = re.compile(r"\r?\n")


def decode_capture_bytes(data: bytes) -> str:
    """Decode ``data`` using its byte-order mark, defaulting to UTF-8."""
    if data.startswith(BOM_UTF16_LE):
        logger.info("Detected UTF-16 LE encoding")
        text = data[2:].decode("utf-16-le", errors="replace")
    elif data.startswith(BOM_UTF16_BE):
        logger.info("Detected UTF-16 BE encoding")
        text = data[2:].decode("utf-16-be", errors="replace")
    elif data.startswith(BOM_UTF8):
        logger.info("Detected UTF-8 with BOM")
        text = data[3:].decode("utf-8", errors="replace")
    else:
        logger.info("Assuming UTF-8 encoding")
        text = data.decode("utf-8", errors="replace")
    return text.lstrip("\ufeff")


def split_lines(text: str) -> List[str]:
    """Split ``text`` on ``\\n`` or ``\\r\\n`` line endings."""
    return _LINE_BREAK_RE.split(text)


@handle_read_errors
def read_capture_text(source: str | os.PathLike | IO[bytes]) -> str:
    """Return the decoded text of ``source`` (a path or binary stream)."""
    if isinstance(source, (str, os.PathLike)):
        data = Path(source).read_bytes()
    elif hasattr(source, "read"):
        data = source.read()
    else:
        raise CaptureReadError(
            f"Cannot read capture from {type(source).__name__}",
            suggestion="Pass a file path or a binary stream.",
        )
    if not isinstance(data, (bytes, bytearray)):
        raise CaptureReadError(
            f"Capture stream returned {type(data).__name__}, expected bytes",
            context=getattr(source, "name", None),
            suggestion="Open the capture in binary mode.",
        )
    return decode_capture_bytes(bytes(data))


def read_capture_lines(source: str | os.PathLike | IO[bytes]) -> List[str]:
    lines = split_lines(read_capture_text(source))
    logger.info("Total lines in capture: %s", len(lines))
    return lines


__all__ = [
    "decode_capture_bytes",
    "split_lines",
    "read_capture_text",
    "read_capture_lines",
]
