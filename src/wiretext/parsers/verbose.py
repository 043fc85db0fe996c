"""Accumulator for verbose dissector output (``Frame N:`` blocks)."""

from __future__ import annotations

import re
from typing import Optional

from ..core.models import OpenPacket, PacketRecord
from .base import BaseAccumulator
from .detector import Dialect
from .fields import extract_fields

# "Frame 12: 74 bytes on wire (592 bits), 74 bytes captured (592 bits)"
FRAME_BOUNDARY_RE = re.compile(r"^Frame\s+(\d+):\s+.*?(\d+)\s+bytes", re.IGNORECASE)


class VerboseAccumulator(BaseAccumulator):
    """Open a packet on every frame line; all other fields come from details.

    Lines seen before the first frame line are discarded.
    """

    dialect = Dialect.VERBOSE

    def feed(self, line: str) -> Optional[PacketRecord]:
        frame = FRAME_BOUNDARY_RE.match(line)
        if frame is not None:
            return self._begin(
                OpenPacket(
                    number=int(frame.group(1)),
                    length=int(frame.group(2)),
                    raw_lines=[line],
                )
            )
        if self._open is not None:
            self._open.raw_lines.append(line)
            extract_fields(line, self._open)
        return None


class GenericAccumulator(VerboseAccumulator):
    """Best-effort scan for unrecognized exports, identical to verbose."""

    dialect = Dialect.GENERIC
