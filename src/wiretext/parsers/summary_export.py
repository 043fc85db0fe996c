"""Accumulator for summary exports (one summary row per packet)."""

from __future__ import annotations

import re
from typing import Optional

from ..core.models import OpenPacket, PacketRecord
from ..heuristics.protocol_inference import normalize_protocol
from .base import BaseAccumulator
from .detector import SUMMARY_HEADER_RE, Dialect
from .fields import extract_fields
from .utils import _safe_float, _safe_int

# "    1 0.000000   192.168.112.6   192.168.111.104   TLSv1.2   196   Application Data"
SUMMARY_ROW_RE = re.compile(
    r"^\s*(\d+)\s+([\d.]+)\s+(\S+)\s+(\S+)\s+(\S+)\s+(\d+)(?:\s+(.*))?$"
)
FRAME_NUMBER_RE = re.compile(r"^Frame\s+(\d+):")
PORT_ARROW_RE = re.compile(r"(\d+)\s*(?:→|->)+\s*(\d+)")
BRACKET_FLAGS_RE = re.compile(r"\[([A-Z,\s]+)\]")


def _packet_from_row(m: re.Match, line: str) -> OpenPacket:
    info = (m.group(7) or "").strip()
    packet = OpenPacket(
        number=int(m.group(1)),
        time=m.group(2),
        epoch_time=_safe_float(m.group(2)),
        source=m.group(3),
        destination=m.group(4),
        protocol=m.group(5),
        layers=[normalize_protocol(m.group(5))],
        length=int(m.group(6)),
        info=info,
        raw_lines=[line],
    )
    ports = PORT_ARROW_RE.search(info)
    if ports:
        packet.src_port = _safe_int(ports.group(1))
        packet.dst_port = _safe_int(ports.group(2))
    flags = BRACKET_FLAGS_RE.search(info)
    if flags:
        packet.flags = [f.strip() for f in flags.group(1).split(",") if f.strip()]
    return packet


class SummaryExportAccumulator(BaseAccumulator):
    """Open a packet on every summary row; detail lines refine it.

    ``Frame N:`` lines are kept in the raw text only when ``N`` is the open
    packet's number. Other frame lines are dropped.
    """

    dialect = Dialect.SUMMARY_EXPORT

    def feed(self, line: str) -> Optional[PacketRecord]:
        if SUMMARY_HEADER_RE.match(line):
            return None

        frame = FRAME_NUMBER_RE.match(line)
        if frame is None:
            row = SUMMARY_ROW_RE.match(line)
            if row is not None:
                return self._begin(_packet_from_row(row, line))
        elif self._open is not None and self._open.number == int(frame.group(1)):
            self._open.raw_lines.append(line)
            return None
        else:
            return None

        if self._open is not None:
            self._open.raw_lines.append(line)
            extract_fields(line, self._open)
        return None
