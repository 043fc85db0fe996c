"""Line-scoped field recognizers for the packet under construction.

Each :class:`FieldRecognizer` pairs an anchored pattern with a merge
function. Recognizers are independent of each other: every one of them is
tried against every detail line and several may fire on the same line.
Merge functions either overwrite (last match wins) or go through
:meth:`OpenPacket.fill` (first match wins).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List

from ..core.constants import UNKNOWN_PROTOCOL
from ..core.models import OpenPacket
from ..heuristics.protocol_inference import normalize_protocol
from .utils import _is_ip_address, _safe_float, _safe_int


@dataclass(frozen=True)
class FieldRecognizer:
    name: str
    pattern: re.Pattern
    merge: Callable[[re.Match, OpenPacket], None]

    def apply(self, line: str, packet: OpenPacket) -> bool:
        """Merge ``line`` into ``packet``; return ``True`` if the pattern matched."""
        match = self.pattern.match(line)
        if match is None:
            return False
        self.merge(match, packet)
        return True


def _rx(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


# --- overwrite-on-match -----------------------------------------------------

def _merge_arrival_time(m: re.Match, packet: OpenPacket) -> None:
    packet.time = m.group(1).strip()


def _merge_epoch_time(m: re.Match, packet: OpenPacket) -> None:
    value = _safe_float(m.group(1))
    if value is not None:
        packet.epoch_time = value


def _merge_protocols_in_frame(m: re.Match, packet: OpenPacket) -> None:
    tokens = [t.strip() for t in m.group(1).split(":") if t.strip()]
    if not tokens:
        return
    packet.protocols = tokens
    packet.layers = [normalize_protocol(t) for t in tokens]
    if packet.protocol == UNKNOWN_PROTOCOL:
        packet.protocol = packet.layers[-1]


def _merge_ethernet(m: re.Match, packet: OpenPacket) -> None:
    packet.src_mac = m.group(1)
    packet.dst_mac = m.group(2)


def _merge_ttl(m: re.Match, packet: OpenPacket) -> None:
    packet.ttl = _safe_int(m.group(1))


def _merge_http_request(m: re.Match, packet: OpenPacket) -> None:
    packet.info = f"{m.group(1).upper()} {m.group(2)}"
    packet.protocol = "HTTP"


def _merge_http_response(m: re.Match, packet: OpenPacket) -> None:
    reason = m.group(2).strip()
    if reason.endswith("\\r\\n"):
        reason = reason[:-4].rstrip()
    packet.info = f"HTTP {m.group(1)} {reason}"
    packet.protocol = "HTTP"


def _merge_arp(m: re.Match, packet: OpenPacket) -> None:
    packet.info = f"ARP {m.group(1)}"
    packet.protocol = "ARP"


def _merge_icmp_type(m: re.Match, packet: OpenPacket) -> None:
    if "ICMP" in packet.layers or packet.protocol.upper() == "ICMP":
        packet.info = f"ICMP {m.group(1)}"


# --- first-match-wins -------------------------------------------------------

def _merge_frame_length(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(length=_safe_int(m.group(1)) or 0)


def _merge_ip_header(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(source=m.group(1).strip(), destination=m.group(2).strip())


def _merge_source_address(m: re.Match, packet: OpenPacket) -> None:
    if _is_ip_address(m.group(1)):
        packet.fill(source=m.group(1))


def _merge_destination_address(m: re.Match, packet: OpenPacket) -> None:
    if _is_ip_address(m.group(1)):
        packet.fill(destination=m.group(1))


def _merge_transport_header(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(src_port=_safe_int(m.group(2)), dst_port=_safe_int(m.group(3)))
    packet.add_layer("TCP" if m.group(1).lower().startswith("transmission") else "UDP")


def _merge_source_port(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(src_port=_safe_int(m.group(1)))


def _merge_destination_port(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(dst_port=_safe_int(m.group(1)))


def _merge_tcp_flags(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(flags=[f.strip() for f in m.group(1).split(",") if f.strip()])


def _merge_tls_record(m: re.Match, packet: OpenPacket) -> None:
    packet.fill(info=f"{m.group(1)}: {m.group(2).strip()}")


def _merge_dns_query(m: re.Match, packet: OpenPacket) -> None:
    if "DNS" in packet.layers:
        packet.fill(info=f"DNS Query: {m.group(1)}")


RECOGNIZERS: tuple[FieldRecognizer, ...] = (
    FieldRecognizer("arrival_time", _rx(r"^\s*Arrival Time:\s*(.+)"), _merge_arrival_time),
    FieldRecognizer("epoch_time", _rx(r"^\s*Epoch (?:Arrival )?Time:\s*([\d.]+)"), _merge_epoch_time),
    FieldRecognizer("frame_length", _rx(r"^\s*Frame Length:\s*(\d+)"), _merge_frame_length),
    FieldRecognizer(
        "protocols_in_frame",
        _rx(r"^\s*\[Protocols in frame:\s*([^\]]+)\]"),
        _merge_protocols_in_frame,
    ),
    FieldRecognizer(
        "ethernet",
        _rx(r"^\s*Ethernet II,\s+Src:\s+([^\s(]+).*?,\s+Dst:\s+([^\s(]+)"),
        _merge_ethernet,
    ),
    FieldRecognizer(
        "ip_header",
        _rx(r"^\s*Internet Protocol Version \d,\s+Src:\s+([^,]+),\s+Dst:\s+(.+)"),
        _merge_ip_header,
    ),
    FieldRecognizer("source_address", _rx(r"^\s+Source(?: Address)?:\s+([0-9a-f.:]+)"), _merge_source_address),
    FieldRecognizer(
        "destination_address",
        _rx(r"^\s+Destination(?: Address)?:\s+([0-9a-f.:]+)"),
        _merge_destination_address,
    ),
    FieldRecognizer(
        "transport_header",
        _rx(
            r"^\s*(Transmission Control Protocol|User Datagram Protocol),"
            r"\s+Src Port:\s+(\d+),\s+Dst Port:\s+(\d+)"
        ),
        _merge_transport_header,
    ),
    FieldRecognizer("source_port", _rx(r"^\s+Source Port:\s+(\d+)"), _merge_source_port),
    FieldRecognizer("destination_port", _rx(r"^\s+Destination Port:\s+(\d+)"), _merge_destination_port),
    FieldRecognizer("tcp_flags", _rx(r"^\s+Flags:\s+0x[0-9a-f]+\s+\(([^)]+)\)"), _merge_tcp_flags),
    FieldRecognizer("ttl", _rx(r"^\s+Time to Live:\s+(\d+)"), _merge_ttl),
    FieldRecognizer(
        "tls_record",
        _rx(r"^\s*((?:TLS|SSL)v[\d.]+)\s+Record Layer:\s+(.+)"),
        _merge_tls_record,
    ),
    FieldRecognizer(
        "http_request",
        _rx(r"^\s*(GET|POST|PUT|DELETE|HEAD|OPTIONS|PATCH)\s+(\S+)\s+HTTP"),
        _merge_http_request,
    ),
    FieldRecognizer("http_response", _rx(r"^\s*HTTP/[\d.]+\s+(\d+)\s+(.+)"), _merge_http_response),
    FieldRecognizer("dns_query", _rx(r"^\s+Name:\s+(\S+)"), _merge_dns_query),
    FieldRecognizer("arp", _rx(r"^\s*Address Resolution Protocol\s+\(([^)]+)\)"), _merge_arp),
    FieldRecognizer("icmp_type", _rx(r"^\s+Type:\s+\d+\s+\((.+)\)\s*$"), _merge_icmp_type),
)


def extract_fields(line: str, packet: OpenPacket) -> List[str]:
    """Apply every recognizer to ``line`` and return the names that fired."""
    return [r.name for r in RECOGNIZERS if r.apply(line, packet)]


__all__ = ["FieldRecognizer", "RECOGNIZERS", "extract_fields"]
