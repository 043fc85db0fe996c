"""Core data structures for decoded packet records and analysis results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, List, Optional, Tuple

from .constants import NOT_AVAILABLE, UNKNOWN_PROTOCOL


@dataclass
class OpenPacket:
    """The single packet under construction during a scan.

    Fields are filled line by line by the detail recognizers. Two merge
    disciplines apply: :meth:`fill` only writes fields that are still unset,
    while plain attribute assignment overwrites (last match wins).
    """

    number: int
    length: int = 0
    time: Optional[str] = None
    epoch_time: Optional[float] = None
    source: str = ""
    destination: str = ""
    src_mac: str = ""
    dst_mac: str = ""
    protocol: str = UNKNOWN_PROTOCOL
    protocols: List[str] = field(default_factory=list)  # raw declared tokens
    layers: List[str] = field(default_factory=list)  # normalized, outer to inner
    src_port: Optional[int] = None
    dst_port: Optional[int] = None
    flags: List[str] = field(default_factory=list)
    info: str = ""
    ttl: Optional[int] = None
    raw_lines: List[str] = field(default_factory=list)

    def is_unset(self, name: str) -> bool:
        value = getattr(self, name)
        return value is None or value == "" or value == [] or (name == "length" and value == 0)

    def fill(self, **values: Any) -> None:
        """Set each field in ``values`` only if it is currently unset."""
        for name, value in values.items():
            if self.is_unset(name):
                setattr(self, name, value)

    def add_layer(self, layer: str) -> None:
        if layer not in self.layers:
            self.layers.append(layer)

    def freeze(self) -> "PacketRecord":
        """Return the immutable record for this packet."""
        return PacketRecord(
            number=self.number,
            time=self.time,
            epoch_time=self.epoch_time,
            source=self.source,
            destination=self.destination,
            src_mac=self.src_mac,
            dst_mac=self.dst_mac,
            protocol=self.protocol,
            protocols=tuple(self.protocols),
            layers=tuple(self.layers),
            src_port=self.src_port,
            dst_port=self.dst_port,
            flags=tuple(self.flags),
            info=self.info,
            ttl=self.ttl,
            length=self.length,
            raw="\n".join(self.raw_lines),
        )


@dataclass(frozen=True)
class PacketRecord:
    number: int
    time: Optional[str] = None
    epoch_time: Optional[float] = None
    source: str = ""
    destination: str = ""
    src_mac: str = ""
    dst_mac: str = ""
    protocol: str = UNKNOWN_PROTOCOL
    protocols: Tuple[str, ...] = ()
    layers: Tuple[str, ...] = ()
    src_port: Optional[int] = None
    dst_port: Optional[int] = None
    flags: Tuple[str, ...] = ()
    info: str = ""
    ttl: Optional[int] = None
    length: int = 0
    raw: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for name in ("protocols", "layers", "flags"):
            data[name] = list(data[name])
        return data

    def __str__(self) -> str:
        return (
            f"Frame: {self.number}, Time: {self.time or NOT_AVAILABLE}, "
            f"IP: {self.source or NOT_AVAILABLE}:{self.src_port if self.src_port is not None else NOT_AVAILABLE} -> "
            f"{self.destination or NOT_AVAILABLE}:{self.dst_port if self.dst_port is not None else NOT_AVAILABLE}, "
            f"Proto: {self.protocol}, Len: {self.length}, Info: {self.info or NOT_AVAILABLE}"
        )


@dataclass(frozen=True)
class Snippet:
    """Lightweight per-packet preview kept inside a conversation."""

    number: int
    time: Optional[str]
    source: str
    destination: str
    src_port: Optional[int]
    dst_port: Optional[int]
    protocol: str
    info: str
    flags: Tuple[str, ...]
    length: int

    @classmethod
    def from_record(cls, record: PacketRecord) -> "Snippet":
        return cls(**{f.name: getattr(record, f.name) for f in fields(cls)})


@dataclass(frozen=True)
class ProtocolStat:
    protocol: str
    count: int
    bytes: int
    percentage: str


@dataclass(frozen=True)
class TalkerStat:
    ip: str
    sent: int
    received: int
    total: int
    packets: int


@dataclass(frozen=True)
class ConversationStat:
    endpoints: str
    packets: int
    bytes: int
    protocols: Tuple[str, ...]
    packet_numbers: Tuple[int, ...]
    snippets: Tuple[Snippet, ...]


@dataclass(frozen=True)
class TimelinePoint:
    time: str
    count: int


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable snapshot of one analysis run."""

    packets: Tuple[PacketRecord, ...] = ()
    protocol_stats: Tuple[ProtocolStat, ...] = ()
    top_talkers: Tuple[TalkerStat, ...] = ()
    conversations: Tuple[ConversationStat, ...] = ()
    timeline: Tuple[TimelinePoint, ...] = ()
    unique_ips: int = 0
    start_time: str = NOT_AVAILABLE
    end_time: str = NOT_AVAILABLE
    total_bytes: int = 0
    dialect: str = ""

    @property
    def total_packets(self) -> int:
        return len(self.packets)

    def summary(self) -> dict[str, Any]:
        """Return the aggregate part of the result as plain Python types."""
        return {
            "dialect": self.dialect,
            "total_packets": self.total_packets,
            "total_bytes": self.total_bytes,
            "protocol_stats": [asdict(s) for s in self.protocol_stats],
            "top_talkers": [asdict(t) for t in self.top_talkers],
            "conversations": [_conversation_dict(c) for c in self.conversations],
            "timeline": [asdict(p) for p in self.timeline],
            "unique_ips": self.unique_ips,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "packets": [p.to_dict() for p in self.packets],
            "summary": self.summary(),
        }


def _conversation_dict(conv: ConversationStat) -> dict[str, Any]:
    data = asdict(conv)
    data["protocols"] = list(conv.protocols)
    data["packet_numbers"] = list(conv.packet_numbers)
    data["snippets"] = [
        {**asdict(s), "flags": list(s.flags)} for s in conv.snippets
    ]
    return data


__all__ = [
    "OpenPacket",
    "PacketRecord",
    "Snippet",
    "ProtocolStat",
    "TalkerStat",
    "ConversationStat",
    "TimelinePoint",
    "AnalysisResult",
]
