"""Protocol and per-address counters for emitted packet records."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import DefaultDict

from ..core.constants import UNKNOWN_PROTOCOL
from ..core.models import PacketRecord


@dataclass
class ProtocolTotals:
    count: int = 0
    bytes: int = 0


@dataclass
class AddressTotals:
    sent: int = 0
    received: int = 0
    packets: int = 0  # packets sent


class StatsCollector:
    """Accumulate protocol and IP statistics from :class:`PacketRecord`."""

    def __init__(self) -> None:
        self.protocols: DefaultDict[str, ProtocolTotals] = defaultdict(ProtocolTotals)
        self.addresses: DefaultDict[str, AddressTotals] = defaultdict(AddressTotals)
        self.total_packets = 0
        self.total_bytes = 0

    def add(self, record: PacketRecord) -> None:
        """Update metrics for a single record."""
        length = record.length or 0
        self.total_packets += 1
        self.total_bytes += length

        proto = self.protocols[record.protocol or UNKNOWN_PROTOCOL]
        proto.count += 1
        proto.bytes += length

        if record.source:
            sender = self.addresses[record.source]
            sender.sent += length
            sender.packets += 1
        if record.destination:
            self.addresses[record.destination].received += length

    @property
    def unique_ips(self) -> int:
        return len(self.addresses)
