from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Iterator, Optional

from ..core.models import OpenPacket, PacketRecord
from ..heuristics.protocol_inference import finalize_packet
from .detector import Dialect


class BaseAccumulator(ABC):
    """Line-driven packet accumulation shared by every dialect.

    Exactly one packet is open at a time. Opening a new packet flushes the
    previous one, and :meth:`finish` flushes the last one at end of input.
    """

    dialect: ClassVar[Dialect]

    def __init__(self) -> None:
        self._open: Optional[OpenPacket] = None

    @property
    def open_packet(self) -> Optional[OpenPacket]:
        return self._open

    @abstractmethod
    def feed(self, line: str) -> Optional[PacketRecord]:
        """Consume one line; return the record it completed, if any."""

    def finish(self) -> Optional[PacketRecord]:
        """Flush the open packet at end of input."""
        return self._flush()

    def scan(self, lines: Iterable[str]) -> Iterator[PacketRecord]:
        """Yield completed records for ``lines`` in input order."""
        for line in lines:
            record = self.feed(line)
            if record is not None:
                yield record
        record = self.finish()
        if record is not None:
            yield record

    def _begin(self, packet: OpenPacket) -> Optional[PacketRecord]:
        emitted = self._flush()
        self._open = packet
        return emitted

    def _flush(self) -> Optional[PacketRecord]:
        if self._open is None:
            return None
        packet, self._open = self._open, None
        return finalize_packet(packet)
