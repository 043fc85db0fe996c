from __future__ import annotations

from typing import Optional

from wiretext.core.models import PacketRecord


def record(
    number: int = 1,
    source: str = "10.0.0.1",
    destination: str = "10.0.0.2",
    protocol: str = "TCP",
    length: int = 100,
    epoch_time: Optional[float] = None,
    **kwargs,
) -> PacketRecord:
    """Return a finalized record with sensible defaults."""
    return PacketRecord(
        number=number,
        source=source,
        destination=destination,
        protocol=protocol,
        length=length,
        epoch_time=epoch_time,
        **kwargs,
    )
