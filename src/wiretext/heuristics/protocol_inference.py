"""Protocol name normalization and packet finalization."""

from __future__ import annotations

from typing import Iterable, Optional

from ..core.cache import PacketCache
from ..core.config import settings
from ..core.constants import (
    PORT_ARROW,
    PROTOCOL_DISPLAY_NAMES,
    PROTOCOL_PRIORITY,
    UNKNOWN_PROTOCOL,
)
from ..core.models import OpenPacket, PacketRecord


_packet_cache = PacketCache(settings.packet_cache_size, settings.cache_enabled)


@_packet_cache.memoize
def _normalize_impl(token: str) -> str:
    key = token.strip().lower()
    if not key:
        return UNKNOWN_PROTOCOL
    return PROTOCOL_DISPLAY_NAMES.get(key, token.strip().upper())


def normalize_protocol(token: Optional[str]) -> str:
    """Return the display name for a protocol ``token``.

    Tokens missing from :data:`PROTOCOL_DISPLAY_NAMES` are upper-cased, so
    ``"tcp"`` becomes ``"TCP"`` and ``"gquic"`` becomes ``"GQUIC"``.
    """
    if not token:
        return UNKNOWN_PROTOCOL
    return _normalize_impl(token)


def resolve_protocol(layers: Iterable[str]) -> Optional[str]:
    """Return the highest priority protocol present in ``layers``."""
    present = set(layers)
    for candidate in PROTOCOL_PRIORITY:
        if candidate in present:
            return candidate
    return None


def synthesize_info(packet: OpenPacket) -> str:
    if packet.src_port is not None and packet.dst_port is not None:
        flags = f" [{', '.join(packet.flags)}]" if packet.flags else ""
        return f"{packet.src_port} {PORT_ARROW} {packet.dst_port}{flags}"
    if packet.protocol and packet.protocol != UNKNOWN_PROTOCOL:
        return packet.protocol
    return ""


def finalize_packet(packet: OpenPacket) -> PacketRecord:
    """Fill defaults on ``packet`` and return its frozen record.

    Info is synthesized before the protocol is resolved from the layer list,
    so a packet whose protocol is only known through its layers gets an info
    string from its ports or stays empty.
    """
    if not packet.info:
        packet.info = synthesize_info(packet)

    if packet.protocol == UNKNOWN_PROTOCOL and packet.layers:
        packet.protocol = resolve_protocol(packet.layers) or UNKNOWN_PROTOCOL

    packet.protocol = normalize_protocol(packet.protocol)
    return packet.freeze()


__all__ = [
    "normalize_protocol",
    "resolve_protocol",
    "synthesize_info",
    "finalize_packet",
]
