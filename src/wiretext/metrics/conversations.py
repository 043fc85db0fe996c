"""Conversation table keyed by the unordered endpoint pair."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.config import settings
from ..core.constants import CONVERSATION_SEPARATOR
from ..core.models import PacketRecord, Snippet


def conversation_key(a: str, b: str) -> str:
    """Return the key shared by ``a -> b`` and ``b -> a``."""
    return CONVERSATION_SEPARATOR.join(sorted((a, b)))


@dataclass
class Conversation:
    """Traffic between one unordered pair of endpoints."""

    endpoints: str
    packets: int = 0
    bytes: int = 0
    protocols: Dict[str, None] = field(default_factory=dict)  # insertion-ordered set
    packet_numbers: List[int] = field(default_factory=list)
    snippets: List[Snippet] = field(default_factory=list)


class ConversationTable:
    """Track conversations; retained numbers and snippets stop growing at the cap."""

    def __init__(self, retain_limit: Optional[int] = None) -> None:
        self.retain_limit = (
            settings.conversation_retain_limit if retain_limit is None else retain_limit
        )
        self.conversations: Dict[str, Conversation] = {}

    def add_packet(self, record: PacketRecord) -> None:
        """Update the conversation for ``record`` if both endpoints are known."""
        if not (record.source and record.destination):
            return
        key = conversation_key(record.source, record.destination)
        conv = self.conversations.get(key)
        if conv is None:
            conv = Conversation(endpoints=key)
            self.conversations[key] = conv

        conv.packets += 1
        conv.bytes += record.length or 0
        conv.protocols.setdefault(record.protocol, None)
        if len(conv.packet_numbers) < self.retain_limit:
            conv.packet_numbers.append(record.number)
        if len(conv.snippets) < self.retain_limit:
            conv.snippets.append(Snippet.from_record(record))

    def __len__(self) -> int:
        return len(self.conversations)
