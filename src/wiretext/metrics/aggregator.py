from __future__ import annotations

from typing import Optional

from ..core.models import PacketRecord
from .conversations import ConversationTable
from .stats_collector import StatsCollector
from .timeline_builder import TimelineBuilder


class StatsAggregator:
    """Feed each finalized record once to every running aggregate."""

    def __init__(self, retain_limit: Optional[int] = None) -> None:
        self.stats_collector = StatsCollector()
        self.conversation_table = ConversationTable(retain_limit)
        self.timeline_builder = TimelineBuilder()

    def add(self, record: PacketRecord) -> None:
        self.stats_collector.add(record)
        self.conversation_table.add_packet(record)
        self.timeline_builder.add_packet(record)
