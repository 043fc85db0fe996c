from .stats_collector import StatsCollector, ProtocolTotals, AddressTotals
from .conversations import ConversationTable, Conversation, conversation_key
from .timeline_builder import TimelineBuilder
from .aggregator import StatsAggregator

__all__ = [
    "StatsCollector",
    "ProtocolTotals",
    "AddressTotals",
    "ConversationTable",
    "Conversation",
    "conversation_key",
    "TimelineBuilder",
    "StatsAggregator",
]
