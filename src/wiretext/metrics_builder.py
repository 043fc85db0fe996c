"""Turn the running aggregates of a run into an :class:`AnalysisResult`."""

from __future__ import annotations

from typing import Optional, Sequence

from .core.config import settings
from .core.constants import NOT_AVAILABLE
from .core.models import (
    AnalysisResult,
    ConversationStat,
    PacketRecord,
    ProtocolStat,
    TalkerStat,
    TimelinePoint,
)
from .logging import get_logger
from .metrics.aggregator import StatsAggregator

logger = get_logger(__name__)


def format_percentage(count: int, total: int) -> str:
    if total <= 0:
        return "0.00"
    return f"{count / total * 100:.2f}"


class MetricsBuilder:
    """Sort, cap and format the aggregates of one run."""

    def __init__(
        self,
        aggregator: StatsAggregator,
        *,
        top_talkers_limit: Optional[int] = None,
        conversation_limit: Optional[int] = None,
    ) -> None:
        self.aggregator = aggregator
        self.top_talkers_limit = (
            settings.top_talkers_limit if top_talkers_limit is None else top_talkers_limit
        )
        self.conversation_limit = (
            settings.conversation_limit if conversation_limit is None else conversation_limit
        )

    def protocol_stats(self) -> list[ProtocolStat]:
        sc = self.aggregator.stats_collector
        stats = [
            ProtocolStat(
                protocol=name,
                count=totals.count,
                bytes=totals.bytes,
                percentage=format_percentage(totals.count, sc.total_packets),
            )
            for name, totals in sc.protocols.items()
        ]
        return sorted(stats, key=lambda s: s.count, reverse=True)

    def top_talkers(self) -> list[TalkerStat]:
        talkers = [
            TalkerStat(
                ip=ip,
                sent=totals.sent,
                received=totals.received,
                total=totals.sent + totals.received,
                packets=totals.packets,
            )
            for ip, totals in self.aggregator.stats_collector.addresses.items()
        ]
        talkers.sort(key=lambda t: t.total, reverse=True)
        return talkers[: self.top_talkers_limit]

    def conversations(self) -> list[ConversationStat]:
        ordered = sorted(
            self.aggregator.conversation_table.conversations.values(),
            key=lambda c: c.packets,
            reverse=True,
        )
        return [
            ConversationStat(
                endpoints=conv.endpoints,
                packets=conv.packets,
                bytes=conv.bytes,
                protocols=tuple(conv.protocols),
                packet_numbers=tuple(conv.packet_numbers),
                snippets=tuple(conv.snippets),
            )
            for conv in ordered[: self.conversation_limit]
        ]

    def timeline(self) -> list[TimelinePoint]:
        """Return buckets ascending, relative to the first bucket (``"0.0s"``)."""
        bins, counts = self.aggregator.timeline_builder.get_timeline_data()
        if not bins:
            return []
        start = bins[0]
        return [
            TimelinePoint(time=f"{b - start:.1f}s", count=count)
            for b, count in zip(bins, counts)
        ]

    def build_result(self, packets: Sequence[PacketRecord], dialect: str = "") -> AnalysisResult:
        logger.debug("Building analysis result for %s packets", len(packets))
        sc = self.aggregator.stats_collector
        return AnalysisResult(
            packets=tuple(packets),
            protocol_stats=tuple(self.protocol_stats()),
            top_talkers=tuple(self.top_talkers()),
            conversations=tuple(self.conversations()),
            timeline=tuple(self.timeline()),
            unique_ips=sc.unique_ips,
            start_time=(packets[0].time or NOT_AVAILABLE) if packets else NOT_AVAILABLE,
            end_time=(packets[-1].time or NOT_AVAILABLE) if packets else NOT_AVAILABLE,
            total_bytes=sc.total_bytes,
            dialect=dialect,
        )


__all__ = ["MetricsBuilder", "format_percentage"]
