"""Timeline metrics utilities."""

import math
from collections import defaultdict
from typing import DefaultDict

from ..core.models import PacketRecord


class TimelineBuilder:
    """Aggregate per-second packet counts."""

    def __init__(self) -> None:
        self.packets_per_second: DefaultDict[int, int] = defaultdict(int)

    def add_packet(self, record: PacketRecord) -> None:
        """Add a packet record to the timeline; records without epoch time are skipped."""
        if record.epoch_time is None:
            return
        self.packets_per_second[math.floor(record.epoch_time)] += 1

    def get_timeline_data(self) -> tuple[list[int], list[int]]:
        """Return sorted time bins and corresponding packet counts."""
        sorted_bins = sorted(self.packets_per_second)
        return sorted_bins, [self.packets_per_second[b] for b in sorted_bins]
