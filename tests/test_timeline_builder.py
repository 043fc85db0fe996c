from wiretext.metrics.timeline_builder import TimelineBuilder
from tests.fixtures.records import record


def test_timeline_builder_basic():
    tb = TimelineBuilder()
    for i, ts in enumerate([1.2, 1.8, 2.4, 5.0]):
        tb.add_packet(record(i, epoch_time=ts))

    bins, pkts_list = tb.get_timeline_data()
    assert bins == [1, 2, 5]
    assert pkts_list == [2, 1, 1]


def test_records_without_epoch_are_skipped():
    tb = TimelineBuilder()
    tb.add_packet(record(1))
    assert tb.get_timeline_data() == ([], [])


def test_bins_are_sorted_regardless_of_input_order():
    tb = TimelineBuilder()
    for i, ts in enumerate([9.1, 3.0, 9.9, 3.5]):
        tb.add_packet(record(i, epoch_time=ts))
    assert tb.get_timeline_data() == ([3, 9], [2, 2])
