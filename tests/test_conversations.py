from wiretext.metrics import ConversationTable, conversation_key
from tests.fixtures.records import record


def test_conversation_key_is_unordered():
    assert conversation_key("10.0.0.2", "10.0.0.1") == "10.0.0.1 ↔ 10.0.0.2"
    assert conversation_key("10.0.0.1", "10.0.0.2") == conversation_key("10.0.0.2", "10.0.0.1")


def test_both_directions_share_one_conversation():
    table = ConversationTable()
    table.add_packet(record(1, "10.0.0.1", "10.0.0.2", "TCP", 66))
    table.add_packet(record(2, "10.0.0.2", "10.0.0.1", "TLS", 100))
    table.add_packet(record(3, "10.0.0.1", "10.0.0.2", "TCP", 54))

    assert len(table) == 1
    conv = table.conversations["10.0.0.1 ↔ 10.0.0.2"]
    assert conv.packets == 3
    assert conv.bytes == 220
    assert list(conv.protocols) == ["TCP", "TLS"]
    assert conv.packet_numbers == [1, 2, 3]
    assert [s.number for s in conv.snippets] == [1, 2, 3]
    assert conv.snippets[1].protocol == "TLS"


def test_packets_without_both_endpoints_are_skipped():
    table = ConversationTable()
    table.add_packet(record(1, "", "10.0.0.2"))
    table.add_packet(record(2, "10.0.0.1", ""))
    assert len(table) == 0


def test_retained_numbers_and_snippets_are_capped():
    table = ConversationTable(retain_limit=3)
    for i in range(10):
        table.add_packet(record(i, length=1))
    conv = table.conversations["10.0.0.1 ↔ 10.0.0.2"]
    assert conv.packets == 10
    assert conv.bytes == 10
    assert conv.packet_numbers == [0, 1, 2]
    assert len(conv.snippets) == 3
