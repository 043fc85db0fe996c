import pandas as pd

from wiretext import analyze_file
from wiretext.utils import (
    export_to_csv,
    packets_to_dataframe,
    protocol_stats_to_dataframe,
    talkers_to_dataframe,
)
from tests.utils.assertions import assert_frames_equal


def test_packets_to_dataframe(verbose_path):
    result = analyze_file(verbose_path)
    df = packets_to_dataframe(result.packets)

    assert len(df) == 5
    assert "raw" not in df.columns
    assert df.loc[0, "protocols"] == "eth:ethertype:ip:tcp"
    assert df.loc[1, "flags"] == "PSH,ACK"
    assert df["src_port"].tolist() == [52000, 52000, 53124, -1, -1]
    assert df.loc[3, "time"] == ""
    assert df["ttl"].dtype.kind in {"i", "u"}

    with_raw = packets_to_dataframe(result.packets, include_raw=True)
    assert with_raw.loc[0, "raw"].startswith("Frame 1:")


def test_empty_packets_dataframe():
    df = packets_to_dataframe([])
    assert df.empty
    assert "number" in df.columns


def test_stats_frames(summary_export_path):
    result = analyze_file(summary_export_path)
    expected = pd.DataFrame(
        {
            "protocol": ["TCP", "DNS", "TLSV1.2"],
            "count": [2, 1, 1],
            "bytes": [132, 74, 196],
            "percentage": ["50.00", "25.00", "25.00"],
        }
    )
    assert_frames_equal(protocol_stats_to_dataframe(result), expected)
    assert talkers_to_dataframe(result)["ip"].tolist() == ["10.0.0.1", "10.0.0.2", "8.8.8.8"]


def test_export_to_csv(tmp_path, summary_export_path):
    result = analyze_file(summary_export_path)
    out = tmp_path / "packets.csv"
    export_to_csv(packets_to_dataframe(result.packets), str(out))
    loaded = pd.read_csv(out)
    assert loaded["number"].tolist() == [1, 2, 3, 4]
