import json

import pytest

from wiretext.__main__ import main


def test_analyze_prints_summary(capsys, summary_export_path):
    assert main(["analyze", str(summary_export_path)]) == 0
    out = capsys.readouterr().out
    assert "Parsed 4 packets (402 bytes, dialect summary-export) from 0.000000 to 2.900000" in out
    assert "Unique IPs: 3" in out
    assert "TLSV1.2" in out


def test_analyze_writes_exports(tmp_path, verbose_path):
    csv_path = tmp_path / "packets.csv"
    json_path = tmp_path / "summary.json"
    main(["analyze", str(verbose_path), "--csv", str(csv_path), "--json", str(json_path), "--top", "2"])

    assert csv_path.read_text(encoding="utf-8").splitlines()[0].startswith("number,time,epoch_time")
    summary = json.loads(json_path.read_text(encoding="utf-8"))
    assert summary["total_packets"] == 5
    assert summary["dialect"] == "verbose"
    assert summary["conversations"][0]["endpoints"] == "192.168.1.10 ↔ 93.184.216.34"


def test_missing_capture_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["analyze", str(tmp_path / "missing.txt")])
    assert info.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])
