from __future__ import annotations

from dataclasses import asdict
from typing import Dict, Iterable

import pandas as pd

from ..core.models import AnalysisResult, PacketRecord
from .pandas_safe import coalesce, safe_int

PACKET_COLUMNS = [
    "number",
    "time",
    "epoch_time",
    "source",
    "destination",
    "src_mac",
    "dst_mac",
    "protocol",
    "protocols",
    "layers",
    "src_port",
    "dst_port",
    "flags",
    "info",
    "ttl",
    "length",
    "raw",
]

# Optional integer columns and the value used where a packet has none.
FILL_VALUES: Dict[str, int] = {
    "src_port": -1,
    "dst_port": -1,
    "ttl": -1,
}


def packets_to_dataframe(packets: Iterable[PacketRecord], include_raw: bool = False) -> pd.DataFrame:
    """Return one row per packet; list fields are joined with ``:`` or ``,``."""
    rows = []
    for packet in packets:
        row = asdict(packet)
        row["protocols"] = ":".join(packet.protocols)
        row["layers"] = ":".join(packet.layers)
        row["flags"] = ",".join(packet.flags)
        rows.append(row)
    df = pd.DataFrame(rows, columns=PACKET_COLUMNS)
    for col, fill in FILL_VALUES.items():
        df[col] = safe_int(df[col], fill)
    df["time"] = coalesce(df["time"], "")
    if not include_raw:
        df = df.drop(columns=["raw"])
    return df


def talkers_to_dataframe(result: AnalysisResult) -> pd.DataFrame:
    return pd.DataFrame(
        [asdict(t) for t in result.top_talkers],
        columns=["ip", "sent", "received", "total", "packets"],
    )


def protocol_stats_to_dataframe(result: AnalysisResult) -> pd.DataFrame:
    return pd.DataFrame(
        [asdict(s) for s in result.protocol_stats],
        columns=["protocol", "count", "bytes", "percentage"],
    )


def export_to_csv(data_to_export: pd.DataFrame, filename: str) -> None:
    """Write ``data_to_export`` to ``filename`` as CSV without index."""
    data_to_export.to_csv(filename, index=False)


__all__ = [
    "packets_to_dataframe",
    "talkers_to_dataframe",
    "protocol_stats_to_dataframe",
    "export_to_csv",
    "safe_int",
    "coalesce",
]
