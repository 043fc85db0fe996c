from __future__ import annotations

from typing import List, Optional, Sequence

SUMMARY_HEADER = "No.     Time           Source                Destination           Protocol Length Info"


class CaptureFactory:
    """Utility factory for building text exports line by line."""

    @staticmethod
    def summary_row(
        number: int,
        time: float,
        src: str,
        dst: str,
        protocol: str = "TCP",
        length: int = 60,
        info: str = "",
    ) -> str:
        row = f"{number:>7} {time:.6f}   {src:<21} {dst:<21} {protocol:<8} {length:<6}"
        return f"{row} {info}" if info else row.rstrip()

    @staticmethod
    def frame_line(number: int, length: int) -> str:
        bits = length * 8
        return (
            f"Frame {number}: {length} bytes on wire ({bits} bits), "
            f"{length} bytes captured ({bits} bits)"
        )

    @staticmethod
    def verbose_frame(
        number: int,
        length: int,
        *,
        src: Optional[str] = None,
        dst: Optional[str] = None,
        transport: str = "tcp",
        sport: Optional[int] = None,
        dport: Optional[int] = None,
        epoch: Optional[float] = None,
        extra: Sequence[str] = (),
    ) -> List[str]:
        lines = [CaptureFactory.frame_line(number, length)]
        if epoch is not None:
            lines.append(f"    Epoch Arrival Time: {epoch:.9f}")
        lines.append(f"    Frame Length: {length} bytes ({length * 8} bits)")
        protocols = ["eth", "ethertype"]
        if src and dst:
            protocols.append("ip")
            if sport is not None and dport is not None:
                protocols.append(transport)
        lines.append(f"    [Protocols in frame: {':'.join(protocols)}]")
        if src and dst:
            lines.append(f"Internet Protocol Version 4, Src: {src}, Dst: {dst}")
            lines.append(f"    Source Address: {src}")
            lines.append(f"    Destination Address: {dst}")
            if sport is not None and dport is not None:
                name = "Transmission Control Protocol" if transport == "tcp" else "User Datagram Protocol"
                lines.append(f"{name}, Src Port: {sport}, Dst Port: {dport}")
        lines.extend(extra)
        lines.append("")
        return lines
