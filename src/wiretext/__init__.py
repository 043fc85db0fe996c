# src/wiretext/__init__.py
from .analyzer import analyze_lines, analyze_text, analyze_file
from .reader import read_capture_text, read_capture_lines, decode_capture_bytes
from .core.models import (
    OpenPacket,
    PacketRecord,
    Snippet,
    ProtocolStat,
    TalkerStat,
    ConversationStat,
    TimelinePoint,
    AnalysisResult,
)
from .parsers import Dialect, detect_dialect, extract_fields, AccumulatorFactory
from .heuristics import normalize_protocol, finalize_packet
from .metrics import StatsAggregator
from .metrics_builder import MetricsBuilder
from .progress import ProgressReporter
from .session import SessionRegistry, AnalysisSession, SessionStatus
from .utils import packets_to_dataframe, export_to_csv
from .exceptions import WiretextError, CaptureReadError, AnalysisError, SessionNotFoundError


__all__ = [
    "analyze_lines",
    "analyze_text",
    "analyze_file",
    "read_capture_text",
    "read_capture_lines",
    "decode_capture_bytes",
    "OpenPacket",
    "PacketRecord",
    "Snippet",
    "ProtocolStat",
    "TalkerStat",
    "ConversationStat",
    "TimelinePoint",
    "AnalysisResult",
    "Dialect",
    "detect_dialect",
    "extract_fields",
    "AccumulatorFactory",
    "normalize_protocol",
    "finalize_packet",
    "StatsAggregator",
    "MetricsBuilder",
    "ProgressReporter",
    "SessionRegistry",
    "AnalysisSession",
    "SessionStatus",
    "packets_to_dataframe",
    "export_to_csv",
    "WiretextError",
    "CaptureReadError",
    "AnalysisError",
    "SessionNotFoundError",
]
