from .config import settings
from .constants import *  # noqa: F401,F403
from .models import (
    OpenPacket,
    PacketRecord,
    Snippet,
    ProtocolStat,
    TalkerStat,
    ConversationStat,
    TimelinePoint,
    AnalysisResult,
)
from ..exceptions import (
    WiretextError,
    CaptureReadError,
    AnalysisError,
    SessionNotFoundError,
)

__all__ = [
    "settings",
    "OpenPacket",
    "PacketRecord",
    "Snippet",
    "ProtocolStat",
    "TalkerStat",
    "ConversationStat",
    "TimelinePoint",
    "AnalysisResult",
    "WiretextError",
    "CaptureReadError",
    "AnalysisError",
    "SessionNotFoundError",
] + [name for name in globals().keys() if name.isupper()]
