from .protocol_inference import (
    normalize_protocol,
    resolve_protocol,
    synthesize_info,
    finalize_packet,
)

__all__ = [
    "normalize_protocol",
    "resolve_protocol",
    "synthesize_info",
    "finalize_packet",
]
