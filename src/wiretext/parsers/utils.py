from __future__ import annotations

import ipaddress
from typing import Any, Optional


def _safe_int(value: Any) -> Optional[int]:
    """Safely convert a decimal ``value`` that may contain commas to ``int``."""
    try:
        return int(str(value).replace(",", "").strip())
    except (TypeError, ValueError):
        return None


def _safe_float(value: Any) -> Optional[float]:
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return None


def _is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


__all__ = ["_safe_int", "_safe_float", "_is_ip_address"]
