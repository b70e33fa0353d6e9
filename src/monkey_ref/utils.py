from __future__ import annotations

import os
from typing import Optional

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_UINT64_SPAN = 1 << 64


def wrap_int64(value: int) -> int:
    """Reduce an unbounded int to signed 64-bit two's complement."""
    value &= _UINT64_SPAN - 1

    if value > INT64_MAX:
        return value - _UINT64_SPAN

    return value


def truncating_div(lhs: int, rhs: int) -> int:
    """Integer quotient rounded toward zero (Python's // floors)."""
    quotient = abs(lhs) // abs(rhs)

    if (lhs < 0) != (rhs < 0):
        return -quotient

    return quotient


def env_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a MONKEY_* setting, normalised to lower case."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    return raw.strip().lower()


def arity_policy_name() -> str:
    return env_setting("MONKEY_ARITY_POLICY", "strict") or "strict"
