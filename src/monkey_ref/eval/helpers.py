from __future__ import annotations

from typing_extensions import TypeGuard

from ..runtime import EvalResult, MonkeyBoolean, MonkeyNull, MonkeyUnit, MonkeyValue, ReturnSignal

def is_truthy(val: MonkeyValue) -> bool:
    match val:
        case MonkeyBoolean(value=b):
            return b
        case MonkeyNull() | MonkeyUnit():
            return False
        case _:
            return True

def is_signal(val: EvalResult) -> TypeGuard[ReturnSignal]:
    """True when an operand produced a pending `return` that must keep unwinding."""
    return isinstance(val, ReturnSignal)
