from __future__ import annotations

from typing import List

from lark import Token

from ..runtime import ErrorKind, EvaluationError, MonkeyArray, MonkeyValue

ARITHMETIC_OPS = frozenset({'+', '-', '*', '/'})

def operand_side(lhs_is_null: bool, rhs_is_null: bool) -> str:
    if lhs_is_null and rhs_is_null:
        return "both values are"

    return "left value is" if lhs_is_null else "right value is"

def expect_arity(name: str, token: Token, args: List[MonkeyValue], expected: int) -> None:
    if len(args) != expected:
        raise EvaluationError(ErrorKind.ARITY, token, f"{name} expects {expected} argument(s), got {len(args)}")

def require_array(name: str, token: Token, value: MonkeyValue) -> MonkeyArray:
    if isinstance(value, MonkeyArray):
        return value

    raise EvaluationError(ErrorKind.TYPE_MISMATCH, token, f"Argument to {name} must be Array, got {value.type_name}")
