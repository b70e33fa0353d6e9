from __future__ import annotations

from typing import Callable

from lark import Token

from ..runtime import (
    NULL,
    Environment,
    ErrorKind,
    EvalResult,
    EvaluationError,
    MonkeyInteger,
    MonkeyNull,
    MonkeyString,
    MonkeyValue,
    native_bool,
)
from ..tree import InfixExpression, Node, PrefixExpression
from ..utils import truncating_div, wrap_int64
from .common import ARITHMETIC_OPS, operand_side
from .helpers import is_signal, is_truthy

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_prefix(node: PrefixExpression, env: Environment, eval_func: EvalFunc) -> EvalResult:
    rhs = eval_func(node.right, env)

    if is_signal(rhs):
        return rhs

    return apply_prefix_operator(node.operator, node.token, rhs)

def apply_prefix_operator(op: str, token: Token, rhs: MonkeyValue) -> MonkeyValue:
    match op:
        case '!':
            return native_bool(not is_truthy(rhs))
        case '-':
            match rhs:
                case MonkeyInteger(value=num):
                    return MonkeyInteger(wrap_int64(-num))
                case MonkeyNull():
                    return NULL

            raise EvaluationError(ErrorKind.TYPE_MISMATCH, token, f"Operation - not supported for type {rhs.type_name}")

    raise AssertionError(f"unreachable prefix operator {op!r}")

def eval_infix(node: InfixExpression, env: Environment, eval_func: EvalFunc) -> EvalResult:
    lhs = eval_func(node.left, env)
    if is_signal(lhs):
        return lhs

    rhs = eval_func(node.right, env)
    if is_signal(rhs):
        return rhs

    return apply_binary_operator(node.operator, node.token, lhs, rhs)

def apply_binary_operator(op: str, token: Token, lhs: MonkeyValue, rhs: MonkeyValue) -> MonkeyValue:
    match (lhs, rhs):
        case (MonkeyInteger(value=a), MonkeyInteger(value=b)):
            return _integer_infix(op, token, a, b)
        case (MonkeyString(value=a), MonkeyString(value=b)):
            return _string_infix(op, token, a, b)

    lhs_null = lhs is NULL
    rhs_null = rhs is NULL

    # null propagates through arithmetic, ahead of mixed concatenation
    if (lhs_null or rhs_null) and op in ARITHMETIC_OPS:
        return NULL

    if op == '+' and (isinstance(lhs, MonkeyString) or isinstance(rhs, MonkeyString)):
        return MonkeyString(lhs.inspect() + rhs.inspect())

    match op:
        case '==':
            return native_bool(lhs is rhs)
        case '!=':
            return native_bool(lhs is not rhs)

    if lhs_null or rhs_null:
        raise EvaluationError(
            ErrorKind.NULL_OPERAND,
            token,
            f"Null value error: {operand_side(lhs_null, rhs_null)} null",
        )

    raise EvaluationError(
        ErrorKind.TYPE_MISMATCH,
        token,
        f"Operation {op} not supported for types {lhs.type_name} and {rhs.type_name}",
    )

def _integer_infix(op: str, token: Token, a: int, b: int) -> MonkeyValue:
    match op:
        case '+':
            return MonkeyInteger(wrap_int64(a + b))
        case '-':
            return MonkeyInteger(wrap_int64(a - b))
        case '*':
            return MonkeyInteger(wrap_int64(a * b))
        case '/':
            if b == 0:
                raise EvaluationError(ErrorKind.DIVISION_BY_ZERO, token, "Cannot divide by 0")
            return MonkeyInteger(wrap_int64(truncating_div(a, b)))
        case '==':
            return native_bool(a == b)
        case '!=':
            return native_bool(a != b)
        case '<':
            return native_bool(a < b)
        case '>':
            return native_bool(a > b)

    raise AssertionError(f"unreachable integer operator {op!r}")

def _string_infix(op: str, token: Token, a: str, b: str) -> MonkeyValue:
    match op:
        case '+':
            return MonkeyString(a + b)
        case '==':
            return native_bool(a == b)
        case '!=':
            return native_bool(a != b)
        case '<':
            return native_bool(a < b)
        case '>':
            return native_bool(a > b)

    raise EvaluationError(ErrorKind.TYPE_MISMATCH, token, f"Operation {op} not supported between Strings")
