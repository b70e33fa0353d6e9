from __future__ import annotations

from typing import Callable

from ..runtime import (
    UNIT,
    Environment,
    ErrorKind,
    EvalResult,
    EvaluationError,
    MonkeyValue,
    lookup_builtin,
)
from ..tree import Identifier, LetStatement, Node
from .helpers import is_signal

EvalFn = Callable[[Node, Environment], EvalResult]

def eval_let(node: LetStatement, env: Environment, eval_func: EvalFn) -> EvalResult:
    value = eval_func(node.value, env)

    if is_signal(value):
        return value

    if value is UNIT:
        raise EvaluationError(ErrorKind.UNIT_BINDING, node.token, "Cannot bind unit (void) to a variable")

    # always the current scope, shadowing any outer binding
    return env.set(node.name.value, value)

def eval_identifier(node: Identifier, env: Environment) -> MonkeyValue:
    value = env.get(node.value)
    if value is not None:
        return value

    builtin = lookup_builtin(node.value)
    if builtin is not None:
        return builtin

    raise EvaluationError(ErrorKind.UNDECLARED, node.token, f"Variable {node.value} is not declared")
