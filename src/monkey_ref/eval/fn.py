from __future__ import annotations

from typing import Callable

from ..runtime import (
    Environment,
    ErrorKind,
    EvalResult,
    EvaluationError,
    MonkeyBuiltin,
    MonkeyFunction,
    ReturnSignal,
    call_value,
)
from ..tree import CallExpression, FunctionLiteral, Node
from .helpers import is_signal
from .literals import eval_expressions

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_function_literal(node: FunctionLiteral, env: Environment) -> MonkeyFunction:
    params = tuple(p.value for p in node.parameters)

    # the scope is captured by reference: later lets in it stay visible
    return MonkeyFunction(parameters=params, body=node.body, env=env)

def eval_call(node: CallExpression, env: Environment, eval_func: EvalFunc) -> EvalResult:
    callee = eval_func(node.function, env)

    if is_signal(callee):
        return callee

    if not isinstance(callee, (MonkeyFunction, MonkeyBuiltin)):
        raise EvaluationError(ErrorKind.NOT_CALLABLE, node.token, f"Cannot call non Function object {callee.type_name}")

    args = eval_expressions(node.arguments, env, eval_func)

    if isinstance(args, ReturnSignal):
        return args

    return call_value(callee, args, node.token, env)
