from __future__ import annotations

from typing import Callable

from ..runtime import NULL, Environment, EvalResult, ReturnSignal
from ..tree import IfExpression, Node, ReturnStatement
from .helpers import is_signal, is_truthy

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_if(node: IfExpression, env: Environment, eval_func: EvalFunc) -> EvalResult:
    cond_val = eval_func(node.condition, env)

    if is_signal(cond_val):
        return cond_val

    if is_truthy(cond_val):
        return eval_func(node.consequence, env)

    if node.alternative is not None:
        return eval_func(node.alternative, env)

    return NULL

def eval_return(node: ReturnStatement, env: Environment, eval_func: EvalFunc) -> ReturnSignal:
    value = eval_func(node.value, env)

    if is_signal(value):
        return value

    return ReturnSignal(value)
