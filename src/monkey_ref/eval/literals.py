from __future__ import annotations

from typing import Callable, List, Sequence

from ..runtime import Environment, EvalResult, MonkeyArray, MonkeyValue, ReturnSignal
from ..tree import ArrayLiteral, Expression, Node
from .helpers import is_signal

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_expressions(nodes: Sequence[Expression], env: Environment, eval_func: EvalFunc) -> List[MonkeyValue] | ReturnSignal:
    """Evaluate left to right; a pending return short-circuits the rest."""
    values: List[MonkeyValue] = []

    for node in nodes:
        val = eval_func(node, env)

        if is_signal(val):
            return val
        values.append(val)

    return values

def eval_array_literal(node: ArrayLiteral, env: Environment, eval_func: EvalFunc) -> EvalResult:
    elements = eval_expressions(node.elements, env, eval_func)

    if isinstance(elements, ReturnSignal):
        return elements

    return MonkeyArray(tuple(elements))
