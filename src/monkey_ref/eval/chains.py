from __future__ import annotations

from typing import Callable

from ..runtime import (
    Environment,
    ErrorKind,
    EvalResult,
    EvaluationError,
    MonkeyArray,
    MonkeyInteger,
    MonkeyValue,
)
from ..tree import IndexExpression, Node
from .helpers import is_signal

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_index(node: IndexExpression, env: Environment, eval_func: EvalFunc) -> EvalResult:
    base = eval_func(node.left, env)

    if is_signal(base):
        return base

    if not isinstance(base, MonkeyArray):
        raise EvaluationError(ErrorKind.UNSUPPORTED_INDEX, node.left.token, f"Index operator not supported for {base.type_name}")

    idx = eval_func(node.index, env)

    if is_signal(idx):
        return idx

    return index_array(base, idx, node)

def index_array(base: MonkeyArray, idx: MonkeyValue, node: IndexExpression) -> MonkeyValue:
    if not isinstance(idx, MonkeyInteger):
        raise EvaluationError(
            ErrorKind.TYPE_MISMATCH,
            node.index.token,
            "Index to an array must be an Expression that yields an Integer",
        )

    size = len(base.elements)

    # out of range never yields null
    if not 0 <= idx.value < size:
        raise EvaluationError(
            ErrorKind.INDEX_RANGE,
            node.index.token,
            f"Index {idx.value} outside of range [0, {size})",
        )

    return base.elements[idx.value]
