from __future__ import annotations

from typing import Callable, Sequence

from ..runtime import NULL, Environment, EvalResult, MonkeyValue, ReturnSignal
from ..tree import Block, Node, Program, Statement

EvalFunc = Callable[[Node, Environment], EvalResult]

def eval_statements(statements: Sequence[Statement], env: Environment, eval_func: EvalFunc, unwrap_return: bool) -> EvalResult:
    """Run statements in order, returning the last value (null when empty).

    The first ReturnSignal stops the sequence. The outermost sequence unwraps
    it; nested blocks hand it up so the enclosing call can unwrap it.
    """
    result: EvalResult = NULL

    for stmt in statements:
        result = eval_func(stmt, env)

        if isinstance(result, ReturnSignal):
            return result.value if unwrap_return else result

    return result

def eval_program(node: Program, env: Environment, eval_func: EvalFunc) -> MonkeyValue:
    result = eval_statements(node.statements, env, eval_func, unwrap_return=True)
    assert not isinstance(result, ReturnSignal)

    return result

def eval_block(node: Block, env: Environment, eval_func: EvalFunc) -> EvalResult:
    return eval_statements(node.statements, env, eval_func, unwrap_return=False)
