from __future__ import annotations

import logging
from typing import Optional
from typing_extensions import assert_never

from .runtime import (
    NULL,
    UNIT,
    Environment,
    EvalResult,
    EvaluationError,
    MonkeyInteger,
    MonkeyString,
    MonkeyValue,
    ReturnSignal,
    Settings,
    init_builtins,
    native_bool,
)
from .tree import (
    ArrayLiteral,
    Block,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Node,
    NullLiteral,
    PrefixExpression,
    Program,
    ReturnStatement,
    StringLiteral,
    UnitExpression,
    node_position,
)

from .eval.blocks import eval_block, eval_program
from .eval.chains import eval_index
from .eval.control import eval_if, eval_return
from .eval.expr import eval_infix, eval_prefix
from .eval.fn import eval_call, eval_function_literal
from .eval.let import eval_identifier, eval_let
from .eval.literals import eval_array_literal

_log = logging.getLogger(__name__)
logging.getLogger("monkey_ref").addHandler(logging.NullHandler())

# ---------------- Public API ----------------

def new_environment(settings: Optional[Settings]=None) -> Environment:
    """Fresh global scope for one evaluation session."""
    init_builtins()
    env = Environment(settings=settings)
    _log.debug("new session, arity policy %s", env.settings.arity_policy.value)

    return env

def eval_expr(ast: Node, env: Optional[Environment]=None) -> MonkeyValue:
    """Evaluate one top-level unit. A pending return is unwrapped here."""
    if env is None:
        env = new_environment()
    else:
        init_builtins()

    try:
        result = eval_node(ast, env)
    except EvaluationError as exc:
        line, col = node_position(ast)
        _log.debug("evaluation of unit at %s:%s failed: %s", line, col, exc)
        raise

    if isinstance(result, ReturnSignal):
        return result.value

    return result

# ---------------- Core evaluator ----------------

def eval_node(n: Node, env: Environment) -> EvalResult:
    match n:
        case Program():
            return eval_program(n, env, eval_node)
        case Block():
            return eval_block(n, env, eval_node)
        case ExpressionStatement(expression=expr):
            return eval_node(expr, env)
        case LetStatement():
            return eval_let(n, env, eval_node)
        case ReturnStatement():
            return eval_return(n, env, eval_node)
        case IntegerLiteral(value=num):
            return MonkeyInteger(num)
        case BooleanLiteral(value=flag):
            return native_bool(flag)
        case StringLiteral(value=text):
            return MonkeyString(text)
        case NullLiteral():
            return NULL
        case UnitExpression():
            return UNIT
        case Identifier():
            return eval_identifier(n, env)
        case PrefixExpression():
            return eval_prefix(n, env, eval_node)
        case InfixExpression():
            return eval_infix(n, env, eval_node)
        case IfExpression():
            return eval_if(n, env, eval_node)
        case FunctionLiteral():
            return eval_function_literal(n, env)
        case CallExpression():
            return eval_call(n, env, eval_node)
        case ArrayLiteral():
            return eval_array_literal(n, env, eval_node)
        case IndexExpression():
            return eval_index(n, env, eval_node)
        case _:
            assert_never(n)
