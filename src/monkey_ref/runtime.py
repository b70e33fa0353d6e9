from __future__ import annotations

import importlib
import logging
from typing import List, Optional

from lark import Token

from .types import (
    NULL, UNIT, TRUE, FALSE, native_bool,
    MonkeyNull, MonkeyUnit, MonkeyBoolean, MonkeyInteger, MonkeyString,
    MonkeyArray, MonkeyFunction, MonkeyBuiltin, ReturnSignal,
    MonkeyValue, EvalResult, BuiltinFn, Builtins,
    Environment, Settings, ArityPolicy, OutputSink,
    EvaluationError, ErrorKind,
    is_monkey_value,
)

_log = logging.getLogger(__name__)

_BUILTINS_INITIALIZED = False

def init_builtins() -> None:
    """Load the builtin module (idempotent) so register_builtin hooks run."""
    global _BUILTINS_INITIALIZED

    if _BUILTINS_INITIALIZED:
        return

    importlib.import_module("monkey_ref.stdlib")
    _BUILTINS_INITIALIZED = True

def register_builtin(name: str):
    def dec(fn: BuiltinFn):
        Builtins.functions[name] = MonkeyBuiltin(name=name, fn=fn)
        _log.debug("registered builtin %s", name)
        return fn

    return dec

def lookup_builtin(name: str) -> Optional[MonkeyBuiltin]:
    init_builtins()

    return Builtins.functions.get(name)

def _ensure_monkey_value(value: object, origin: str) -> MonkeyValue:
    if is_monkey_value(value):
        return value

    raise AssertionError(f"{origin} produced a non-Monkey value: {type(value).__name__}")

def call_value(callee: MonkeyFunction | MonkeyBuiltin, args: List[MonkeyValue], token: Token, caller_env: Environment) -> MonkeyValue:
    if isinstance(callee, MonkeyBuiltin):
        return call_builtin(callee, args, token, caller_env.settings)

    return call_function(callee, args, token)

def call_builtin(builtin: MonkeyBuiltin, args: List[MonkeyValue], token: Token, settings: Settings) -> MonkeyValue:
    # builtins see session settings only, never a scope they could bind into
    result = builtin.fn(token, args, settings)

    return _ensure_monkey_value(result, f"builtin {builtin.name}")

def call_function(fn: MonkeyFunction, args: List[MonkeyValue], token: Token) -> MonkeyValue:
    """
    Call semantics:
    - the callee scope is a child of the closure scope, not the caller's.
    - parameters bind positionally; a count mismatch follows the session
      ArityPolicy (STRICT fails, LENIENT pads with null and drops extras).
    - a ReturnSignal from the body is unwrapped here.
    """
    from .evaluator import eval_node  # local import to avoid cycle

    callee_env = Environment(parent=fn.env)
    params = fn.parameters
    policy = callee_env.settings.arity_policy

    _log.debug("calling fn/%d with %d arg(s) under %s", len(params), len(args), policy.value)

    if len(args) != len(params) and policy is ArityPolicy.STRICT:
        raise EvaluationError(
            ErrorKind.ARITY,
            token,
            f"Function expects {len(params)} argument(s), got {len(args)}",
        )

    for idx, name in enumerate(params):
        callee_env.set(name, args[idx] if idx < len(args) else NULL)

    result = eval_node(fn.body, callee_env)

    if isinstance(result, ReturnSignal):
        return result.value

    return result
