"""Builtin functions (len, puts, etc.) registered via monkey_ref.runtime."""

from __future__ import annotations

from typing import List

from lark import Token

from .runtime import (
    NULL,
    UNIT,
    ErrorKind,
    EvaluationError,
    MonkeyArray,
    MonkeyInteger,
    MonkeyString,
    MonkeyValue,
    Settings,
    register_builtin,
)
from .eval.common import expect_arity, require_array

@register_builtin("len")
def std_len(token: Token, args: List[MonkeyValue], _settings: Settings) -> MonkeyInteger:
    expect_arity("len", token, args, 1)
    arg = args[0]

    match arg:
        case MonkeyString(value=text):
            return MonkeyInteger(len(text))
        case MonkeyArray(elements=items):
            return MonkeyInteger(len(items))

    raise EvaluationError(ErrorKind.TYPE_MISMATCH, token, f"Argument to len not supported, got {arg.type_name}")

@register_builtin("first")
def std_first(token: Token, args: List[MonkeyValue], _settings: Settings) -> MonkeyValue:
    expect_arity("first", token, args, 1)
    items = require_array("first", token, args[0]).elements

    return items[0] if items else NULL

@register_builtin("last")
def std_last(token: Token, args: List[MonkeyValue], _settings: Settings) -> MonkeyValue:
    expect_arity("last", token, args, 1)
    items = require_array("last", token, args[0]).elements

    return items[-1] if items else NULL

@register_builtin("rest")
def std_rest(token: Token, args: List[MonkeyValue], _settings: Settings) -> MonkeyValue:
    expect_arity("rest", token, args, 1)
    items = require_array("rest", token, args[0]).elements

    if not items:
        return NULL

    return MonkeyArray(items[1:])

@register_builtin("push")
def std_push(token: Token, args: List[MonkeyValue], _settings: Settings) -> MonkeyArray:
    expect_arity("push", token, args, 2)
    items = require_array("push", token, args[0]).elements

    # arrays never grow in place
    return MonkeyArray(items + (args[1],))

@register_builtin("puts")
def std_puts(_token: Token, args: List[MonkeyValue], settings: Settings) -> MonkeyValue:
    for arg in args:
        settings.output(arg.inspect() + "\n")

    return UNIT
