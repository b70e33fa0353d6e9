from __future__ import annotations

import pytest

from tests.support.harness import (
    ErrorKind,
    array,
    block,
    call,
    fn,
    ident,
    if_,
    index,
    infix,
    lenient_env,
    let,
    num,
    program,
    ret,
    run_runtime_case,
    string,
)

FIB = let(
    "fib",
    fn(
        ["n"],
        if_(infix(ident("n"), "<", num(2)), block(ret(ident("n")))),
        infix(
            call(ident("fib"), infix(ident("n"), "-", num(1))),
            "+",
            call(ident("fib"), infix(ident("n"), "-", num(2))),
        ),
    ),
)

NEW_ADDER = let("newAdder", fn(["x"], fn(["y"], infix(ident("x"), "+", ident("y")))))

SCENARIOS = [
    pytest.param(
        program(let("identity", fn(["x"], ident("x"))), call(ident("identity"), num(5))),
        ("integer", 5),
        None,
        id="identity",
    ),
    pytest.param(
        program(call(fn(["x"], ret(infix(ident("x"), "*", num(2)))), num(3))),
        ("integer", 6),
        None,
        id="immediate-call-with-return",
    ),
    pytest.param(
        program(call(fn(["a", "b"], infix(ident("a"), "-", ident("b"))), num(10), num(4))),
        ("integer", 6),
        None,
        id="positional-binding",
    ),
    pytest.param(
        program(call(fn([]))),
        ("null", None),
        None,
        id="empty-body-yields-null",
    ),
    pytest.param(
        program(fn(["a", "b"], ident("a"))),
        ("function", "fn(a, b) { ... }"),
        None,
        id="function-inspect",
    ),
    pytest.param(
        program(
            NEW_ADDER,
            let("addTwo", call(ident("newAdder"), num(2))),
            call(ident("addTwo"), num(3)),
        ),
        ("integer", 5),
        None,
        id="closure-keeps-outer-param",
    ),
    pytest.param(
        program(
            NEW_ADDER,
            let("addOne", call(ident("newAdder"), num(1))),
            let("addTen", call(ident("newAdder"), num(10))),
            array(call(ident("addOne"), num(1)), call(ident("addTen"), num(1))),
        ),
        ("array", [2, 11]),
        None,
        id="closures-have-separate-scopes",
    ),
    pytest.param(
        program(
            let("makeGetter", fn(["v"], fn([], ident("v")))),
            let("getters", array(call(ident("makeGetter"), num(1)), call(ident("makeGetter"), num(2)))),
            infix(call(index(ident("getters"), num(0))), "+", call(index(ident("getters"), num(1)))),
        ),
        ("integer", 3),
        None,
        id="closures-captured-per-call",
    ),
    pytest.param(
        program(FIB, call(ident("fib"), num(10))),
        ("integer", 55),
        None,
        id="recursive-fib",
    ),
    pytest.param(
        program(
            let("apply", fn(["f", "x"], call(ident("f"), ident("x")))),
            call(ident("apply"), fn(["y"], infix(ident("y"), "+", num(1))), num(41)),
        ),
        ("integer", 42),
        None,
        id="higher-order",
    ),
    pytest.param(
        program(
            let("x", num(10)),
            let("f", fn([], ident("x"))),
            let("g", fn(["x"], call(ident("f")))),
            call(ident("g"), num(99)),
        ),
        ("integer", 10),
        None,
        id="lexical-not-dynamic-scope",
    ),
    pytest.param(
        program(let("l", ident("len")), call(ident("l"), string("abc"))),
        ("integer", 3),
        None,
        id="builtin-as-value",
    ),
    pytest.param(
        program(call(index(array(fn(["x"], infix(ident("x"), "*", num(2)))), num(0)), num(4))),
        ("integer", 8),
        None,
        id="call-indexed-function",
    ),
    pytest.param(
        program(call(fn(["x"], ident("x")))),
        None,
        ErrorKind.ARITY,
        id="strict-too-few-args",
    ),
    pytest.param(
        program(call(fn(["x"], ident("x")), num(1), num(2))),
        None,
        ErrorKind.ARITY,
        id="strict-too-many-args",
    ),
    pytest.param(
        program(call(num(5), num(1))),
        None,
        ErrorKind.NOT_CALLABLE,
        id="call-integer-error",
    ),
    pytest.param(
        program(call(string("f"))),
        None,
        ErrorKind.NOT_CALLABLE,
        id="call-string-error",
    ),
    pytest.param(
        program(call(ident("missing"))),
        None,
        ErrorKind.UNDECLARED,
        id="call-undeclared-error",
    ),
]

LENIENT_SCENARIOS = [
    pytest.param(
        program(call(fn(["a", "b"], ident("b")), num(1))),
        ("null", None),
        None,
        id="lenient-missing-param-is-null",
    ),
    pytest.param(
        program(call(fn(["a"], ident("a")), num(1), num(2))),
        ("integer", 1),
        None,
        id="lenient-extra-args-dropped",
    ),
    pytest.param(
        program(call(fn(["a"], ident("a")), num(1), infix(num(1), "/", num(0)))),
        None,
        ErrorKind.DIVISION_BY_ZERO,
        id="lenient-extra-args-still-evaluated",
    ),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_functions(source, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


@pytest.mark.parametrize("source, expectation, expected_exc", LENIENT_SCENARIOS)
def test_functions_lenient_arity(source, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc, env=lenient_env())
