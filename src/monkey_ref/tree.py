"""AST node variants consumed by the evaluator.

The tree is produced by an external parser. Each node keeps the lark Token it
was built from; the evaluator reads it only to position error messages and
never mutates a node.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
from typing_extensions import TypeAlias

from lark import Token


def make_token(type_: str, value: str, line: int = 1, column: int = 1) -> Token:
    """Build a positioned Token the way lark's lexer would."""
    return Token(type_, value, line=line, column=column)


# ---------- Statements ----------

@dataclass(frozen=True)
class Program:
    token: Token
    statements: Tuple['Statement', ...]

@dataclass(frozen=True)
class Block:
    token: Token
    statements: Tuple['Statement', ...]

@dataclass(frozen=True)
class ExpressionStatement:
    token: Token
    expression: 'Expression'

@dataclass(frozen=True)
class LetStatement:
    token: Token
    name: 'Identifier'
    value: 'Expression'

@dataclass(frozen=True)
class ReturnStatement:
    token: Token
    value: 'Expression'

# ---------- Expressions ----------

@dataclass(frozen=True)
class Identifier:
    token: Token
    value: str

@dataclass(frozen=True)
class IntegerLiteral:
    token: Token
    value: int

@dataclass(frozen=True)
class BooleanLiteral:
    token: Token
    value: bool

@dataclass(frozen=True)
class StringLiteral:
    token: Token
    value: str

@dataclass(frozen=True)
class NullLiteral:
    token: Token

@dataclass(frozen=True)
class UnitExpression:
    """Empty parentheses `()`."""
    token: Token

@dataclass(frozen=True)
class ArrayLiteral:
    token: Token
    elements: Tuple['Expression', ...]

@dataclass(frozen=True)
class IndexExpression:
    token: Token
    left: 'Expression'
    index: 'Expression'

@dataclass(frozen=True)
class PrefixExpression:
    token: Token
    operator: str
    right: 'Expression'

@dataclass(frozen=True)
class InfixExpression:
    token: Token
    left: 'Expression'
    operator: str
    right: 'Expression'

@dataclass(frozen=True)
class IfExpression:
    token: Token
    condition: 'Expression'
    consequence: Block
    alternative: Optional[Block] = None

@dataclass(frozen=True)
class FunctionLiteral:
    token: Token
    parameters: Tuple[Identifier, ...]
    body: Block

@dataclass(frozen=True)
class CallExpression:
    token: Token
    function: 'Expression'
    arguments: Tuple['Expression', ...]


Statement: TypeAlias = (
    ExpressionStatement
    | LetStatement
    | ReturnStatement
)

Expression: TypeAlias = (
    Identifier
    | IntegerLiteral
    | BooleanLiteral
    | StringLiteral
    | NullLiteral
    | UnitExpression
    | ArrayLiteral
    | IndexExpression
    | PrefixExpression
    | InfixExpression
    | IfExpression
    | FunctionLiteral
    | CallExpression
)

Node: TypeAlias = Program | Block | Statement | Expression


def node_position(node: Node) -> Tuple[Optional[int], Optional[int]]:
    tok = node.token
    return getattr(tok, "line", None), getattr(tok, "column", None)
