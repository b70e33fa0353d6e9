from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Dict, List, Optional, Tuple
from typing_extensions import TypeAlias, TypeGuard

from lark import Token

from .tree import Block
from .utils import arity_policy_name

# ---------- Value Model ----------

class MonkeyNull:
    """The shared `null` value. Constructing it again yields the same object."""
    type_name: ClassVar[str] = "Null"
    _instance: ClassVar[Optional['MonkeyNull']] = None

    def __new__(cls) -> 'MonkeyNull':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def inspect(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return "null"

class MonkeyUnit:
    """The shared void value, distinct from null."""
    type_name: ClassVar[str] = "Unit"
    _instance: ClassVar[Optional['MonkeyUnit']] = None

    def __new__(cls) -> 'MonkeyUnit':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def inspect(self) -> str:
        return "unit"

    def __repr__(self) -> str:
        return "unit"

class MonkeyBoolean:
    """Interned booleans: there is exactly one `true` and one `false`."""
    type_name: ClassVar[str] = "Boolean"
    _instances: ClassVar[Dict[bool, 'MonkeyBoolean']] = {}
    value: bool

    def __new__(cls, value: bool) -> 'MonkeyBoolean':
        flag = bool(value)
        inst = cls._instances.get(flag)

        if inst is None:
            inst = super().__new__(cls)
            inst.value = flag
            cls._instances[flag] = inst

        return inst

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return self.inspect()

@dataclass(frozen=True)
class MonkeyInteger:
    type_name: ClassVar[str] = "Integer"
    value: int

    def inspect(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return self.inspect()

@dataclass(frozen=True)
class MonkeyString:
    type_name: ClassVar[str] = "String"
    value: str

    def inspect(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f'"{self.value}"'

@dataclass(frozen=True)
class MonkeyArray:
    type_name: ClassVar[str] = "Array"
    elements: Tuple['MonkeyValue', ...]

    def inspect(self) -> str:
        return "[" + ", ".join(x.inspect() for x in self.elements) + "]"

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(x) for x in self.elements) + "]"

@dataclass(eq=False)
class MonkeyFunction:
    type_name: ClassVar[str] = "Function"
    parameters: Tuple[str, ...]
    body: Block
    env: 'Environment'  # closure scope, shared not copied

    def inspect(self) -> str:
        return f"fn({', '.join(self.parameters)}) {{ ... }}"

    def __repr__(self) -> str:
        return self.inspect()

BuiltinFn = Callable[[Token, List['MonkeyValue'], 'Settings'], 'MonkeyValue']

@dataclass(frozen=True, eq=False)
class MonkeyBuiltin:
    type_name: ClassVar[str] = "Builtin"
    name: str
    fn: BuiltinFn

    def inspect(self) -> str:
        return f"builtin {self.name}"

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"

@dataclass(frozen=True)
class ReturnSignal:
    """Marks a statement sequence that must stop and hand `value` to the
    nearest function call (or the program). Never a language value."""
    value: 'MonkeyValue'

NULL = MonkeyNull()
UNIT = MonkeyUnit()
TRUE = MonkeyBoolean(True)
FALSE = MonkeyBoolean(False)

def native_bool(flag: bool) -> MonkeyBoolean:
    return TRUE if flag else FALSE

MonkeyValue: TypeAlias = (
    MonkeyNull
    | MonkeyUnit
    | MonkeyBoolean
    | MonkeyInteger
    | MonkeyString
    | MonkeyArray
    | MonkeyFunction
    | MonkeyBuiltin
)

EvalResult: TypeAlias = MonkeyValue | ReturnSignal

_MONKEY_VALUE_TYPES: Tuple[type, ...] = (
    MonkeyNull,
    MonkeyUnit,
    MonkeyBoolean,
    MonkeyInteger,
    MonkeyString,
    MonkeyArray,
    MonkeyFunction,
    MonkeyBuiltin,
)

def is_monkey_value(value: object) -> TypeGuard[MonkeyValue]:
    return isinstance(value, _MONKEY_VALUE_TYPES)

# ---------- Session settings ----------

class ArityPolicy(enum.Enum):
    """What a user function call does when the argument count is wrong."""
    STRICT = "strict"    # fail with an arity error
    LENIENT = "lenient"  # pad missing parameters with null, drop extras

    @classmethod
    def from_env(cls) -> 'ArityPolicy':
        name = arity_policy_name()

        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"MONKEY_ARITY_POLICY must be 'strict' or 'lenient', got {name!r}") from None

OutputSink = Callable[[str], None]

def _write_stdout(text: str) -> None:
    sys.stdout.write(text)

@dataclass
class Settings:
    arity_policy: ArityPolicy = field(default_factory=ArityPolicy.from_env)
    output: OutputSink = _write_stdout

# ---------- Environment ----------

class Environment:
    """One lexical scope. Children point at their parent, never the reverse."""

    def __init__(self, parent: Optional['Environment']=None, settings: Optional[Settings]=None):
        self.parent = parent
        self.vars: Dict[str, MonkeyValue] = {}
        self.settings: Settings

        if settings is not None:
            self.settings = settings
        elif parent is not None:
            self.settings = parent.settings
        else:
            self.settings = Settings()

    def get(self, name: str) -> Optional[MonkeyValue]:
        scope: Optional[Environment] = self

        while scope is not None:
            if name in scope.vars:
                return scope.vars[name]
            scope = scope.parent

        return None

    def set(self, name: str, val: MonkeyValue) -> MonkeyValue:
        self.vars[name] = val
        return val

    def child(self) -> 'Environment':
        return Environment(parent=self)

# ---------- Errors ----------

class ErrorKind(enum.Enum):
    UNDECLARED = "undeclared-identifier"
    TYPE_MISMATCH = "type-mismatch"
    UNSUPPORTED_INDEX = "unsupported-index-target"
    INDEX_RANGE = "out-of-range-index"
    DIVISION_BY_ZERO = "division-by-zero"
    NULL_OPERAND = "null-operand"
    UNIT_BINDING = "unit-binding"
    NOT_CALLABLE = "not-callable"
    ARITY = "arity-mismatch"

class EvaluationError(Exception):
    """The single user-facing failure raised while evaluating a program."""
    kind: ErrorKind
    token: Optional[Token]

    def __init__(self, kind: ErrorKind, token: Optional[Token], message: str):
        super().__init__(message)
        self.kind = kind
        self.token = token

    @property
    def message(self) -> str:
        return super().__str__()

    @property
    def line(self) -> Optional[int]:
        return getattr(self.token, "line", None)

    @property
    def column(self) -> Optional[int]:
        return getattr(self.token, "column", None)

    def __str__(self) -> str:
        msg = self.message
        line = self.line
        col = self.column

        if line is None:
            return msg

        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

# ---------- Builtin registry ----------

class Builtins:
    functions: Dict[str, MonkeyBuiltin] = {}
