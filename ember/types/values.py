"""
Runtime values for the Ember evaluator.

The value model is a closed set of variants. Scalars are frozen dataclasses,
arrays hold an immutable tuple and dictionaries are keyed by plain `str`, so
dictionary lookup, merge and equality always compare keys by content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from ember.types.base import Value
from ember.types.function import Function
from ember.types.nil import Nil, NilType

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    n &= (1 << 64) - 1
    return n - (1 << 64) if n > INT64_MAX else n


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


@dataclass(frozen=True)
class Integer(Value):
    type_name = "Integer"
    value: int

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    type_name = "Float"
    value: float

    def inspect(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class String(Value):
    type_name = "String"
    value: str

    def inspect(self) -> str:
        return _quote(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Atom(Value):
    type_name = "Atom"
    value: str

    def inspect(self) -> str:
        return f":{self.value}"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Boolean(Value):
    type_name = "Boolean"
    value: bool

    def inspect(self) -> str:
        return "true" if self.value else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)


@dataclass(frozen=True)
class Array(Value):
    type_name = "Array"
    elements: Tuple[Value, ...] = ()

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True)
class Dictionary(Value):
    type_name = "Dictionary"
    pairs: Dict[str, Value] = field(default_factory=dict)

    def inspect(self) -> str:
        if not self.pairs:
            return "[:]"
        items = (f"{_quote(k)}: {self.pairs[k].inspect()}" for k in sorted(self.pairs))
        return "[" + ", ".join(items) + "]"

    def __len__(self) -> int:
        return len(self.pairs)

    # dict payloads are unhashable; dictionaries are never used as keys
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Placeholder(Value):
    """The `_` wildcard of array-shaped switch cases."""
    type_name = "Placeholder"

    def inspect(self) -> str:
        return "_"


PLACEHOLDER = Placeholder()


# -------------------------------
# Control signals
# -------------------------------

@dataclass(frozen=True)
class ReturnSignal(Value):
    """Carries a returned value up to the enclosing function call."""
    type_name = "Return"
    value: Value = Nil

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(frozen=True)
class BreakSignal(Value):
    type_name = "Break"

    def inspect(self) -> str:
        return "break"


@dataclass(frozen=True)
class ContinueSignal(Value):
    type_name = "Continue"

    def inspect(self) -> str:
        return "continue"


BREAK = BreakSignal()
CONTINUE = ContinueSignal()

CONTROL_SIGNALS = (ReturnSignal, BreakSignal, ContinueSignal)


# -------------------------------
# Helpers
# -------------------------------

def native_bool(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def make_array(items: Iterable[Value]) -> Array:
    return Array(tuple(items))


def is_signal(value: Value) -> bool:
    return isinstance(value, CONTROL_SIGNALS)


def is_truthy(value: Value) -> bool:
    """Ember truthiness, used by `if`, `!` and switch/loop control."""
    if isinstance(value, Boolean):
        return value.value
    if isinstance(value, NilType):
        return False
    if isinstance(value, Atom):
        # atoms are always truthy, even when empty
        return True
    if isinstance(value, String):
        return value.value != ""
    if isinstance(value, (Integer, Float)):
        return value.value != 0
    if isinstance(value, Array):
        return len(value.elements) > 0
    if isinstance(value, Dictionary):
        return len(value.pairs) > 0
    return False


def same_value(a: Value, b: Value) -> bool:
    """Content equality: same type and same canonical rendering."""
    return a.type_name == b.type_name and a.inspect() == b.inspect()


def string_to_array(text: str) -> Array:
    """Split a string into an Array of one-character Strings."""
    return Array(tuple(String(ch) for ch in text))


__all__ = [
    "Value", "Integer", "Float", "String", "Atom", "Boolean", "Array",
    "Dictionary", "Function", "Nil", "NilType", "Placeholder",
    "ReturnSignal", "BreakSignal", "ContinueSignal",
    "TRUE", "FALSE", "PLACEHOLDER", "BREAK", "CONTINUE", "CONTROL_SIGNALS",
    "INT64_MIN", "INT64_MAX", "wrap_int64", "native_bool", "make_array",
    "is_signal", "is_truthy", "same_value", "string_to_array",
]
