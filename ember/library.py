"""Native standard library for Ember.

Library functions are addressed with the same ``Module.function`` notation
as user modules and take precedence over them. Each function receives the
already evaluated argument values and returns a value, raising an
``EmberError`` subclass when the arguments are wrong.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Iterator, Optional, Sequence, Tuple, Type

from ember.errors import (
    EmberArithmeticError, EmberArityError, EmberIndexError, EmberTypeError,
)
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.values import (
    Array, Atom, Dictionary, Float, Integer, String,
    make_array, native_bool, same_value, wrap_int64,
)

NativeFunction = Callable[..., Value]


class Library:
    """Table of qualified name -> native function."""

    def __init__(self):
        self._functions: Dict[str, NativeFunction] = {}

    def register(self, name: str, fn: NativeFunction) -> None:
        self._functions[name] = fn

    def get(self, name: str) -> Optional[NativeFunction]:
        return self._functions.get(name)

    def names(self) -> Iterator[str]:
        return iter(sorted(self._functions))

    def __contains__(self, name: str) -> bool:
        return name in self._functions


# -------------------------------
# Argument checks
# -------------------------------
def _expect_count(name: str, args: Sequence[Value], count: int) -> None:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise EmberArityError(f"{name} requires exactly {count} {plural}, got {len(args)}")


def _expect_type(name: str, value: Value, types: Tuple[Type[Value], ...]) -> None:
    if not isinstance(value, types):
        expected = " or ".join(t.type_name for t in types)
        raise EmberTypeError(f"{name} expects {expected}, got '{value.type_name}'")


# -------------------------------
# IO
# -------------------------------
def io_puts(*args: Value) -> Value:
    print(" ".join(str(a) for a in args))
    return Nil

def io_write(*args: Value) -> Value:
    print(" ".join(str(a) for a in args), end="")
    return Nil

# -------------------------------
# Types and enumerables
# -------------------------------
def type_of(*args: Value) -> Value:
    _expect_count("Type.of", args, 1)
    return String(args[0].type_name)

def enum_size(*args: Value) -> Value:
    _expect_count("Enum.size", args, 1)
    value = args[0]
    if isinstance(value, Array):
        return Integer(len(value.elements))
    if isinstance(value, Dictionary):
        return Integer(len(value.pairs))
    if isinstance(value, (String, Atom)):
        return Integer(len(value.value))
    raise EmberTypeError(f"Enum.size expects an enumerable, got '{value.type_name}'")

# -------------------------------
# Arrays
# -------------------------------
def array_first(*args: Value) -> Value:
    _expect_count("Array.first", args, 1)
    _expect_type("Array.first", args[0], (Array,))
    if not args[0].elements:
        raise EmberIndexError("Array.first called on an empty Array")
    return args[0].elements[0]

def array_last(*args: Value) -> Value:
    _expect_count("Array.last", args, 1)
    _expect_type("Array.last", args[0], (Array,))
    if not args[0].elements:
        raise EmberIndexError("Array.last called on an empty Array")
    return args[0].elements[-1]

def array_push(*args: Value) -> Value:
    _expect_count("Array.push", args, 2)
    _expect_type("Array.push", args[0], (Array,))
    return Array(args[0].elements + (args[1],))

def array_reverse(*args: Value) -> Value:
    _expect_count("Array.reverse", args, 1)
    _expect_type("Array.reverse", args[0], (Array,))
    return Array(tuple(reversed(args[0].elements)))

def array_contains(*args: Value) -> Value:
    _expect_count("Array.contains", args, 2)
    _expect_type("Array.contains", args[0], (Array,))
    return native_bool(any(same_value(e, args[1]) for e in args[0].elements))

# -------------------------------
# Dictionaries
# -------------------------------
def dict_keys(*args: Value) -> Value:
    _expect_count("Dict.keys", args, 1)
    _expect_type("Dict.keys", args[0], (Dictionary,))
    return make_array(String(k) for k in args[0].pairs)

def dict_values(*args: Value) -> Value:
    _expect_count("Dict.values", args, 1)
    _expect_type("Dict.values", args[0], (Dictionary,))
    return make_array(args[0].pairs.values())

def dict_has(*args: Value) -> Value:
    _expect_count("Dict.has", args, 2)
    _expect_type("Dict.has", args[0], (Dictionary,))
    _expect_type("Dict.has", args[1], (String,))
    return native_bool(args[1].value in args[0].pairs)

# -------------------------------
# Strings
# -------------------------------
def string_upper(*args: Value) -> Value:
    _expect_count("String.upper", args, 1)
    _expect_type("String.upper", args[0], (String, Atom))
    return String(args[0].value.upper())

def string_lower(*args: Value) -> Value:
    _expect_count("String.lower", args, 1)
    _expect_type("String.lower", args[0], (String, Atom))
    return String(args[0].value.lower())

def string_trim(*args: Value) -> Value:
    _expect_count("String.trim", args, 1)
    _expect_type("String.trim", args[0], (String, Atom))
    return String(args[0].value.strip())

def string_split(*args: Value) -> Value:
    _expect_count("String.split", args, 2)
    _expect_type("String.split", args[0], (String, Atom))
    _expect_type("String.split", args[1], (String,))
    text, separator = args[0].value, args[1].value
    parts = list(text) if separator == "" else text.split(separator)
    return make_array(String(p) for p in parts)

def string_join(*args: Value) -> Value:
    _expect_count("String.join", args, 2)
    _expect_type("String.join", args[0], (Array,))
    _expect_type("String.join", args[1], (String,))
    return String(args[1].value.join(str(e) for e in args[0].elements))

# -------------------------------
# Math
# -------------------------------
_NUMBERS = (Integer, Float)

def _expect_finite(name: str, value: Value) -> None:
    if isinstance(value, Float) and not math.isfinite(value.value):
        raise EmberArithmeticError(f"{name} cannot convert {value.inspect()} to an Integer")

def math_abs(*args: Value) -> Value:
    _expect_count("Math.abs", args, 1)
    _expect_type("Math.abs", args[0], _NUMBERS)
    if isinstance(args[0], Integer):
        return Integer(wrap_int64(abs(args[0].value)))
    return Float(abs(args[0].value))

def math_floor(*args: Value) -> Value:
    _expect_count("Math.floor", args, 1)
    _expect_type("Math.floor", args[0], _NUMBERS)
    _expect_finite("Math.floor", args[0])
    return Integer(wrap_int64(math.floor(args[0].value)))

def math_ceil(*args: Value) -> Value:
    _expect_count("Math.ceil", args, 1)
    _expect_type("Math.ceil", args[0], _NUMBERS)
    _expect_finite("Math.ceil", args[0])
    return Integer(wrap_int64(math.ceil(args[0].value)))

def math_sqrt(*args: Value) -> Value:
    _expect_count("Math.sqrt", args, 1)
    _expect_type("Math.sqrt", args[0], _NUMBERS)
    if args[0].value < 0:
        return Float(math.nan)
    return Float(math.sqrt(args[0].value))

def _numeric_pick(name: str, args: Sequence[Value], pick: Callable) -> Value:
    if not args:
        raise EmberArityError(f"{name} requires at least 1 argument")
    for a in args:
        _expect_type(name, a, _NUMBERS)
    return pick(args, key=lambda v: v.value)

def math_min(*args: Value) -> Value:
    return _numeric_pick("Math.min", args, min)

def math_max(*args: Value) -> Value:
    return _numeric_pick("Math.max", args, max)

# -------------------------------
# Registration
# -------------------------------
def register_defaults(library: Library) -> Library:
    """Install the default native functions into `library`."""
    for name, fn in {
        "IO.puts": io_puts,
        "IO.write": io_write,
        "Type.of": type_of,
        "Enum.size": enum_size,
        "Array.first": array_first,
        "Array.last": array_last,
        "Array.push": array_push,
        "Array.reverse": array_reverse,
        "Array.contains": array_contains,
        "Dict.keys": dict_keys,
        "Dict.values": dict_values,
        "Dict.has": dict_has,
        "String.upper": string_upper,
        "String.lower": string_lower,
        "String.split": string_split,
        "String.join": string_join,
        "String.trim": string_trim,
        "Math.abs": math_abs,
        "Math.floor": math_floor,
        "Math.ceil": math_ceil,
        "Math.sqrt": math_sqrt,
        "Math.min": math_min,
        "Math.max": math_max,
    }.items():
        library.register(name, fn)
    return library


def default_library() -> Library:
    return register_defaults(Library())
