"""Prefix and infix operator semantics.

Operators are dispatched on the concrete type pair of the two already
evaluated operands. Nothing here knows about the syntax tree: every function
takes values and returns a value or raises an Ember error, and the evaluator
attaches the source location when it reports the failure.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Tuple

from ember.errors import EmberArithmeticError, EmberTypeError
from ember.types.base import Value
from ember.types.values import (
    INT64_MAX, INT64_MIN, Array, Atom, Boolean, Dictionary, Float, Integer, String,
    is_truthy, make_array, native_bool, same_value, wrap_int64,
)

RANGE_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


# -------------------------------
# Prefix operators
# -------------------------------

def eval_prefix(operator: str, right: Value) -> Value:
    if operator == "!":
        return native_bool(not is_truthy(right))
    if operator == "-":
        if isinstance(right, Integer):
            return Integer(wrap_int64(-right.value))
        if isinstance(right, Float):
            return Float(-right.value)
        raise EmberTypeError(f"Minus prefix can be applied to Integers and Floats only, got '{right.type_name}'")
    if operator == "~":
        if isinstance(right, Integer):
            return Integer(~right.value)
        raise EmberTypeError(f"Bitwise NOT prefix can be applied to Integers only, got '{right.type_name}'")
    raise EmberTypeError(f"Unsupported prefix operator '{operator}' for type '{right.type_name}'")


# -------------------------------
# Integers
# -------------------------------

def _int_divide(a: int, b: int) -> Value:
    if b == 0:
        raise EmberArithmeticError("Division by zero")
    if a % b == 0:
        return Integer(wrap_int64(a // b))
    return Float(a / b)


def _int_modulo(a: int, b: int) -> Integer:
    if b == 0:
        raise EmberArithmeticError("Modulo by zero")
    # truncated remainder: the sign follows the dividend
    r = abs(a) % abs(b)
    return Integer(-r if a < 0 else r)


def _int_power(a: int, b: int) -> Integer:
    """Floating exponentiation truncated toward zero."""
    if a == 0 and b < 0:
        raise EmberArithmeticError("Zero raised to a negative power")
    try:
        result = math.pow(a, b)
    except OverflowError:
        raise EmberArithmeticError(f"Integer overflow in {a} ** {b}") from None
    if not INT64_MIN <= result <= INT64_MAX:
        raise EmberArithmeticError(f"Integer overflow in {a} ** {b}")
    return Integer(int(result))


def _int_shift(a: int, b: int, left: bool) -> Integer:
    if a < 0 or b < 0:
        raise EmberTypeError("Bitwise shift requires two non-negative Integers")
    if left:
        return Integer(wrap_int64(a << b) if b < 64 else 0)
    return Integer(a >> b)


def integer_range(a: int, b: int) -> Array:
    """Inclusive range, descending when `a` is greater than `b`."""
    step = 1 if a <= b else -1
    return make_array(Integer(i) for i in range(a, b + step, step))


INTEGER_OPS: Dict[str, Callable[[int, int], Value]] = {
    "+": lambda a, b: Integer(wrap_int64(a + b)),
    "-": lambda a, b: Integer(wrap_int64(a - b)),
    "*": lambda a, b: Integer(wrap_int64(a * b)),
    "/": _int_divide,
    "%": _int_modulo,
    "**": _int_power,
    "<": lambda a, b: native_bool(a < b),
    "<=": lambda a, b: native_bool(a <= b),
    ">": lambda a, b: native_bool(a > b),
    ">=": lambda a, b: native_bool(a >= b),
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
    "&": lambda a, b: Integer(a & b),
    "|": lambda a, b: Integer(a | b),
    "<<": lambda a, b: _int_shift(a, b, True),
    ">>": lambda a, b: _int_shift(a, b, False),
    "..": integer_range,
}


# -------------------------------
# Floats
# -------------------------------

def _float_divide(a: float, b: float) -> Float:
    if b == 0:
        # IEEE semantics instead of a Python exception
        if a == 0 or math.isnan(a):
            return Float(math.nan)
        return Float(math.copysign(math.inf, a) * math.copysign(1.0, b))
    return Float(a / b)


def _float_modulo(a: float, b: float) -> Float:
    if b == 0:
        return Float(math.nan)
    return Float(math.fmod(a, b))


def _float_power(a: float, b: float) -> Float:
    try:
        return Float(math.pow(a, b))
    except OverflowError:
        return Float(math.inf)
    except ValueError:
        return Float(math.nan)


FLOAT_OPS: Dict[str, Callable[[float, float], Value]] = {
    "+": lambda a, b: Float(a + b),
    "-": lambda a, b: Float(a - b),
    "*": lambda a, b: Float(a * b),
    "/": _float_divide,
    "%": _float_modulo,
    "**": _float_power,
    "<": lambda a, b: native_bool(a < b),
    "<=": lambda a, b: native_bool(a <= b),
    ">": lambda a, b: native_bool(a > b),
    ">=": lambda a, b: native_bool(a >= b),
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
}


# -------------------------------
# Strings and atoms
# -------------------------------

def character_range(a: str, b: str) -> Array:
    """Range between two single characters over 0-9a-z."""
    if len(a) != 1 or len(b) != 1:
        raise EmberTypeError("Range operator expects 2 single character strings")
    lo, hi = a.lower(), b.lower()
    if lo <= hi:
        chars = [c for c in RANGE_ALPHABET if lo <= c <= hi]
    else:
        chars = [c for c in reversed(RANGE_ALPHABET) if hi <= c <= lo]
    return make_array(String(c) for c in chars)


# ordering compares lengths, not characters
STRING_OPS: Dict[str, Callable[[str, str], Value]] = {
    "+": lambda a, b: String(a + b),
    "<": lambda a, b: native_bool(len(a) < len(b)),
    "<=": lambda a, b: native_bool(len(a) <= len(b)),
    ">": lambda a, b: native_bool(len(a) > len(b)),
    ">=": lambda a, b: native_bool(len(a) >= len(b)),
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
    "..": character_range,
}


BOOLEAN_OPS: Dict[str, Callable[[bool, bool], Value]] = {
    "&&": lambda a, b: native_bool(a and b),
    "||": lambda a, b: native_bool(a or b),
    "==": lambda a, b: native_bool(a == b),
    "!=": lambda a, b: native_bool(a != b),
}


# -------------------------------
# Collections
# -------------------------------

def arrays_equal(left: Tuple[Value, ...], right: Tuple[Value, ...]) -> bool:
    if len(left) != len(right):
        return False
    return all(same_value(a, b) for a, b in zip(left, right))


def dictionaries_equal(left: Dict[str, Value], right: Dict[str, Value]) -> bool:
    if len(left) != len(right):
        return False
    left_pairs = {(k, v.type_name, v.inspect()) for k, v in left.items()}
    right_pairs = {(k, v.type_name, v.inspect()) for k, v in right.items()}
    return left_pairs == right_pairs


ARRAY_OPS: Dict[str, Callable[[Tuple[Value, ...], Tuple[Value, ...]], Value]] = {
    "+": lambda a, b: Array(a + b),
    "==": lambda a, b: native_bool(arrays_equal(a, b)),
    "!=": lambda a, b: native_bool(not arrays_equal(a, b)),
}


DICTIONARY_OPS: Dict[str, Callable[[Dict[str, Value], Dict[str, Value]], Value]] = {
    # right-hand keys win on collision
    "+": lambda a, b: Dictionary({**a, **b}),
    "==": lambda a, b: native_bool(dictionaries_equal(a, b)),
    "!=": lambda a, b: native_bool(not dictionaries_equal(a, b)),
}


# -------------------------------
# Infix dispatch
# -------------------------------

def _apply(table: Dict[str, Callable], family: str, operator: str, left: Value, right: Value, a, b) -> Value:
    fn = table.get(operator)
    if fn is None:
        raise EmberTypeError(
            f"Unsupported {family} operator '{operator}' for types '{left.type_name}' and '{right.type_name}'"
        )
    return fn(a, b)


def eval_infix(operator: str, left: Value, right: Value) -> Value:
    """Apply a binary operator to two evaluated operands."""
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _apply(INTEGER_OPS, "Integer", operator, left, right, left.value, right.value)
    if isinstance(left, (Integer, Float)) and isinstance(right, (Integer, Float)):
        # mixed pairs promote the integer side
        return _apply(FLOAT_OPS, "Float", operator, left, right, float(left.value), float(right.value))
    if isinstance(left, (String, Atom)) and isinstance(right, (String, Atom)):
        return _apply(STRING_OPS, "String", operator, left, right, left.value, right.value)
    if isinstance(left, Boolean) and isinstance(right, Boolean):
        return _apply(BOOLEAN_OPS, "Boolean", operator, left, right, left.value, right.value)
    if isinstance(left, Array) and isinstance(right, Array):
        return _apply(ARRAY_OPS, "Array", operator, left, right, left.elements, right.elements)
    if isinstance(left, Dictionary) and isinstance(right, Dictionary):
        return _apply(DICTIONARY_OPS, "Dictionary", operator, left, right, left.pairs, right.pairs)
    if left.type_name != right.type_name:
        raise EmberTypeError(
            f"Cannot run expression '{operator}' with types '{left.type_name}' and '{right.type_name}'"
        )
    raise EmberTypeError(
        f"Unknown operator '{operator}' for types '{left.type_name}' and '{right.type_name}'"
    )
