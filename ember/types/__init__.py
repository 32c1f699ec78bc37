from ember.types.base import Value
from ember.types.scope import Scope
from ember.types.nil import Nil, NilType
from ember.types.function import Function
from ember.types.values import (
    Integer, Float, String, Atom, Boolean, Array, Dictionary, Placeholder,
    ReturnSignal, BreakSignal, ContinueSignal,
    TRUE, FALSE, PLACEHOLDER, BREAK, CONTINUE,
    is_truthy, same_value,
)

__all__ = [
    "Value", "Scope", "Nil", "NilType", "Function",
    "Integer", "Float", "String", "Atom", "Boolean", "Array", "Dictionary",
    "Placeholder", "ReturnSignal", "BreakSignal", "ContinueSignal",
    "TRUE", "FALSE", "PLACEHOLDER", "BREAK", "CONTINUE",
    "is_truthy", "same_value",
]
