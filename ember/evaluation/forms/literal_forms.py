from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from ember import ast
from ember.errors import EmberTypeError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import (
    PLACEHOLDER, Array, Atom, Dictionary, Float, Integer, String,
    native_bool, wrap_int64,
)

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def integer_form(node: ast.IntegerLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return Integer(wrap_int64(node.value))


def float_form(node: ast.FloatLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return Float(node.value)


def string_form(node: ast.StringLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return String(node.value)


def atom_form(node: ast.AtomLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return Atom(node.value)


def boolean_form(node: ast.BooleanLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return native_bool(node.value)


def placeholder_form(node: ast.PlaceholderLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    return PLACEHOLDER


def array_form(node: ast.ArrayLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    elements: List[Value] = []
    for element in node.elements:
        value = evaluator.eval_node(element, scope)
        elements.append(Nil if value is None else value)
    return Array(tuple(elements))


def dictionary_form(node: ast.DictionaryLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    pairs: Dict[str, Value] = {}
    for key_node, value_node in node.pairs:
        key = evaluator.eval_node(key_node, scope)
        if not isinstance(key, String):
            raise EmberTypeError(
                f"Dictionary keys must be Strings, got '{key.type_name}'", key_node.location
            )
        value = evaluator.eval_node(value_node, scope)
        pairs[key.value] = Nil if value is None else value
    return Dictionary(pairs)
