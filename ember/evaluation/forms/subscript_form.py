from __future__ import annotations

from typing import TYPE_CHECKING

from ember import ast
from ember.errors import EmberIndexError, EmberKeyError, EmberTypeError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import Array, Atom, Dictionary, Integer, String

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def array_subscript(array: Array, index: int) -> Value:
    """Negative indices count from the end."""
    position = index + len(array.elements) if index < 0 else index
    if position < 0 or position >= len(array.elements):
        raise EmberIndexError(f"Array index '{index}' out of bounds")
    return array.elements[position]


def dictionary_subscript(dictionary: Dictionary, key: str) -> Value:
    try:
        return dictionary.pairs[key]
    except KeyError:
        raise EmberKeyError(f"Key '{key}' doesn't exist in Dictionary")


def string_subscript(text: str, index: int) -> Value:
    if index < 0 or index >= len(text):
        raise EmberIndexError(f"String index '{index}' out of bounds")
    return String(text[index])


def subscript_form(node: ast.Subscript, scope: Scope, evaluator: "Evaluator") -> Value:
    left = evaluator.eval_node(node.left, scope)
    index = evaluator.eval_node(node.index, scope)
    left = Nil if left is None else left
    index = Nil if index is None else index

    if isinstance(left, Array) and isinstance(index, Integer):
        return array_subscript(left, index.value)
    if isinstance(left, Dictionary) and isinstance(index, String):
        return dictionary_subscript(left, index.value)
    if isinstance(left, (String, Atom)) and isinstance(index, Integer):
        return string_subscript(left.value, index.value)
    raise EmberTypeError(
        f"Subscript on '{left.type_name}' not supported with literal '{index.type_name}'"
    )
