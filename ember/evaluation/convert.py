"""Conversion of runtime values back into literal syntax nodes.

The pipe operator prepends its left-hand value to the argument list of a call
node. Arguments are syntax, so the value is turned back into the literal that
would evaluate to it.
"""

from __future__ import annotations

from ember import ast
from ember.errors import EmberTypeError
from ember.reader.tokens import Location
from ember.types.base import Value
from ember.types.values import Array, Atom, Boolean, Dictionary, Float, Integer, String


def value_to_node(value: Value, location: Location) -> ast.Expression:
    """Build a literal node for `value`, recursing into arrays and dictionaries."""
    if isinstance(value, Integer):
        return ast.IntegerLiteral(location, value.value)
    if isinstance(value, Float):
        return ast.FloatLiteral(location, value.value)
    if isinstance(value, String):
        return ast.StringLiteral(location, value.value)
    if isinstance(value, Atom):
        return ast.AtomLiteral(location, value.value)
    if isinstance(value, Boolean):
        return ast.BooleanLiteral(location, value.value)
    if isinstance(value, Array):
        return ast.ArrayLiteral(location, [value_to_node(e, location) for e in value.elements])
    if isinstance(value, Dictionary):
        pairs = [
            (ast.StringLiteral(location, key), value_to_node(item, location))
            for key, item in value.pairs.items()
        ]
        return ast.DictionaryLiteral(location, pairs)
    raise EmberTypeError(f"Type '{value.type_name}' can't be passed through a pipe", location)
