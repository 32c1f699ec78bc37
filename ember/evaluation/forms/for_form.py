from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from ember import ast
from ember.errors import EmberArityError, EmberTypeError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import (
    Array, Atom, BreakSignal, ContinueSignal, Dictionary, Integer, ReturnSignal,
    String, string_to_array,
)

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def _entries(enumerable: Value) -> Iterator[Tuple[Value, Value]]:
    """Yield (index or key, element) pairs of an enumerable value."""
    if isinstance(enumerable, Dictionary):
        for key, value in list(enumerable.pairs.items()):
            yield String(key), value
        return
    if isinstance(enumerable, (String, Atom)):
        enumerable = string_to_array(enumerable.value)
    for index, element in enumerate(enumerable.elements):
        yield Integer(index), element


def for_form(node: ast.For, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    """
    for x in e { ... } / for i, x in e { ... }

    Always a map: the result is an Array of every body result not cut short
    by break or continue. Loop variables live in one loop frame shared by all
    iterations; each iteration runs the body in a fresh child of it.
    """
    enumerable = evaluator.eval_node(node.enumerable, scope)
    if enumerable is None:
        enumerable = Nil
    if not isinstance(enumerable, (Array, Dictionary, String, Atom)):
        raise EmberTypeError(f"Type '{enumerable.type_name}' is not an enumerable")

    names = [argument.value for argument in node.arguments]
    if len(names) not in (1, 2):
        raise EmberArityError(
            f"A for loop over type '{enumerable.type_name}' expects 1 or 2 arguments, got {len(names)}"
        )

    loop_scope = scope.child()
    out: List[Value] = []
    for key, element in _entries(enumerable):
        if len(names) == 1:
            loop_scope.bind(names[0], element)
        else:
            loop_scope.bind(names[0], key)
            loop_scope.bind(names[1], element)

        result = evaluator.eval_node(node.body, loop_scope.child())
        if isinstance(result, BreakSignal):
            break
        if isinstance(result, ContinueSignal):
            continue
        if isinstance(result, ReturnSignal):
            return result
        out.append(Nil if result is None else result)

    return Array(tuple(out))
