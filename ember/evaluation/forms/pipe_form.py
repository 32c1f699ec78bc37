from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ember import ast
from ember.errors import EmberTypeError
from ember.evaluation.convert import value_to_node
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def pipe_form(node: ast.Pipe, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    """
    left |> f(args...)  is  f(left, args...)

    A new call node is built for every evaluation; the call on the right
    side is never modified, so the same pipe can run any number of times.
    """
    call = node.right
    if not isinstance(call, ast.FunctionCall):
        raise EmberTypeError("Pipe expects a function call on its right side", call.location)

    left = evaluator.eval_node(node.left, scope)
    argument = value_to_node(Nil if left is None else left, node.left.location)
    piped = ast.FunctionCall(call.location, call.function, [argument, *call.arguments])
    return evaluator.eval_node(piped, scope)
