from __future__ import annotations

from typing import TYPE_CHECKING

from ember import ast
from ember.types.base import Value
from ember.types.function import Function
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import is_signal

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def let_form(node: ast.Let, scope: Scope, evaluator: "Evaluator") -> Value:
    """
    let name = value

    Declares `name` in the current frame and yields the value. A function
    value without a name takes this one, which is how a let-bound function
    can call itself.
    """
    value = evaluator.eval_node(node.value, scope)
    if value is None:
        value = Nil
    if is_signal(value):
        return value

    scope.write(node.name.value, value)
    if isinstance(value, Function) and value.name is None:
        value.name = node.name.value
    return value
