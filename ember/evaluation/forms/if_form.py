from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ember import ast
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import is_truthy

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def if_form(node: ast.If, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    condition = evaluator.eval_node(node.condition, scope)

    if condition is not None and is_truthy(condition):
        return evaluator.eval_node(node.then, scope.child())
    elif node.else_ is not None:
        return evaluator.eval_node(node.else_, scope.child())
    else:
        return Nil
