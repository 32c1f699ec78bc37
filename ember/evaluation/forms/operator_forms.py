from __future__ import annotations

from typing import TYPE_CHECKING

from ember import ast
from ember.evaluation.operators import eval_infix, eval_prefix
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def prefix_form(node: ast.PrefixExpression, scope: Scope, evaluator: "Evaluator") -> Value:
    right = evaluator.eval_node(node.right, scope)
    return eval_prefix(node.operator, Nil if right is None else right)


def infix_form(node: ast.InfixExpression, scope: Scope, evaluator: "Evaluator") -> Value:
    # both sides are always evaluated, && and || do not short-circuit
    left = evaluator.eval_node(node.left, scope)
    right = evaluator.eval_node(node.right, scope)
    return eval_infix(
        node.operator,
        Nil if left is None else left,
        Nil if right is None else right,
    )
