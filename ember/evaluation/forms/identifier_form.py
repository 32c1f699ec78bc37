from __future__ import annotations

from typing import TYPE_CHECKING

from ember import ast
from ember.types.base import Value
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def identifier_form(node: ast.Identifier, scope: Scope, evaluator: "Evaluator") -> Value:
    return scope.lookup(node.value)
