"""Module declaration and member access.

    module Name { let a = 1; let f = fn() { a } }
    Name.a

Declaration only registers the body. The body is evaluated on first member
access, in a frame nested in the scope the module was declared in, and that
frame is cached for every later access.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ember import ast
from ember.errors import EmberDeclarationError, EmberNameError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


def module_form(node: ast.Module, scope: Scope, evaluator: "Evaluator") -> Value:
    for statement in node.body.statements:
        if not isinstance(statement, ast.Let):
            raise EmberDeclarationError(
                "Only let statements are accepted as Module members", statement.location
            )
    evaluator.modules.declare(node.name.value, node.body, scope)
    return Nil


def module_scope(name: str, evaluator: "Evaluator") -> Scope:
    """Return the evaluated scope of module `name`, evaluating it on first use."""
    cached = evaluator.modules.cached_scope(name)
    if cached is not None:
        return cached

    module = evaluator.modules.get(name)
    if module is None:
        raise EmberNameError(f"Module '{name}' not found")

    logger.debug("evaluating module %s", name)
    frame = module.scope.child()
    for statement in module.body.statements:
        # a failing member leaves the module uncached
        evaluator.eval_node(statement, frame)
    evaluator.modules.store_scope(name, frame)
    return frame


def module_access_form(node: ast.ModuleAccess, scope: Scope, evaluator: "Evaluator") -> Value:
    module_name = node.object.value
    member = node.parameter.value
    frame = module_scope(module_name, evaluator)
    if not frame.contains_local(member):
        raise EmberNameError(f"Member '{member}' in Module '{module_name}' not found")
    return frame.vars[member]
