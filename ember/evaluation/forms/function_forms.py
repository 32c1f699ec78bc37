from __future__ import annotations

from typing import TYPE_CHECKING, List

from ember import ast
from ember.errors import EmberTypeError
from ember.evaluation.apply import apply_function, apply_native, check_arity
from ember.types.base import Value
from ember.types.function import Function
from ember.types.nil import Nil
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def function_literal_form(node: ast.FunctionLiteral, scope: Scope, evaluator: "Evaluator") -> Value:
    """
    fn(params) { body }

    The closure gets its own empty frame whose outer frame is the current
    scope, so it shares rather than copies everything visible here.
    """
    parameters = [p.value for p in node.parameters]
    return Function(parameters, node.body, Scope(outer=scope))


def _evaluate_arguments(node: ast.FunctionCall, scope: Scope, evaluator: "Evaluator") -> List[Value]:
    args: List[Value] = []
    for argument in node.arguments:
        value = evaluator.eval_node(argument, scope)
        args.append(Nil if value is None else value)
    return args


def function_call_form(node: ast.FunctionCall, scope: Scope, evaluator: "Evaluator") -> Value:
    callee = node.function

    # Library functions share the Module.member notation and win over modules.
    if isinstance(callee, ast.ModuleAccess):
        native = evaluator.library.get(f"{callee.object.value}.{callee.parameter.value}")
        if native is not None:
            return apply_native(native, _evaluate_arguments(node, scope, evaluator))

    fn = evaluator.eval_node(callee, scope)
    if fn is None:
        fn = Nil
    if not isinstance(fn, Function):
        raise EmberTypeError(f"Trying to call a non-function of type '{fn.type_name}'")
    check_arity(fn, len(node.arguments))
    return apply_function(fn, _evaluate_arguments(node, scope, evaluator), evaluator)
