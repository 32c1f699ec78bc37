"""Statements that produce control signals.

Signals are ordinary values: blocks stop at the first one and hand it up,
loops consume break and continue, function calls unwrap return.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ember import ast
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import BREAK, CONTINUE, ReturnSignal, is_signal

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def return_form(node: ast.ReturnStatement, scope: Scope, evaluator: "Evaluator") -> Value:
    if node.value is None:
        return ReturnSignal(Nil)
    value = evaluator.eval_node(node.value, scope)
    if value is None:
        value = Nil
    if is_signal(value):
        return value
    return ReturnSignal(value)


def break_form(node: ast.BreakStatement, scope: Scope, evaluator: "Evaluator") -> Value:
    return BREAK


def continue_form(node: ast.ContinueStatement, scope: Scope, evaluator: "Evaluator") -> Value:
    return CONTINUE
