from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ember import ast
from ember.errors import EmberControlFlowError, EmberError, EmberRecursionError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import BreakSignal, ContinueSignal, ReturnSignal, is_signal

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def program_form(node: ast.Program, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    """
    Run top-level statements in order.

    A failing statement is reported and the next one still runs. The result
    is the value of the last statement, or None when it failed. A top-level
    return stops the program with its payload.
    """
    result: Optional[Value] = None
    for statement in node.statements:
        try:
            result = evaluator.eval_node(statement, scope)
        except EmberError as err:
            evaluator.report(err, statement)
            result = None
            continue
        except RecursionError:
            evaluator.report(EmberRecursionError("Maximum recursion depth exceeded"), statement)
            result = None
            continue

        if isinstance(result, ReturnSignal):
            return result.value
        if isinstance(result, (BreakSignal, ContinueSignal)):
            keyword = "break" if isinstance(result, BreakSignal) else "continue"
            evaluator.report(
                EmberControlFlowError(f"'{keyword}' outside of a loop", statement.location)
            )
            result = None
    return result


def block_statement_form(node: ast.BlockStatement, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    """(statements...) in the given scope; a control signal ends the block."""
    result: Optional[Value] = Nil
    for statement in node.statements:
        result = evaluator.eval_node(statement, scope)
        if is_signal(result):
            return result
    return result


def expression_statement_form(node: ast.ExpressionStatement, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    return evaluator.eval_node(node.expression, scope)
