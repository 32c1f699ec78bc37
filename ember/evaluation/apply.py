"""Application engine for Ember.

Centralizes function application semantics for the interpreter:
- Arity checking for user functions.
- A fresh call frame per call, nested in the function's closure scope.
- Running the body directly in the call frame, so function literals met in
  the body close over the call's own locals.
- Unwrapping return signals and rejecting break/continue that escape a body.
- Calling native library functions with already evaluated arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from ember.errors import EmberArityError, EmberControlFlowError, EmberTypeError
from ember.types.base import Value
from ember.types.function import Function
from ember.types.nil import Nil
from ember.types.values import BreakSignal, ContinueSignal, ReturnSignal, is_signal

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def check_arity(fn: Function, provided: int) -> None:
    if provided > fn.arity:
        raise EmberArityError(
            f"Too many arguments in function call: expected {fn.arity}, got {provided}"
        )
    if provided < fn.arity:
        raise EmberArityError(
            f"Too few arguments in function call: expected {fn.arity}, got {provided}"
        )


def apply_function(fn: Value, args: Sequence[Value], evaluator: "Evaluator") -> Value:
    """Apply an Ember function value to already evaluated arguments."""
    if not isinstance(fn, Function):
        raise EmberTypeError(f"Trying to call a non-function of type '{fn.type_name}'")
    check_arity(fn, len(args))

    frame = fn.call_scope()
    for name, value in zip(fn.parameters, args):
        frame.bind(name, value)

    result: Optional[Value] = Nil
    for statement in fn.body.statements:
        result = evaluator.eval_node(statement, frame)
        if is_signal(result):
            break

    if isinstance(result, ReturnSignal):
        return result.value
    if isinstance(result, BreakSignal):
        raise EmberControlFlowError("'break' outside of a loop")
    if isinstance(result, ContinueSignal):
        raise EmberControlFlowError("'continue' outside of a loop")
    return Nil if result is None else result


def apply_native(native: Callable[..., Value], args: List[Value]) -> Value:
    """Call a library function; it raises EmberError on failure."""
    result = native(*args)
    return Nil if result is None else result
