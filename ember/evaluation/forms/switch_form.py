"""
switch [control] { case v1, v2 { ... } default { ... } }

Cases are tried in source order and the values of a case from left to right.
For each value the first applicable rule decides:

1. same type as the control: the case wins when the renderings are equal;
2. an Atom value against a String control: the case wins on equal text;
3. an Array control: the case must list exactly one value per element, and
   wins once every position is equal by content or a placeholder;
4. anything else is a type error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ember import ast
from ember.errors import EmberTypeError
from ember.types.base import Value
from ember.types.nil import Nil
from ember.types.scope import Scope
from ember.types.values import TRUE, Array, Atom, Placeholder, String, same_value

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def switch_form(node: ast.Switch, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    if node.control is None:
        control: Optional[Value] = TRUE
    else:
        control = evaluator.eval_node(node.control, scope)
        if control is None:
            raise EmberTypeError("Switch control expression couldn't be evaluated", node.location)

    winner = find_case(node.cases, control, scope, evaluator)
    if winner is not None:
        return evaluator.eval_node(winner.body, scope.child())
    if node.default is not None:
        return evaluator.eval_node(node.default, scope.child())
    return Nil


def find_case(
    cases: List[ast.SwitchCase], control: Value, scope: Scope, evaluator: "Evaluator"
) -> Optional[ast.SwitchCase]:
    for case in cases:
        matches = 0
        for position, value_node in enumerate(case.values):
            value = evaluator.eval_node(value_node, scope)
            if value is None:
                value = Nil

            if value.type_name == control.type_name:
                if value.inspect() == control.inspect():
                    return case
            elif isinstance(value, Atom) and isinstance(control, String):
                if value.value == control.value:
                    return case
            elif isinstance(control, Array):
                if len(case.values) != len(control.elements):
                    # wrong shape, try the next case
                    break
                element = control.elements[position]
                if isinstance(value, Placeholder) or same_value(value, element):
                    matches += 1
                    if matches == len(control.elements):
                        return case
            else:
                raise EmberTypeError(
                    f"Type '{value.type_name}' can't be used in a Switch case "
                    f"with control type '{control.type_name}'",
                    value_node.location,
                )
    return None
