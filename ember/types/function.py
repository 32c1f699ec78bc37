"""Function value: parameters, body, closure scope and declared name."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, List, Optional

from ember.types.base import Value
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.ast import BlockStatement


class Function(Value):
    """A first-class function with parameter names, body, and closure scope.

    `name` is attached by `let` so a call can bind the function under its own
    name, letting it refer to itself recursively. Anonymous functions keep
    `name` as None.
    """

    type_name = "Function"

    __slots__ = ("parameters", "body", "scope", "name")

    def __init__(
        self,
        parameters: List[str],
        body: "BlockStatement",
        scope: Optional[Scope] = None,
        name: Optional[str] = None,
    ):
        self.parameters: List[str] = parameters
        self.body: "BlockStatement" = body
        # Avoid shared default Scope across instances
        self.scope: Scope = scope if scope is not None else Scope()
        self.name: Optional[str] = name

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn(")
            buffer.write(", ".join(self.parameters))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        label = self.name or "<anonymous>"
        return f"<Function {label}({', '.join(self.parameters)})>"

    def call_scope(self) -> Scope:
        """Return a fresh frame for one call, nested in the closure scope.

        The declared name is bound first so parameters can still shadow it.
        """
        frame = Scope(outer=self.scope)
        if self.name is not None:
            frame.bind(self.name, self)
        return frame
