"""Runtime scope for Ember.

A Scope stores bindings of identifier names to runtime values and supports
nested frames via an `outer` link. Lookups walk outward through the chain;
declarations only ever touch the current frame, so a nested frame may shadow
an outer name while a second declaration in the same frame is rejected.

Closures hold a reference to the frame they were created in rather than a
copy of it, so later writes to that frame stay visible to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from ember.errors import EmberDeclarationError, EmberNameError

if TYPE_CHECKING:
    from ember.types.base import Value


class Scope:
    """Hierarchical mapping from names to Ember values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: Dict[str, "Value"] = {}
        self.outer: Scope | None = outer

    def child(self) -> Scope:
        """Create a new frame nested in this one."""
        return Scope(outer=self)

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest frame in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def read(self, name: str) -> Optional["Value"]:
        """Return the value bound to `name`, or None when nothing binds it."""
        scope = self.find(name)
        if scope is None:
            return None
        return scope.vars[name]

    def lookup(self, name: str) -> "Value":
        """Look up `name` through the chain.

        Raises EmberNameError if not found.
        """
        value = self.read(name)
        if value is None:
            raise EmberNameError(f"Identifier '{name}' not found in current scope")
        return value

    def write(self, name: str, value: "Value") -> None:
        """Declare `name` in this frame.

        Raises EmberDeclarationError if this frame already binds `name`.
        Names bound in outer frames are shadowed, not rejected.
        """
        if name in self.vars:
            raise EmberDeclarationError(f"Identifier '{name}' already declared")
        self.vars[name] = value

    def bind(self, name: str, value: "Value") -> None:
        """Bind `name` in this frame, replacing any existing binding."""
        self.vars[name] = value

    def merge(self, other: Scope) -> None:
        """Copy every binding of `other`'s own frame into this frame."""
        self.vars.update(other.vars)

    def contains_local(self, name: str) -> bool:
        return name in self.vars
