"""Base class of every runtime value."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Value(ABC):
    """A runtime-typed result of evaluation.

    `type_name` is the stable tag used in error messages and type dispatch.
    `inspect()` is the canonical rendering: two values are equal by content
    when they share a type name and render identically.
    """

    type_name: ClassVar[str] = "Value"

    @abstractmethod
    def inspect(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return self.inspect()
