"""Diagnostic sink shared by the reader and the evaluator.

Nothing in the interpreter aborts the host process on a semantic error. Errors
are reported here with a source location and evaluation carries on with the
next top-level statement. Callers inspect ``error_count`` to find out whether
anything went wrong while they were running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ember.reader.tokens import Location

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Which stage produced a diagnostic."""
    PARSE = "parse"
    RUNTIME = "runtime"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported error."""
    kind: ErrorKind
    location: Optional[Location]
    message: str

    def format(self) -> str:
        """Format the diagnostic for display."""
        where = f"{self.location}: " if self.location is not None else ""
        return f"{where}{self.kind.value} error: {self.message}"

    def __str__(self) -> str:
        return self.format()


class Reporter:
    """Collects diagnostics in the order they were reported."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report(self, kind: ErrorKind, location: Optional[Location], message: str) -> Diagnostic:
        diagnostic = Diagnostic(kind, location, message)
        self.diagnostics.append(diagnostic)
        logger.debug("%s", diagnostic.format())
        return diagnostic

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
