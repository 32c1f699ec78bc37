from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Union

from ember.config import get_recursion_limit
from ember.evaluation.evaluator import Evaluator
from ember.library import Library
from ember.modules.import_loader import ImportLoader
from ember.reader.parser import parse_program
from ember.reporter import Diagnostic, Reporter
from ember.types.base import Value
from ember.types.scope import Scope


class Interpreter:
    """
    Orchestrates reading and evaluating Ember code.
    Maintains a global Scope, the module registry and the import cache across
    calls, so definitions from one `eval` are visible to the next.
    """

    def __init__(
        self,
        library: Optional[Library] = None,
        reporter: Optional[Reporter] = None,
        base_dir: Optional[Union[str, Path]] = None,
        read_text: Optional[Callable[[str], str]] = None,
    ):
        self.reporter: Reporter = reporter if reporter is not None else Reporter()
        self.loader = ImportLoader(parse_program, read_text=read_text, base_dir=base_dir)
        self.evaluator = Evaluator(library=library, reporter=self.reporter, loader=self.loader)
        self.scope: Scope = Scope()
        # every Ember call costs several Python frames
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.reporter.diagnostics

    def define_globals(self, mapping: Mapping[str, Value]) -> None:
        """Seed the global frame with host-provided bindings."""
        seed = Scope()
        for name, value in mapping.items():
            seed.bind(name, value)
        self.scope.merge(seed)

    def eval(self, code: str, filename: str = "<input>") -> Optional[Value]:
        """Parse and run `code`; returns the last value, or None when parsing failed."""
        errors_before = self.reporter.error_count
        program = parse_program(code, self.reporter, filename)
        if self.reporter.error_count > errors_before:
            return None
        return self.evaluator.evaluate(program, self.scope)

    def run_file(self, path: Union[str, Path]) -> Optional[Value]:
        path = Path(path)
        code = path.read_text(encoding='utf-8')
        return self.eval(code, str(path))
