"""Core evaluator for the Ember interpreter.

Walks the syntax tree produced by the reader. Every node class maps to a form
handler in `NODE_FORMS`; handlers raise an `EmberError` subclass on semantic
failure and the evaluator turns that into a runtime diagnostic carrying the
location of the innermost failing node.
"""

from __future__ import annotations

import logging
from typing import Optional

from ember import ast
from ember.errors import EmberError, EmberRecursionError, EmberTypeError
from ember.evaluation.forms import NODE_FORMS
from ember.library import Library, default_library
from ember.module_registry import ModuleRegistry
from ember.modules.import_loader import ImportLoader
from ember.reporter import ErrorKind, Reporter
from ember.types.base import Value
from ember.types.scope import Scope

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Tree-walking evaluator.

    Holds the collaborators every form may need: the native library table,
    the diagnostic sink, the import loader and the module registry. Module and
    import caches live as long as the evaluator does.
    """

    def __init__(
        self,
        library: Optional[Library] = None,
        reporter: Optional[Reporter] = None,
        loader: Optional[ImportLoader] = None,
    ):
        self.library: Library = library if library is not None else default_library()
        self.reporter: Reporter = reporter if reporter is not None else Reporter()
        self.loader: ImportLoader = loader if loader is not None else ImportLoader()
        self.modules: ModuleRegistry = ModuleRegistry()

    def evaluate(self, node: ast.Node, scope: Scope) -> Optional[Value]:
        """
        Evaluate `node` in `scope`.

        Errors never escape: they are reported to the sink and the result is
        None.
        """
        try:
            return self.eval_node(node, scope)
        except EmberError as err:
            self.report(err, node)
            return None
        except RecursionError:
            self.report(EmberRecursionError("Maximum recursion depth exceeded"), node)
            return None

    def eval_node(self, node: ast.Node, scope: Scope) -> Optional[Value]:
        """Dispatch `node` to its form handler, letting errors propagate."""
        form = NODE_FORMS.get(type(node))
        if form is None:
            raise EmberTypeError(f"Cannot evaluate node of type '{type(node).__name__}'", node.location)
        try:
            return form(node, scope, self)
        except EmberError as err:
            # innermost node wins
            if err.location is None:
                err.location = node.location
            raise

    def report(self, err: EmberError, node: Optional[ast.Node] = None) -> None:
        location = err.location
        if location is None and node is not None:
            location = node.location
        logger.debug("runtime error at %s: %s", location, err.message)
        self.reporter.report(ErrorKind.RUNTIME, location, err.message)