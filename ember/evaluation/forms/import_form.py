from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ember import ast
from ember.evaluation.forms.block_forms import program_form
from ember.types.base import Value
from ember.types.scope import Scope

if TYPE_CHECKING:
    from ember.evaluation.evaluator import Evaluator


def import_form(node: ast.Import, scope: Scope, evaluator: "Evaluator") -> Optional[Value]:
    """
    Usage:
        import "lib/strings"

    The imported program runs in the importing scope, so its top-level lets
    become visible there. Yields the program's last value, or None when the
    file failed to parse.
    """
    program = evaluator.loader.load(node.file.value, evaluator.reporter, node.location)
    if program is None:
        return None
    return program_form(program, scope, evaluator)
