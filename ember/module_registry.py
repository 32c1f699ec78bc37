from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from ember.errors import EmberDeclarationError

if TYPE_CHECKING:
    from ember.ast import BlockStatement
    from ember.types.scope import Scope

logger = logging.getLogger(__name__)


@dataclass
class ModuleDefinition:
    name: str
    body: "BlockStatement"
    scope: "Scope"  # the scope the module was declared in


class ModuleRegistry:
    """Declared modules and the scopes they evaluated to.

    A module body is evaluated at most once; the resulting scope is cached
    under the module name and reused by every later member access.
    """

    def __init__(self):
        self._modules: Dict[str, ModuleDefinition] = {}
        self._scopes: Dict[str, "Scope"] = {}

    def declare(self, name: str, body: "BlockStatement", scope: "Scope") -> ModuleDefinition:
        if name in self._modules:
            raise EmberDeclarationError(f"Module '{name}' redeclared")
        module = ModuleDefinition(name=name, body=body, scope=scope)
        self._modules[name] = module
        logger.debug("declared module %s", name)
        return module

    def get(self, name: str) -> Optional[ModuleDefinition]:
        return self._modules.get(name)

    def cached_scope(self, name: str) -> Optional["Scope"]:
        return self._scopes.get(name)

    def store_scope(self, name: str, scope: "Scope") -> None:
        self._scopes[name] = scope

    def clear(self) -> None:
        self._modules.clear()
        self._scopes.clear()
