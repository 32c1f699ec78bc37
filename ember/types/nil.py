from __future__ import annotations

from ember.types.base import Value


class NilType(Value):
    type_name = "Nil"

    _instance = None

    def __new__(cls):
        # one Nil per process
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def inspect(self) -> str: return "nil"
    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
