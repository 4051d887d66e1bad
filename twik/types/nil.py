from __future__ import annotations


class NilType:
    """The absence value.

    The evaluator tests for it with `is Nil`, so there is exactly one
    instance, and copying or unpickling hands that instance back.
    """

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash("nil")

    def __reduce__(self):
        return (NilType, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Nil = NilType()
