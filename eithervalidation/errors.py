from __future__ import annotations
from typing import Any


class CombinatorError(TypeError):
    """Raised when the combinators are called with ill-typed input.

    Validation failures are never raised; they travel as ``Left`` values.
    """


class MissingMergeStrategy(CombinatorError):
    def __init__(self, arity: int):
        super().__init__(
            f"no merge strategy available for the failure payload: "
            f"combining {arity} fallible arguments needs merge=<MergeStrategy>"
        )
        self.arity = arity


class ArityError(CombinatorError):
    pass


class NotAFallible(CombinatorError):
    def __init__(self, slot: str, value: Any, expected: str = "Left or Right"):
        super().__init__(f"{slot} must be {expected}, got {value!r}")
        self.slot = slot
        self.value = value
