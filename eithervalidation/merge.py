"""Merge strategies for failure payloads.

A strategy says how two failures of the same payload type become one. The
combinators take the strategy as an explicit argument; nothing here looks at a
payload to decide how to merge it.
"""
from __future__ import annotations
from dataclasses import dataclass
from itertools import chain
from typing import Any, Callable, Generic, Iterable, List, Protocol, Tuple, TypeVar

F = TypeVar("F")
T = TypeVar("T")
C = TypeVar("C", bound=Iterable[Any])


class MergeStrategy(Protocol[F]):
    def merge(self, left: F, right: F) -> F: ...


@dataclass(frozen=True)
class Semigroup(Generic[F]):
    """Adapts a two-argument append function into a :class:`MergeStrategy`."""
    append: Callable[[F, F], F]

    def merge(self, left: F, right: F) -> F:
        return self.append(left, right)


class StringMerge:
    # No separator; payloads carry their own (e.g. a trailing newline).
    def merge(self, left: str, right: str) -> str:
        return left + right


class ListMerge(Generic[T]):
    def merge(self, left: List[T], right: List[T]) -> List[T]:
        return left + right


class TupleMerge(Generic[T]):
    def merge(self, left: Tuple[T, ...], right: Tuple[T, ...]) -> Tuple[T, ...]:
        return left + right


def concat_with(build: Callable[[Iterable[Any]], C]) -> MergeStrategy[C]:
    """Concatenation for any homogeneous collection.

    ``build`` receives the left elements followed by the right elements and
    returns the merged collection, e.g. ``concat_with(collections.deque)``.
    """
    def append(left: C, right: C) -> C:
        return build(chain(left, right))
    return Semigroup(append)


STRING: MergeStrategy[str] = StringMerge()
LIST: MergeStrategy[List] = ListMerge()
TUPLE: MergeStrategy[Tuple] = TupleMerge()
