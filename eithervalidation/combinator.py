from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, overload

from .curry import curried
from .either import Either, Left, Right
from .errors import ArityError, MissingMergeStrategy, NotAFallible
from .merge import MergeStrategy

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


def _fallible(slot: str, value: Any) -> None:
    if not isinstance(value, (Left, Right)):
        raise NotAFallible(slot, value)


def apply(
    wrapped_fn: Either[E, Callable[[A], B]],
    wrapped_arg: Either[E, A],
    merge: MergeStrategy[E],
) -> Either[E, B]:
    """Apply a fallible function to a fallible argument, keeping every failure.

    ============  ============  ==========================
    wrapped_fn    wrapped_arg   result
    ============  ============  ==========================
    Left(e1)      Left(e2)      Left(merge.merge(e1, e2))
    Left(e1)      Right(_)      Left(e1)
    Right(_)      Left(e2)      Left(e2)
    Right(f)      Right(x)      Right(f(x))
    ============  ============  ==========================

    Exceptions raised by ``f`` are not caught.
    """
    if merge is None:
        raise MissingMergeStrategy(2)
    _fallible("function", wrapped_fn)
    _fallible("argument", wrapped_arg)
    if isinstance(wrapped_fn, Left):
        if isinstance(wrapped_arg, Left):
            return Left(merge.merge(wrapped_fn.error, wrapped_arg.error))
        return Left(wrapped_fn.error)
    if isinstance(wrapped_arg, Left):
        return Left(wrapped_arg.error)
    return Right(wrapped_fn.value(wrapped_arg.value))  # type: ignore[attr-defined]


def apply_pure(fn: Callable[[A], B], wrapped_arg: Either[E, A]) -> Either[E, B]:
    """:func:`apply` for a function that cannot fail; needs no merge strategy."""
    _fallible("argument", wrapped_arg)
    if isinstance(wrapped_arg, Left):
        return Left(wrapped_arg.error)
    return Right(fn(wrapped_arg.value))  # type: ignore[attr-defined]


def apply_all(
    wrapped_fn: Either[E, Callable[..., B]],
    args: Iterable[Either[E, Any]],
    merge: MergeStrategy[E],
) -> Either[E, B]:
    """Apply a fallible N-ary function to N fallible arguments.

    The function is curried to ``len(args)`` and :func:`apply` is folded over
    the arguments left to right, so failures come out in argument order (a
    failing ``wrapped_fn`` first).
    """
    args = tuple(args)
    if not args:
        raise ArityError("at least one fallible argument is required")
    if merge is None:
        raise MissingMergeStrategy(len(args))
    _fallible("function", wrapped_fn)
    n = len(args)
    acc: Either[E, Any] = wrapped_fn.map(lambda f: curried(f, n))
    for arg in args:
        acc = apply(acc, arg, merge)
    return acc


@dataclass(frozen=True)
class Combinator(Generic[E, A, B]):
    """A fallible function waiting for its argument(s).

    ``Combinator(Right(f), LIST).apply(arg)`` is one binary step. Calling the
    combinator with several arguments treats ``f`` as an uncurried N-ary
    function: ``Combinator(Right(add), LIST)(Right(2), Right(3))``.
    """
    wrapped: Either[E, Callable[[A], B]]
    merge: MergeStrategy[E]

    def apply(self, arg: Either[E, A]) -> Either[E, B]:
        return apply(self.wrapped, arg, self.merge)

    def __call__(self, first: Either[E, Any], *rest: Either[E, Any]) -> Either[E, Any]:
        return apply_all(self.wrapped, (first,) + rest, self.merge)


@dataclass(frozen=True)
class Lifted(Generic[A, B]):
    """A plain function lifted to take fallible arguments.

    The function side is always a success, so a single argument needs no merge
    strategy. Two or more arguments can both fail, so ``merge`` is required.

        person = lift(Person)(valid_age(s1), valid_name(s2), valid_postcode(s3), merge=LIST)
    """
    fn: Callable[..., B]

    @classmethod
    def from_either(cls, wrapped: Either[Any, Callable[..., B]]) -> "Lifted[Any, B]":
        if isinstance(wrapped, Right):
            return cls(wrapped.value)
        raise NotAFallible("lifted function", wrapped, expected="Right")

    def apply(self, arg: Either[E, A]) -> Either[E, B]:
        return apply_pure(self.fn, arg)

    @overload
    def __call__(self, first: Either[E, Any], *, merge: Optional[MergeStrategy[E]] = None) -> Either[E, B]: ...

    @overload
    def __call__(
        self,
        first: Either[E, Any],
        second: Either[E, Any],
        *rest: Either[E, Any],
        merge: MergeStrategy[E],
    ) -> Either[E, B]: ...

    def __call__(
        self,
        first: Either[E, Any],
        *rest: Either[E, Any],
        merge: Optional[MergeStrategy[E]] = None,
    ) -> Either[E, B]:
        # merge= is required once there are two arguments.
        if rest and merge is None:
            raise MissingMergeStrategy(1 + len(rest))
        acc: Either[E, Any] = apply_pure(curried(self.fn, 1 + len(rest)), first)
        for arg in rest:
            acc = apply(acc, arg, merge)  # type: ignore[arg-type]
        return acc


def lift(fn: Callable[..., B]) -> Lifted[Any, B]:
    return Lifted(fn)
