from __future__ import annotations
import inspect
from typing import Any, Callable, Optional, Tuple

from .errors import ArityError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def arity_of(f: Callable[..., Any]) -> int:
    """Number of required positional parameters of ``f``.

    Works for functions, lambdas, bound methods and record constructors
    (dataclasses, NamedTuples).
    """
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError) as ex:
        raise ArityError(f"cannot determine the arity of {f!r}; pass arity= explicitly") from ex
    return sum(
        1 for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def curried(f: Callable[..., Any], arity: Optional[int] = None) -> Callable[[Any], Any]:
    """Turn ``f(a1, ..., an)`` into ``a1 -> a2 -> ... -> f(a1, ..., an)``.

    Each intermediate function is independent, so a partial application can be
    reused:

        add3 = curried(lambda x, y, z: x + y + z)
        plus1 = add3(1)
        plus1(2)(3)   # 6
        plus1(10)(3)  # 14
    """
    n = arity_of(f) if arity is None else arity
    if n < 1:
        raise ArityError(f"cannot curry a function of arity {n}")
    if n == 1:
        return f

    def collect(args: Tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(x: Any) -> Any:
            got = args + (x,)
            if len(got) == n:
                return f(*got)
            return collect(got)
        return take

    return collect(())
