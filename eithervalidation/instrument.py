from __future__ import annotations
import functools
from typing import Callable, Optional, TypeVar

from .either import Either
from .logger import ConsoleLogger

E = TypeVar("E"); A = TypeVar("A")


def instrument(name: str, validator: Callable[..., Either[E, A]], logger: Optional[ConsoleLogger] = None,
               tags: dict[str, str] | None = None) -> Callable[..., Either[E, A]]:
    """Add logging to a validator.

    Each call logs ``check <name>`` at DEBUG, then ``valid <name>`` at INFO
    when the validator returns ``Right`` or ``invalid <name>`` at WARN with the
    failure payload when it returns ``Left``. The validator's result is
    returned unchanged, so instrumented validators feed the combinators like
    any other.

    Args:
        name: Field or rule name used in the log lines
        validator: Function returning an ``Either``
        logger: Where to log; a default ``ConsoleLogger`` when omitted
        tags: Extra fields bound on every line

    Example:
        ```python
        age = instrument("age", valid_age, ConsoleLogger(level="DEBUG"))
        lift(Person)(age("150"), valid_name("dude"), merge=LIST)
        ```
    """
    log = logger if logger is not None else ConsoleLogger()
    if tags:
        log = log.bind(**tags)

    @functools.wraps(validator)
    def run(*args, **kwargs) -> Either[E, A]:
        log.debug(f"check {name}", args=args)
        res = validator(*args, **kwargs)
        if res.is_left():
            log.warn(f"invalid {name}", error=res.error)  # type: ignore[attr-defined]
        else:
            log.info(f"valid {name}")
        return res
    return run
