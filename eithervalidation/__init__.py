from .either import Either, Left, Right
from .merge import (
    MergeStrategy,
    Semigroup,
    StringMerge,
    ListMerge,
    TupleMerge,
    concat_with,
    STRING,
    LIST,
    TUPLE,
)
from .curry import curried, arity_of
from .combinator import apply, apply_pure, apply_all, Combinator, Lifted, lift
from .errors import CombinatorError, MissingMergeStrategy, ArityError, NotAFallible
from .logger import ConsoleLogger
from .instrument import instrument
