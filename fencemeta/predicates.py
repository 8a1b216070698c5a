"""Attribute predicates deciding which parsed attributes get projected.

Configuration accepts loose forms (a bool, an attribute name, a compiled
pattern, a ``(key, value)`` callable, or a list of those OR-ed together).
They are converted once into tagged variants by :func:`as_predicate` and
evaluated by :func:`evaluate`.
"""

import re
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel

from fencemeta.exceptions import UnsupportedPredicateError

AttributePredicate = Callable[[str, str], Any]


class Always(BaseModel):
    type: Literal["always"] = "always"
    value: bool


class Equals(BaseModel):
    type: Literal["equals"] = "equals"
    key: str


class Matches(BaseModel):
    """Passes when the pattern is found anywhere in the key."""

    type: Literal["matches"] = "matches"
    pattern: re.Pattern[str]


class Custom(BaseModel):
    type: Literal["custom"] = "custom"
    fn: AttributePredicate


class AnyOf(BaseModel):
    type: Literal["any_of"] = "any_of"
    predicates: list["Predicate"]


Predicate = Always | Equals | Matches | Custom | AnyOf

AnyOf.model_rebuild()

# Anything as_predicate() understands
PredicateLike = bool | str | re.Pattern[str] | AttributePredicate | list[Any] | tuple[Any, ...] | Predicate

NEVER = Always(value=False)
ALWAYS = Always(value=True)


def as_predicate(option: PredicateLike | None) -> Predicate:
    """Convert a loose predicate option into a tagged variant.

    ``None`` means the default, which matches nothing.

    Raises:
        UnsupportedPredicateError: if ``option`` (or a list member) has an unsupported type.
    """
    if option is None:
        return NEVER
    if isinstance(option, Always | Equals | Matches | Custom | AnyOf):
        return option
    if isinstance(option, bool):
        return ALWAYS if option else NEVER
    if isinstance(option, str):
        return Equals(key=option)
    if isinstance(option, re.Pattern):
        return Matches(pattern=option)
    if isinstance(option, list | tuple):
        return AnyOf(predicates=[as_predicate(item) for item in option])
    if callable(option):
        return Custom(fn=option)
    raise UnsupportedPredicateError(option)


def evaluate(predicate: Predicate, key: str, value: str) -> bool:
    """Apply a predicate to a parsed attribute.

    Exceptions raised by custom callables propagate to the caller.
    """
    match predicate:
        case Always(value=result):
            return result
        case Equals(key=expected):
            return key == expected
        case Matches(pattern=pattern):
            return pattern.search(key) is not None
        case Custom(fn=fn):
            return bool(fn(key, value))
        case AnyOf(predicates=predicates):
            return any(evaluate(p, key, value) for p in predicates)
    raise UnsupportedPredicateError(predicate)
