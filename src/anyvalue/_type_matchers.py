"""Matchers that accept a candidate by type, value set, or numeric parity.

``bool`` is a subclass of ``int`` in Python but is never treated as a
number here: ``any_integer() == True`` is False.
"""

from __future__ import annotations

import datetime as dt
import numbers
from dataclasses import dataclass
from typing import Any, ClassVar

from anyvalue._matcher import Matcher


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Anything(Matcher):
    """Equal to every value, including None and other matchers.

    Advertises both coercion capabilities, so it can stand in for text
    and for sequences on the actual side of a comparison.
    """

    coerces_to_sequence: ClassVar[bool] = True
    coerces_to_text: ClassVar[bool] = True

    def equals(self, candidate: Any, /) -> bool:
        return True


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyInteger(Matcher):
    def equals(self, candidate: Any, /) -> bool:
        return is_integer(candidate)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyNumber(Matcher):
    """Any numeric value: int, float, Decimal, Fraction, complex."""

    def equals(self, candidate: Any, /) -> bool:
        return is_number(candidate)


_ANY_NUMBER = AnyNumber()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class EvenNumber(Matcher):
    """A real number divisible by two. ``4.0`` is even, ``4.5`` is not."""

    def equals(self, candidate: Any, /) -> bool:
        return (
            _ANY_NUMBER.equals(candidate)
            and isinstance(candidate, numbers.Real)
            and candidate % 2 == 0
        )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OddNumber(Matcher):
    """A real number with remainder one modulo two."""

    def equals(self, candidate: Any, /) -> bool:
        return (
            _ANY_NUMBER.equals(candidate)
            and isinstance(candidate, numbers.Real)
            and candidate % 2 == 1
        )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OneOf(Matcher):
    """Membership in a fixed, ordered tuple of allowed values."""

    values: tuple[Any, ...]

    def equals(self, candidate: Any, /) -> bool:
        return candidate in self.values

    def describe(self) -> str:
        rendered = " ".join(repr(v) for v in self.values)
        return f"<OneOf {rendered}>"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyTime(Matcher):
    """A point in time (``datetime.datetime``)."""

    def equals(self, candidate: Any, /) -> bool:
        return isinstance(candidate, dt.datetime)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyDate(Matcher):
    """A calendar date. ``datetime.datetime`` is a date too."""

    def equals(self, candidate: Any, /) -> bool:
        return isinstance(candidate, dt.date)
