"""Constructor functions — the flat namespace tests build matchers from.

Module-level constructors always return a fresh instance. For the stateful
matchers that is rarely what a test wants, so MatcherScope offers the same
constructors with any_unique() and increasing() memoized per scope:

    m = MatcherScope()
    uuid = m.any_unique() ^ m.string_of_length(36)
    assert rows == [[uuid, "Alice"], [uuid, "Bob"]]
    assert m.any_unique() is m.any_unique()

The pytest plugin (anyvalue.pytest_plugin) hands each test its own scope as
the ``matchers`` fixture.
"""

from __future__ import annotations

from typing import Any

from anyvalue._collection_matchers import ArrayOf, SortedArray
from anyvalue._matcher import InvalidArgumentError, Matcher, combine
from anyvalue._stateful import AnyUnique, Increasing
from anyvalue._string_matchers import (
    AnyDateString,
    AnyDateTimeString,
    AnyHTTPURI,
    AnyString,
    AnyTimeString,
    StringMatching,
    StringOfLength,
    UpcaseString,
)
from anyvalue._type_matchers import (
    AnyDate,
    AnyInteger,
    AnyNumber,
    AnyTime,
    Anything,
    EvenNumber,
    OddNumber,
    OneOf,
)


def anything() -> Anything:
    return Anything()


def any_integer() -> AnyInteger:
    return AnyInteger()


def any_number() -> AnyNumber:
    return AnyNumber()


def even_number() -> EvenNumber:
    return EvenNumber()


def odd_number() -> OddNumber:
    return OddNumber()


def any_string() -> AnyString:
    return AnyString()


def one_of(*values: Any) -> OneOf:
    return OneOf(values)


def string_of_length(expected_length: int) -> StringOfLength:
    return StringOfLength(expected_length)


def string_matching(pattern: str) -> StringMatching:
    return StringMatching(pattern)


def upcase_string() -> UpcaseString:
    return UpcaseString()


def sorted_array() -> SortedArray:
    return SortedArray()


def array_of(element: Matcher) -> ArrayOf:
    return ArrayOf(element)


def any_unique() -> AnyUnique:
    """A fresh uniqueness tracker. Hold on to it, or use MatcherScope."""
    return AnyUnique()


def increasing() -> Increasing:
    """A fresh monotonic tracker. Hold on to it, or use MatcherScope."""
    return Increasing()


def any_time() -> AnyTime:
    return AnyTime()


def any_date() -> AnyDate:
    return AnyDate()


def any_time_string() -> AnyTimeString:
    return AnyTimeString()


def any_date_string() -> AnyDateString:
    return AnyDateString()


def any_datetime_string() -> AnyDateTimeString:
    return AnyDateTimeString()


def any_http_uri() -> AnyHTTPURI:
    return AnyHTTPURI()


def all_of(first: Matcher, *rest: Matcher) -> Matcher:
    """Fold matchers with ``^``, left to right.

    ``all_of(a, b, c)`` builds ``(a ^ b) ^ c``. A single matcher is returned
    as-is.

    Raises:
        InvalidArgumentError: If any argument is not a Matcher.
    """
    if not isinstance(first, Matcher):
        msg = f"invalid argument: {first!r} is not a Matcher"
        raise InvalidArgumentError(msg)
    result = first
    for m in rest:
        result = combine(result, m)
    return result


# Constructors whose result carries no history; MatcherScope passes them through.
STATELESS_CONSTRUCTORS = (
    anything,
    any_integer,
    any_number,
    even_number,
    odd_number,
    any_string,
    one_of,
    string_of_length,
    string_matching,
    upcase_string,
    sorted_array,
    array_of,
    any_time,
    any_date,
    any_time_string,
    any_date_string,
    any_datetime_string,
    any_http_uri,
)


class MatcherScope:
    """Owner of stateful matcher history for one test.

    Stateless constructors are plain pass-throughs. any_unique() and
    increasing() return the same instance on every call within this scope.
    Discard the scope to discard the history.

    Not thread-safe: a scope belongs to exactly one running test.
    """

    anything = staticmethod(anything)
    any_integer = staticmethod(any_integer)
    any_number = staticmethod(any_number)
    even_number = staticmethod(even_number)
    odd_number = staticmethod(odd_number)
    any_string = staticmethod(any_string)
    one_of = staticmethod(one_of)
    string_of_length = staticmethod(string_of_length)
    string_matching = staticmethod(string_matching)
    upcase_string = staticmethod(upcase_string)
    sorted_array = staticmethod(sorted_array)
    array_of = staticmethod(array_of)
    any_time = staticmethod(any_time)
    any_date = staticmethod(any_date)
    any_time_string = staticmethod(any_time_string)
    any_date_string = staticmethod(any_date_string)
    any_datetime_string = staticmethod(any_datetime_string)
    any_http_uri = staticmethod(any_http_uri)
    all_of = staticmethod(all_of)
    combine = staticmethod(combine)

    def __init__(self) -> None:
        self._any_unique: AnyUnique | None = None
        self._increasing: Increasing | None = None

    def any_unique(self) -> AnyUnique:
        if self._any_unique is None:
            self._any_unique = AnyUnique()
        return self._any_unique

    def increasing(self) -> Increasing:
        if self._increasing is None:
            self._increasing = Increasing()
        return self._increasing

    def reset(self) -> None:
        """Forget stateful history. The next any_unique()/increasing() is fresh."""
        self._any_unique = None
        self._increasing = None
