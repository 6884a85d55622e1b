"""Matchers over text candidates.

Every matcher here returns False for non-string candidates. The refined
variants (length, pattern, upper case, parseable temporal or URI text) first
require AnyString and then add their own predicate.

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind because they require
backtracking, so patterns using them are rejected at construction time.

Temporal strings are parsed with ``python-dateutil``, which is lenient in
the same way a hand-written test fixture usually is ("2024-05-01",
"May 1 2024 10:00", "10:00"). A string that fails to parse simply does not
match: parse failures are never propagated.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, ClassVar
from urllib.parse import urlsplit

import re2
from dateutil import parser as date_parser

from anyvalue._matcher import InvalidArgumentError, Matcher, MatcherError

_HTTP_SCHEMES = frozenset({"http", "https"})

# Two leap-year defaults that differ in every date field: a field the string
# does not carry shows up as a difference between the two parses.
_DEFAULT_A = dt.datetime(2000, 1, 1)
_DEFAULT_B = dt.datetime(2004, 2, 2)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyString(Matcher):
    coerces_to_text: ClassVar[bool] = True

    def equals(self, candidate: Any, /) -> bool:
        return isinstance(candidate, str)


_ANY_STRING = AnyString()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class StringOfLength(Matcher):
    """Text of exactly ``length`` characters.

    Raises:
        InvalidArgumentError: If length is not a non-negative int.
    """

    length: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.length, int)
            or isinstance(self.length, bool)
            or self.length < 0
        ):
            msg = f"invalid argument: length must be a non-negative int, got {self.length!r}"
            raise InvalidArgumentError(msg)

    def equals(self, candidate: Any, /) -> bool:
        return _ANY_STRING.equals(candidate) and len(candidate) == self.length

    def describe(self) -> str:
        return f"<StringOfLength {self.length}>"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class StringMatching(Matcher):
    """Text containing a match for a regular expression (search, not fullmatch).

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            msg = f"invalid argument: pattern must be a str, got {self.pattern!r}"
            raise InvalidArgumentError(msg)
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def equals(self, candidate: Any, /) -> bool:
        return (
            _ANY_STRING.equals(candidate)
            and self._compiled.search(candidate) is not None
        )

    def describe(self) -> str:
        return f"<StringMatching {self.pattern!r}>"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class UpcaseString(Matcher):
    """Text that is unchanged by upper-casing ("FOO", "A1", "")."""

    def equals(self, candidate: Any, /) -> bool:
        return _ANY_STRING.equals(candidate) and candidate.upper() == candidate


def _parse_datetime(text: str, default: dt.datetime) -> dt.datetime | None:
    try:
        return date_parser.parse(text, default=default)
    except (ValueError, OverflowError):
        return None


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyTimeString(Matcher):
    """Text parseable as a time ("10:30", "2024-05-01T10:30:00Z")."""

    def equals(self, candidate: Any, /) -> bool:
        return (
            _ANY_STRING.equals(candidate)
            and _parse_datetime(candidate, _DEFAULT_A) is not None
        )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyDateTimeString(Matcher):
    """Text parseable as a date-time ("2024-05-01 10:30", "May 1 2024 8pm")."""

    def equals(self, candidate: Any, /) -> bool:
        return (
            _ANY_STRING.equals(candidate)
            and _parse_datetime(candidate, _DEFAULT_A) is not None
        )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyDateString(Matcher):
    """Text parseable as a calendar date.

    The text must name at least a month. The day and year may be omitted
    ("May", "May 1"), but a bare time ("10:30") is not a date.
    """

    def equals(self, candidate: Any, /) -> bool:
        if not _ANY_STRING.equals(candidate):
            return False
        parsed_a = _parse_datetime(candidate, _DEFAULT_A)
        parsed_b = _parse_datetime(candidate, _DEFAULT_B)
        if parsed_a is None or parsed_b is None:
            return False
        return parsed_a.month == parsed_b.month


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AnyHTTPURI(Matcher):
    """Text that is an absolute http or https URI with a host.

    Whitespace anywhere in the text, a bad port, or an unparseable
    authority makes the candidate a non-URI (False), not an error.
    """

    def equals(self, candidate: Any, /) -> bool:
        if not _ANY_STRING.equals(candidate):
            return False
        if any(ch.isspace() for ch in candidate):
            return False
        try:
            parts = urlsplit(candidate)
            # .port validates the port lazily and raises ValueError
            parts.port  # noqa: B018
        except ValueError:
            return False
        return parts.scheme.lower() in _HTTP_SCHEMES and bool(parts.hostname)
