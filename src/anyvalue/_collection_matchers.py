"""Matchers over sequence candidates.

A sequence is any ``collections.abc.Sequence`` except text and bytes:
``"abc"`` is a string, not an array of characters.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from anyvalue._matcher import InvalidArgumentError, Matcher


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class SortedArray(Matcher):
    """A sequence equal to its own ascending sort.

    Equivalent to ``array_of(increasing())`` but without shared history.
    A sequence whose elements cannot be ordered against each other is not
    sorted.
    """

    coerces_to_sequence: ClassVar[bool] = True

    def equals(self, candidate: Any, /) -> bool:
        if not is_sequence(candidate):
            return False
        items = list(candidate)
        try:
            return items == sorted(items)
        except TypeError:
            return False


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ArrayOf(Matcher):
    """A sequence whose every member satisfies ``element``.

    Empty sequences match vacuously. Evaluation stops at the first member
    that fails, so a stateful element matcher only sees members up to and
    including that one.

    Raises:
        InvalidArgumentError: If element is not a Matcher.
    """

    element: Matcher

    def __post_init__(self) -> None:
        if not isinstance(self.element, Matcher):
            msg = f"invalid argument: {self.element!r}"
            raise InvalidArgumentError(msg)

    def equals(self, candidate: Any, /) -> bool:
        if not is_sequence(candidate):
            return False
        return all(self.element.equals(item) for item in candidate)

    def describe(self) -> str:
        return f"<ArrayOf {self.element.describe()}>"
