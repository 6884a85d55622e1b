"""Matcher — the base contract every placeholder value implements.

A matcher stands in for an expected value inside an equality assertion:
- equals(candidate) decides whether a concrete value satisfies it
- describe() renders a human-readable description for failure output
- ``^`` ANDs two matchers into a Composite

``__eq__`` delegates to equals(), so ``matcher == value`` and
``value == matcher`` (via Python's reflected comparison) both route
through the matcher's predicate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar


class MatcherError(Exception):
    """Errors from matcher construction and evaluation."""


class InvalidArgumentError(MatcherError, TypeError):
    """A matcher constructor was given an unusable argument."""


class IncomparableValueError(MatcherError, TypeError):
    """A candidate cannot be ordered against previously recorded history."""

    def __init__(self, candidate: Any, recorded: Any) -> None:
        self.candidate = candidate
        self.recorded = recorded
        super().__init__(
            f"cannot order {candidate!r} ({type(candidate).__name__}) "
            f"against {recorded!r} ({type(recorded).__name__})"
        )


class Matcher(ABC):
    """Abstract placeholder value.

    Subclasses implement equals() and, where the class name alone is not
    descriptive enough, describe().

    The coercion flags let a comparison front-end treat a matcher found on
    the *actual* side as a stand-in for text or a sequence. See
    anyvalue.testing.compare().
    """

    __slots__ = ()

    coerces_to_sequence: ClassVar[bool] = False
    coerces_to_text: ClassVar[bool] = False

    @abstractmethod
    def equals(self, candidate: Any, /) -> bool: ...

    def describe(self) -> str:
        return f"<{type(self).__name__}>"

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    # Equality is predicate-based, so matchers are never hashable.
    __hash__ = None  # type: ignore[assignment]

    def __xor__(self, other: object) -> Composite:
        if not isinstance(other, Matcher):
            return NotImplemented
        return Composite(self, other)

    def __repr__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Composite(Matcher):
    """Logical AND of two matchers.

    Both sides are always evaluated, left first. There is no short-circuit,
    so a stateful right-hand side still records the candidate when the
    left-hand side has already rejected it.

    Chains fold left: ``a ^ b ^ c`` is ``Composite(Composite(a, b), c)``.
    The coercion flags follow the left operand.
    """

    left: Matcher
    right: Matcher

    def equals(self, candidate: Any, /) -> bool:
        left_ok = self.left.equals(candidate)
        right_ok = self.right.equals(candidate)
        return left_ok and right_ok

    def describe(self) -> str:
        return f"<Composite {self.left.describe()} {self.right.describe()}>"

    @property
    def coerces_to_sequence(self) -> bool:  # type: ignore[override]
        return self.left.coerces_to_sequence

    @property
    def coerces_to_text(self) -> bool:  # type: ignore[override]
        return self.left.coerces_to_text


def combine(left: Matcher, right: Matcher) -> Composite:
    """Function form of ``left ^ right``.

    Raises:
        InvalidArgumentError: If either operand is not a Matcher.
    """
    for operand in (left, right):
        if not isinstance(operand, Matcher):
            msg = f"invalid argument: {operand!r} is not a Matcher"
            raise InvalidArgumentError(msg)
    return Composite(left, right)
