"""Stateful matchers — the verdict depends on, and updates, per-instance history.

History lives on the instance and nowhere else. Reusing one instance across
a sequence of comparisons is what makes these useful, and constructing a new
instance starts from empty history. See MatcherScope for per-test
memoization.

Instances are not safe to share across concurrently running tests.

describe() renders the history as it was at the *start* of the most recent
equals() call, which is the state the rejected candidate was judged against.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Final

from anyvalue._matcher import IncomparableValueError, Matcher

logger = logging.getLogger(__name__)


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "unset"


UNSET: Final = _Unset()


@dataclass(slots=True, eq=False, repr=False)
class AnyUnique(Matcher):
    """True for a value not seen before by this instance, which then records it.

    Values are compared by equality. Hashable values are tracked in a set;
    unhashable ones (lists, dicts) fall back to a linear scan.
    No eviction: history grows for the instance's lifetime.
    """

    _seen: set[Any] = field(default_factory=set, init=False)
    _seen_unhashable: list[Any] = field(default_factory=list, init=False)
    _seen_count_before: int = field(default=0, init=False)

    def equals(self, candidate: Any, /) -> bool:
        self._seen_count_before = self.seen_count
        try:
            if candidate in self._seen:
                logger.debug("any_unique rejected repeat %r", candidate)
                return False
            self._seen.add(candidate)
        except TypeError:
            if candidate in self._seen_unhashable:
                logger.debug("any_unique rejected repeat %r", candidate)
                return False
            self._seen_unhashable.append(candidate)
        logger.debug("any_unique recorded %r", candidate)
        return True

    @property
    def seen_count(self) -> int:
        return len(self._seen) + len(self._seen_unhashable)

    def describe(self) -> str:
        return f"<AnyUnique seen={self._seen_count_before}>"


@dataclass(slots=True, eq=False, repr=False)
class Increasing(Matcher):
    """True iff the candidate is greater than the previously observed one.

    The first observation is always accepted. After every comparison, pass
    or fail, the candidate becomes the new baseline. This makes the check
    deliberately permissive: after ``1, 2, 3``, a ``1`` is rejected, and
    then ``2`` is accepted because it is compared against ``1``.

    Raises:
        IncomparableValueError: If the candidate cannot be ordered against
            the baseline. The baseline is left unchanged.
    """

    _last: Any = field(default=UNSET, init=False)
    _last_before: Any = field(default=UNSET, init=False)

    def equals(self, candidate: Any, /) -> bool:
        self._last_before = self._last
        if self._last is UNSET:
            self._last = candidate
            logger.debug("increasing baseline set to %r", candidate)
            return True
        try:
            result = bool(candidate > self._last)
        except TypeError as e:
            raise IncomparableValueError(candidate, self._last) from e
        if not result:
            logger.debug(
                "increasing rejected %r (not greater than %r)", candidate, self._last
            )
        self._last = candidate
        logger.debug("increasing baseline advanced to %r", candidate)
        return result

    @property
    def last(self) -> Any:
        """The current baseline, or UNSET before the first observation."""
        return self._last

    def describe(self) -> str:
        return f"<Increasing last={self._last_before!r}>"
