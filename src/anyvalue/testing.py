"""Comparison front-end for assertions that mix matchers and concrete values.

Plain ``==`` already works for most cases because Matcher.__eq__ delegates
to equals() and Python reflects ``value == matcher`` onto the matcher.
compare() makes the contract explicit instead of relying on operator
dispatch:

- A matcher on the expected side is always asked first, as the receiver:
  ``expected.equals(actual)``.
- Mappings and same-typed lists/tuples are walked structurally, so
  matchers nested anywhere in the expected value are honoured.
- A matcher found only on the *actual* side is consulted when it advertises
  the capability for the expected value's shape (coerces_to_text for a str,
  coerces_to_sequence for a sequence). Any other matcher on the actual side
  compares unequal.

>>> from anyvalue import any_integer, any_string
>>> compare({"id": any_integer(), "name": "alice"}, {"id": 7, "name": "alice"})
True
>>> compare("alice", any_string())
True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from anyvalue._collection_matchers import is_sequence
from anyvalue._matcher import Matcher


def compare(expected: Any, actual: Any) -> bool:
    """Structural equality with matcher-as-receiver dispatch.

    Stricter than plain ``==`` when the matcher is on the actual side:
    ``42 == anything()`` is True through Python's reflected comparison, but
    ``compare(42, anything())`` is False because a number has no text or
    sequence shape for the matcher to stand in for. Put matchers on the
    expected side.
    """
    if isinstance(expected, Matcher):
        return expected.equals(actual)
    if isinstance(actual, Matcher):
        return _compare_coerced(expected, actual)
    if isinstance(expected, Mapping) and isinstance(actual, Mapping):
        if expected.keys() != actual.keys():
            return False
        return all(compare(expected[k], actual[k]) for k in expected)
    if isinstance(expected, (list, tuple)) and type(actual) is type(expected):
        if len(expected) != len(actual):
            return False
        return all(compare(e, a) for e, a in zip(expected, actual, strict=True))
    return bool(expected == actual)


def _compare_coerced(expected: Any, matcher: Matcher) -> bool:
    if isinstance(expected, str):
        return matcher.coerces_to_text and matcher.equals(expected)
    if is_sequence(expected):
        return matcher.coerces_to_sequence and matcher.equals(expected)
    return False


def assert_matches(expected: Any, actual: Any, msg: str | None = None) -> None:
    """Assert compare(expected, actual), reporting both sides on failure.

    Raises:
        AssertionError: If the values do not match.
    """
    if compare(expected, actual):
        return
    detail = f"expected {expected!r}, got {actual!r}"
    raise AssertionError(f"{msg}: {detail}" if msg else detail)  # noqa: EM102


def refute_matches(expected: Any, actual: Any, msg: str | None = None) -> None:
    """Assert that compare(expected, actual) is False.

    Raises:
        AssertionError: If the values match.
    """
    if not compare(expected, actual):
        return
    detail = f"expected {expected!r} not to match {actual!r}"
    raise AssertionError(f"{msg}: {detail}" if msg else detail)  # noqa: EM102
