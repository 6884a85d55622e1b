"""pytest integration.

Enable it from a conftest.py::

    pytest_plugins = ["anyvalue.pytest_plugin"]

Provides:
- the ``matchers`` fixture: a fresh MatcherScope per test, so any_unique()
  and increasing() accumulate history within a test and never across tests
- failure explanations that show a matcher's description when an ``==``
  assertion involving a matcher fails
"""

from __future__ import annotations

from typing import Any

import pytest

from anyvalue._factory import MatcherScope
from anyvalue._matcher import Matcher


@pytest.fixture
def matchers() -> MatcherScope:
    """A MatcherScope owned by the requesting test."""
    return MatcherScope()


def pytest_assertrepr_compare(
    config: pytest.Config, op: str, left: Any, right: Any
) -> list[str] | None:
    if op != "==":
        return None
    if isinstance(left, Matcher):
        matcher, candidate = left, right
    elif isinstance(right, Matcher):
        matcher, candidate = right, left
    else:
        return None
    return [
        f"{type(candidate).__name__} value did not match {matcher.describe()}",
        f"candidate: {candidate!r}",
    ]
