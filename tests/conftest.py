"""Shared test configuration."""

# Registers the ``matchers`` fixture and the assertion explanation hook.
from anyvalue.pytest_plugin import matchers, pytest_assertrepr_compare  # noqa: F401
