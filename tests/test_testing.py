"""Tests for the comparison front-end and the pytest plugin hooks."""

from __future__ import annotations

import datetime as dt
import logging

import pytest

from anyvalue import (
    MatcherScope,
    any_integer,
    any_string,
    any_time,
    anything,
    array_of,
    sorted_array,
    upcase_string,
)
from anyvalue.pytest_plugin import pytest_assertrepr_compare
from anyvalue.testing import assert_matches, compare, refute_matches


class TestCompare:
    def test_matcher_is_receiver(self) -> None:
        assert compare(any_integer(), 1) is True
        assert compare(any_integer(), "1") is False

    def test_plain_values(self) -> None:
        assert compare(1, 1) is True
        assert compare("a", "b") is False

    def test_mapping(self) -> None:
        expected = {"id": any_integer(), "name": "alice"}
        assert compare(expected, {"id": 7, "name": "alice"}) is True
        assert compare(expected, {"id": "7", "name": "alice"}) is False

    def test_mapping_keys_must_match(self) -> None:
        assert compare({"id": anything()}, {"id": 1, "extra": 2}) is False
        assert compare({"id": anything()}, {}) is False

    def test_nested_sequences(self) -> None:
        expected = [{"tags": array_of(any_string())}, (1, any_integer())]
        assert compare(expected, [{"tags": ["a", "b"]}, (1, 2)]) is True
        assert compare(expected, [{"tags": ["a", 3]}, (1, 2)]) is False

    def test_sequence_length_and_type(self) -> None:
        assert compare([any_integer()], [1, 2]) is False
        assert compare([1, 2], (1, 2)) is False

    def test_matcher_on_expected_side_wins(self) -> None:
        assert compare(anything(), anything()) is True
        assert compare(any_integer(), any_integer()) is False


class TestReverseCoercion:
    """A matcher only on the actual side is consulted by capability."""

    def test_text_capability(self) -> None:
        assert compare("foo", any_string()) is True
        assert compare("FOO", any_string() ^ upcase_string()) is True
        assert compare("foo", any_string() ^ upcase_string()) is False

    def test_sequence_capability(self) -> None:
        assert compare([1, 2, 3], sorted_array()) is True
        assert compare([3, 2, 1], sorted_array()) is False

    def test_anything_coerces_to_both(self) -> None:
        assert compare("x", anything()) is True
        assert compare([1], anything()) is True

    def test_without_capability(self) -> None:
        assert compare("foo", any_integer()) is False
        assert compare(42, any_integer()) is False
        assert compare([1], array_of(any_integer())) is False

    def test_none_never_coerces(self) -> None:
        assert compare(None, anything()) is False

    def test_stricter_than_reflected_equality(self) -> None:
        assert 42 == anything()
        assert compare(42, anything()) is False
        assert compare(anything(), 42) is True


class TestAssertMatches:
    def test_passes(self) -> None:
        assert_matches({"id": any_integer()}, {"id": 1})

    def test_failure_message_describes_matcher(self) -> None:
        with pytest.raises(AssertionError, match=r"expected <AnyInteger>, got 'x'"):
            assert_matches(any_integer(), "x")

    def test_failure_message_prefix(self) -> None:
        with pytest.raises(AssertionError, match=r"^user id: expected"):
            assert_matches(any_integer(), "x", msg="user id")

    def test_refute(self) -> None:
        refute_matches(any_integer(), "x")
        with pytest.raises(AssertionError, match="not to match"):
            refute_matches(any_integer(), 1)

    def test_shape_of_api_rows(self, matchers: MatcherScope) -> None:
        rows = [
            {"id": "a" * 36, "created_at": dt.datetime.now(), "name": "Item 1"},
            {"id": "b" * 36, "created_at": dt.datetime.now(), "name": "Item 2"},
        ]
        uid = matchers.any_unique() ^ matchers.string_of_length(36)

        assert_matches(
            [
                {"id": uid, "created_at": any_time(), "name": "Item 1"},
                {"id": uid, "created_at": any_time(), "name": "Item 2"},
            ],
            rows,
        )
        # both ids are now recorded by the scope's tracker
        refute_matches(uid, "a" * 36)

    def test_normal_sequence_logs_nothing_above_debug(
        self, matchers: MatcherScope, caplog: pytest.LogCaptureFixture
    ) -> None:
        uid = matchers.any_unique()
        seq = matchers.increasing()
        with caplog.at_level(logging.DEBUG, logger="anyvalue"):
            for i in range(3):
                assert_matches({"id": uid, "seq": seq}, {"id": f"row-{i}", "seq": i})
            refute_matches({"id": uid, "seq": seq}, {"id": "row-0", "seq": 0})
        assert caplog.records
        assert all(r.levelno < logging.INFO for r in caplog.records)


class TestAssertReprCompare:
    def test_matcher_on_left(self) -> None:
        lines = pytest_assertrepr_compare(None, "==", any_integer(), "x")  # type: ignore[arg-type]
        assert lines == ["str value did not match <AnyInteger>", "candidate: 'x'"]

    def test_matcher_on_right(self) -> None:
        lines = pytest_assertrepr_compare(None, "==", 1.5, any_integer())  # type: ignore[arg-type]
        assert lines is not None
        assert lines[0] == "float value did not match <AnyInteger>"

    def test_other_operators_ignored(self) -> None:
        assert pytest_assertrepr_compare(None, "!=", any_integer(), 1) is None  # type: ignore[arg-type]

    def test_no_matcher_ignored(self) -> None:
        assert pytest_assertrepr_compare(None, "==", 1, 2) is None  # type: ignore[arg-type]
