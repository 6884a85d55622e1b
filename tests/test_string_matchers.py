"""Tests for text matchers."""

import pytest

from anyvalue import (
    InvalidArgumentError,
    MatcherError,
    any_date_string,
    any_datetime_string,
    any_http_uri,
    any_string,
    any_time_string,
    string_matching,
    string_of_length,
    upcase_string,
)


class TestAnyString:
    def test_text(self) -> None:
        assert any_string() == "foo"
        assert any_string() == ""

    def test_non_text(self) -> None:
        assert any_string() != 42
        assert any_string() != b"foo"
        assert any_string() != None  # noqa: E711


class TestStringOfLength:
    def test_exact_length(self) -> None:
        assert string_of_length(3) == "foo"
        assert string_of_length(0) == ""

    def test_wrong_length(self) -> None:
        assert string_of_length(5) != "foo"

    def test_non_text_with_length(self) -> None:
        assert string_of_length(3) != ["a", "b", "c"]

    @pytest.mark.parametrize("length", [-1, "3", 3.0, True, None])
    def test_invalid_length_raises(self, length: object) -> None:
        with pytest.raises(InvalidArgumentError):
            string_of_length(length)  # type: ignore[arg-type]

    def test_describe(self) -> None:
        assert string_of_length(36).describe() == "<StringOfLength 36>"


class TestStringMatching:
    def test_match(self) -> None:
        x = string_matching("foo")
        assert x == "foo"
        assert x == "foo foo"

    def test_no_match(self) -> None:
        assert string_matching("foo") != "bar"

    def test_search_not_fullmatch(self) -> None:
        assert string_matching(r"\d+") == "abc123def"

    def test_anchored(self) -> None:
        m = string_matching(r"^\d+$")
        assert m == "12345"
        assert m != "12a45"

    def test_non_text(self) -> None:
        assert string_matching(r"\d+") != 123

    def test_invalid_regex_raises(self) -> None:
        with pytest.raises(MatcherError):
            string_matching(r"[invalid")

    def test_backreference_rejected_by_re2(self) -> None:
        with pytest.raises(MatcherError):
            string_matching(r"(a)\1")

    def test_non_string_pattern_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            string_matching(42)  # type: ignore[arg-type]

    def test_describe(self) -> None:
        assert string_matching("foo").describe() == "<StringMatching 'foo'>"


class TestUpcaseString:
    def test_upper(self) -> None:
        assert upcase_string() == "FOO"
        assert upcase_string() == "A1"
        assert upcase_string() == ""

    def test_not_upper(self) -> None:
        assert upcase_string() != "Foo"
        assert upcase_string() != 42


class TestTemporalStrings:
    @pytest.mark.parametrize(
        "text", ["2024-05-01T10:30:00Z", "10:30", "May 1 2024 10:30", "2024-05-01"]
    )
    def test_time_strings(self, text: str) -> None:
        assert any_time_string() == text

    @pytest.mark.parametrize("text", ["2024-05-01", "May 1 2024", "1 May", "2024/05/01"])
    def test_date_strings(self, text: str) -> None:
        assert any_date_string() == text

    def test_month_alone_is_a_date(self) -> None:
        assert any_date_string() == "May"
        assert any_date_string() == "Feb 29"

    def test_clock_time_is_not_a_date(self) -> None:
        assert any_date_string() != "10:30"

    def test_bare_day_or_year_is_not_a_date(self) -> None:
        assert any_date_string() != "15"
        assert any_date_string() != "2024"

    @pytest.mark.parametrize("text", ["2024-05-01 10:30", "2024-05-01T10:30:00+02:00"])
    def test_datetime_strings(self, text: str) -> None:
        assert any_datetime_string() == text

    @pytest.mark.parametrize(
        "matcher", [any_time_string(), any_date_string(), any_datetime_string()]
    )
    @pytest.mark.parametrize("candidate", ["banana", "", "2024-13-45", 42, None])
    def test_unparseable_is_false_not_error(self, matcher: object, candidate: object) -> None:
        assert matcher != candidate


class TestAnyHTTPURI:
    @pytest.mark.parametrize(
        "uri",
        [
            "http://example.com",
            "https://example.com/path?q=1#frag",
            "HTTP://EXAMPLE.COM",
            "http://localhost:8080/",
            "http://user:pw@127.0.0.1/",
        ],
    )
    def test_http_uris(self, uri: str) -> None:
        assert any_http_uri() == uri

    @pytest.mark.parametrize(
        "candidate",
        [
            "not a uri",
            "ftp://x",
            "mailto:someone@example.com",
            "example.com",
            "http://",
            "http://example.com:notaport",
            "http://[::1",
            "http://exa mple.com",
            42,
            None,
        ],
    )
    def test_non_http_uris(self, candidate: object) -> None:
        assert any_http_uri() != candidate
