"""Tests for header and query parameter handling."""

import pytest

from quotes.api.headers import (
    DEFAULT_CONTENT_TYPE,
    authorization_header,
    clean_headers,
    clean_params,
)
from quotes.config.indirection import EnvRef


class TestCleanHeaders:
    """Test Content-Type defaulting for mappings and lists."""

    def test_empty_mapping(self):
        assert clean_headers({}) == [("Content-Type", DEFAULT_CONTENT_TYPE)]

    def test_none(self):
        assert clean_headers(None) == [("Content-Type", DEFAULT_CONTENT_TYPE)]

    def test_mapping_with_content_type(self):
        assert clean_headers({"Content-Type": "application/xml"}) == [("Content-Type", "application/xml")]

    def test_mapping_merges_default(self):
        headers = clean_headers({"Authorization": "Bearer abc123"})
        assert sorted(headers) == [
            ("Authorization", "Bearer abc123"),
            ("Content-Type", DEFAULT_CONTENT_TYPE),
        ]

    def test_mapping_caller_value_wins(self):
        headers = clean_headers({"Authorization": "Bearer abc123", "Content-Type": "application/xml"})
        assert sorted(headers) == [
            ("Authorization", "Bearer abc123"),
            ("Content-Type", "application/xml"),
        ]

    def test_empty_list(self):
        assert clean_headers([]) == [("Content-Type", DEFAULT_CONTENT_TYPE)]

    def test_list_gets_default_prepended(self):
        assert clean_headers([("apples", "delicious")]) == [
            ("Content-Type", DEFAULT_CONTENT_TYPE),
            ("apples", "delicious"),
        ]

    def test_list_order_preserved(self):
        headers = [("apples", "delicious"), ("Content-Type", "application/xml")]
        assert clean_headers(headers) == headers

    def test_content_type_key_is_case_sensitive(self):
        headers = clean_headers([("content-type", "application/xml")])
        assert headers[0] == ("Content-Type", DEFAULT_CONTENT_TYPE)
        assert len(headers) == 2

    @pytest.mark.parametrize("headers", [
        {},
        {"Accept": "application/json"},
        {"Authorization": "Bearer x", "X-Trace": "1"},
        [],
        [("Accept", "*/*"), ("X-Trace", "1")],
    ])
    def test_default_present_exactly_once(self, headers):
        cleaned = clean_headers(headers)
        assert cleaned.count(("Content-Type", DEFAULT_CONTENT_TYPE)) == 1
        assert [key for key, _ in cleaned].count("Content-Type") == 1

    @pytest.mark.parametrize("headers", [
        {"Content-Type": "text/csv"},
        {"Accept": "*/*", "Content-Type": "text/csv"},
        [("Content-Type", "text/csv")],
        [("Accept", "*/*"), ("Content-Type", "text/csv")],
    ])
    def test_explicit_content_type_not_duplicated(self, headers):
        cleaned = clean_headers(headers)
        assert [value for key, value in cleaned if key == "Content-Type"] == ["text/csv"]


class TestAuthorizationHeader:
    """Test bearer token resolution."""

    def test_explicit_token(self):
        assert authorization_header("abc123") == ("Authorization", "Bearer abc123")

    def test_no_token(self):
        assert authorization_header() == ("Authorization", "Bearer ")

    def test_configured_token(self):
        assert authorization_header(configured="conf") == ("Authorization", "Bearer conf")

    def test_explicit_token_wins(self):
        assert authorization_header("explicit", configured="conf") == ("Authorization", "Bearer explicit")

    def test_configured_env_ref(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("QUOTES_SECRET", "s3cret")
        assert authorization_header(configured=EnvRef("QUOTES_SECRET")) == ("Authorization", "Bearer s3cret")

    def test_unresolved_env_ref(self):
        assert authorization_header(configured="env:QUOTES_MISSING_SECRET") == ("Authorization", "Bearer ")


class TestCleanParams:

    def test_empty(self):
        assert clean_params({}) is None
        assert clean_params(None) is None

    def test_passes_values_through(self):
        assert clean_params({"category": "inspire"}) == {"category": "inspire"}

    def test_drops_none_values(self):
        assert clean_params({"category": None}) is None
        assert clean_params({"category": None, "lang": "en"}) == {"lang": "en"}
