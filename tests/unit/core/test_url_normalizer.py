"""Tests for URL normalization."""

import pytest

from cacheban.core.exceptions import InvalidUrlError
from cacheban.core.services.url_normalizer import normalize_url


class TestNormalizeUrl:
    """Tests for normalize_url."""

    def test_strips_scheme_host_and_port(self) -> None:
        """Test that only path, query and fragment are kept."""
        result = normalize_url("http://example.com:8080/foo/bar?x=1#frag")

        assert result.path == "/foo/bar?x=1#frag"

    def test_strips_credentials(self) -> None:
        """Test that userinfo is discarded with the host."""
        assert normalize_url("https://user:pw@example.com/a").path == "/a"

    @pytest.mark.parametrize(
        "raw_url,expected",
        [
            ("/foo/bar", "/foo/bar"),
            ("/foo/bar?x=1", "/foo/bar?x=1"),
            ("/foo?x=1#top", "/foo?x=1#top"),
            ("/", "/"),
        ],
    )
    def test_idempotent_on_normalized_paths(self, raw_url: str, expected: str) -> None:
        """Test that normalized paths come back unchanged."""
        assert normalize_url(raw_url).path == expected
        assert normalize_url(normalize_url(raw_url).path).path == expected

    def test_round_trip_through_full_url(self) -> None:
        """Test normalizing an absolute form of a normalized path."""
        path = normalize_url("https://example.com/a/b?q=1#f").path

        assert normalize_url("https://other.example" + path).path == path

    def test_host_less_string_is_a_path(self) -> None:
        """Test that strings without scheme are treated as paths."""
        assert normalize_url("example.com/baz").path == "/example.com/baz"
        assert normalize_url("baz").path == "/baz"

    def test_network_path_reference_drops_host(self) -> None:
        """Test that //host/path is treated as having a host."""
        assert normalize_url("//example.com/baz").path == "/baz"

    def test_empty_path(self) -> None:
        """Test URLs without a path map to the root."""
        assert normalize_url("https://example.com").path == "/"
        assert normalize_url("").path == "/"

    def test_empty_query_and_fragment_are_kept(self) -> None:
        """Test that bare delimiters survive normalization."""
        assert normalize_url("https://example.com/a?").path == "/a?"
        assert normalize_url("https://example.com/a#").path == "/a#"
        assert normalize_url("https://example.com/a?#").path == "/a?#"

    def test_question_mark_in_fragment_is_not_a_query(self) -> None:
        """Test that a '?' after '#' belongs to the fragment."""
        assert normalize_url("https://example.com/a#x?y").path == "/a#x?y"

    def test_query_without_path(self) -> None:
        """Test a URL with a query but no path."""
        assert normalize_url("https://example.com?p=1").path == "/?p=1"

    def test_unparsable_url(self) -> None:
        """Test that a broken IPv6 literal is rejected."""
        with pytest.raises(InvalidUrlError):
            normalize_url("http://[::1/foo")

    def test_non_string_input(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidUrlError):
            normalize_url(None)  # type: ignore[arg-type]

    def test_invalid_url_error_is_value_error(self) -> None:
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            normalize_url(42)  # type: ignore[arg-type]
