"""Tests for namespace derivation."""

import pytest

from sitechat.core.exceptions import ValidationError
from sitechat.core.ingestion.namespace import derive_namespace


class TestDeriveNamespace:
    """Test suite for derive_namespace."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://a.b.com/x/y/", "a-b-com-x-y"),
            ("https://a.b.com/x/y", "a-b-com-x-y"),
            ("https://example.com", "example-com"),
            ("https://example.com/", "example-com"),
            ("http://docs.example.org/guide/intro.html", "docs-example-org-guide-intro.html"),
        ],
    )
    def test_should_replace_dots_and_slashes(self, url: str, expected: str) -> None:
        assert derive_namespace(url) == expected

    def test_should_ignore_query_and_fragment(self) -> None:
        assert derive_namespace("https://example.com/docs?page=2#top") == "example-com-docs"

    def test_should_ignore_port(self) -> None:
        assert derive_namespace("http://localhost:8080/app") == "localhost-app"

    def test_same_host_and_path_should_share_namespace(self) -> None:
        assert derive_namespace("https://example.com/a/") == derive_namespace("https://example.com/a")

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("file:///tmp/page.html", "-tmp-page.html"),
            ("urn:isbn:0451450523", "isbn:0451450523"),
            ("mailto:team@example.com", "team@example.com"),
        ],
    )
    def test_should_accept_absolute_urls_without_host(self, url: str, expected: str) -> None:
        assert derive_namespace(url) == expected

    @pytest.mark.parametrize(
        "url", ["/relative/path", "example.com/no-scheme", "", "not a url", "https://"]
    )
    def test_should_reject_relative_or_empty_urls(self, url: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            derive_namespace(url)

        assert exc_info.value.details["field"] == "url"
