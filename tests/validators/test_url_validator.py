"""Tests for website URL validation."""

import pytest

from fieldcheck.validators.url import validate_website_url


class TestWebsiteURLValidation:
    """Test website URL validation."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.example.com",
            "http://example.com",
            "HTTPS://WWW.EXAMPLE.COM",
            "https://sub-domain.example.co.uk",
            "http://example.com:8080",
            "https://example.com/path/to/page",
            "https://example.com:443/a-b_c.html",
            "  https://example.com  ",
        ],
    )
    def test_valid_urls(self, url):
        """Test http(s) URLs with optional port and path pass."""
        assert validate_website_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "www.example.com",
            "example.com",
            "http//invalid-url",
            "htp://example.com",
            "ftp://example.com",
            "https://example",
            "https://example.c",
            "https://example.com:123456",
            "https://exa mple.com",
            "https://exämple.com",
        ],
    )
    def test_invalid_urls(self, url):
        """Test URLs without a proper scheme or host fail."""
        assert validate_website_url(url) is False
