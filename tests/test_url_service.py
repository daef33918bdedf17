"""
Tests for the URL shortening service.

Covers short identifier synthesis and short URL construction. The clock
is injected so every identifier is deterministic.
"""

import re

import pytest

from shortener.services.redirect_service import RedirectService
from shortener.services.url_service import ShortURL, URLShorteningService, generate_short_id
from tests.conftest import make_settings


class TestShortIdGeneration:
    """Test generate_short_id."""

    def test_known_timestamps(self):
        assert generate_short_id(1700000000) == "abc0"
        assert generate_short_id(1700001234) == "abc1234"
        assert generate_short_id(1700000042) == "abc42"
        assert generate_short_id(9999) == "abc9999"

    def test_fractional_seconds_are_truncated(self):
        assert generate_short_id(1700000007.999) == "abc7"

    def test_format(self):
        """Every identifier is 'abc' followed by 1-4 digits."""
        for timestamp in [0, 1, 10, 999, 10000, 123456789, 1700009999]:
            short_id = generate_short_id(timestamp)
            assert re.fullmatch(r"abc\d{1,4}", short_id), short_id

    def test_same_second_collides(self):
        """No uniqueness guarantee: identical seconds give identical identifiers."""
        assert generate_short_id(1700000500.1) == generate_short_id(1700000500.9)


class TestURLShorteningService:
    """Test URLShorteningService."""

    def test_create_short_url(self):
        service = URLShorteningService(make_settings(), clock=lambda: 1700000000)
        result = service.create_short_url("https://example.com")

        assert result == ShortURL(
            short_id="abc0",
            original_url="https://example.com",
            short_url="http://localhost:8080/abc0",
        )

    def test_short_url_uses_configured_port(self):
        service = URLShorteningService(make_settings(PORT=9090), clock=lambda: 1700000077)
        assert service.create_short_url("https://example.com").short_url == (
            "http://localhost:9090/abc77"
        )

    def test_short_url_uses_public_base_url(self):
        settings = make_settings(PUBLIC_BASE_URL="https://sho.rt/")
        service = URLShorteningService(settings, clock=lambda: 1700000001)
        assert service.create_short_url("https://example.com").short_url == "https://sho.rt/abc1"

    @pytest.mark.parametrize("url", ["not-a-url", "ftp://example.com", "https://例え.jp/パス?q=1"])
    def test_original_url_is_echoed_verbatim(self, url):
        service = URLShorteningService(make_settings(), clock=lambda: 1700000000)
        assert service.create_short_url(url).original_url == url


def test_redirect_lookup_always_misses():
    service = RedirectService()
    assert service.get_redirect_url("abc0") is None
    assert service.get_redirect_url("") is None
