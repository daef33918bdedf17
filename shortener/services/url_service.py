"""
URL Shortening Service

This service handles the business logic for URL shortening:
- Synthesizing a short identifier from the current time
- Building the complete short URL from the configured base

Design Decisions:
- Time-based: short_id is "abc" followed by the unix time modulo 10000
- Not unique: two requests within the same second get the same identifier
- Stateless: nothing is stored, so the identifier never resolves back
- Clock is injectable so the identifier is deterministic under test
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from shortener.core.setting import Settings

logger = logging.getLogger(__name__)

SHORT_ID_PREFIX = "abc"
SHORT_ID_MODULUS = 10000


@dataclass(frozen=True)
class ShortURL:
    """A freshly generated short URL. Lives for one request only."""
    short_id: str
    original_url: str
    short_url: str


def generate_short_id(timestamp: float) -> str:
    """
    Build a short identifier from a unix timestamp.

    Args:
        timestamp: Seconds since the epoch (fractions are truncated)

    Returns:
        "abc" followed by 1-4 digits

    Example:
        generate_short_id(1700000000) -> "abc0"
        generate_short_id(1700001234.9) -> "abc1234"
    """
    return f"{SHORT_ID_PREFIX}{int(timestamp) % SHORT_ID_MODULUS}"


class URLShorteningService:
    """
    Service for creating short URLs.

    Stateless apart from the settings and clock it is constructed with.
    """

    def __init__(self, settings: Settings, clock: Callable[[], float] = time.time):
        """
        Args:
            settings: Application settings (used for the short URL base)
            clock: Returns the current unix time in seconds
        """
        self.settings = settings
        self.clock = clock

    def build_short_url(self, short_id: str) -> str:
        return f"{self.settings.base_url}/{short_id}"

    def create_short_url(self, original_url: str) -> ShortURL:
        """
        Create a short URL for original_url.

        The original URL is echoed back verbatim.
        """
        short_id = generate_short_id(self.clock())
        short_url = ShortURL(
            short_id=short_id,
            original_url=original_url,
            short_url=self.build_short_url(short_id),
        )
        logger.debug("Generated short_id=%s for %s", short_id, original_url)
        return short_url
