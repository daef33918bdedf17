"""
Redirect Service

This service handles URL redirection logic.
Separated from the URL service so that a real lookup can be dropped in
without touching the endpoints.

There is no backing store, so every lookup misses.
"""

from typing import Optional


class RedirectService:
    """
    Service for resolving short identifiers to their original URLs.
    """

    def get_redirect_url(self, short_id: str) -> Optional[str]:
        """
        Get the original URL for redirection.

        Returns:
            The original URL, or None when the identifier is unknown
        """
        return None
