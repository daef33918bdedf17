"""URL shortener HTTP service."""
