"""URL acceptance rules and the title-based last-resort guess."""

from __future__ import annotations

import logging

from browser_info.exceptions import InvalidUrlError, UrlExtractionFailedError

logger = logging.getLogger(__name__)

_ALLOWED_PREFIXES = ("http://", "https://", "file://")

# Checked in order; first substring hit wins.
TITLE_URL_HINTS = (
    ("claude", "https://claude.ai/chat"),
    ("github", "https://github.com"),
    ("google", "https://www.google.com"),
    ("youtube", "https://www.youtube.com"),
    ("stackoverflow", "https://stackoverflow.com"),
    ("twitter", "https://x.com"),
    ("x.com", "https://x.com"),
    ("reddit", "https://www.reddit.com"),
)


def is_valid_url(url: str | None) -> bool:
    """True when ``url`` starts with http://, https:// or file://."""
    if not url:
        return False
    return url.strip().lower().startswith(_ALLOWED_PREFIXES)


def validate_url(url: str | None, source: str = "extraction") -> str:
    """Return the stripped URL or raise InvalidUrlError."""
    candidate = (url or "").strip()
    if not is_valid_url(candidate):
        raise InvalidUrlError(f"Invalid URL format from {source}: {candidate!r}")
    return candidate


def url_from_title(title: str) -> str:
    """Guess a canonical URL from well-known service names in a window title.

    Raises:
        UrlExtractionFailedError: no known service name appears in the title.
    """
    title_lower = (title or "").lower()
    for needle, url in TITLE_URL_HINTS:
        if needle in title_lower:
            logger.debug("Title %r matched %r, guessing %s", title, needle, url)
            return url
    raise UrlExtractionFailedError(f"Cannot determine URL from title: {title!r}")
