"""Unified exception hierarchy for browser-info."""

from __future__ import annotations


class BrowserInfoError(Exception):
    """Base exception for all browser-info errors."""

    kind = "other"


# Window / classification
class WindowNotFoundError(BrowserInfoError):
    """No active window could be found."""

    kind = "window_not_found"

    def __init__(self, message: str = "No active window found"):
        super().__init__(message)


class NotABrowserError(BrowserInfoError):
    """The active window is not a browser."""

    kind = "not_a_browser"

    def __init__(self, message: str = "Active window is not a browser"):
        super().__init__(message)


class BrowserDetectionFailedError(BrowserInfoError):
    """Browser detection failed."""

    kind = "browser_detection_failed"


# URL extraction
class UrlExtractionFailedError(BrowserInfoError):
    """Failed to extract a URL from the browser."""

    kind = "url_extraction_failed"


class InvalidUrlError(BrowserInfoError):
    """An extraction stage produced a value that is not an acceptable URL."""

    kind = "invalid_url"


class PlatformError(BrowserInfoError):
    """Platform-specific failure (script host, automation channel, OS support)."""

    kind = "platform_error"


class ExtractionTimeoutError(BrowserInfoError):
    """An extraction step exceeded its time budget."""

    kind = "timeout"

    def __init__(self, message: str = "Timeout during operation"):
        super().__init__(message)


class PermissionDeniedError(BrowserInfoError):
    """Permission denied, e.g. missing accessibility or automation rights on macOS."""

    kind = "permission_denied"

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message)


# Remote debugging
class NetworkError(BrowserInfoError):
    """Network failure talking to the remote-debugging endpoint."""

    kind = "network_error"


class ParseError(BrowserInfoError):
    """Malformed response from the remote-debugging endpoint."""

    kind = "parse_error"


class NoActiveTabsError(BrowserInfoError):
    """The remote-debugging endpoint reported no page tabs."""

    kind = "no_active_tabs"

    def __init__(self, message: str = "No active tabs found"):
        super().__init__(message)


class CapabilityUnavailableError(BrowserInfoError):
    """The remote-debugging endpoint is not reachable."""

    kind = "capability_unavailable"

    def __init__(self, message: str = "Remote debugging endpoint not available"):
        super().__init__(message)


# Catch-all
class OtherBrowserInfoError(BrowserInfoError):
    """Anything not covered by a more specific kind."""

    kind = "other"


class AllMethodsFailedError(OtherBrowserInfoError):
    """Every extraction method was tried and none produced a URL.

    ``errors`` holds the individual failures in the order they happened.
    """

    kind = "all_methods_failed"

    def __init__(self, errors: list[BrowserInfoError] | None = None):
        self.errors = list(errors or [])
        detail = "; ".join(f"{e.kind}: {e}" for e in self.errors)
        message = "All extraction methods failed"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


# Errors after which no other extraction method is attempted.
TERMINAL_ERRORS = (WindowNotFoundError, NotABrowserError)
