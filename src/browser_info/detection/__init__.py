"""Browser classification for the foreground window."""

from browser_info.detection.classifier import (
    classify_browser,
    detect_incognito,
    get_browser_metadata,
    is_browser_path,
)

__all__ = [
    "classify_browser",
    "detect_incognito",
    "get_browser_metadata",
    "is_browser_path",
]
