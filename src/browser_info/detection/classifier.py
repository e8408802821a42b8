"""Classify the foreground window as a browser and derive cheap metadata."""

from __future__ import annotations

import logging

from browser_info.exceptions import NotABrowserError
from browser_info.models import (
    BRAVE,
    CHROME,
    EDGE,
    FIREFOX,
    OPERA,
    SAFARI,
    VIVALDI,
    BrowserMetadata,
    BrowserType,
    WindowSnapshot,
)

logger = logging.getLogger(__name__)

BROWSER_INDICATORS = ("chrome", "firefox", "edge", "safari", "brave", "opera", "vivaldi")

PATH_DETECTION_LABEL = "detected_from_path"

INCOGNITO_MARKERS = ("incognito", "private", "inprivate")


def classify_browser(window: WindowSnapshot) -> BrowserType:
    """Map a window snapshot to a browser type.

    The application name is checked first. Edge ships a Chromium user agent and
    sometimes reports "chrome" in its name, so Chrome only matches when "edge"
    is absent. If the name says nothing, the process path is scanned for the
    same indicators; a path hit without a recognisable browser still counts as
    an (unknown) browser.

    Raises:
        NotABrowserError: neither the name nor the path looks like a browser.
    """
    app_name = (window.app_name or "").lower()

    browser_type = _classify_app_name(app_name)
    if browser_type is not None:
        return browser_type

    process_path = (window.process_path or "").lower()
    if is_browser_path(process_path):
        browser_type = _classify_path(process_path)
        logger.debug("Classified %r from process path as %s", window.app_name, browser_type)
        return browser_type

    raise NotABrowserError(f"Active window is not a browser: {window.app_name!r}")


def _classify_app_name(app_name: str) -> BrowserType | None:
    if "chrome" in app_name and "edge" not in app_name:
        return CHROME
    if "msedge" in app_name or "edge" in app_name:
        return EDGE
    if "firefox" in app_name:
        return FIREFOX
    if "safari" in app_name:
        return SAFARI
    if "brave" in app_name:
        return BRAVE
    if "opera" in app_name:
        return OPERA
    if "vivaldi" in app_name:
        return VIVALDI
    return None


def is_browser_path(path: str) -> bool:
    return any(indicator in path for indicator in BROWSER_INDICATORS)


def _classify_path(path: str) -> BrowserType:
    if "chrome" in path and "edge" not in path:
        return CHROME
    if "firefox" in path:
        return FIREFOX
    if "edge" in path:
        return EDGE
    return BrowserType.unknown(PATH_DETECTION_LABEL)


def get_browser_metadata(window: WindowSnapshot, browser_type: BrowserType) -> BrowserMetadata:
    # Version and tab count have no dependable source without talking to the
    # browser itself, so they stay unset.
    return BrowserMetadata(
        version=None,
        tabs_count=None,
        is_incognito=detect_incognito(window),
    )


def detect_incognito(window: WindowSnapshot) -> bool:
    """Guess private-browsing mode from the window title."""
    title = (window.title or "").lower()
    return any(marker in title for marker in INCOGNITO_MARKERS)
