"""Foreground window probing."""

from browser_info.window.probe import WindowProbe, get_active_window

__all__ = ["WindowProbe", "get_active_window"]
