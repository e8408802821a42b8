"""Remote-debugging (DevTools HTTP) access to the foreground page."""

from browser_info.devtools.client import DevToolsClient, parse_tabs, select_active_tab

__all__ = ["DevToolsClient", "parse_tabs", "select_active_tab"]
