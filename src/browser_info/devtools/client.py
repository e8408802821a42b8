"""Chromium remote-debugging HTTP client (``--remote-debugging-port``)."""

from __future__ import annotations

import logging

from browser_info.config import DEFAULT_DEVTOOLS_HOST, DEFAULT_DEVTOOLS_PORT
from browser_info.exceptions import NetworkError, NoActiveTabsError, ParseError
from browser_info.extraction.urls import validate_url
from browser_info.models import CHROME, BrowserInfo, DevToolsTab, WindowPosition

logger = logging.getLogger(__name__)

PAGE_TAB_TYPE = "page"


class DevToolsClient:
    """Read the foreground page from a browser's remote-debugging endpoint.

    Only works when the browser was started with ``--remote-debugging-port``.
    Each call opens and closes its own connection.

    Args:
        host: Host the endpoint listens on.
        port: Remote-debugging port (Chromium default 9222).
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        host: str = DEFAULT_DEVTOOLS_HOST,
        port: int = DEFAULT_DEVTOOLS_PORT,
        timeout: float = 3.0,
        transport=None,
        logger: logging.Logger = logger,
    ):
        try:
            import httpx  # noqa: F401
        except ImportError:
            raise ImportError(
                "httpx is required for DevToolsClient. "
                "Install with: pip install httpx"
            )
        self.host = host
        self.port = port
        self.timeout = timeout
        self.transport = transport
        self.logger = logger

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def _client(self):
        import httpx

        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def is_available(self) -> bool:
        """True when ``/json/version`` answers with a 2xx status."""
        import httpx

        try:
            async with self._client() as client:
                response = await client.get("/json/version")
        except httpx.HTTPError as e:
            self.logger.debug("Remote debugging not reachable at %s: %s", self.base_url, e)
            return False
        available = response.is_success
        if not available:
            self.logger.debug(
                "Remote debugging probe at %s returned %s", self.base_url, response.status_code
            )
        return available

    async def get_tabs(self) -> list[DevToolsTab]:
        """Fetch the tab list from ``/json``.

        Raises:
            NetworkError: connection failure, timeout or non-2xx status.
            ParseError: the body is not a JSON array of tab objects.
        """
        import httpx

        try:
            async with self._client() as client:
                response = await client.get("/json")
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"Remote debugging request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Remote debugging returned invalid JSON: {e}") from e
        return parse_tabs(data)

    async def extract_browser_info(self) -> BrowserInfo:
        """Build a BrowserInfo from the first page-type tab.

        Process id, version, tab count, private mode and window geometry are not
        exposed by this API and are left at their defaults.

        Raises:
            NoActiveTabsError: no tab of type "page".
            InvalidUrlError: the page URL is not http(s)/file.
        """
        tabs = await self.get_tabs()
        tab = select_active_tab(tabs)
        url = validate_url(tab.url, "remote debugging")
        self.logger.info("Remote debugging returned %s", url)
        return BrowserInfo(
            url=url,
            title=tab.title,
            browser_name="Chrome",
            browser_type=CHROME,
            version=None,
            tabs_count=None,
            is_incognito=False,
            process_id=0,
            window_position=WindowPosition(),
        )


def parse_tabs(data) -> list[DevToolsTab]:
    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array of tabs, got {type(data).__name__}")
    tabs: list[DevToolsTab] = []
    for item in data:
        if not isinstance(item, dict):
            raise ParseError(f"Expected a tab object, got {type(item).__name__}")
        try:
            tabs.append(DevToolsTab(
                id=str(item["id"]),
                title=str(item.get("title", "")),
                url=str(item["url"]),
                type=str(item["type"]),
            ))
        except KeyError as e:
            raise ParseError(f"Tab entry missing field {e}") from e
    return tabs


def select_active_tab(tabs: list[DevToolsTab]) -> DevToolsTab:
    """First tab of type "page", in list order."""
    for tab in tabs:
        if tab.type == PAGE_TAB_TYPE:
            return tab
    raise NoActiveTabsError()
