"""Public entry points: resolve the foreground browser and its current URL."""

from __future__ import annotations

import logging

from browser_info.config import ExtractorConfig
from browser_info.detection.classifier import classify_browser, get_browser_metadata
from browser_info.exceptions import (
    TERMINAL_ERRORS,
    AllMethodsFailedError,
    BrowserInfoError,
    CapabilityUnavailableError,
    ExtractionTimeoutError,
    InvalidUrlError,
    NetworkError,
    NoActiveTabsError,
    ParseError,
    PermissionDeniedError,
    PlatformError,
    UrlExtractionFailedError,
    WindowNotFoundError,
)
from browser_info.models import BrowserInfo, BrowserType, ExtractionMethod, WindowSnapshot
from browser_info.platform import ExtractionStrategy, select_strategy
from browser_info.window.probe import WindowProbe, get_active_window

logger = logging.getLogger(__name__)

# Most to least informative, used to pick the cause of AllMethodsFailedError.
_ERROR_SPECIFICITY = (
    InvalidUrlError,
    ParseError,
    PermissionDeniedError,
    ExtractionTimeoutError,
    NoActiveTabsError,
    PlatformError,
    UrlExtractionFailedError,
    NetworkError,
    CapabilityUnavailableError,
)


class BrowserInfoClient:
    """Resolve the foreground browser window, classify it and extract its URL.

    Nothing is cached between calls; each call takes a fresh window snapshot.

    Args:
        config: Extraction settings; defaults to ``ExtractorConfig.from_env()``.
        window_probe: Callable returning the current ``WindowSnapshot``.
        strategy: Native extraction strategy; chosen from the host OS if omitted.
        devtools: Remote-debugging client; built from ``config`` when needed.
        logger: Logger used by this client and the default strategy.
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        window_probe: WindowProbe | None = None,
        strategy: ExtractionStrategy | None = None,
        devtools=None,
        logger: logging.Logger = logger,
    ):
        self.config = config or ExtractorConfig.from_env()
        self.window_probe = window_probe or get_active_window
        self.logger = logger
        self.strategy = strategy or select_strategy(self.config, logger=logger)
        self._devtools = devtools

    @property
    def devtools(self):
        if self._devtools is not None:
            return self._devtools
        from browser_info.devtools.client import DevToolsClient

        return DevToolsClient(
            host=self.config.devtools_host,
            port=self.config.devtools_port,
            timeout=self.config.devtools_timeout,
            logger=self.logger,
        )

    # -- window resolution -------------------------------------------------

    def resolve_window(self) -> WindowSnapshot:
        """Snapshot the foreground window; every failure is WindowNotFoundError."""
        try:
            return self.window_probe()
        except ImportError:
            raise
        except WindowNotFoundError:
            raise
        except Exception as e:
            raise WindowNotFoundError(f"Window probe failed: {e}") from e

    def resolve_browser(self) -> tuple[WindowSnapshot, BrowserType]:
        window = self.resolve_window()
        browser_type = classify_browser(window)
        self.logger.debug("Foreground window %r classified as %s", window.app_name, browser_type)
        return window, browser_type

    def is_browser_active(self) -> bool:
        """True when the foreground window is a browser."""
        try:
            self.resolve_browser()
        except ImportError as e:
            self.logger.warning("Window probe unavailable: %s", e)
            return False
        except BrowserInfoError:
            return False
        return True

    # -- native automation ---------------------------------------------------

    def get_info_native(self) -> BrowserInfo:
        """Extract via the platform strategy only (blocks on child processes)."""
        window, browser_type = self.resolve_browser()
        url = self.strategy.extract_url(window, browser_type)
        metadata = get_browser_metadata(window, browser_type)
        return BrowserInfo(
            url=url,
            title=window.title,
            browser_name=window.app_name,
            browser_type=browser_type,
            version=metadata.version,
            tabs_count=metadata.tabs_count,
            is_incognito=metadata.is_incognito,
            process_id=window.process_id,
            window_position=window.position,
        )

    def get_url(self) -> str:
        """Lightweight variant returning only the URL."""
        window, browser_type = self.resolve_browser()
        return self.strategy.extract_url(window, browser_type)

    # -- remote debugging ----------------------------------------------------

    async def get_info_devtools(self) -> BrowserInfo:
        """Extract via the remote-debugging endpoint only.

        Raises:
            CapabilityUnavailableError: the endpoint is not reachable.
        """
        devtools = self.devtools
        if not await devtools.is_available():
            raise CapabilityUnavailableError(
                f"Remote debugging not available on port {self.config.devtools_port}"
            )
        return await devtools.extract_browser_info()

    # -- method selection ----------------------------------------------------

    async def get_info(self, method: ExtractionMethod = ExtractionMethod.AUTO) -> BrowserInfo:
        """Extract browser info with the requested method."""
        method = ExtractionMethod(method)
        if method is ExtractionMethod.NATIVE_AUTOMATION:
            return self.get_info_native()
        if method is ExtractionMethod.REMOTE_DEBUGGING:
            return await self.get_info_devtools()
        return await self._get_info_auto()

    async def _get_info_auto(self) -> BrowserInfo:
        errors: list[BrowserInfoError] = []
        try:
            return self.get_info_native()
        except TERMINAL_ERRORS:
            raise
        except BrowserInfoError as e:
            self.logger.warning(f"Native extraction failed ({e.kind}): {e}; trying remote debugging")
            errors.append(e)

        try:
            info = await self.get_info_devtools()
        except BrowserInfoError as e:
            self.logger.warning(f"Remote debugging failed ({e.kind}): {e}")
            errors.append(e)
        else:
            self.logger.info("Using remote debugging result")
            return info

        raise AllMethodsFailedError(errors) from _most_specific(errors)


def _most_specific(errors: list[BrowserInfoError]) -> BrowserInfoError | None:
    for error_type in _ERROR_SPECIFICITY:
        for error in errors:
            if isinstance(error, error_type):
                return error
    return errors[0] if errors else None


# -- module-level conveniences ------------------------------------------------

def get_active_browser_info() -> BrowserInfo:
    """Browser info for the foreground window using native automation."""
    return BrowserInfoClient().get_info_native()


def get_active_browser_url() -> str:
    """URL of the foreground browser using native automation."""
    return BrowserInfoClient().get_url()


def is_browser_active() -> bool:
    """True when the foreground window is a browser."""
    return BrowserInfoClient().is_browser_active()


async def get_browser_info(method: ExtractionMethod = ExtractionMethod.AUTO) -> BrowserInfo:
    """Browser info for the foreground window using ``method``."""
    return await BrowserInfoClient().get_info(method)


__all__ = [
    "BrowserInfoClient",
    "get_active_browser_info",
    "get_active_browser_url",
    "get_browser_info",
    "is_browser_active",
]
