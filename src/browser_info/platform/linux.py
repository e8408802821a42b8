"""Placeholder strategies for hosts without an automation channel."""

from __future__ import annotations

from browser_info.exceptions import PlatformError
from browser_info.models import BrowserType, WindowSnapshot
from browser_info.platform.base import ExtractionStrategy, Stage


class LinuxStrategy(ExtractionStrategy):
    """No native extraction yet; callers fall back to remote debugging."""

    name = "linux"

    def stages(self) -> list[tuple[str, Stage]]:
        return [("native", self.try_native)]

    def try_native(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        raise PlatformError("Linux URL extraction is not implemented")


class UnsupportedStrategy(ExtractionStrategy):
    name = "unsupported"

    def __init__(self, system: str, config=None, logger=None):
        super().__init__(config=config, logger=logger)
        self.system = system

    def stages(self) -> list[tuple[str, Stage]]:
        return [("native", self.try_native)]

    def try_native(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        raise PlatformError(f"Unsupported platform: {self.system or 'unknown'}")
