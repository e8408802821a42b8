"""Per-OS URL extraction strategies."""

from __future__ import annotations

import logging
import platform

from browser_info.config import ExtractorConfig
from browser_info.platform.base import ExtractionStrategy, find_script
from browser_info.platform.linux import LinuxStrategy, UnsupportedStrategy
from browser_info.platform.macos import MacStrategy
from browser_info.platform.windows import WindowsStrategy


def select_strategy(
    config: ExtractorConfig | None = None,
    logger: logging.Logger | None = None,
    system: str | None = None,
) -> ExtractionStrategy:
    """Pick the strategy for the host OS (or ``system`` when given)."""
    system = system if system is not None else platform.system()
    if system == "Windows":
        return WindowsStrategy(config=config, logger=logger)
    if system == "Darwin":
        return MacStrategy(config=config, logger=logger)
    if system == "Linux":
        return LinuxStrategy(config=config, logger=logger)
    return UnsupportedStrategy(system, config=config, logger=logger)


__all__ = [
    "ExtractionStrategy",
    "LinuxStrategy",
    "MacStrategy",
    "UnsupportedStrategy",
    "WindowsStrategy",
    "find_script",
    "select_strategy",
]
