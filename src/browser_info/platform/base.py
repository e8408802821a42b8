"""Abstract base class for per-OS URL extraction strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from browser_info.config import ExtractorConfig
from browser_info.exceptions import (
    BrowserInfoError,
    NotABrowserError,
    UrlExtractionFailedError,
)
from browser_info.extraction.urls import validate_url
from browser_info.models import BrowserType, ExtractionOutcome, WindowSnapshot

Stage = Callable[[WindowSnapshot, BrowserType], str]


class ExtractionStrategy(ABC):
    """Ordered fallback chain of URL extraction techniques for one OS.

    Subclasses list their techniques in ``stages()``. Each stage either
    returns a URL or raises a ``BrowserInfoError``, which moves the chain on to
    the next stage. A ``NotABrowserError`` only stops the chain when the window
    was classified from its path alone (``Unknown``); for a recognised browser
    it means the helper cannot drive that browser and is recorded as a
    ``UrlExtractionFailedError``.
    """

    name = "base"

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or ExtractorConfig()
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def stages(self) -> list[tuple[str, Stage]]:
        """Techniques in the order they should be attempted."""
        ...

    def extract_url(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        """Run the chain and return the first URL produced.

        Raises:
            BrowserInfoError: the failure of the last stage attempted.
        """
        last_error: BrowserInfoError | None = None
        for stage_name, stage in self.stages():
            outcome = self.attempt(stage_name, stage, window, browser_type)
            if outcome.ok:
                self.logger.info("%s: %s succeeded: %s", self.name, stage_name, outcome.url)
                return outcome.url
            last_error = outcome.error
            if outcome.fatal:
                break

        if last_error is None:
            last_error = UrlExtractionFailedError(f"No extraction stages for {self.name}")
        raise last_error

    def attempt(
        self,
        stage_name: str,
        stage: Stage,
        window: WindowSnapshot,
        browser_type: BrowserType,
    ) -> ExtractionOutcome:
        self.logger.debug("%s: trying %s for %s", self.name, stage_name, window.app_name)
        try:
            url = validate_url(stage(window, browser_type), stage_name)
        except NotABrowserError as e:
            if browser_type.is_unknown:
                self.logger.info("%s: %s says the window is not a browser", self.name, stage_name)
                return ExtractionOutcome.failed(e)
            self.logger.debug("%s: %s cannot drive %s", self.name, stage_name, browser_type)
            error = UrlExtractionFailedError(f"{stage_name} cannot drive {browser_type}")
            error.__cause__ = e
            return ExtractionOutcome.recoverable(error)
        except BrowserInfoError as e:
            self.logger.debug("%s: %s failed (%s): %s", self.name, stage_name, e.kind, e)
            return ExtractionOutcome.recoverable(e)
        return ExtractionOutcome.success(url)


def find_script(candidates: list[str]) -> Path | None:
    """Return the first candidate path that exists as a file."""
    for candidate in candidates:
        path = Path(candidate)
        if path.is_file():
            return path
    return None
