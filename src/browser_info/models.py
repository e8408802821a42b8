"""Data models shared across browser-info."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from browser_info.exceptions import BrowserInfoError


@dataclass(frozen=True)
class WindowPosition:
    """Window position and dimensions in screen coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class WindowSnapshot:
    """A point-in-time observation of the foreground window."""

    app_name: str
    process_path: str
    process_id: int
    title: str
    position: WindowPosition = field(default_factory=WindowPosition)


class BrowserKind(str, Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"
    BRAVE = "brave"
    OPERA = "opera"
    VIVALDI = "vivaldi"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BrowserType:
    """Browser classification.

    Known browsers carry only ``kind``; ``BrowserKind.UNKNOWN`` also carries a
    free-form ``label`` describing where the guess came from.
    """

    kind: BrowserKind
    label: str = ""

    @classmethod
    def unknown(cls, label: str) -> BrowserType:
        return cls(BrowserKind.UNKNOWN, label)

    @property
    def is_unknown(self) -> bool:
        return self.kind is BrowserKind.UNKNOWN

    def __str__(self) -> str:
        if self.is_unknown:
            return f"unknown({self.label})"
        return self.kind.value


CHROME = BrowserType(BrowserKind.CHROME)
FIREFOX = BrowserType(BrowserKind.FIREFOX)
EDGE = BrowserType(BrowserKind.EDGE)
SAFARI = BrowserType(BrowserKind.SAFARI)
BRAVE = BrowserType(BrowserKind.BRAVE)
OPERA = BrowserType(BrowserKind.OPERA)
VIVALDI = BrowserType(BrowserKind.VIVALDI)


@dataclass
class BrowserMetadata:
    """Best-effort extras; version and tab count have no reliable source yet."""

    version: str | None = None
    tabs_count: int | None = None
    is_incognito: bool = False


class ExtractionMethod(str, Enum):
    AUTO = "auto"  # native automation first, then remote debugging
    REMOTE_DEBUGGING = "remote_debugging"
    NATIVE_AUTOMATION = "native_automation"


@dataclass
class BrowserInfo:
    """Everything known about the foreground browser window."""

    url: str
    title: str
    browser_name: str
    browser_type: BrowserType
    version: str | None = None
    tabs_count: int | None = None
    is_incognito: bool = False
    process_id: int = 0
    window_position: WindowPosition = field(default_factory=WindowPosition)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["browser_type"] = str(self.browser_type)
        return data


@dataclass(frozen=True)
class DevToolsTab:
    """One entry of the remote-debugging ``/json`` tab list."""

    id: str
    title: str
    url: str
    type: str


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of a single fallback stage."""

    url: str | None = None
    error: BrowserInfoError | None = None
    fatal: bool = False

    @classmethod
    def success(cls, url: str) -> ExtractionOutcome:
        return cls(url=url)

    @classmethod
    def recoverable(cls, error: BrowserInfoError) -> ExtractionOutcome:
        return cls(error=error)

    @classmethod
    def failed(cls, error: BrowserInfoError) -> ExtractionOutcome:
        return cls(error=error, fatal=True)

    @property
    def ok(self) -> bool:
        return self.url is not None
