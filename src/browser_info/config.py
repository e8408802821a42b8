"""Runtime configuration for the extraction pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from browser_info.exceptions import OtherBrowserInfoError

SCRIPTS_DIR = Path(__file__).resolve().parent / "platform" / "scripts"

WINDOWS_SCRIPT_NAME = "windows_get_url.ps1"
MACOS_SCRIPT_NAME = "macos_get_url.applescript"

# Bundled script first. It ships as package data, so the relative locations
# after it (used by older checkouts for hand-maintained helpers) are only
# reached when the package data is missing. The macOS fallbacks are compiled
# .scpt files; osascript runs them the same way as .applescript source. Set
# BROWSER_INFO_*_SCRIPT_PATHS to replace the whole list.
DEFAULT_WINDOWS_SCRIPT_PATHS = (
    str(SCRIPTS_DIR / WINDOWS_SCRIPT_NAME),
    "src/platform/scripts/windows_get_url.ps1",
    "platform/scripts/windows_get_url.ps1",
    "scripts/windows_get_url.ps1",
    "../src/platform/scripts/windows_get_url.ps1",
    "../../src/platform/scripts/windows_get_url.ps1",
    "../../../src/platform/scripts/windows_get_url.ps1",
)

DEFAULT_MACOS_SCRIPT_PATHS = (
    str(SCRIPTS_DIR / MACOS_SCRIPT_NAME),
    "src/platform/scripts/macos_get_url.scpt",
    "platform/scripts/macos_get_url.scpt",
    "scripts/macos_get_url.scpt",
    "../src/platform/scripts/macos_get_url.scpt",
    "../../src/platform/scripts/macos_get_url.scpt",
)

DEFAULT_DEVTOOLS_HOST = "localhost"
DEFAULT_DEVTOOLS_PORT = 9222


@dataclass
class ExtractorConfig:
    """Knobs for script discovery, per-stage time budgets and remote debugging.

    Args:
        windows_script_paths: Candidate helper-script locations, probed in order.
        macos_script_paths: Candidate AppleScript locations, probed in order.
        windows_script_timeout: Seconds allowed for the external PowerShell script.
        windows_embedded_timeout: Seconds allowed for the embedded clipboard script.
        macos_script_timeout: Seconds allowed for each osascript invocation.
        devtools_host: Host serving the remote-debugging HTTP API.
        devtools_port: Port of the remote-debugging HTTP API.
        devtools_timeout: Request timeout for remote-debugging calls.
    """

    windows_script_paths: list[str] = field(
        default_factory=lambda: list(DEFAULT_WINDOWS_SCRIPT_PATHS)
    )
    macos_script_paths: list[str] = field(
        default_factory=lambda: list(DEFAULT_MACOS_SCRIPT_PATHS)
    )
    windows_script_timeout: float = 10.0
    windows_embedded_timeout: float = 5.0
    macos_script_timeout: float = 5.0
    devtools_host: str = DEFAULT_DEVTOOLS_HOST
    devtools_port: int = DEFAULT_DEVTOOLS_PORT
    devtools_timeout: float = 3.0

    @classmethod
    def from_env(cls, environ: dict | None = None) -> ExtractorConfig:
        """Build a config from ``BROWSER_INFO_*`` environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        config.devtools_host = env.get("BROWSER_INFO_DEVTOOLS_HOST", config.devtools_host)
        config.devtools_port = _int_env(env, "BROWSER_INFO_DEVTOOLS_PORT", config.devtools_port)
        config.devtools_timeout = _float_env(
            env, "BROWSER_INFO_DEVTOOLS_TIMEOUT", config.devtools_timeout
        )

        win_paths = env.get("BROWSER_INFO_WINDOWS_SCRIPT_PATHS")
        if win_paths:
            config.windows_script_paths = _split_paths(win_paths)
        mac_paths = env.get("BROWSER_INFO_MACOS_SCRIPT_PATHS")
        if mac_paths:
            config.macos_script_paths = _split_paths(mac_paths)
        return config


def _split_paths(value: str) -> list[str]:
    return [p for p in value.split(os.pathsep) if p.strip()]


def _int_env(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise OtherBrowserInfoError(f"{name} must be an integer, got {raw!r}") from e


def _float_env(env, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise OtherBrowserInfoError(f"{name} must be a number, got {raw!r}") from e
