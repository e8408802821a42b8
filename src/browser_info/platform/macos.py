"""macOS URL extraction via AppleScript (osascript)."""

from __future__ import annotations

from browser_info.exceptions import PlatformError
from browser_info.extraction.output import parse_script_output
from browser_info.extraction.process import run_script
from browser_info.extraction.urls import url_from_title, validate_url
from browser_info.models import BrowserKind, BrowserType, WindowSnapshot
from browser_info.platform.base import ExtractionStrategy, Stage, find_script

OSASCRIPT = "osascript"


def _active_tab_script(app: str, label: str) -> str:
    return (
        f'tell application "{app}"\n'
        f'    if (count of windows) > 0 then\n'
        f'        get URL of active tab of front window\n'
        f'    else\n'
        f'        error "No {label} windows open"\n'
        f'    end if\n'
        f'end tell'
    )


INLINE_SCRIPTS = {
    BrowserKind.CHROME: _active_tab_script("Google Chrome", "Chrome"),
    BrowserKind.EDGE: _active_tab_script("Microsoft Edge", "Edge"),
    BrowserKind.BRAVE: _active_tab_script("Brave Browser", "Brave"),
    BrowserKind.SAFARI: (
        'tell application "Safari"\n'
        '    if (count of windows) > 0 then\n'
        '        get URL of front document\n'
        '    else\n'
        '        error "No Safari windows open"\n'
        '    end if\n'
        'end tell'
    ),
}


class MacStrategy(ExtractionStrategy):
    """External AppleScript file, inline per-browser AppleScript, keyboard, title guess."""

    name = "macos"

    def stages(self) -> list[tuple[str, Stage]]:
        return [
            ("external_script", self.try_external_script),
            ("inline_applescript", self.try_inline_script),
            ("keyboard_simulation", self.try_keyboard),
            ("title_heuristic", self.try_title),
        ]

    def try_external_script(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        script_path = find_script(self.config.macos_script_paths)
        if script_path is None:
            raise PlatformError(
                "AppleScript helper not found in: " + ", ".join(self.config.macos_script_paths)
            )
        self.logger.debug("Found AppleScript file at %s", script_path)
        stdout = run_script(
            [OSASCRIPT, str(script_path)],
            timeout=self.config.macos_script_timeout,
            source="AppleScript file",
            logger=self.logger,
        )
        return parse_script_output(stdout, "AppleScript file")

    def try_inline_script(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        if browser_type.kind is BrowserKind.FIREFOX:
            raise PlatformError("Firefox does not support AppleScript URL access")
        script = INLINE_SCRIPTS.get(browser_type.kind)
        if script is None:
            raise PlatformError(f"Unsupported browser for AppleScript: {browser_type}")

        stdout = run_script(
            [OSASCRIPT, "-e", script],
            timeout=self.config.macos_script_timeout,
            source="inline AppleScript",
            logger=self.logger,
        )
        return validate_url(stdout, "inline AppleScript")

    def try_keyboard(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        # TODO: Cmd+L / Cmd+C via Quartz CGEvent with pasteboard save/restore,
        # once it can be exercised against a real Accessibility-enabled session.
        raise PlatformError("Keyboard extraction is not implemented on macOS")

    def try_title(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        self.logger.info("AppleScript extraction failed, guessing from title")
        return url_from_title(window.title)
