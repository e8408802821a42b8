"""Windows URL extraction via PowerShell."""

from __future__ import annotations

from browser_info.exceptions import PlatformError
from browser_info.extraction.output import parse_script_output
from browser_info.extraction.process import run_script
from browser_info.extraction.urls import url_from_title
from browser_info.models import BrowserType, WindowSnapshot
from browser_info.platform.base import ExtractionStrategy, Stage, find_script

POWERSHELL = "powershell"
POWERSHELL_BASE_ARGS = ["-ExecutionPolicy", "Bypass", "-NoProfile"]

# Focuses the address bar with Ctrl+L, copies it with Ctrl+C and reads the
# clipboard. The user's clipboard text is restored in the finally block on
# every exit path.
EMBEDDED_SCRIPT = r'''
[Console]::OutputEncoding = New-Object System.Text.UTF8Encoding $false
Add-Type -AssemblyName System.Windows.Forms

Add-Type -TypeDefinition @"
    using System;
    using System.Runtime.InteropServices;
    public class BrowserKeys {
        [DllImport("user32.dll")] public static extern void keybd_event(byte bVk, byte bScan, int dwFlags, int dwExtraInfo);
        public const int KEYEVENTF_KEYUP = 0x0002;
        public const byte VK_CONTROL = 0x11;
        public const byte VK_L = 0x4C;
        public const byte VK_C = 0x43;
        public const byte VK_ESCAPE = 0x1B;
    }
"@

function Emit($status, $fields) {
    $fields["status"] = $status
    $fields["method"] = "embedded"
    Write-Output ($fields | ConvertTo-Json -Compress)
}

$originalClipboard = $null
try {
    try { $originalClipboard = [System.Windows.Forms.Clipboard]::GetText() } catch {}

    [BrowserKeys]::keybd_event([BrowserKeys]::VK_CONTROL, 0, 0, 0)
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_L, 0, 0, 0)
    Start-Sleep -Milliseconds 50
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_C, 0, 0, 0)
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_L, 0, [BrowserKeys]::KEYEVENTF_KEYUP, 0)
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_C, 0, [BrowserKeys]::KEYEVENTF_KEYUP, 0)
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_CONTROL, 0, [BrowserKeys]::KEYEVENTF_KEYUP, 0)
    Start-Sleep -Milliseconds 100

    $url = [System.Windows.Forms.Clipboard]::GetText().Trim()

    [BrowserKeys]::keybd_event([BrowserKeys]::VK_ESCAPE, 0, 0, 0)
    [BrowserKeys]::keybd_event([BrowserKeys]::VK_ESCAPE, 0, [BrowserKeys]::KEYEVENTF_KEYUP, 0)

    if ($url -and (($url -match '^https?://') -or ($url -match '^file://'))) {
        Emit "SUCCESS" @{ url = $url }
    } else {
        Emit "FAILED" @{ message = "Invalid URL format: $url" }
    }
} catch {
    Emit "ERROR" @{ message = $_.Exception.Message }
} finally {
    try {
        if ($originalClipboard) {
            [System.Windows.Forms.Clipboard]::SetText($originalClipboard)
        } else {
            [System.Windows.Forms.Clipboard]::Clear()
        }
    } catch {}
}
'''


class WindowsStrategy(ExtractionStrategy):
    """External PowerShell script, then embedded clipboard script, then title guess."""

    name = "windows"

    def stages(self) -> list[tuple[str, Stage]]:
        return [
            ("external_script", self.try_external_script),
            ("embedded_script", self.try_embedded_script),
            ("title_heuristic", self.try_title),
        ]

    def try_external_script(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        script_path = find_script(self.config.windows_script_paths)
        if script_path is None:
            raise PlatformError(
                "PowerShell helper script not found in: "
                + ", ".join(self.config.windows_script_paths)
            )
        self.logger.debug("Found PowerShell script at %s", script_path)
        # The script finds the foreground browser itself; it takes no arguments.
        stdout = run_script(
            [POWERSHELL, *POWERSHELL_BASE_ARGS, "-File", str(script_path)],
            timeout=self.config.windows_script_timeout,
            source="PowerShell script",
            logger=self.logger,
        )
        return parse_script_output(stdout, "PowerShell script")

    def try_embedded_script(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        stdout = run_script(
            [POWERSHELL, *POWERSHELL_BASE_ARGS, "-Command", EMBEDDED_SCRIPT],
            timeout=self.config.windows_embedded_timeout,
            source="embedded PowerShell script",
            logger=self.logger,
        )
        return parse_script_output(stdout, "embedded PowerShell script")

    def try_title(self, window: WindowSnapshot, browser_type: BrowserType) -> str:
        self.logger.info("PowerShell extraction failed, guessing from title")
        return url_from_title(window.title)
