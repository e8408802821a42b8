"""Tests for the Windows extraction strategy."""

from unittest.mock import patch

import pytest

from browser_info.config import SCRIPTS_DIR, WINDOWS_SCRIPT_NAME, ExtractorConfig
from browser_info.exceptions import (
    ExtractionTimeoutError,
    NotABrowserError,
    PlatformError,
    UrlExtractionFailedError,
)
from browser_info.models import CHROME, BrowserType, WindowSnapshot
from browser_info.platform.windows import EMBEDDED_SCRIPT, WindowsStrategy


def _window(title="Example Domain - Google Chrome"):
    return WindowSnapshot(app_name="chrome.exe", process_path=r"C:\chrome.exe", process_id=7, title=title)


@pytest.fixture
def no_scripts(tmp_path):
    return ExtractorConfig(windows_script_paths=[str(tmp_path / "missing.ps1")])


@pytest.fixture
def with_script(tmp_path):
    script = tmp_path / "windows_get_url.ps1"
    script.write_text("# helper")
    return ExtractorConfig(windows_script_paths=[str(tmp_path / "missing.ps1"), str(script)]), script


@patch("browser_info.platform.windows.run_script")
def test_external_script_success(mock_run, with_script):
    config, script = with_script
    mock_run.return_value = "Searching...\nSUCCESS|https://example.com/x|uia\n"

    url = WindowsStrategy(config).extract_url(_window(), CHROME)

    assert url == "https://example.com/x"
    mock_run.assert_called_once()
    args = mock_run.call_args.args[0]
    assert args == [
        "powershell", "-ExecutionPolicy", "Bypass", "-NoProfile", "-File", str(script),
    ]
    assert mock_run.call_args.kwargs["timeout"] == 10.0


@patch("browser_info.platform.windows.run_script")
def test_missing_script_falls_back_to_embedded(mock_run, no_scripts):
    mock_run.return_value = '{"status": "SUCCESS", "url": "https://b.test/", "method": "embedded"}'

    url = WindowsStrategy(no_scripts).extract_url(_window(), CHROME)

    assert url == "https://b.test/"
    args = mock_run.call_args.args[0]
    assert args[:5] == ["powershell", "-ExecutionPolicy", "Bypass", "-NoProfile", "-Command"]
    assert args[5] == EMBEDDED_SCRIPT
    assert mock_run.call_args.kwargs["timeout"] == 5.0


@patch("browser_info.platform.windows.run_script")
def test_external_failure_falls_back_to_embedded(mock_run, with_script):
    config, _ = with_script
    mock_run.side_effect = [
        ExtractionTimeoutError("PowerShell script timed out after 10.0s"),
        "SUCCESS|https://c.test|embedded",
    ]
    assert WindowsStrategy(config).extract_url(_window(), CHROME) == "https://c.test"
    assert mock_run.call_count == 2


@patch("browser_info.platform.windows.run_script")
def test_title_heuristic_when_scripts_fail(mock_run, no_scripts):
    mock_run.side_effect = PlatformError("powershell not found")
    url = WindowsStrategy(no_scripts).extract_url(_window("Claude — New chat"), CHROME)
    assert url == "https://claude.ai/chat"


@patch("browser_info.platform.windows.run_script")
def test_invalid_url_from_embedded_falls_back(mock_run, no_scripts):
    mock_run.return_value = "SUCCESS|edge://settings|embedded"
    url = WindowsStrategy(no_scripts).extract_url(_window("Issues · GitHub"), CHROME)
    assert url == "https://github.com"


@patch("browser_info.platform.windows.run_script")
def test_last_stage_error_surfaces(mock_run, no_scripts):
    mock_run.return_value = "FAILED|Invalid URL format: |embedded"
    with pytest.raises(UrlExtractionFailedError, match="Cannot determine URL from title"):
        WindowsStrategy(no_scripts).extract_url(_window("Untitled"), CHROME)


@patch("browser_info.platform.windows.run_script")
def test_not_browser_stops_chain_for_path_only_window(mock_run, with_script):
    config, _ = with_script
    mock_run.return_value = "NOT_BROWSER|launcher"
    window = WindowSnapshot("launcher.exe", r"C:\Opera\launcher.exe", 7, "Claude")
    with pytest.raises(NotABrowserError):
        WindowsStrategy(config).extract_url(window, BrowserType.unknown("detected_from_path"))
    mock_run.assert_called_once()


@patch("browser_info.platform.windows.run_script")
def test_not_browser_for_recognised_browser_falls_back(mock_run, with_script):
    config, _ = with_script
    mock_run.side_effect = [
        '{"status": "NOT_BROWSER", "process": "chromium"}',
        '{"status": "SUCCESS", "url": "https://d.test", "method": "embedded"}',
    ]
    assert WindowsStrategy(config).extract_url(_window(), CHROME) == "https://d.test"
    assert mock_run.call_count == 2


def test_embedded_script_restores_clipboard():
    finally_block = EMBEDDED_SCRIPT.split("} finally {", 1)[1]
    assert "Clipboard]::SetText($originalClipboard)" in finally_block


@pytest.mark.parametrize(
    "script",
    [EMBEDDED_SCRIPT, (SCRIPTS_DIR / WINDOWS_SCRIPT_NAME).read_text(encoding="utf-8")],
)
def test_scripts_write_utf8_without_byte_order_mark(script):
    assert "New-Object System.Text.UTF8Encoding $false" in script
    assert "[System.Text.Encoding]::UTF8" not in script


def test_bundled_script_reports_missing_scheme_as_failure():
    script = (SCRIPTS_DIR / WINDOWS_SCRIPT_NAME).read_text(encoding="utf-8")
    assert '"https://$url"' not in script
    assert "Address bar shows no scheme" in script
