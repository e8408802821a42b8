"""Tests for strategy selection and the fallback-chain runner."""

from unittest.mock import MagicMock

import pytest

from browser_info.exceptions import (
    InvalidUrlError,
    NotABrowserError,
    PlatformError,
    UrlExtractionFailedError,
)
from browser_info.models import CHROME, BrowserType, WindowSnapshot
from browser_info.platform import (
    ExtractionStrategy,
    LinuxStrategy,
    MacStrategy,
    UnsupportedStrategy,
    WindowsStrategy,
    find_script,
    select_strategy,
)

WINDOW = WindowSnapshot(app_name="chrome", process_path="", process_id=1, title="t")


class ScriptedStrategy(ExtractionStrategy):
    name = "scripted"

    def __init__(self, results):
        super().__init__()
        self.results = results
        self.calls = []

    def stages(self):
        return [(f"stage{i}", self._make(i, r)) for i, r in enumerate(self.results)]

    def _make(self, index, result):
        def stage(window, browser_type):
            self.calls.append(index)
            if isinstance(result, Exception):
                raise result
            return result
        return stage


@pytest.mark.parametrize(
    "system,expected",
    [
        ("Windows", WindowsStrategy),
        ("Darwin", MacStrategy),
        ("Linux", LinuxStrategy),
        ("FreeBSD", UnsupportedStrategy),
    ],
)
def test_select_strategy(system, expected):
    assert isinstance(select_strategy(system=system), expected)


def test_linux_not_implemented():
    with pytest.raises(PlatformError, match="Linux URL extraction is not implemented"):
        LinuxStrategy().extract_url(WINDOW, CHROME)


def test_unsupported_platform():
    with pytest.raises(PlatformError, match="Unsupported platform: FreeBSD"):
        UnsupportedStrategy("FreeBSD").extract_url(WINDOW, CHROME)


def test_first_success_stops_chain():
    strategy = ScriptedStrategy([PlatformError("x"), "https://a.test", "https://b.test"])
    assert strategy.extract_url(WINDOW, CHROME) == "https://a.test"
    assert strategy.calls == [0, 1]


def test_invalid_stage_result_is_recoverable():
    strategy = ScriptedStrategy(["javascript:alert(1)", "https://ok.test"])
    assert strategy.extract_url(WINDOW, CHROME) == "https://ok.test"


def test_last_error_is_raised():
    strategy = ScriptedStrategy([PlatformError("first"), InvalidUrlError("second")])
    with pytest.raises(InvalidUrlError, match="second"):
        strategy.extract_url(WINDOW, CHROME)


def test_not_a_browser_is_fatal_for_path_only_classification():
    strategy = ScriptedStrategy([NotABrowserError(), "https://never.test"])
    with pytest.raises(NotABrowserError):
        strategy.extract_url(WINDOW, BrowserType.unknown("detected_from_path"))
    assert strategy.calls == [0]


def test_not_a_browser_for_recognised_browser_continues():
    strategy = ScriptedStrategy([NotABrowserError(), "https://next.test"])
    assert strategy.extract_url(WINDOW, CHROME) == "https://next.test"
    assert strategy.calls == [0, 1]


def test_not_a_browser_for_recognised_browser_is_recorded_as_extraction_failure():
    strategy = ScriptedStrategy([NotABrowserError()])
    with pytest.raises(UrlExtractionFailedError, match="cannot drive chrome") as exc_info:
        strategy.extract_url(WINDOW, CHROME)
    assert isinstance(exc_info.value.__cause__, NotABrowserError)


def test_attempt_outcomes():
    strategy = ScriptedStrategy([])
    ok = strategy.attempt("s", lambda w, b: "https://a.test", WINDOW, CHROME)
    assert ok.ok and ok.url == "https://a.test"
    soft = strategy.attempt("s", lambda w, b: "nope", WINDOW, CHROME)
    assert not soft.ok and not soft.fatal and isinstance(soft.error, InvalidUrlError)


def test_empty_chain():
    with pytest.raises(UrlExtractionFailedError):
        ScriptedStrategy([]).extract_url(WINDOW, CHROME)


def test_find_script(tmp_path):
    second = tmp_path / "b.ps1"
    second.write_text("")
    assert find_script([str(tmp_path / "a.ps1"), str(second)]) == second
    assert find_script([str(tmp_path / "a.ps1")]) is None
    # Directories are not scripts.
    assert find_script([str(tmp_path)]) is None


def test_injected_logger_receives_stage_messages():
    logger = MagicMock()
    strategy = WindowsStrategy(logger=logger)
    assert strategy.logger is logger

    scripted = ScriptedStrategy(["https://a.test"])
    scripted.logger = logger
    scripted.extract_url(WINDOW, CHROME)
    logger.info.assert_called_once()
