"""Tests for extractor configuration."""

import os
from pathlib import Path

import pytest

from browser_info.config import (
    DEFAULT_MACOS_SCRIPT_PATHS,
    DEFAULT_WINDOWS_SCRIPT_PATHS,
    ExtractorConfig,
)
from browser_info.exceptions import OtherBrowserInfoError


def test_defaults():
    config = ExtractorConfig()
    assert config.devtools_host == "localhost"
    assert config.devtools_port == 9222
    assert config.devtools_timeout == 3.0
    assert config.windows_script_timeout == 10.0
    assert config.windows_embedded_timeout == 5.0
    assert config.macos_script_timeout == 5.0
    assert config.windows_script_paths == list(DEFAULT_WINDOWS_SCRIPT_PATHS)
    assert config.macos_script_paths == list(DEFAULT_MACOS_SCRIPT_PATHS)


def test_bundled_scripts_come_first_and_exist():
    assert Path(DEFAULT_WINDOWS_SCRIPT_PATHS[0]).is_file()
    assert Path(DEFAULT_MACOS_SCRIPT_PATHS[0]).is_file()
    assert "src/platform/scripts/windows_get_url.ps1" in DEFAULT_WINDOWS_SCRIPT_PATHS


def test_path_lists_are_independent():
    a = ExtractorConfig()
    b = ExtractorConfig()
    a.windows_script_paths.append("extra.ps1")
    assert "extra.ps1" not in b.windows_script_paths


def test_from_env_overrides():
    env = {
        "BROWSER_INFO_DEVTOOLS_HOST": "127.0.0.1",
        "BROWSER_INFO_DEVTOOLS_PORT": "9333",
        "BROWSER_INFO_DEVTOOLS_TIMEOUT": "0.5",
        "BROWSER_INFO_WINDOWS_SCRIPT_PATHS": os.pathsep.join(["a.ps1", "b.ps1"]),
        "BROWSER_INFO_MACOS_SCRIPT_PATHS": "only.scpt",
    }
    config = ExtractorConfig.from_env(env)
    assert config.devtools_host == "127.0.0.1"
    assert config.devtools_port == 9333
    assert config.devtools_timeout == 0.5
    assert config.windows_script_paths == ["a.ps1", "b.ps1"]
    assert config.macos_script_paths == ["only.scpt"]


def test_from_env_empty_uses_defaults():
    assert ExtractorConfig.from_env({}) == ExtractorConfig()


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("BROWSER_INFO_DEVTOOLS_PORT", "9444")
    assert ExtractorConfig.from_env().devtools_port == 9444


def test_from_env_bad_port():
    with pytest.raises(OtherBrowserInfoError, match="BROWSER_INFO_DEVTOOLS_PORT"):
        ExtractorConfig.from_env({"BROWSER_INFO_DEVTOOLS_PORT": "ninety"})


def test_from_env_bad_timeout():
    with pytest.raises(OtherBrowserInfoError, match="must be a number"):
        ExtractorConfig.from_env({"BROWSER_INFO_DEVTOOLS_TIMEOUT": "soon"})
