"""Shared building blocks for URL extraction stages."""

from browser_info.extraction.output import parse_script_output
from browser_info.extraction.process import run_script
from browser_info.extraction.urls import is_valid_url, url_from_title, validate_url

__all__ = [
    "parse_script_output",
    "run_script",
    "is_valid_url",
    "url_from_title",
    "validate_url",
]
