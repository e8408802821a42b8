"""Parse the result line printed by helper scripts.

Two line formats are understood. Current scripts print one JSON object::

    {"status": "SUCCESS", "url": "https://example.com", "method": "uia"}
    {"status": "ERROR", "message": "no browser window"}

Older scripts print pipe-delimited tags::

    SUCCESS|https://example.com|uia
    ERROR|no browser window|uia
    NOT_BROWSER|explorer.exe

Only the last recognisable line counts; anything printed before it (progress
output, warnings) is ignored.
"""

from __future__ import annotations

import json
import logging

from browser_info.exceptions import (
    NotABrowserError,
    PlatformError,
    UrlExtractionFailedError,
)
from browser_info.extraction.urls import is_valid_url, validate_url

logger = logging.getLogger(__name__)

SUCCESS = "SUCCESS"
ERROR = "ERROR"
FAILED = "FAILED"
NOT_BROWSER = "NOT_BROWSER"

# Windows PowerShell can prefix redirected UTF-8 output with a byte order mark.
BOM = "\ufeff"


def parse_script_output(output: str, source: str = "script") -> str:
    """Return the URL reported by a helper script.

    Raises:
        NotABrowserError: the script reported that the window is not a browser.
        PlatformError: the script reported an ERROR/FAILED status.
        InvalidUrlError: a SUCCESS line carried something that is not a URL.
        UrlExtractionFailedError: no result line, or an unknown status tag.
    """
    for line in reversed((output or "").splitlines()):
        line = line.replace(BOM, "").strip()
        if not line:
            continue
        record = _load_json_record(line)
        if record is not None:
            return _from_record(record, source)
        if "|" in line:
            return _from_tagged_line(line, source)

    raise UrlExtractionFailedError(f"No result line in {source} output")


def _load_json_record(line: str) -> dict | None:
    if not line.startswith("{"):
        return None
    try:
        data = json.loads(line)
    except ValueError:
        return None
    if isinstance(data, dict) and "status" in data:
        return data
    return None


def _from_record(record: dict, source: str) -> str:
    status = str(record.get("status") or "").strip().upper()
    logger.debug("%s reported status %s (method=%s)", source, status, record.get("method"))
    if status == SUCCESS:
        return validate_url(record.get("url"), source)
    if status in (ERROR, FAILED):
        raise PlatformError(str(record.get("message") or "Unknown error"))
    if status == NOT_BROWSER:
        raise NotABrowserError()
    raise UrlExtractionFailedError(f"Unknown status {status!r} in {source} output")


def _from_tagged_line(line: str, source: str) -> str:
    parts = [p.strip() for p in line.split("|")]
    tag = parts[0]
    payload = parts[1] if len(parts) > 1 else ""

    if tag == SUCCESS:
        return validate_url(payload, source)
    if tag in (ERROR, FAILED):
        raise PlatformError(payload or "Unknown error")
    if tag == NOT_BROWSER:
        raise NotABrowserError()
    # URL|Title|Process lines from early helper scripts.
    if is_valid_url(tag):
        return tag
    raise UrlExtractionFailedError(f"Unknown tag {tag!r} in {source} output")
