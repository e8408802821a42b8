"""Run helper scripts as child processes with a hard time budget."""

from __future__ import annotations

import logging
import subprocess
import time

from browser_info.exceptions import (
    ExtractionTimeoutError,
    PermissionDeniedError,
    PlatformError,
)

logger = logging.getLogger(__name__)

# osascript: "Not authorized to send Apple events to ..." (-1743).
_PERMISSION_MARKERS = ("not authorized", "(-1743)", "access is denied")


def run_script(
    args: list[str],
    timeout: float,
    source: str = "script",
    logger: logging.Logger = logger,
) -> str:
    """Execute ``args`` and return its stdout.

    The child is killed once ``timeout`` seconds have passed.

    Raises:
        ExtractionTimeoutError: the process outlived its budget.
        PermissionDeniedError: the OS refused automation access.
        PlatformError: the executable is missing or exited non-zero.
    """
    logger.debug("Running %s: %s", source, args[0])
    started = time.monotonic()
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ExtractionTimeoutError(f"{source} timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise PlatformError(f"{args[0]} not found, cannot run {source}") from e
    except OSError as e:
        raise PlatformError(f"{source} execution error: {e}") from e

    elapsed = time.monotonic() - started
    stderr = (result.stderr or "").strip()
    if stderr:
        logger.warning(f"{source} stderr: {stderr[:500]}")

    if result.returncode != 0:
        lowered = stderr.lower()
        if any(marker in lowered for marker in _PERMISSION_MARKERS):
            raise PermissionDeniedError(f"{source} was denied: {stderr}")
        raise PlatformError(
            f"{source} failed with exit code {result.returncode}: {stderr}"
        )

    logger.debug("%s finished in %.2fs", source, elapsed)
    return result.stdout or ""
