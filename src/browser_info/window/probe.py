"""Default foreground-window probe.

Windows uses pywin32 + psutil; macOS uses pyobjc (AppKit + Quartz). Any
callable returning a ``WindowSnapshot`` can replace ``get_active_window`` when
constructing ``BrowserInfoClient``.
"""

from __future__ import annotations

import logging
import platform
from typing import Callable

from browser_info.exceptions import PermissionDeniedError, PlatformError, WindowNotFoundError
from browser_info.models import WindowPosition, WindowSnapshot

logger = logging.getLogger(__name__)

WindowProbe = Callable[[], WindowSnapshot]


def get_active_window() -> WindowSnapshot:
    """Snapshot the current foreground window.

    Raises:
        WindowNotFoundError: there is no foreground window.
        PermissionDeniedError: the OS refused to describe the owning process.
        PlatformError: the host OS is unsupported.
        ImportError: the platform extra is not installed.
    """
    system = platform.system()
    if system == "Windows":
        return _get_active_window_windows()
    if system == "Darwin":
        return _get_active_window_macos()
    raise PlatformError(f"No window probe for platform: {system or 'unknown'}")


def _get_active_window_windows() -> WindowSnapshot:
    try:
        import psutil
        import win32gui
        import win32process
    except ImportError:
        raise ImportError(
            "pywin32 and psutil are required for the Windows window probe. "
            "Install with: pip install browser-info[windows]"
        )

    hwnd = win32gui.GetForegroundWindow()
    if not hwnd:
        raise WindowNotFoundError()

    title = win32gui.GetWindowText(hwnd)
    left, top, right, bottom = win32gui.GetWindowRect(hwnd)
    _, pid = win32process.GetWindowThreadProcessId(hwnd)

    try:
        process = psutil.Process(pid)
        app_name = process.name()
        process_path = process.exe()
    except psutil.NoSuchProcess as e:
        raise WindowNotFoundError(f"Foreground process {pid} has exited") from e
    except psutil.AccessDenied as e:
        raise PermissionDeniedError(f"Cannot inspect foreground process {pid}") from e

    return WindowSnapshot(
        app_name=app_name,
        process_path=process_path,
        process_id=pid,
        title=title,
        position=WindowPosition(
            x=float(left), y=float(top), width=float(right - left), height=float(bottom - top)
        ),
    )


def _get_active_window_macos() -> WindowSnapshot:
    try:
        import Quartz
        from AppKit import NSWorkspace
    except ImportError:
        raise ImportError(
            "pyobjc-framework-Quartz and pyobjc-framework-Cocoa are required for the "
            "macOS window probe. Install with: pip install browser-info[macos]"
        )

    app = NSWorkspace.sharedWorkspace().frontmostApplication()
    if app is None:
        raise WindowNotFoundError()

    pid = int(app.processIdentifier())
    app_name = str(app.localizedName() or "")
    bundle_url = app.bundleURL()
    process_path = str(bundle_url.path()) if bundle_url is not None else ""

    title = ""
    position = WindowPosition()
    windows = Quartz.CGWindowListCopyWindowInfo(
        Quartz.kCGWindowListOptionOnScreenOnly | Quartz.kCGWindowListExcludeDesktopElements,
        Quartz.kCGNullWindowID,
    ) or []
    # Front-to-back order; the first layer-0 window of the app is its key window.
    for info in windows:
        if info.get("kCGWindowOwnerPID") != pid or info.get("kCGWindowLayer", 0) != 0:
            continue
        # Window titles are empty without Screen Recording permission.
        title = str(info.get("kCGWindowName") or "")
        bounds = info.get("kCGWindowBounds") or {}
        position = WindowPosition(
            x=float(bounds.get("X", 0)),
            y=float(bounds.get("Y", 0)),
            width=float(bounds.get("Width", 0)),
            height=float(bounds.get("Height", 0)),
        )
        break
    else:
        logger.debug("No on-screen window found for %s (pid %s)", app_name, pid)

    return WindowSnapshot(
        app_name=app_name,
        process_path=process_path,
        process_id=pid,
        title=title,
        position=position,
    )
