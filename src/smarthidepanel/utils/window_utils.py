"""
Window geometry utilities.

Provides the window snapshot types handed over by a `WindowRegistry` and the
geometric test that decides whether a window visually conflicts with the
panel on the reference monitor.
"""

import logging
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Iterable, Optional

from smarthidepanel import constants

logger = logging.getLogger("SmartHidePanel.WindowUtils")


class WindowType(Enum):
    """Window kinds reported by the window manager. Only NORMAL windows can block."""
    NORMAL = "normal"
    DIALOG = "dialog"
    MODAL_DIALOG = "modal_dialog"
    UTILITY = "utility"
    SPLASHSCREEN = "splashscreen"
    DOCK = "dock"
    DESKTOP = "desktop"
    MENU = "menu"
    TOOLTIP = "tooltip"
    NOTIFICATION = "notification"
    OTHER = "other"


class MaximizeFlags(Flag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    BOTH = HORIZONTAL | VERTICAL


@dataclass(slots=True, frozen=True)
class FrameRect:
    """A window frame rectangle in screen coordinates (top-left origin)."""
    x: int
    y: int
    width: int
    height: int


@dataclass(slots=True, frozen=True)
class WindowInfo:
    """Snapshot of the properties of one top-level window."""
    window_type: WindowType
    showing_on_workspace: bool
    monitor_index: int
    maximize_flags: MaximizeFlags
    frame_rect: FrameRect
    title: str = ""


def proximity_threshold(panel_height: int, policy: str = constants.panel.DEFAULT_PROXIMITY_POLICY,
                        margin: int = constants.panel.PROXIMITY_MARGIN_PX) -> int:
    """
    Returns the lowest frame top (in px) at which a window still counts as touching the panel.

    Args:
        panel_height: Current panel height in px.
        policy: "margin" adds `margin` to the panel height, "strict" uses the panel height alone.
        margin: Extra distance in px for the "margin" policy.

    Raises:
        ValueError: If `policy` is unknown or a size is negative.
    """
    if panel_height < 0 or margin < 0:
        raise ValueError(f"Panel height and margin must be non-negative: {panel_height}, {margin}")
    if policy == constants.ProximityPolicy.STRICT:
        return panel_height
    if policy == constants.ProximityPolicy.MARGIN:
        return panel_height + margin
    raise ValueError(f"Unknown proximity policy: {policy!r}")


def is_blocking_window(window: WindowInfo, panel_monitor: int, threshold: int) -> bool:
    """
    Checks whether a single window conflicts with the panel.

    A window blocks when it is a normal application window showing on its
    workspace and on the panel's monitor, and it is either maximized in both
    directions or its top edge reaches `threshold`.
    """
    if window.window_type is not WindowType.NORMAL:
        return False
    if not window.showing_on_workspace:
        return False
    if window.monitor_index != panel_monitor:
        return False

    if window.maximize_flags == MaximizeFlags.BOTH:
        return True
    return window.frame_rect.y <= threshold


def find_blocking_window(windows: Iterable[WindowInfo], panel_monitor: Optional[int],
                         threshold: int) -> Optional[WindowInfo]:
    """Returns the first blocking window, or None. No monitor means nothing can block."""
    if panel_monitor is None:
        logger.debug("No panel monitor available; treating all windows as non-blocking.")
        return None
    for window in windows:
        if window is None:
            continue
        if is_blocking_window(window, panel_monitor, threshold):
            logger.debug("Window %r blocks the panel (frame top %d, threshold %d)",
                         window.title or "untitled", window.frame_rect.y, threshold)
            return window
    return None


def any_window_blocks_panel(windows: Iterable[WindowInfo], panel_monitor: Optional[int], threshold: int) -> bool:
    return find_blocking_window(windows, panel_monitor, threshold) is not None
