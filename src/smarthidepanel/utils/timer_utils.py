"""
QTimer construction and teardown helpers.

The hysteresis pair and the engine's polling tick are built and released
through these two functions, so every timer is parented, validated and logged
the same way.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger("SmartHidePanel.TimerUtils")


def create_timer(parent: QObject, callback: Callable[[], None], interval: int, single_shot: bool = False) -> QTimer:
    """
    Builds a stopped QTimer owned by `parent`.

    Args:
        parent: Owner of the timer; it is deleted together with the parent.
        callback: Connected to `timeout`.
        interval: Interval or delay in ms.
        single_shot: One-shot delay instead of a repeating tick.

    Raises:
        ValueError: For a non-callable callback or a negative interval.
    """
    if not callable(callback):
        raise ValueError(f"Timer callback is not callable: {callback!r}")
    if interval < 0:
        raise ValueError(f"Timer interval must be non-negative, got {interval}")

    timer = QTimer(parent)
    timer.setSingleShot(single_shot)
    timer.setInterval(interval)
    timer.timeout.connect(callback)
    logger.debug("%s timer created (%dms)", "Single-shot" if single_shot else "Repeating", interval)
    return timer


def cleanup_timer(timer: Optional[QTimer]) -> None:
    """
    Stops `timer`, drops its connections and schedules it for deletion. None is ignored.

    Raises:
        RuntimeError: If the underlying Qt object is already gone.
    """
    if timer is None:
        return
    try:
        timer.stop()
        try:
            timer.timeout.disconnect()
        except TypeError:
            pass  # nothing connected
        timer.deleteLater()
    except RuntimeError as e:
        logger.error("Failed to clean up timer: %s", e, exc_info=True)
        raise
    logger.debug("Timer released")
