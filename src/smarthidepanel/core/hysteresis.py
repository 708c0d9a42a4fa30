"""
Hysteresis timer pair.

Turns jittery pointer enter/leave stimuli into delayed callbacks. The enter
and leave timers cancel each other, so at most one of them is ever armed, and
arming an already armed timer does not restart it.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject

from smarthidepanel import constants
from smarthidepanel.utils.timer_utils import create_timer

logger = logging.getLogger("SmartHidePanel.Hysteresis")


class HysteresisTimers(QObject):
    """
    Owns the `enter` and `leave` single-shot timers.

    Args:
        on_enter_elapsed: Called when the enter delay elapses without a leave stimulus.
        on_leave_elapsed: Called when the leave delay elapses without an enter stimulus.
        enter_delay_ms: Delay before an enter stimulus takes effect.
        leave_delay_ms: Delay before a leave stimulus takes effect.
    """

    def __init__(
        self,
        on_enter_elapsed: Callable[[], None],
        on_leave_elapsed: Callable[[], None],
        enter_delay_ms: int = constants.timers.ENTER_DELAY_MS,
        leave_delay_ms: int = constants.timers.LEAVE_DELAY_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._on_enter_elapsed = on_enter_elapsed
        self._on_leave_elapsed = on_leave_elapsed
        self._enter_timer = create_timer(self, self._fire_enter, enter_delay_ms, single_shot=True)
        self._leave_timer = create_timer(self, self._fire_leave, leave_delay_ms, single_shot=True)

    @property
    def enter_delay_ms(self) -> int:
        return self._enter_timer.interval()

    @property
    def leave_delay_ms(self) -> int:
        return self._leave_timer.interval()

    @property
    def is_enter_armed(self) -> bool:
        return self._enter_timer.isActive()

    @property
    def is_leave_armed(self) -> bool:
        return self._leave_timer.isActive()

    @property
    def armed_count(self) -> int:
        return int(self.is_enter_armed) + int(self.is_leave_armed)

    def set_delays(self, enter_delay_ms: int, leave_delay_ms: int) -> None:
        """Changes both delays. Armed timers keep their current deadline."""
        if enter_delay_ms < 0 or leave_delay_ms < 0:
            raise ValueError(f"Delays must be non-negative: {enter_delay_ms}, {leave_delay_ms}")
        if not self._enter_timer.isActive():
            self._enter_timer.setInterval(enter_delay_ms)
        if not self._leave_timer.isActive():
            self._leave_timer.setInterval(leave_delay_ms)

    def start_enter_timer(self) -> None:
        self.cancel_leave_timer()
        if not self._enter_timer.isActive():
            self._enter_timer.start()
            logger.debug("Enter timer armed (%dms)", self._enter_timer.interval())

    def start_leave_timer(self) -> None:
        self.cancel_enter_timer()
        if not self._leave_timer.isActive():
            self._leave_timer.start()
            logger.debug("Leave timer armed (%dms)", self._leave_timer.interval())

    def cancel_enter_timer(self) -> None:
        if self._enter_timer.isActive():
            self._enter_timer.stop()
            logger.debug("Enter timer cancelled")

    def cancel_leave_timer(self) -> None:
        if self._leave_timer.isActive():
            self._leave_timer.stop()
            logger.debug("Leave timer cancelled")

    def cancel_all(self) -> None:
        self.cancel_enter_timer()
        self.cancel_leave_timer()

    def _fire_enter(self) -> None:
        self._enter_timer.stop()
        try:
            self._on_enter_elapsed()
        except Exception as e:
            logger.error("Error in enter timer callback: %s", e, exc_info=True)

    def _fire_leave(self) -> None:
        self._leave_timer.stop()
        try:
            self._on_leave_elapsed()
        except Exception as e:
            logger.error("Error in leave timer callback: %s", e, exc_info=True)
