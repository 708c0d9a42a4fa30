"""
Constants for the hysteresis delays, the polling tick and the panel animation.
"""

from typing import Final, Tuple

class TimerConstants:
    """Defines all timer intervals used by the visibility engine."""
    ENTER_DELAY_MS: Final[int] = 0
    LEAVE_DELAY_MS: Final[int] = 750
    POLL_INTERVAL_MS: Final[int] = 50
    ANIMATION_DURATION_MS: Final[int] = 200

    # Accepted configuration ranges, inclusive.
    ENTER_DELAY_RANGE_MS: Final[Tuple[int, int]] = (0, 1000)
    LEAVE_DELAY_RANGE_MS: Final[Tuple[int, int]] = (0, 5000)
    POLL_INTERVAL_RANGE_MS: Final[Tuple[int, int]] = (20, 1000)
    ANIMATION_DURATION_RANGE_MS: Final[Tuple[int, int]] = (0, 2000)

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the defaults are non-negative and sit inside their ranges."""
        pairs = (
            ("ENTER_DELAY_MS", self.ENTER_DELAY_RANGE_MS),
            ("LEAVE_DELAY_MS", self.LEAVE_DELAY_RANGE_MS),
            ("POLL_INTERVAL_MS", self.POLL_INTERVAL_RANGE_MS),
            ("ANIMATION_DURATION_MS", self.ANIMATION_DURATION_RANGE_MS),
        )
        for attr_name, (low, high) in pairs:
            value = getattr(self, attr_name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{attr_name} must be a non-negative integer.")
            if not (low <= value <= high):
                raise ValueError(f"{attr_name} must be within [{low}, {high}].")
        if self.POLL_INTERVAL_MS <= 0:
            raise ValueError("POLL_INTERVAL_MS must be positive.")

# Singleton instance for easy access
timers = TimerConstants()
