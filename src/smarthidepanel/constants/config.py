"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any

from .timers import timers
from .panel import panel
from .logs import logs

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_BOOLEAN: Final[str] = "Invalid {key} '{value}', resetting to boolean default '{default}'"
    INVALID_CHOICE: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'. Valid choices: {choices}"
    UNKNOWN_KEYS: Final[str] = "Ignoring unknown config fields: {keys}"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all engine settings."""
    DEFAULT_ENTER_DELAY_MS: Final[int] = timers.ENTER_DELAY_MS
    DEFAULT_LEAVE_DELAY_MS: Final[int] = timers.LEAVE_DELAY_MS
    DEFAULT_POLL_INTERVAL_MS: Final[int] = timers.POLL_INTERVAL_MS
    DEFAULT_ANIMATION_DURATION_MS: Final[int] = timers.ANIMATION_DURATION_MS
    DEFAULT_HOT_ZONE_HEIGHT_PX: Final[int] = panel.HOT_ZONE_HEIGHT_PX
    DEFAULT_POINTER_TOP_THRESHOLD_PX: Final[int] = panel.POINTER_TOP_THRESHOLD_PX
    DEFAULT_PROXIMITY_POLICY: Final[str] = panel.DEFAULT_PROXIMITY_POLICY
    DEFAULT_PROXIMITY_MARGIN_PX: Final[int] = panel.PROXIMITY_MARGIN_PX
    DEFAULT_DRAG_SUPPRESSES_POINTER: Final[bool] = True
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"

    CONFIG_FILENAME: Final[str] = "SmartHidePanel_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "enter_delay_ms": DEFAULT_ENTER_DELAY_MS,
        "leave_delay_ms": DEFAULT_LEAVE_DELAY_MS,
        "poll_interval_ms": DEFAULT_POLL_INTERVAL_MS,
        "animation_duration_ms": DEFAULT_ANIMATION_DURATION_MS,
        "hot_zone_height_px": DEFAULT_HOT_ZONE_HEIGHT_PX,
        "pointer_top_threshold_px": DEFAULT_POINTER_TOP_THRESHOLD_PX,
        "proximity_policy": DEFAULT_PROXIMITY_POLICY,
        "proximity_margin_px": DEFAULT_PROXIMITY_MARGIN_PX,
        "drag_suppresses_pointer": DEFAULT_DRAG_SUPPRESSES_POINTER,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        if self.DEFAULT_LOG_LEVEL not in logs.LEVEL_NAMES:
            raise ValueError(f"DEFAULT_LOG_LEVEL must be one of {logs.LEVEL_NAMES}")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = {
            "enter_delay_ms", "leave_delay_ms", "poll_interval_ms", "animation_duration_ms",
            "hot_zone_height_px", "pointer_top_threshold_px", "proximity_policy",
            "proximity_margin_px", "drag_suppresses_pointer", "log_level",
        }
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
