"""
Configuration management for SmartHidePanel.

This module provides a ConfigManager for loading and validating the engine
settings from a JSON file, and for setting up logging. The file is only ever
read: settings are not written back and no runtime state is persisted.
"""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from smarthidepanel import constants


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading and validation of SmartHidePanel's configuration.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager.

        Args:
            config_path: Explicit path of the JSON file. Defaults to the file in the
                application directory.
        """
        self._config_path = Path(config_path) if config_path else None
        self.logger = logging.getLogger("SmartHidePanel.Config")

    @property
    def config_path(self) -> Path:
        if self._config_path is None:
            self._config_path = get_app_data_path() / constants.config.defaults.CONFIG_FILENAME
        return self._config_path

    @staticmethod
    def get_log_file_path() -> Path:
        """Returns the absolute path to the log file."""
        return get_app_data_path() / constants.logs.LOG_FILENAME

    @classmethod
    def setup_logging(cls, log_level: str = constants.config.defaults.DEFAULT_LOG_LEVEL,
                      log_file: Optional[Path] = None) -> None:
        """
        Initializes logging with handlers for both a file and the console.

        Args:
            log_level: Console level name ("DEBUG", "INFO", "WARNING" or "ERROR").
            log_file: Overrides the log file location.
        """
        try:
            logger = logging.getLogger(constants.app.LOGGER_NAME)
            logger.setLevel(logging.DEBUG)
            logger.handlers.clear()

            file_handler = logging.handlers.RotatingFileHandler(
                log_file or cls.get_log_file_path(),
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(constants.logs.FILE_LOG_LEVEL)
            file_handler.setFormatter(logging.Formatter(
                constants.logs.LOG_FORMAT,
                datefmt=constants.logs.LOG_DATE_FORMAT
            ))
            logger.addHandler(file_handler)

            console_handler = logging.StreamHandler()
            level = log_level.upper() if isinstance(log_level, str) else ""
            console_handler.setLevel(level if level in constants.logs.LEVEL_NAMES else constants.logs.CONSOLE_LOG_LEVEL)
            console_handler.setFormatter(logging.Formatter(constants.logs.CONSOLE_LOG_FORMAT))
            logger.addHandler(console_handler)

            logger.info("Logging initialized successfully.")
        except Exception as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error("Failed to initialize file logging, falling back to basic console: %s", e)

    def _validate_numeric(self, key: str, value: Any, default: int, min_v: int, max_v: int) -> int:
        """Validates a value is an integer within the inclusive range."""
        try:
            if isinstance(value, bool):
                raise TypeError("Booleans are not numbers here")
            num_value = float(value)
            if not (min_v <= num_value <= max_v) or num_value != int(num_value):
                raise ValueError("Value out of range or not integral")
            return int(num_value)
        except (TypeError, ValueError):
            self.logger.warning(constants.config.messages.INVALID_NUMERIC.format(key=key, value=value, default=default))
            return default

    def _validate_boolean(self, key: str, value: Any, default: bool) -> bool:
        """Validates a value is a boolean."""
        if isinstance(value, bool):
            return value
        self.logger.warning(constants.config.messages.INVALID_BOOLEAN.format(key=key, value=value, default=default))
        return default

    def _validate_choice(self, key: str, value: Any, default: str, choices: List[str]) -> str:
        """Validates a value is one of the allowed choices (case-insensitive)."""
        if isinstance(value, str):
            for choice in choices:
                if choice.lower() == value.lower():
                    return choice
        self.logger.warning(constants.config.messages.INVALID_CHOICE.format(key=key, value=value, default=default, choices=choices))
        return default

    def validate(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merges `loaded_config` over the defaults and sanitizes every value.
        Unknown keys are dropped with a warning.
        """
        default_ref = constants.config.defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning(constants.config.messages.UNKNOWN_KEYS.format(keys=", ".join(sorted(unknown_keys))))

        ranges = {
            "enter_delay_ms": constants.timers.ENTER_DELAY_RANGE_MS,
            "leave_delay_ms": constants.timers.LEAVE_DELAY_RANGE_MS,
            "poll_interval_ms": constants.timers.POLL_INTERVAL_RANGE_MS,
            "animation_duration_ms": constants.timers.ANIMATION_DURATION_RANGE_MS,
            "hot_zone_height_px": constants.panel.HOT_ZONE_HEIGHT_RANGE_PX,
            "pointer_top_threshold_px": constants.panel.POINTER_TOP_THRESHOLD_RANGE_PX,
            "proximity_margin_px": constants.panel.PROXIMITY_MARGIN_RANGE_PX,
        }
        for key, (low, high) in ranges.items():
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], low, high)

        validated["drag_suppresses_pointer"] = self._validate_boolean(
            "drag_suppresses_pointer", validated.get("drag_suppresses_pointer"), default_ref["drag_suppresses_pointer"])
        validated["proximity_policy"] = self._validate_choice(
            "proximity_policy", validated.get("proximity_policy"), default_ref["proximity_policy"],
            list(constants.ProximityPolicy.CHOICES))
        validated["log_level"] = self._validate_choice(
            "log_level", validated.get("log_level"), default_ref["log_level"], list(constants.logs.LEVEL_NAMES))

        return {key: validated[key] for key in default_ref}

    def load(self) -> Dict[str, Any]:
        """
        Loads and validates the configuration file.

        A missing file yields the defaults. A corrupt file is logged and also
        yields the defaults.

        Raises:
            ConfigError: If the file exists but cannot be read.
        """
        path = self.config_path
        if not path.exists():
            self.logger.info("Configuration file not found at %s. Using default settings.", path)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        try:
            with path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error("Configuration file %s is corrupt (%s). Using defaults.", path, e)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        except OSError as e:
            msg = f"OS error reading config file {path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file %s does not contain an object. Using defaults.", path)
            return constants.config.defaults.DEFAULT_CONFIG.copy()
        return self.validate(config)
