"""
Unit tests for the ConfigManager class in SmartHidePanel.
"""
import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from smarthidepanel import constants
from smarthidepanel.utils.config import ConfigError, ConfigManager
from smarthidepanel.utils.helpers import get_app_data_path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "smarthidepanel_test.json"


@pytest.fixture
def config_manager(config_path):
    return ConfigManager(config_path)


def write_config(path: Path, content) -> None:
    path.write_text(json.dumps(content), encoding="utf-8")


def test_missing_file_yields_defaults(config_manager):
    """A missing file gives a copy of the defaults."""
    config = config_manager.load()
    assert config == constants.config.defaults.DEFAULT_CONFIG
    assert config is not constants.config.defaults.DEFAULT_CONFIG


def test_valid_config_merges_with_defaults(config_manager, config_path):
    """Values from the file override defaults; the rest stay default."""
    write_config(config_path, {"leave_delay_ms": 300, "proximity_policy": "strict"})
    config = config_manager.load()
    assert config["leave_delay_ms"] == 300
    assert config["proximity_policy"] == "strict"
    assert config["enter_delay_ms"] == constants.config.defaults.DEFAULT_ENTER_DELAY_MS


def test_validate_corrects_invalid_values(config_manager):
    """Out-of-range and mistyped values are reset with a warning each."""
    invalid_config = {
        "leave_delay_ms": -1,
        "poll_interval_ms": 5,
        "hot_zone_height_px": True,
        "enter_delay_ms": 12.5,
        "drag_suppresses_pointer": "yes",
        "proximity_policy": "loose",
    }
    with patch.object(config_manager.logger, "warning") as mock_warning:
        validated = config_manager.validate(invalid_config)

    defaults = constants.config.defaults
    assert validated["leave_delay_ms"] == defaults.DEFAULT_LEAVE_DELAY_MS
    assert validated["poll_interval_ms"] == defaults.DEFAULT_POLL_INTERVAL_MS
    assert validated["hot_zone_height_px"] == defaults.DEFAULT_HOT_ZONE_HEIGHT_PX
    assert validated["enter_delay_ms"] == defaults.DEFAULT_ENTER_DELAY_MS
    assert validated["drag_suppresses_pointer"] is defaults.DEFAULT_DRAG_SUPPRESSES_POINTER
    assert validated["proximity_policy"] == defaults.DEFAULT_PROXIMITY_POLICY
    assert mock_warning.call_count == 6


def test_validate_normalizes_choices_and_integral_floats(config_manager):
    """Choices are case-insensitive and whole floats become ints."""
    validated = config_manager.validate({"proximity_policy": "STRICT", "log_level": "debug", "leave_delay_ms": 300.0})
    assert validated["proximity_policy"] == "strict"
    assert validated["log_level"] == "DEBUG"
    assert validated["leave_delay_ms"] == 300
    assert isinstance(validated["leave_delay_ms"], int)


def test_validate_drops_unknown_keys(config_manager):
    """Unknown keys are dropped with one warning."""
    with patch.object(config_manager.logger, "warning") as mock_warning:
        validated = config_manager.validate({"update_rate": 1.0})
    assert "update_rate" not in validated
    assert set(validated) == set(constants.config.defaults.DEFAULT_CONFIG)
    mock_warning.assert_called_once()


def test_corrupt_file_yields_defaults(config_manager, config_path):
    """Invalid JSON falls back to the defaults."""
    config_path.write_text("{not json", encoding="utf-8")
    assert config_manager.load() == constants.config.defaults.DEFAULT_CONFIG


def test_non_object_file_yields_defaults(config_manager, config_path):
    """A JSON document that is not an object falls back to the defaults."""
    write_config(config_path, [1, 2, 3])
    assert config_manager.load() == constants.config.defaults.DEFAULT_CONFIG


def test_unreadable_file_raises_config_error(tmp_path):
    """An I/O error while reading raises ConfigError."""
    manager = ConfigManager(tmp_path)  # A directory cannot be opened as a file.
    with pytest.raises(ConfigError):
        manager.load()


def test_default_path_follows_xdg_config_home(tmp_path, monkeypatch):
    """The config file lives under XDG_CONFIG_HOME."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    app_dir = get_app_data_path()
    assert app_dir == tmp_path / constants.app.APP_NAME
    assert app_dir.is_dir()
    assert ConfigManager().config_path == app_dir / constants.config.defaults.CONFIG_FILENAME


def test_setup_logging_installs_file_and_console_handlers(tmp_path):
    """Logging gets a file handler and a console handler at the requested level."""
    logger = logging.getLogger(constants.app.LOGGER_NAME)
    try:
        ConfigManager.setup_logging("WARNING", log_file=tmp_path / "test.log")
        assert len(logger.handlers) == 2
        console = [h for h in logger.handlers if type(h) is logging.StreamHandler][0]
        assert console.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
