"""
Utilities submodule for SmartHidePanel.

Provides configuration management, timer helpers and window geometry tests.
"""

from .config import ConfigManager, ConfigError
from .helpers import get_app_data_path
from .window_utils import FrameRect, MaximizeFlags, WindowInfo, WindowType

__all__ = [
    "ConfigManager",
    "ConfigError",
    "get_app_data_path",
    "FrameRect",
    "MaximizeFlags",
    "WindowInfo",
    "WindowType",
]
