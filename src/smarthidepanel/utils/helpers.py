"""
Helper utilities for SmartHidePanel.

This module provides directory lookup for the configuration and log files.
"""

import os
import logging
from typing import Optional
from pathlib import Path

from smarthidepanel import constants


def get_app_data_path() -> Path:
    """
    Retrieve the application directory, following the XDG base directory layout.

    Raises:
        OSError: If the directory cannot be created.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    base: Optional[str] = os.getenv("XDG_CONFIG_HOME")
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".config")
        logger.debug("XDG_CONFIG_HOME not set, using %s", base)
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except PermissionError as e:
        logger.error("Permission denied creating app data directory %s: %s", path, e)
        raise PermissionError(f"Cannot access app data directory: {path}. Please check permissions.") from e
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e
