"""
Provides centralized, immutable constants for SmartHidePanel.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from smarthidepanel import constants

    # Default leave delay in milliseconds
    timer.start(constants.timers.LEAVE_DELAY_MS)

    # Default configuration value
    policy = constants.config.defaults.DEFAULT_PROXIMITY_POLICY
"""

from .app import app
from .config import config
from .logs import logs
from .panel import panel, ProximityPolicy
from .timers import timers

__all__ = [
    "app",
    "config",
    "logs",
    "panel",
    "ProximityPolicy",
    "timers",
]
