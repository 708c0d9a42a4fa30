"""
Constants for application metadata.
"""

from typing import Final

class AppConstants:
    """Defines application metadata and the root logger name."""
    APP_NAME: Final[str] = "SmartHidePanel"
    VERSION: Final[str] = "1.0.0"
    LOGGER_NAME: Final[str] = APP_NAME

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the constants to ensure they meet constraints."""
        if not self.APP_NAME:
            raise ValueError("APP_NAME must not be empty")
        if not self.VERSION:
            raise ValueError("VERSION must not be empty")
        if not self.LOGGER_NAME:
            raise ValueError("LOGGER_NAME must not be empty")

# Singleton instance for easy access
app = AppConstants()
