"""
Constants describing the hot zone and the window proximity test.
"""

from typing import Final, Tuple


class ProximityPolicy:
    """Names of the supported proximity threshold policies."""
    MARGIN: Final[str] = "margin"
    STRICT: Final[str] = "strict"
    CHOICES: Final[Tuple[str, ...]] = (MARGIN, STRICT)


class PanelConstants:
    """Geometry constants for the hot zone, pointer fallback and blocking windows."""
    HOT_ZONE_HEIGHT_PX: Final[int] = 2
    HOT_ZONE_HEIGHT_RANGE_PX: Final[Tuple[int, int]] = (1, 20)

    POINTER_TOP_THRESHOLD_PX: Final[int] = 5
    POINTER_TOP_THRESHOLD_RANGE_PX: Final[Tuple[int, int]] = (0, 50)

    PROXIMITY_MARGIN_PX: Final[int] = 50
    PROXIMITY_MARGIN_RANGE_PX: Final[Tuple[int, int]] = (0, 500)
    DEFAULT_PROXIMITY_POLICY: Final[str] = ProximityPolicy.MARGIN

    DEFAULT_PANEL_HEIGHT_PX: Final[int] = 32
    """Used by the Qt panel wrapper when the widget reports no height yet."""

    def __init__(self) -> None:
        self.policy = ProximityPolicy()
        self.validate()

    def validate(self) -> None:
        """Validate the geometry constants."""
        if self.HOT_ZONE_HEIGHT_PX <= 0:
            raise ValueError("HOT_ZONE_HEIGHT_PX must be positive")
        if self.POINTER_TOP_THRESHOLD_PX < 0:
            raise ValueError("POINTER_TOP_THRESHOLD_PX must be non-negative")
        if self.PROXIMITY_MARGIN_PX < 0:
            raise ValueError("PROXIMITY_MARGIN_PX must be non-negative")
        if self.DEFAULT_PANEL_HEIGHT_PX <= 0:
            raise ValueError("DEFAULT_PANEL_HEIGHT_PX must be positive")
        if self.DEFAULT_PROXIMITY_POLICY not in ProximityPolicy.CHOICES:
            raise ValueError(f"Unknown DEFAULT_PROXIMITY_POLICY: {self.DEFAULT_PROXIMITY_POLICY}")

# Singleton instance for easy access
panel = PanelConstants()
