"""
Views submodule for SmartHidePanel.

Qt implementations of the pointer and panel collaborators: the top-edge hot
zone, the cursor-based pointer source and the sliding panel wrapper.
"""

from .animated_panel import AnimatedPanel
from .hot_zone import HotZoneWidget, QtHotZone, QtPointerSource

__all__ = ["AnimatedPanel", "HotZoneWidget", "QtHotZone", "QtPointerSource"]
