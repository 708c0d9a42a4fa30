"""
SmartHidePanel: decides when a desktop top bar is shown or hidden.
"""

from smarthidepanel.core.engine import PanelVisibilityEngine
from smarthidepanel.core.facts import EnvironmentFacts, VisibilityDecision

__all__ = ["PanelVisibilityEngine", "EnvironmentFacts", "VisibilityDecision"]
