"""
Core of the panel visibility engine: facts, resolver, hysteresis and wiring.
"""

from .engine import PanelVisibilityEngine
from .facts import EnvironmentFacts, VisibilityDecision
from .resolver import explain, resolve

__all__ = [
    "PanelVisibilityEngine",
    "EnvironmentFacts",
    "VisibilityDecision",
    "explain",
    "resolve",
]
