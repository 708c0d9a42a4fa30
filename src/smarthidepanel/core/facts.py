"""
Data model for the visibility engine.

`EnvironmentFacts` is the snapshot the resolver reads. It is replaced, never
mutated in place, so a decision is always computed from one consistent value.
"""

from dataclasses import dataclass, fields
from enum import Enum


class VisibilityDecision(Enum):
    """The only externally observable output of the engine."""
    SHOWN = "shown"
    HIDDEN = "hidden"

    @property
    def is_visible(self) -> bool:
        return self is VisibilityDecision.SHOWN


@dataclass(slots=True, frozen=True)
class EnvironmentFacts:
    """
    Current state of every signal the resolver depends on.

    Raw pointer facts (`mouse_in_hot_zone`, `mouse_in_panel`,
    `pointer_at_top_edge`) follow the input immediately. `mouse_inside_debounced`
    is derived from them by the hysteresis timers.
    """
    overview_visible: bool = False
    screen_locked: bool = False
    any_menu_open: bool = False
    mouse_in_hot_zone: bool = False
    mouse_in_panel: bool = False
    pointer_at_top_edge: bool = False
    mouse_inside_debounced: bool = False
    blocking_window_present: bool = False
    drag_in_progress: bool = False

    @property
    def mouse_inside_raw(self) -> bool:
        """Instantaneous pointer presence from every source."""
        return self.mouse_in_hot_zone or self.mouse_in_panel or self.pointer_at_top_edge

    @classmethod
    def field_names(cls) -> frozenset:
        return frozenset(f.name for f in fields(cls))
