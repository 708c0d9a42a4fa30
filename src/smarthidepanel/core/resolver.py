"""
Visibility resolver.

A pure function of `EnvironmentFacts`. The rules are checked in a fixed
priority order and the first match wins:

1. screen locked             -> HIDDEN
2. overview visible          -> SHOWN
3. a menu is open            -> SHOWN
4. pointer inside, no drag   -> SHOWN
5. a window blocks the panel -> HIDDEN
6. otherwise                 -> SHOWN
"""

from typing import Tuple

from .facts import EnvironmentFacts, VisibilityDecision


class Reason:
    """Labels attached to each rule, used in log lines."""
    SCREEN_LOCKED = "screen locked"
    OVERVIEW = "overview visible"
    MENU_OPEN = "menu open"
    POINTER_INSIDE = "pointer inside hot zone or panel"
    BLOCKING_WINDOW = "window maximized or near the panel"
    DEFAULT = "default"


def explain(facts: EnvironmentFacts, drag_suppresses_pointer: bool = True) -> Tuple[VisibilityDecision, str]:
    """
    Resolves the decision and returns it together with the rule that produced it.

    Args:
        facts: The snapshot to evaluate.
        drag_suppresses_pointer: When True, an active window move grab disables
            the pointer rule, so dragging a window towards the top edge does not
            reveal the panel.
    """
    if facts.screen_locked:
        return VisibilityDecision.HIDDEN, Reason.SCREEN_LOCKED
    if facts.overview_visible:
        return VisibilityDecision.SHOWN, Reason.OVERVIEW
    if facts.any_menu_open:
        return VisibilityDecision.SHOWN, Reason.MENU_OPEN

    dragging = facts.drag_in_progress and drag_suppresses_pointer
    if facts.mouse_inside_debounced and not dragging:
        return VisibilityDecision.SHOWN, Reason.POINTER_INSIDE
    if facts.blocking_window_present:
        return VisibilityDecision.HIDDEN, Reason.BLOCKING_WINDOW
    return VisibilityDecision.SHOWN, Reason.DEFAULT


def resolve(facts: EnvironmentFacts, drag_suppresses_pointer: bool = True) -> VisibilityDecision:
    """Returns only the decision for `facts`. See `explain`."""
    decision, _ = explain(facts, drag_suppresses_pointer)
    return decision
