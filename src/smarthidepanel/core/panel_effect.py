"""
Application of visibility decisions to the panel.

Repeating the current decision is a no-op while the panel is animating
towards it, or once it has settled in the matching state. A settled panel
whose visibility was changed from outside gets the decision applied again.
The opposite decision is always accepted and redirects the running animation.
"""

import logging
from typing import Optional

from .facts import VisibilityDecision
from .interfaces import PanelEffectTarget

logger = logging.getLogger("SmartHidePanel.PanelEffect")


class PanelEffectApplier:
    """Drives a `PanelEffectTarget` from a stream of decisions."""

    def __init__(self, target: PanelEffectTarget) -> None:
        self._target = target
        self._decision: Optional[VisibilityDecision] = None
        self._in_flight = False
        self._generation = 0
        self.applied_count = 0

    @property
    def decision(self) -> Optional[VisibilityDecision]:
        """The last decision handed to the panel, or None before the first one."""
        return self._decision

    target = decision

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def apply(self, decision: VisibilityDecision, reason: str = "") -> bool:
        """
        Starts the transition towards `decision` unless it is already the target.

        Returns:
            bool: True if the panel was told to change, False for a redundant decision.
        """
        if decision is self._decision and (self._in_flight or self._target_matches(decision)):
            return False

        previous = self._decision
        redirected = self._in_flight
        self._generation += 1
        generation = self._generation
        self._decision = decision
        self._in_flight = True

        def on_complete() -> None:
            self._on_transition_complete(generation)

        try:
            if decision.is_visible:
                self._target.show_panel(on_complete)
            else:
                self._target.hide_panel(on_complete)
        except Exception:
            self._decision = previous
            self._in_flight = False
            raise

        self.applied_count += 1
        logger.debug("Panel %s (%s)%s", decision.value, reason or "no reason given",
                     " [redirected mid-flight]" if redirected else "")
        return True

    def _target_matches(self, decision: VisibilityDecision) -> bool:
        try:
            return self._target.is_panel_visible() == decision.is_visible
        except Exception as e:
            logger.error("Could not read panel visibility, assuming %s: %s", decision.value, e, exc_info=True)
            return True

    def _on_transition_complete(self, generation: int) -> None:
        # A redirected animation reports completion for a superseded call.
        if generation != self._generation:
            return
        self._in_flight = False
        logger.debug("Panel transition to %s completed", self._decision.value if self._decision else "unknown")
