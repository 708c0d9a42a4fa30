"""
Panel visibility engine.

Composes the signal collector, the hysteresis timers, the resolver and the
panel effect into one reactive loop:

    notification -> facts updated -> (pointer: delayed via hysteresis)
                 -> resolver -> panel shown or hidden

A low-frequency polling tick re-runs the resolver as a fallback for states
that have no discrete notification (pointer already at the top edge on
activation, lock engaging without a signal). Everything runs on the Qt
event loop thread, so facts need no locking.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from smarthidepanel import constants
from smarthidepanel.utils.timer_utils import cleanup_timer, create_timer
from .facts import EnvironmentFacts, VisibilityDecision
from .hysteresis import HysteresisTimers
from .interfaces import PanelEffectTarget, PointerSource, ShellModeSource, WindowRegistry
from .panel_effect import PanelEffectApplier
from .resolver import explain
from .signal_collector import SignalCollector

logger = logging.getLogger("SmartHidePanel.Engine")


class PanelVisibilityEngine(QObject):
    """
    Decides whether the panel is shown or hidden.

    Signals:
        visibility_changed (bool): Emitted when an applied decision differs from the previous one.
    """
    visibility_changed = pyqtSignal(bool)

    def __init__(
        self,
        pointer: PointerSource,
        windows: WindowRegistry,
        shell: ShellModeSource,
        panel: PanelEffectTarget,
        config: Optional[Dict[str, Any]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Args:
            pointer: Pointer position queries and hot zone factory.
            windows: Live window registry.
            shell: Overview, lock and status-area state.
            panel: The panel to show and hide.
            config: A validated configuration (see `ConfigManager.load`). Missing
                keys fall back to the defaults.
        """
        super().__init__(parent)
        self.config: Dict[str, Any] = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.config.update(config or {})

        self.facts = EnvironmentFacts()
        self._active = False
        self._poll_timer: Optional[QTimer] = None

        self._applier = PanelEffectApplier(panel)
        self.hysteresis = HysteresisTimers(
            self._on_enter_elapsed,
            self._on_leave_elapsed,
            enter_delay_ms=self.config["enter_delay_ms"],
            leave_delay_ms=self.config["leave_delay_ms"],
            parent=self,
        )
        self.collector = SignalCollector(self, pointer, windows, shell, panel, parent=self)
        logger.debug("PanelVisibilityEngine initialized.")

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def decision(self) -> Optional[VisibilityDecision]:
        """The last decision applied to the panel."""
        return self._applier.decision

    @property
    def effect_count(self) -> int:
        """How many times the panel was actually told to change."""
        return self._applier.applied_count

    @property
    def is_polling(self) -> bool:
        return self._poll_timer is not None and self._poll_timer.isActive()

    # --- Lifecycle ---

    def activate(self) -> None:
        """Wires all subscriptions, creates the hot zone, starts polling and evaluates once."""
        if self._active:
            logger.debug("activate() called while already active; ignoring.")
            return
        try:
            self.collector.connect_all()
            self._poll_timer = create_timer(self, self._on_poll_tick, self.config["poll_interval_ms"])
            self._poll_timer.start()
        except Exception as e:
            logger.critical("Failed to activate visibility engine: %s", e, exc_info=True)
            self.collector.disconnect_all()
            cleanup_timer(self._poll_timer)
            self._poll_timer = None
            raise
        self._active = True
        logger.info("Visibility engine activated.")
        self.reevaluate("activate")

    def deactivate(self) -> None:
        """
        Cancels every subscription and timer, destroys the hot zone and leaves
        the panel shown. Safe to call repeatedly.
        """
        if not self._active:
            logger.debug("deactivate() called while inactive; ignoring.")
            return
        self._active = False
        self.collector.disconnect_all()
        self.hysteresis.cancel_all()
        poll_timer, self._poll_timer = self._poll_timer, None
        try:
            cleanup_timer(poll_timer)
        except RuntimeError as e:
            logger.error("Polling timer cleanup failed: %s", e)
        self.facts = EnvironmentFacts()
        self.force_show("deactivate")
        logger.info("Visibility engine deactivated.")

    def update_config(self, config: Dict[str, Any]) -> None:
        """
        Applies new delays and polling interval. Geometry settings take effect on the next evaluation.

        Raises:
            ValueError: If a delay is negative or the polling interval is not positive. The
                current configuration is left untouched.
        """
        merged = {**self.config, **config}
        if merged["poll_interval_ms"] <= 0:
            raise ValueError(f"Polling interval must be positive: {merged['poll_interval_ms']}")
        self.hysteresis.set_delays(merged["enter_delay_ms"], merged["leave_delay_ms"])
        self.config = merged
        if self._poll_timer is not None:
            self._poll_timer.setInterval(self.config["poll_interval_ms"])
        logger.debug("Configuration updated: %s", self.config)

    # --- Facts and evaluation ---

    def update_facts(self, **changes: bool) -> EnvironmentFacts:
        """
        Replaces the current facts with `changes` applied.

        Raises:
            KeyError: If a change names an unknown fact.
        """
        unknown = set(changes) - EnvironmentFacts.field_names()
        if unknown:
            raise KeyError(f"Unknown facts: {', '.join(sorted(unknown))}")
        self.facts = replace(self.facts, **changes)
        return self.facts

    def apply_and_reevaluate(self, reason: str = "fact update", **changes: bool) -> Optional[VisibilityDecision]:
        """The single entry point for a fact change that must be reflected immediately."""
        self.update_facts(**changes)
        return self.reevaluate(reason, pinned=changes.keys())

    def reevaluate(self, reason: str = "", pinned: Iterable[str] = ()) -> Optional[VisibilityDecision]:
        """
        Refreshes the queried facts, resolves a decision and applies it.

        Args:
            reason: Logged with the decision.
            pinned: Facts just set from a notification. Their queries are skipped for
                this evaluation, so a shell that has not caught up yet cannot undo them.

        Returns:
            The decision, or None if the evaluation failed. Never raises.
        """
        try:
            self.facts = replace(self.facts, **self.collector.query_facts(skip=pinned))
            decision, rule = explain(self.facts, self.config["drag_suppresses_pointer"])
            logger.debug("Evaluated (%s): %s because %s", reason or "unspecified", decision.value, rule)
            self._apply(decision, rule)
            return decision
        except Exception as e:
            logger.error("Error evaluating panel visibility (%s): %s", reason, e, exc_info=True)
            return None

    def force_show(self, reason: str) -> None:
        """Shows the panel without consulting the resolver."""
        try:
            self._apply(VisibilityDecision.SHOWN, reason)
        except Exception as e:
            logger.error("Error forcing panel visible (%s): %s", reason, e, exc_info=True)

    def _apply(self, decision: VisibilityDecision, reason: str) -> None:
        previous = self._applier.decision
        if not self._applier.apply(decision, reason):
            return
        if decision is previous:
            logger.info("Panel %s again: it was changed outside the engine", decision.value)
            return
        logger.info("Panel %s: %s", decision.value, reason)
        self.visibility_changed.emit(decision.is_visible)

    # --- Timer callbacks ---

    def _on_enter_elapsed(self) -> None:
        self.update_facts(mouse_inside_debounced=self.facts.mouse_inside_raw)
        self.reevaluate("enter delay elapsed")

    def _on_leave_elapsed(self) -> None:
        inside = self.facts.mouse_inside_raw
        self.update_facts(mouse_inside_debounced=inside)
        # The pointer came back before the delay ran out: nothing to hide.
        if not inside:
            self.reevaluate("leave delay elapsed")

    def _on_poll_tick(self) -> None:
        try:
            self.collector.poll_pointer()
        except Exception as e:
            logger.error("Pointer poll failed: %s", e, exc_info=True)
        self.reevaluate("poll")
