"""
Signal collector.

Translates every notification coming from the shell collaborators into an
update of `EnvironmentFacts`, then either re-evaluates immediately (overview,
lock, menus, windows) or hands the change to the hysteresis timers (pointer
presence). It also owns every subscription the engine makes and the hot zone
it creates, so teardown is a single call.
"""

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

from PyQt6.QtCore import QObject

from smarthidepanel.utils.window_utils import any_window_blocks_panel, proximity_threshold
from .interfaces import (
    ManagedWindow, PanelEffectTarget, PointerRegion, PointerSource, ShellModeSource, WindowRegistry
)
from .subscriptions import Subscription, SubscriptionGroup, cancel_all, subscribe

if TYPE_CHECKING:
    from .engine import PanelVisibilityEngine

logger = logging.getLogger("SmartHidePanel.SignalCollector")


def _contained(handler: Callable) -> Callable:
    """Logs and swallows any exception raised by a signal handler."""
    @functools.wraps(handler)
    def wrapper(self, *args, **kwargs):
        try:
            return handler(self, *args, **kwargs)
        except Exception as e:
            logger.error("Error in %s: %s", handler.__name__, e, exc_info=True)
            return None
    return wrapper


class SignalCollector(QObject):
    """
    Wires the engine to its collaborators.

    Args:
        engine: The engine whose facts are updated.
        pointer: Pointer queries and hot zone factory.
        windows: The window registry.
        shell: Overview, lock and status-area state.
        panel: The panel, whose own pointer signals count as "inside".
    """

    def __init__(
        self,
        engine: "PanelVisibilityEngine",
        pointer: PointerSource,
        windows: WindowRegistry,
        shell: ShellModeSource,
        panel: PanelEffectTarget,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._pointer = pointer
        self._windows = windows
        self._shell = shell
        self._panel = panel

        self._subscriptions: List[Subscription] = []
        self._window_groups: Dict[int, SubscriptionGroup] = {}
        self.hot_zone: Optional[PointerRegion] = None

    @property
    def subscription_count(self) -> int:
        """Active subscriptions, including per-window ones."""
        own = sum(1 for sub in self._subscriptions if sub.active)
        return own + sum(len(group) for group in self._window_groups.values())

    @property
    def tracked_window_count(self) -> int:
        return len(self._window_groups)

    # --- Wiring ---

    def connect_all(self) -> None:
        """Creates the hot zone and subscribes to every collaborator signal."""
        height = self._engine.config["hot_zone_height_px"]
        self.hot_zone = self._pointer.create_hot_zone(height)
        self._connect(self.hot_zone.pointer_entered, self._on_hot_zone_entered)
        self._connect(self.hot_zone.pointer_left, self._on_hot_zone_left)

        self._connect(self._panel.pointer_entered, self._on_panel_entered)
        self._connect(self._panel.pointer_left, self._on_panel_left)
        self._connect_status_items()

        self._connect(self._shell.overview_showing, self._on_overview_showing)
        self._connect(self._shell.overview_hiding, self._on_overview_hiding)
        self._connect(self._shell.locked, self._on_locked)
        self._connect(self._shell.unlocked, self._on_unlocked)

        self._connect(self._windows.focus_changed, self._on_focus_changed)
        self._connect(self._windows.window_created, self._on_window_created)
        logger.debug("Connected %d subscriptions.", len(self._subscriptions))

    def disconnect_all(self) -> None:
        """Cancels every subscription and destroys the hot zone. Safe to call repeatedly."""
        cancelled = cancel_all(self._subscriptions)
        self._subscriptions.clear()
        for group in self._window_groups.values():
            cancelled += group.cancel()
        self._window_groups.clear()

        hot_zone, self.hot_zone = self.hot_zone, None
        if hot_zone is not None:
            try:
                hot_zone.destroy()
            except Exception as e:
                logger.error("Failed to destroy hot zone: %s", e, exc_info=True)
        logger.debug("Cancelled %d subscriptions.", cancelled)

    def _connect(self, signal, slot: Callable, label: str = "") -> Subscription:
        sub = subscribe(signal, slot, label)
        self._subscriptions.append(sub)
        return sub

    def _connect_status_items(self) -> None:
        try:
            items = list(self._shell.status_items())
        except Exception as e:
            logger.error("Could not enumerate status items: %s", e, exc_info=True)
            return
        for item in items:
            actor = getattr(item, "actor", None)
            if actor is None:
                logger.debug("Status item %r has no actor; skipping.", getattr(item, "name", item))
                continue
            self._connect(actor.pointer_entered, self._on_panel_entered, f"{item.name}.entered")
            self._connect(actor.pointer_left, self._on_panel_left, f"{item.name}.left")

    # --- Queried facts ---

    def query_facts(self, skip: Iterable[str] = ()) -> Dict[str, Any]:
        """
        Reads every fact that has a point-in-time query. A failing query is
        logged and its fact keeps the current value. Facts named in `skip`
        are left out.
        """
        facts = self._engine.facts
        queries = (
            ("overview_visible", "overview", self._shell.is_overview_visible),
            ("screen_locked", "lock state", self._shell.is_screen_locked),
            ("any_menu_open", "menus", self._any_menu_open),
            ("drag_in_progress", "move grab", self._windows.is_move_grab_active),
            ("blocking_window_present", "windows", self._blocking_window_present),
        )
        skipped = set(skip)
        return {
            name: self._query(label, fn, getattr(facts, name))
            for name, label, fn in queries
            if name not in skipped
        }

    def _query(self, label: str, fn: Callable[[], bool], fallback: bool) -> bool:
        try:
            return bool(fn())
        except Exception as e:
            logger.error("Query for %s failed, keeping %s: %s", label, fallback, e, exc_info=True)
            return fallback

    def _any_menu_open(self) -> bool:
        for item in self._shell.status_items():
            try:
                if item.is_menu_open():
                    return True
            except NotImplementedError:
                # Indicator without a menu.
                continue
        return False

    def _blocking_window_present(self) -> bool:
        config = self._engine.config
        threshold = proximity_threshold(
            self._panel.panel_height(), config["proximity_policy"], config["proximity_margin_px"]
        )
        return any_window_blocks_panel(self._windows.windows(), self._windows.panel_monitor_index(), threshold)

    def poll_pointer(self) -> None:
        """
        Polling fallback for pointer presence. Only a change of the
        top-edge state is forwarded to the hysteresis timers.
        """
        x, y = self._pointer.pointer_position()
        at_top = y <= self._engine.config["pointer_top_threshold_px"] and x > 0
        if at_top == self._engine.facts.pointer_at_top_edge:
            return
        self._engine.update_facts(pointer_at_top_edge=at_top)
        if at_top:
            self._engine.hysteresis.start_enter_timer()
        else:
            self._engine.hysteresis.start_leave_timer()

    # --- Pointer handlers ---

    @_contained
    def _on_hot_zone_entered(self) -> None:
        self._engine.update_facts(mouse_in_hot_zone=True)
        self._engine.hysteresis.start_enter_timer()

    @_contained
    def _on_hot_zone_left(self) -> None:
        self._engine.update_facts(mouse_in_hot_zone=False)
        self._engine.hysteresis.start_leave_timer()

    @_contained
    def _on_panel_entered(self) -> None:
        # Entering the panel is never delayed; only leaving it is.
        self._engine.hysteresis.cancel_leave_timer()
        self._engine.apply_and_reevaluate("pointer entered panel", mouse_in_panel=True, mouse_inside_debounced=True)

    @_contained
    def _on_panel_left(self) -> None:
        self._engine.update_facts(mouse_in_panel=False)
        self._engine.hysteresis.start_leave_timer()

    # --- Shell handlers ---

    @_contained
    def _on_overview_showing(self) -> None:
        self._engine.update_facts(overview_visible=True)
        self._engine.force_show("overview showing")

    @_contained
    def _on_overview_hiding(self) -> None:
        self._engine.apply_and_reevaluate("overview hiding", overview_visible=False)

    @_contained
    def _on_locked(self) -> None:
        self._engine.apply_and_reevaluate("screen locked", screen_locked=True)

    @_contained
    def _on_unlocked(self) -> None:
        self._engine.apply_and_reevaluate("screen unlocked", screen_locked=False)

    # --- Window handlers ---

    @_contained
    def _on_focus_changed(self) -> None:
        self._engine.reevaluate("focus changed")

    @_contained
    def _on_window_created(self, window: ManagedWindow) -> None:
        key = id(window)
        if key not in self._window_groups:
            group = SubscriptionGroup()
            group.add(window.maximized_horizontally_changed, self._on_window_changed, "maximized-horizontally")
            group.add(window.maximized_vertically_changed, self._on_window_changed, "maximized-vertically")
            group.add(window.size_changed, self._on_window_changed, "size-changed")
            group.add(window.position_changed, self._on_window_changed, "position-changed")
            group.add(window.unmanaged, functools.partial(self._on_window_unmanaged, key), "unmanaged")
            self._window_groups[key] = group
        self._engine.reevaluate("window created")

    @_contained
    def _on_window_changed(self) -> None:
        self._engine.reevaluate("window geometry changed")

    @_contained
    def _on_window_unmanaged(self, key: int) -> None:
        group = self._window_groups.pop(key, None)
        if group is not None:
            group.cancel()
        self._engine.reevaluate("window unmanaged")
