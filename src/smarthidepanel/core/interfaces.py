"""
Capability interfaces of the host desktop shell.

The engine never talks to the shell directly. It is constructed with objects
implementing these narrow interfaces, which notify it through Qt signals and
answer point-in-time queries. Tests substitute fakes; `smarthidepanel.views`
provides Qt implementations of the pointer and panel pieces.

The classes are plain `QObject` subclasses (Qt's metaclass does not mix with
`abc.ABCMeta`); query methods raise `NotImplementedError` until overridden.
"""

from typing import Callable, Iterable, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from smarthidepanel.utils.window_utils import WindowInfo

CompletionCallback = Callable[[], None]


class PointerRegion(QObject):
    """A pointer-reactive screen region: the hot zone, the panel or a menu button."""
    pointer_entered = pyqtSignal()
    pointer_left = pyqtSignal()

    def destroy(self) -> None:
        """Releases the region. Regions the engine did not create may keep the default."""


class PointerSource(QObject):
    """Pointer position queries and creation of the top-edge hot zone."""

    def pointer_position(self) -> Tuple[int, int]:
        raise NotImplementedError

    def create_hot_zone(self, height_px: int) -> PointerRegion:
        raise NotImplementedError


class ManagedWindow(QObject):
    """Change notifications for one top-level window, valid until `unmanaged`."""
    maximized_horizontally_changed = pyqtSignal()
    maximized_vertically_changed = pyqtSignal()
    size_changed = pyqtSignal()
    position_changed = pyqtSignal()
    unmanaged = pyqtSignal()


class WindowRegistry(QObject):
    """The live set of top-level windows."""
    window_created = pyqtSignal(object)  # ManagedWindow
    focus_changed = pyqtSignal()

    def windows(self) -> Iterable[WindowInfo]:
        raise NotImplementedError

    def panel_monitor_index(self) -> Optional[int]:
        """Index of the monitor holding the panel, or None if it cannot be determined."""
        raise NotImplementedError

    def is_move_grab_active(self) -> bool:
        """True while the window manager reports an interactive window move."""
        raise NotImplementedError


class StatusItem(QObject):
    """One status-area indicator with an optional menu."""

    def __init__(self, name: str = "", actor: Optional[PointerRegion] = None,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.name = name
        self.actor = actor

    def is_menu_open(self) -> bool:
        raise NotImplementedError


class ShellModeSource(QObject):
    """Overview, lock screen and status-area state of the shell."""
    overview_showing = pyqtSignal()
    overview_hiding = pyqtSignal()
    locked = pyqtSignal()
    unlocked = pyqtSignal()

    def is_overview_visible(self) -> bool:
        raise NotImplementedError

    def is_screen_locked(self) -> bool:
        raise NotImplementedError

    def status_items(self) -> Iterable[StatusItem]:
        raise NotImplementedError


class PanelEffectTarget(PointerRegion):
    """
    The panel itself. Emits pointer signals for its own area and performs the
    animated show/hide transition. A new call may redirect an animation that
    is still running; `on_complete` is invoked only for the call that finishes.
    """

    def panel_height(self) -> int:
        raise NotImplementedError

    def is_panel_visible(self) -> bool:
        raise NotImplementedError

    def show_panel(self, on_complete: CompletionCallback) -> None:
        raise NotImplementedError

    def hide_panel(self, on_complete: CompletionCallback) -> None:
        raise NotImplementedError
