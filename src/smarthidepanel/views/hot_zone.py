"""
Qt implementation of the top-edge hot zone and the pointer source.

The hot zone is a frameless, nearly transparent strip along the top of a
screen. It only reports pointer enter/leave; it never takes focus.
"""

import logging
from typing import List, Optional, Tuple

from PyQt6.QtCore import QObject, QRect, Qt, pyqtSignal
from PyQt6.QtGui import QCursor, QGuiApplication, QScreen
from PyQt6.QtWidgets import QWidget

from smarthidepanel import constants
from smarthidepanel.core.interfaces import PointerRegion, PointerSource
from smarthidepanel.core.subscriptions import Subscription, subscribe

logger = logging.getLogger("SmartHidePanel.HotZone")

# Fully transparent windows stop receiving pointer events on some platforms.
HOT_ZONE_OPACITY = 0.01


class HotZoneWidget(QWidget):
    """The strip itself. Emits `entered` / `left` from the Qt enter and leave events."""
    entered = pyqtSignal()
    left = pyqtSignal()

    def __init__(self, screen: QScreen, height_px: int) -> None:
        super().__init__(
            None,
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
            | Qt.WindowType.WindowDoesNotAcceptFocus,
        )
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setWindowOpacity(HOT_ZONE_OPACITY)
        self._screen = screen
        self._height_px = height_px
        self.sync_geometry()

    def sync_geometry(self) -> QRect:
        """Stretches the strip across the full width of its screen."""
        geo = self._screen.geometry()
        rect = QRect(geo.x(), geo.y(), geo.width(), self._height_px)
        self.setGeometry(rect)
        return rect

    def enterEvent(self, event) -> None:
        self.entered.emit()
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self.left.emit()
        super().leaveEvent(event)


class QtHotZone(PointerRegion):
    """`PointerRegion` adapter around a `HotZoneWidget` that follows screen resizes."""

    def __init__(self, screen: QScreen, height_px: int = constants.panel.HOT_ZONE_HEIGHT_PX,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.widget: Optional[HotZoneWidget] = HotZoneWidget(screen, height_px)
        self._subscriptions: List[Subscription] = [
            subscribe(self.widget.entered, self.pointer_entered.emit, "hot-zone.entered"),
            subscribe(self.widget.left, self.pointer_left.emit, "hot-zone.left"),
            subscribe(screen.geometryChanged, self._on_screen_geometry_changed, "screen.geometryChanged"),
        ]
        self.widget.show()
        logger.debug("Hot zone created at %s", self.widget.geometry())

    def _on_screen_geometry_changed(self, _geometry: QRect) -> None:
        if self.widget is not None:
            rect = self.widget.sync_geometry()
            logger.debug("Screen geometry changed; hot zone resized to %s", rect)

    def destroy(self) -> None:
        widget, self.widget = self.widget, None
        if widget is None:
            return
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        widget.hide()
        widget.deleteLater()
        logger.debug("Hot zone destroyed.")


class QtPointerSource(PointerSource):
    """
    Pointer queries through `QCursor`, relative to the panel's screen.

    Args:
        screen: The reference screen. Defaults to the primary screen at query time.
    """

    def __init__(self, screen: Optional[QScreen] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._screen = screen

    def screen(self) -> QScreen:
        screen = self._screen or QGuiApplication.primaryScreen()
        if screen is None:
            raise RuntimeError("No screen available")
        return screen

    def pointer_position(self) -> Tuple[int, int]:
        pos = QCursor.pos()
        geo = self.screen().geometry()
        return pos.x() - geo.x(), pos.y() - geo.y()

    def create_hot_zone(self, height_px: int) -> QtHotZone:
        return QtHotZone(self.screen(), height_px)
