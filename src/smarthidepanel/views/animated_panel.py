"""
Qt implementation of the panel effect target.

Wraps an existing top-bar `QWidget`: hiding slides it up by its own height
and then hides it, showing makes it visible and slides it back. A new request
redirects a running slide from wherever the widget currently is.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QEasingCurve, QEvent, QObject, QPoint, QPropertyAnimation
from PyQt6.QtWidgets import QWidget

from smarthidepanel import constants
from smarthidepanel.core.interfaces import CompletionCallback, PanelEffectTarget

logger = logging.getLogger("SmartHidePanel.AnimatedPanel")


class AnimatedPanel(PanelEffectTarget):
    """
    Args:
        widget: The panel widget, positioned where it sits when shown.
        duration_ms: Length of one slide.
    """

    def __init__(self, widget: QWidget, duration_ms: int = constants.timers.ANIMATION_DURATION_MS,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._widget = widget
        self._shown_y = widget.y()
        self._hide_on_finish = False
        self._pending: Optional[CompletionCallback] = None

        self._animation = QPropertyAnimation(widget, b"pos", self)
        self._animation.setDuration(duration_ms)
        self._animation.setEasingCurve(QEasingCurve(QEasingCurve.Type.OutExpo))
        self._animation.finished.connect(self._on_finished)

        widget.installEventFilter(self)

    @property
    def widget(self) -> QWidget:
        return self._widget

    @property
    def is_animating(self) -> bool:
        return self._animation.state() == QPropertyAnimation.State.Running

    def set_duration(self, duration_ms: int) -> None:
        self._animation.setDuration(duration_ms)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._widget:
            if event.type() == QEvent.Type.Enter:
                self.pointer_entered.emit()
            elif event.type() == QEvent.Type.Leave:
                self.pointer_left.emit()
        return False

    def panel_height(self) -> int:
        height = self._widget.height()
        return height if height > 0 else constants.panel.DEFAULT_PANEL_HEIGHT_PX

    def is_panel_visible(self) -> bool:
        return self._widget.isVisible() and not self._hide_on_finish

    def show_panel(self, on_complete: CompletionCallback) -> None:
        self._hide_on_finish = False
        self._widget.show()
        self._slide_to(self._shown_y, on_complete)

    def hide_panel(self, on_complete: CompletionCallback) -> None:
        self._hide_on_finish = True
        self._slide_to(self._shown_y - self.panel_height(), on_complete)

    def destroy(self) -> None:
        self._animation.stop()
        self._widget.removeEventFilter(self)

    def _slide_to(self, y: int, on_complete: CompletionCallback) -> None:
        # stop() does not emit finished, so the superseded callback is simply dropped.
        self._animation.stop()
        self._pending = on_complete
        start = self._widget.pos()
        end = QPoint(start.x(), y)
        if self._animation.duration() == 0 or start == end:
            self._widget.move(end)
            self._on_finished()
            return
        self._animation.setStartValue(start)
        self._animation.setEndValue(end)
        self._animation.start()

    def _on_finished(self) -> None:
        if self._hide_on_finish:
            self._widget.hide()
        callback, self._pending = self._pending, None
        if callback is not None:
            try:
                callback()
            except Exception as e:
                logger.error("Panel transition callback failed: %s", e, exc_info=True)
