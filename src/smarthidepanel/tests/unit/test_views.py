"""
Tests for the Qt hot zone, pointer source and animated panel.
"""
from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import QEvent
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QWidget

from smarthidepanel.views.animated_panel import AnimatedPanel
from smarthidepanel.views.hot_zone import QtHotZone, QtPointerSource


@pytest.fixture
def screen(q_app):
    return QGuiApplication.primaryScreen()


@pytest.fixture
def hot_zone(screen):
    zone = QtHotZone(screen, 3)
    yield zone
    zone.destroy()


@pytest.fixture
def panel_widget(q_app):
    widget = QWidget()
    widget.setGeometry(0, 0, 800, 32)
    widget.show()
    yield widget
    widget.close()


@pytest.fixture
def animated_panel(panel_widget):
    panel = AnimatedPanel(panel_widget, duration_ms=0)
    yield panel
    panel.destroy()


def test_hot_zone_spans_screen_top(hot_zone, screen):
    """The strip covers the full top edge at the requested height."""
    geo = hot_zone.widget.geometry()
    assert geo.height() == 3
    assert geo.width() == screen.geometry().width()
    assert geo.y() == screen.geometry().y()


def test_hot_zone_forwards_pointer_signals(hot_zone):
    """Widget enter/leave events reach the region signals."""
    entered, left = MagicMock(), MagicMock()
    hot_zone.pointer_entered.connect(entered)
    hot_zone.pointer_left.connect(left)

    hot_zone.widget.entered.emit()
    hot_zone.widget.left.emit()

    entered.assert_called_once()
    left.assert_called_once()


def test_hot_zone_destroy_is_idempotent(screen):
    """Destroying the zone hides the widget and can be repeated."""
    zone = QtHotZone(screen, 2)
    widget = zone.widget
    zone.destroy()
    zone.destroy()
    assert zone.widget is None
    assert not widget.isVisible()


def test_pointer_source_creates_hot_zone(q_app):
    """The pointer source uses the primary screen and reports integer coordinates."""
    source = QtPointerSource()
    assert source.screen() is QGuiApplication.primaryScreen()
    zone = source.create_hot_zone(4)
    try:
        assert zone.widget.geometry().height() == 4
    finally:
        zone.destroy()
    x, y = source.pointer_position()
    assert isinstance(x, int) and isinstance(y, int)


def test_hide_then_show_slides_panel(animated_panel, panel_widget):
    """Hiding slides the widget up by its height and showing brings it back."""
    on_hidden, on_shown = MagicMock(), MagicMock()

    animated_panel.hide_panel(on_hidden)
    on_hidden.assert_called_once()
    assert not animated_panel.is_panel_visible()
    assert not panel_widget.isVisible()
    assert panel_widget.y() == -32

    animated_panel.show_panel(on_shown)
    on_shown.assert_called_once()
    assert animated_panel.is_panel_visible()
    assert panel_widget.y() == 0


def test_panel_height_comes_from_widget(animated_panel):
    """The panel height is the widget height."""
    assert animated_panel.panel_height() == 32


def test_redirect_drops_superseded_callback(animated_panel):
    """Only the latest request's callback runs after a redirect."""
    animated_panel.set_duration(1000)
    on_hidden, on_shown = MagicMock(), MagicMock()

    animated_panel.hide_panel(on_hidden)
    assert animated_panel.is_animating
    animated_panel.show_panel(on_shown)

    on_hidden.assert_not_called()
    on_shown.assert_called_once()
    assert animated_panel.is_panel_visible()


def test_callback_error_is_contained(animated_panel):
    """A failing completion callback does not break the slide."""
    animated_panel.hide_panel(MagicMock(side_effect=RuntimeError("boom")))
    assert not animated_panel.is_panel_visible()


def test_widget_hover_emits_pointer_signals(animated_panel, panel_widget):
    """Hovering the panel widget emits the pointer signals."""
    entered, left = MagicMock(), MagicMock()
    animated_panel.pointer_entered.connect(entered)
    animated_panel.pointer_left.connect(left)

    animated_panel.eventFilter(panel_widget, QEvent(QEvent.Type.Enter))
    animated_panel.eventFilter(panel_widget, QEvent(QEvent.Type.Leave))

    entered.assert_called_once()
    left.assert_called_once()
