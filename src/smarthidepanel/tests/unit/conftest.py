import os
from types import SimpleNamespace
from typing import List

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from smarthidepanel import constants
from smarthidepanel.core.engine import PanelVisibilityEngine
from smarthidepanel.core.interfaces import (
    ManagedWindow, PanelEffectTarget, PointerRegion, PointerSource, ShellModeSource, StatusItem, WindowRegistry
)
from smarthidepanel.utils.window_utils import FrameRect, MaximizeFlags, WindowInfo, WindowType


class FakeRegion(PointerRegion):
    def __init__(self, height_px: int = 0) -> None:
        super().__init__()
        self.height_px = height_px
        self.destroy_calls = 0

    def destroy(self) -> None:
        self.destroy_calls += 1


class FakePointerSource(PointerSource):
    def __init__(self) -> None:
        super().__init__()
        self.position = (500, 500)
        self.hot_zones: List[FakeRegion] = []

    def pointer_position(self):
        return self.position

    def create_hot_zone(self, height_px: int) -> FakeRegion:
        zone = FakeRegion(height_px)
        self.hot_zones.append(zone)
        return zone


class FakeManagedWindow(ManagedWindow):
    pass


class FakeWindowRegistry(WindowRegistry):
    def __init__(self) -> None:
        super().__init__()
        self.window_list: List[WindowInfo] = []
        self.monitor = 0
        self.move_grab = False

    def windows(self):
        return list(self.window_list)

    def panel_monitor_index(self):
        return self.monitor

    def is_move_grab_active(self) -> bool:
        return self.move_grab


class FakeStatusItem(StatusItem):
    def __init__(self, name: str, with_actor: bool = True) -> None:
        super().__init__(name, FakeRegion() if with_actor else None)
        self.menu_open = False

    def is_menu_open(self) -> bool:
        return self.menu_open


class FakeShell(ShellModeSource):
    def __init__(self) -> None:
        super().__init__()
        self.overview_state = False
        self.lock_state = False
        self.items: List[FakeStatusItem] = []

    def is_overview_visible(self) -> bool:
        return self.overview_state

    def is_screen_locked(self) -> bool:
        return self.lock_state

    def status_items(self):
        return list(self.items)


class FakePanel(PanelEffectTarget):
    """Records show/hide calls. Completes transitions immediately unless `auto_complete` is off."""

    def __init__(self) -> None:
        super().__init__()
        self.height = 32
        self.visible = True
        self.calls: List[str] = []
        self.auto_complete = True
        self.pending = []

    def panel_height(self) -> int:
        return self.height

    def is_panel_visible(self) -> bool:
        return self.visible

    def show_panel(self, on_complete) -> None:
        self.calls.append("show")
        self.visible = True
        self._finish(on_complete)

    def hide_panel(self, on_complete) -> None:
        self.calls.append("hide")
        self.visible = False
        self._finish(on_complete)

    def _finish(self, on_complete) -> None:
        if self.auto_complete:
            on_complete()
        else:
            self.pending.append(on_complete)


def make_window(y: int = 200, maximize: MaximizeFlags = MaximizeFlags.NONE, monitor: int = 0,
                window_type: WindowType = WindowType.NORMAL, showing: bool = True) -> WindowInfo:
    return WindowInfo(
        window_type=window_type,
        showing_on_workspace=showing,
        monitor_index=monitor,
        maximize_flags=maximize,
        frame_rect=FrameRect(x=100, y=y, width=800, height=600),
    )


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window_factory():
    return make_window


@pytest.fixture
def shell_env(q_app):
    """Provides a full set of fake collaborators."""
    shell = FakeShell()
    shell.items = [FakeStatusItem("clock"), FakeStatusItem("ghost", with_actor=False)]
    return SimpleNamespace(
        pointer=FakePointerSource(),
        windows=FakeWindowRegistry(),
        shell=shell,
        panel=FakePanel(),
    )


@pytest.fixture
def mock_config() -> dict:
    """Provides a default configuration dictionary with short delays."""
    config = constants.config.defaults.DEFAULT_CONFIG.copy()
    config["leave_delay_ms"] = 300
    return config


@pytest.fixture
def engine(shell_env, mock_config):
    """Provides an engine wired to the fake collaborators; deactivated after the test."""
    eng = PanelVisibilityEngine(
        pointer=shell_env.pointer,
        windows=shell_env.windows,
        shell=shell_env.shell,
        panel=shell_env.panel,
        config=mock_config,
    )
    yield eng
    eng.deactivate()


@pytest.fixture
def fake_panel(q_app):
    return FakePanel()


@pytest.fixture
def managed_window_factory(q_app):
    """Creates fake managed windows and keeps them alive for the test."""
    created = []

    def _make():
        window = FakeManagedWindow()
        created.append(window)
        return window
    return _make
