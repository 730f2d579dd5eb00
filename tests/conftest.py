"""
Shared fixtures for Infinite Board tests.

Provides stub card elements, a mutable scale source, lock/handler fixtures
and helpers for delivering synthetic mouse events.
"""
import sys
import os
import pytest

# Qt must run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure board/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'board', 'src'))

from PyQt5.QtCore import Qt, QEvent, QPointF
from PyQt5.QtGui import QMouseEvent
from PyQt5.QtWidgets import QApplication, QWidget

from models.geometry import Vec2, Size


# ── Synthetic events ────────────────────────────────────────────────────

def send_mouse(target, event_type, screen_x, screen_y, button=Qt.LeftButton):
    """Deliver a mouse event at a screen position to target, synchronously."""
    if event_type == QEvent.MouseMove:
        buttons = Qt.LeftButton
        button = Qt.NoButton
    elif event_type == QEvent.MouseButtonRelease:
        buttons = Qt.NoButton
    else:
        buttons = button
    screen = QPointF(screen_x, screen_y)
    local = QPointF(target.mapFromGlobal(screen.toPoint()))
    event = QMouseEvent(event_type, local, screen, button, buttons, Qt.NoModifier)
    QApplication.sendEvent(target, event)
    return event


def press(target, x, y, button=Qt.LeftButton):
    return send_mouse(target, QEvent.MouseButtonPress, x, y, button)


def move(target, x, y):
    return send_mouse(target, QEvent.MouseMove, x, y)


def release(target, x, y, button=Qt.LeftButton):
    return send_mouse(target, QEvent.MouseButtonRelease, x, y, button)


# ── Stubs ───────────────────────────────────────────────────────────────

class ScaleSource:
    """Callable viewport scale the tests can change mid-gesture."""

    def __init__(self, value=1.0):
        self.value = value

    def __call__(self):
        return self.value


class StubCardElement(QWidget):
    """Minimal element exposing the capability the controllers drive."""

    def __init__(self, x=0.0, y=0.0, w=120.0, h=80.0, get_scale=None):
        super().__init__()
        self.position = Vec2(x, y)
        self.size = Size(w, h)
        self.affordances = set()
        self.position_updates = []
        self.size_updates = []
        self._get_scale = get_scale or (lambda: 1.0)
        self.resize(int(w), int(h))

    def canvas_position(self):
        return Vec2(self.position.x, self.position.y)

    def set_visual_position(self, x, y):
        self.position = Vec2(x, y)
        self.position_updates.append((x, y))

    def set_visual_size(self, w, h):
        self.size = Size(w, h)
        self.size_updates.append((w, h))

    def rendered_size(self):
        scale = self._get_scale()
        return Size(self.size.w * scale, self.size.h * scale)

    def set_affordance(self, name, on):
        if on:
            self.affordances.add(name)
        else:
            self.affordances.discard(name)

    def has_affordance(self, name):
        return name in self.affordances


class CommitRecorder:
    """Records commit callback invocations."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def scale():
    return ScaleSource(1.0)


@pytest.fixture
def lock():
    from components.interaction import GestureLock
    return GestureLock()


@pytest.fixture
def make_element(qtbot, scale):
    """Factory for stub card elements sharing the test's scale source"""
    def factory(x=0.0, y=0.0, w=120.0, h=80.0):
        element = StubCardElement(x, y, w, h, get_scale=scale)
        qtbot.addWidget(element)
        return element
    return factory


@pytest.fixture
def drag_commits():
    return CommitRecorder()


@pytest.fixture
def resize_commits():
    return CommitRecorder()


@pytest.fixture
def drag_handler(qapp, drag_commits, scale, lock):
    from components.interaction import DragHandler
    handler = DragHandler(drag_commits, scale, lock)
    yield handler
    handler.destroy()


@pytest.fixture
def resize_handler(qapp, resize_commits, scale, lock):
    from components.interaction import ResizeHandler
    handler = ResizeHandler(resize_commits, scale, lock)
    yield handler
    handler.destroy()


@pytest.fixture
def store():
    from services.card_store import CardStore
    return CardStore()


@pytest.fixture
def board(qtbot, store):
    """BoardCanvas bound to an empty store"""
    from components.board_canvas import BoardCanvas
    canvas = BoardCanvas(store)
    canvas.resize(800, 600)
    qtbot.addWidget(canvas)
    yield canvas
    canvas.shutdown()
