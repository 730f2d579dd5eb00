"""Qt event filters that turn raw mouse events into gesture calls.

PressFilter sits on a single card element (or its resize handle) and
reports left-button presses. PointerTracker is installed on the whole
application while a gesture runs, so moves and the release are still seen
after the pointer leaves the element it started on.
"""

from PyQt5.QtCore import QObject, QEvent, Qt
from PyQt5.QtWidgets import QApplication

from models.geometry import Vec2


def event_screen_pos(event):
	"""Screen-space pointer position of a mouse event as Vec2."""
	pos = event.screenPos()
	return Vec2(pos.x(), pos.y())


class PressFilter(QObject):
	"""Reports left-button presses on one target to a callback.
	
	Args:
		on_press: callable(Vec2) -> bool, True when a gesture started
		consume: Stop the press from reaching the target when a gesture started
	"""

	def __init__(self, on_press, consume=False, parent=None):
		super().__init__(parent)
		self._on_press = on_press
		self._consume = consume

	def eventFilter(self, obj, event):
		if event.type() == QEvent.MouseButtonPress and event.button() == Qt.LeftButton:
			started = self._on_press(event_screen_pos(event))
			if started and self._consume:
				event.accept()
				return True
		return False


class PointerTracker(QObject):
	"""Application-wide move/release/cancel listener for the active gesture.
	
	Args:
		on_move: callable(Vec2), or None when the owner tracks moves itself
		on_release: callable(Vec2) for the release of the gesture button
		on_cancel: callable() on deactivation or Escape
	"""

	CANCEL_EVENTS = (QEvent.ApplicationDeactivate, QEvent.WindowDeactivate)

	def __init__(self, on_move, on_release, on_cancel, parent=None):
		super().__init__(parent)
		self._on_move = on_move
		self._on_release = on_release
		self._on_cancel = on_cancel
		self._installed = False
		self._release_button = Qt.LeftButton

	@property
	def installed(self):
		return self._installed

	def start(self, release_button=Qt.LeftButton):
		self._release_button = release_button
		app = QApplication.instance()
		if app is not None and not self._installed:
			app.installEventFilter(self)
			self._installed = True

	def stop(self):
		app = QApplication.instance()
		if app is not None and self._installed:
			app.removeEventFilter(self)
		self._installed = False

	def eventFilter(self, obj, event):
		etype = event.type()
		if etype == QEvent.MouseMove and self._on_move is not None:
			self._on_move(event_screen_pos(event))
		elif etype == QEvent.MouseButtonRelease and event.button() == self._release_button:
			self._on_release(event_screen_pos(event))
		elif etype in self.CANCEL_EVENTS:
			self._on_cancel()
		elif etype == QEvent.KeyPress and event.key() == Qt.Key_Escape:
			self._on_cancel()
			return True
		return False
