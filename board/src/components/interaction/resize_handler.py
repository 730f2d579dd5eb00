"""
Resize Handler - Resizes a single card from its bottom-right handle

Each registered card gets a ResizeHandle child, hidden unless the card is
selected. Dragging the handle grows or shrinks the card toward the
bottom-right with the top-left corner fixed; the size never drops below
MIN_CARD_WIDTH x MIN_CARD_HEIGHT canvas units. Only the element's visual
size changes during the gesture; the release commits once through
on_resize_end.
"""

import logging

from PyQt5.QtCore import QObject, QEvent, pyqtSignal

from constants import AFFORDANCE_RESIZING, MIN_CARD_WIDTH, MIN_CARD_HEIGHT
from models.geometry import Vec2, Size
from utils.coordinate_transforms import screen_delta_to_canvas
from utils.logger import loggerRaise
from .errors import DuplicateRegistrationError
from .gesture_context import GestureContext
from .gesture_lock import GestureLock
from .handles import ResizeHandle
from .pointer_filters import PressFilter, PointerTracker
from .registry import RegistrationRegistry


def clamp_card_size(width, height):
	"""Apply the minimum card size floor."""
	return max(MIN_CARD_WIDTH, width), max(MIN_CARD_HEIGHT, height)


class _HandleFollower(QObject):
	"""Keeps a handle pinned to its card's corner when the card resizes."""

	def __init__(self, handle, parent=None):
		super().__init__(parent)
		self._handle = handle

	def eventFilter(self, obj, event):
		if event.type() == QEvent.Resize:
			self._handle.reposition()
		return False


class ResizeHandler(QObject):
	"""Size dragging for card elements through a per-card handle.
	
	Elements must be QWidgets providing rendered_size(),
	set_visual_size(w, h) and set_affordance(name, on).
	
	Args:
		on_resize_end: callable(card_id, w, h) committing the final size
		get_scale: callable() -> current viewport scale
		lock: GestureLock shared with the other controllers
	"""

	# Signals
	resizeStarted = pyqtSignal(str)  # card_id
	resizeFinished = pyqtSignal(str, float, float)  # card_id, w, h (committed)
	resizeCancelled = pyqtSignal(str)  # card_id

	def __init__(self, on_resize_end, get_scale, lock=None, parent=None):
		super().__init__(parent)
		self._on_resize_end = on_resize_end
		self._get_scale = get_scale
		self._lock = lock if lock is not None else GestureLock.shared()
		self._registry = RegistrationRegistry('ResizeHandler')
		self._tracker = PointerTracker(self.move, self.end, self.cancel, self)
		self._token = None
		self.selected_card_id = None
		self._logger = logging.getLogger('ResizeHandler')

	@property
	def active(self):
		"""True while this handler owns the running gesture."""
		return self._token is not None

	@property
	def active_card_id(self):
		return self._token.context.card_id if self._token else None

	def is_registered(self, card_id):
		return card_id in self._registry

	def handle_for(self, card_id):
		"""The resize handle widget of a registered card, or None."""
		return self._registry.handle(card_id)

	# ========================================
	# Registration
	# ========================================

	def register(self, element, card_id):
		"""Create a hidden handle on element and bind it to resize card_id.
		
		Raises:
			DuplicateRegistrationError: card_id is already registered
		"""
		if card_id in self._registry:
			loggerRaise(DuplicateRegistrationError('ResizeHandler', card_id),
			            f"Card {card_id} registered twice")
		handle = ResizeHandle(element)
		self._registry.add(card_id, element, handle)
		press_filter = PressFilter(lambda pos: self.begin(card_id, pos), consume=True, parent=self)
		self._registry.bind(card_id, handle, press_filter)
		self._registry.bind(card_id, element, _HandleFollower(handle, self))
		self._update_handle_visibility(card_id)

	def unregister(self, card_id):
		"""Remove card_id's handle and bindings; a resize in progress is cancelled."""
		if self._token and self._token.context.card_id == card_id:
			self.cancel()
		entry = self._registry.remove(card_id)
		if entry is not None:
			self._dispose_handle(entry.handle)

	def set_selected(self, card_id):
		"""Show the handle of card_id only (None hides every handle)."""
		previous_id = self.selected_card_id
		self.selected_card_id = card_id
		if previous_id is not None:
			self._update_handle_visibility(previous_id)
		if card_id is not None:
			self._update_handle_visibility(card_id)

	def destroy(self):
		"""Tear down every handle and listener.
		
		The handler is inert afterwards; registering or starting gestures on
		it again is not supported.
		"""
		self.cancel()
		self._tracker.stop()
		for entry in self._registry.clear():
			self._dispose_handle(entry.handle)
		self.selected_card_id = None

	def _update_handle_visibility(self, card_id):
		handle = self._registry.handle(card_id)
		if handle is not None:
			handle.setVisible(card_id == self.selected_card_id)

	@staticmethod
	def _dispose_handle(handle):
		if handle is None:
			return
		handle.hide()
		handle.setParent(None)
		handle.deleteLater()

	# ========================================
	# Gesture protocol
	# ========================================

	def begin(self, card_id, screen_pos):
		"""Start resizing card_id from screen_pos.
		
		Returns:
			bool: False if the card is unknown or another gesture is active
		"""
		element = self._registry.element(card_id)
		if element is None:
			return False
		scale = self._get_scale()
		rendered = element.rendered_size()
		start_w, start_h = screen_delta_to_canvas(rendered.w, rendered.h, scale)
		context = GestureContext(
			operation='resize',
			start_screen=Vec2(screen_pos.x, screen_pos.y),
			card_id=card_id,
			element=element,
			start_canvas_size=Size(start_w, start_h),
			current=Size(start_w, start_h),
		)
		token = self._lock.acquire(self, context)
		if token is None:
			return False
		self._token = token
		element.set_affordance(AFFORDANCE_RESIZING, True)
		self._tracker.start()
		self.resizeStarted.emit(card_id)
		return True

	def move(self, screen_pos):
		"""Update the resized element's visual size."""
		if self._token is None:
			return
		context = self._token.context
		dx, dy = screen_delta_to_canvas(screen_pos.x - context.start_screen.x,
		                                screen_pos.y - context.start_screen.y,
		                                self._get_scale())
		width, height = clamp_card_size(context.start_canvas_size.w + dx,
		                                context.start_canvas_size.h + dy)
		context.current = Size(width, height)
		context.element.set_visual_size(width, height)

	def end(self, screen_pos=None):
		"""Commit the element's final size once and clear the gesture."""
		if self._token is None:
			self._logger.debug("Release without an active resize ignored")
			return
		context = self._token.context
		try:
			rendered = context.element.rendered_size()
			width, height = screen_delta_to_canvas(rendered.w, rendered.h, self._get_scale())
			width, height = clamp_card_size(width, height)
			self._on_resize_end(context.card_id, width, height)
		finally:
			self._finish()
		self._logger.debug("Card %s resized to %.1f x %.1f", context.card_id, width, height)
		self.resizeFinished.emit(context.card_id, width, height)

	def cancel(self):
		"""Abort the resize without committing; the element snaps back."""
		if self._token is None:
			return
		context = self._token.context
		context.element.set_visual_size(context.start_canvas_size.w, context.start_canvas_size.h)
		self._finish()
		self._logger.debug("Resize of card %s cancelled", context.card_id)
		self.resizeCancelled.emit(context.card_id)

	def _finish(self):
		token, self._token = self._token, None
		self._tracker.stop()
		token.context.element.set_affordance(AFFORDANCE_RESIZING, False)
		self._lock.release(token)
