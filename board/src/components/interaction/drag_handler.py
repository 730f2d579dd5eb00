"""
Drag Handler - Moves a single card by dragging its body

Press on a registered card element starts the drag, window-level mouse
moves reposition the element visually, and the release commits the final
canvas position once through on_drag_end. The card store is never touched
while the drag is in progress.
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal

from constants import AFFORDANCE_DRAGGING
from models.geometry import Vec2
from utils.coordinate_transforms import screen_delta_to_canvas
from .gesture_context import GestureContext
from .gesture_lock import GestureLock
from .pointer_filters import PressFilter, PointerTracker
from .registry import RegistrationRegistry


class DragHandler(QObject):
	"""Position dragging for card elements.
	
	Elements must provide canvas_position(), set_visual_position(x, y) and
	set_affordance(name, on).
	
	Args:
		on_drag_end: callable(card_id, x, y) committing the final position
		get_scale: callable() -> current viewport scale
		lock: GestureLock shared with the other controllers
	"""

	# Signals
	dragStarted = pyqtSignal(str)  # card_id
	dragFinished = pyqtSignal(str, float, float)  # card_id, x, y (committed)
	dragCancelled = pyqtSignal(str)  # card_id

	def __init__(self, on_drag_end, get_scale, lock=None, parent=None):
		super().__init__(parent)
		self._on_drag_end = on_drag_end
		self._get_scale = get_scale
		self._lock = lock if lock is not None else GestureLock.shared()
		self._registry = RegistrationRegistry('DragHandler')
		self._tracker = PointerTracker(self.move, self.end, self.cancel, self)
		self._token = None
		self._logger = logging.getLogger('DragHandler')

	@property
	def active(self):
		"""True while this handler owns the running gesture."""
		return self._token is not None

	@property
	def active_card_id(self):
		return self._token.context.card_id if self._token else None

	def is_registered(self, card_id):
		return card_id in self._registry

	# ========================================
	# Registration
	# ========================================

	def register(self, element, card_id):
		"""Bind press-to-drag on element for card_id.
		
		Raises:
			DuplicateRegistrationError: card_id is already registered
		"""
		self._registry.add(card_id, element)
		press_filter = PressFilter(lambda pos: self.begin(card_id, pos), parent=self)
		self._registry.bind(card_id, element, press_filter)

	def unregister(self, card_id):
		"""Drop the binding for card_id; a drag in progress on it is cancelled."""
		if self._token and self._token.context.card_id == card_id:
			self.cancel()
		self._registry.remove(card_id)

	def destroy(self):
		"""Cancel any drag and release every binding."""
		self.cancel()
		self._tracker.stop()
		self._registry.clear()

	# ========================================
	# Gesture protocol
	# ========================================

	def begin(self, card_id, screen_pos):
		"""Start dragging card_id from screen_pos.
		
		Returns:
			bool: False if the card is unknown or another gesture is active
		"""
		element = self._registry.element(card_id)
		if element is None:
			return False
		start = element.canvas_position()
		context = GestureContext(
			operation='drag',
			start_screen=Vec2(screen_pos.x, screen_pos.y),
			card_id=card_id,
			element=element,
			start_canvas_pos=Vec2(start.x, start.y),
			current=Vec2(start.x, start.y),
		)
		token = self._lock.acquire(self, context)
		if token is None:
			return False
		self._token = token
		element.set_affordance(AFFORDANCE_DRAGGING, True)
		self._tracker.start()
		self.dragStarted.emit(card_id)
		return True

	def move(self, screen_pos):
		"""Update the dragged element's visual position."""
		if self._token is None:
			return
		context = self._token.context
		context.current = self._position_for(context, screen_pos)
		context.element.set_visual_position(context.current.x, context.current.y)

	def end(self, screen_pos):
		"""Commit the final position once and clear the gesture."""
		if self._token is None:
			self._logger.debug("Release without an active drag ignored")
			return
		context = self._token.context
		try:
			final = self._position_for(context, screen_pos)
			context.element.set_visual_position(final.x, final.y)
			self._on_drag_end(context.card_id, final.x, final.y)
		finally:
			self._finish()
		self._logger.debug("Card %s dropped at (%.1f, %.1f)", context.card_id, final.x, final.y)
		self.dragFinished.emit(context.card_id, final.x, final.y)

	def cancel(self):
		"""Abort the drag without committing; the element snaps back."""
		if self._token is None:
			return
		context = self._token.context
		context.element.set_visual_position(context.start_canvas_pos.x, context.start_canvas_pos.y)
		self._finish()
		self._logger.debug("Drag of card %s cancelled", context.card_id)
		self.dragCancelled.emit(context.card_id)

	def _position_for(self, context, screen_pos):
		dx, dy = screen_delta_to_canvas(screen_pos.x - context.start_screen.x,
		                                screen_pos.y - context.start_screen.y,
		                                self._get_scale())
		return Vec2(context.start_canvas_pos.x + dx, context.start_canvas_pos.y + dy)

	def _finish(self):
		token, self._token = self._token, None
		self._tracker.stop()
		token.context.element.set_affordance(AFFORDANCE_DRAGGING, False)
		self._lock.release(token)
