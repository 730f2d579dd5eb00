"""Mixin for handling zoom and pan of the board viewport.

Provides viewport navigation including:
- Zoom in/out/reset with zoom-to-cursor
- Pan with mouse drag (empty board or middle button) and plain wheel
- Pan gestures take the shared gesture lock, so they never overlap a
  card drag or resize
"""

from PyQt5.QtCore import Qt

from constants import MIN_ZOOM, MAX_ZOOM, ZOOM_STEP, WHEEL_PAN_STEP
from ..interaction.gesture_context import GestureContext
from models.geometry import Vec2
from utils.coordinate_transforms import zoom_translation_for_anchor


class BoardZoomPanMixin:
	"""Mixin providing zoom and pan functionality for the board."""
	
	# Expected state variables (initialized in main class):
	# - viewport: CanvasViewport
	# - gesture_lock: GestureLock
	# - _pan_token: GestureToken or None
	# - _pan_tracker: PointerTracker ending the pan on release, deactivation or Escape
	# - last_mouse_pos: QPointF or None
	# - _apply_viewport(): re-layout after a viewport change
	
	def zoom_in(self, cursor_pos=None):
		"""Zoom in by one step."""
		self._zoom_to(self.viewport.scale * ZOOM_STEP, cursor_pos)
	
	def zoom_out(self, cursor_pos=None):
		"""Zoom out by one step."""
		self._zoom_to(self.viewport.scale / ZOOM_STEP, cursor_pos)
	
	def zoom_reset(self):
		"""Reset zoom to 100% and pan to the origin."""
		self.viewport.scale = 1.0
		self.viewport.translate_x = 0.0
		self.viewport.translate_y = 0.0
		self._apply_viewport()
	
	def set_zoom_level(self, zoom_percent):
		"""Set zoom to specific percentage, anchored at the board centre."""
		self._zoom_to(zoom_percent / 100.0)
	
	def get_zoom_percent(self):
		"""Get current zoom percentage."""
		return int(round(self.viewport.scale * 100))
	
	def _zoom_to(self, new_scale, cursor_pos=None):
		"""Change scale keeping the point under cursor_pos (or centre) fixed."""
		new_scale = max(MIN_ZOOM, min(MAX_ZOOM, new_scale))
		if new_scale == self.viewport.scale:
			return
		if cursor_pos is None:
			anchor_x, anchor_y = self.width() / 2, self.height() / 2
		else:
			anchor_x, anchor_y = cursor_pos.x(), cursor_pos.y()
		tx, ty = zoom_translation_for_anchor(anchor_x, anchor_y, self.viewport, new_scale)
		self.viewport.scale = new_scale
		self.viewport.translate_x = tx
		self.viewport.translate_y = ty
		self._apply_viewport()
	
	def pan_by(self, dx, dy):
		"""Shift the viewport by a screen-pixel delta."""
		self.viewport.translate_x += dx
		self.viewport.translate_y += dy
		self._apply_viewport()
	
	@property
	def is_panning(self):
		return self._pan_token is not None
	
	# ========================================
	# Mouse Event Handlers
	# ========================================
	
	def wheelEvent(self, event):
		"""Ctrl+wheel zooms at the cursor, plain wheel pans."""
		delta = event.angleDelta()
		if event.modifiers() & Qt.ControlModifier:
			if delta.y() > 0:
				self.zoom_in(event.pos())
			elif delta.y() < 0:
				self.zoom_out(event.pos())
		else:
			self.pan_by(delta.x() * WHEEL_PAN_STEP, delta.y() * WHEEL_PAN_STEP)
		event.accept()
	
	def _handle_pan_mouse_press(self, event):
		"""Handle mouse press for panning. Returns True if event was handled."""
		if event.button() not in (Qt.LeftButton, Qt.MiddleButton):
			return False
		start = event.screenPos()
		context = GestureContext(operation='pan', start_screen=Vec2(start.x(), start.y()), button=event.button())
		token = self.gesture_lock.acquire(self, context)
		if token is None:
			return False
		self._pan_token = token
		self.last_mouse_pos = start
		self.setCursor(Qt.ClosedHandCursor)
		self._pan_tracker.start(event.button())
		return True
	
	def _handle_pan_mouse_move(self, event):
		"""Handle mouse move for panning. Returns True if event was handled."""
		if self._pan_token is None or self.last_mouse_pos is None:
			return False
		pos = event.screenPos()
		delta = pos - self.last_mouse_pos
		self.last_mouse_pos = pos
		self.pan_by(delta.x(), delta.y())
		return True
	
	def _handle_pan_mouse_release(self, event):
		"""Handle mouse release for panning. Returns True if event was handled."""
		if self._pan_token is None or event.button() != self._pan_token.context.button:
			return False
		self.cancel_pan()
		return True
	
	def _end_pan(self, screen_pos):
		self.cancel_pan()
	
	def cancel_pan(self):
		"""End a pan gesture (release, window deactivation or Escape)."""
		token, self._pan_token = self._pan_token, None
		if token is None:
			return
		self._pan_tracker.stop()
		self.last_mouse_pos = None
		self.setCursor(Qt.ArrowCursor)
		self.gesture_lock.release(token)
