"""
Board Canvas - The pannable, zoomable surface cards live on

Owns the viewport, the shared gesture lock, the selection gate and both
pointer controllers. Card widgets are mounted and unmounted in step with
the CardStore; mounting registers the widget with the drag and resize
handlers, unmounting unregisters it before the widget is dropped.
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter, QColor, QPen

from models.card import CanvasViewport
from services.card_store import CardStore
from utils.coordinate_transforms import viewport_screen_to_canvas
from .board_widgets import BoardZoomPanMixin
from .card_widget import CardWidget
from .interaction import DragHandler, ResizeHandler, SelectionGate, GestureLock, PointerTracker


class BoardCanvas(BoardZoomPanMixin, QWidget):
	"""Infinite board widget"""
	
	# Signals
	viewportChanged = pyqtSignal(float, float, float)  # scale, translate_x, translate_y
	
	GRID_SPACING = 40  # Canvas units between background dots
	
	def __init__(self, store, parent=None, viewport=None):
		super().__init__(parent)
		self.setAttribute(Qt.WA_StyledBackground, True)
		self.setStyleSheet("BoardCanvas { background-color: #1e1e1e; }")
		self.setFocusPolicy(Qt.StrongFocus)
		
		self.store = store
		self.viewport = viewport if viewport is not None else CanvasViewport()
		self.gesture_lock = GestureLock()
		self._pan_token = None
		self._pan_tracker = PointerTracker(None, self._end_pan, self.cancel_pan, self)
		self.last_mouse_pos = None
		self.card_widgets = {}  # card_id -> CardWidget
		self._logger = logging.getLogger('BoardCanvas')
		
		self.selection = SelectionGate(self)
		self.drag_handler = DragHandler(store.update_card_position, self.get_scale, self.gesture_lock, self)
		self.resize_handler = ResizeHandler(store.update_card_size, self.get_scale, self.gesture_lock, self)
		self.selection.selectionChanged.connect(self._on_selection_changed)
		
		self.store.subscribe(self._on_store_changed)
		for card in self.store.cards():
			self._mount_card(card)
	
	def get_scale(self):
		"""Current viewport scale (read by the pointer controllers)"""
		return self.viewport.scale
	
	def get_viewport(self):
		return self.viewport
	
	def set_viewport(self, viewport):
		self.viewport.scale = viewport.scale
		self.viewport.translate_x = viewport.translate_x
		self.viewport.translate_y = viewport.translate_y
		self._apply_viewport()
	
	def screen_to_canvas(self, pos):
		"""Widget-local point -> canvas coordinates (for pasting at the cursor)"""
		return viewport_screen_to_canvas(pos.x(), pos.y(), self.viewport)
	
	def _apply_viewport(self):
		for widget in self.card_widgets.values():
			widget.apply_geometry()
		self.update()
		self.viewportChanged.emit(self.viewport.scale, self.viewport.translate_x, self.viewport.translate_y)
	
	# ========================================
	# Card mounting
	# ========================================
	
	def _on_store_changed(self, change, card_id):
		if change == CardStore.CHANGE_ADDED:
			self._mount_card(self.store.get_card(card_id))
		elif change == CardStore.CHANGE_REMOVED:
			self._unmount_card(card_id)
		elif card_id in self.card_widgets:
			self.card_widgets[card_id].sync_from_card(self.store.get_card(card_id))
	
	def _mount_card(self, card):
		widget = CardWidget(card, self.get_viewport, self)
		widget.selectRequested.connect(self.selection.select)
		widget.deleteRequested.connect(self.delete_card)
		widget.contentEdited.connect(self.store.update_card_content)
		self.card_widgets[card.id] = widget
		self.drag_handler.register(widget, card.id)
		self.resize_handler.register(widget, card.id)
		widget.show()
	
	def _unmount_card(self, card_id):
		widget = self.card_widgets.pop(card_id, None)
		if widget is None:
			return
		self.drag_handler.unregister(card_id)
		self.resize_handler.unregister(card_id)
		self.selection.forget(card_id)
		widget.selectRequested.disconnect(self.selection.select)
		widget.deleteRequested.disconnect(self.delete_card)
		widget.contentEdited.disconnect(self.store.update_card_content)
		widget.hide()
		widget.setParent(None)
		widget.deleteLater()
	
	def delete_card(self, card_id):
		if card_id in self.store:
			self.store.remove_card(card_id)
	
	def _on_selection_changed(self, previous_id, card_id):
		self.resize_handler.set_selected(card_id)
		if previous_id in self.card_widgets:
			self.card_widgets[previous_id].set_selected(False)
		if card_id in self.card_widgets:
			self.card_widgets[card_id].set_selected(True)
	
	def shutdown(self):
		"""Release every controller binding before the board goes away"""
		self.cancel_pan()
		self.store.unsubscribe(self._on_store_changed)
		self.drag_handler.destroy()
		self.resize_handler.destroy()
	
	# ========================================
	# Painting and background mouse handling
	# ========================================
	
	def paintEvent(self, event):
		"""Dot grid that follows pan and zoom"""
		super().paintEvent(event)
		spacing = self.GRID_SPACING * self.viewport.scale
		if spacing < 8:
			return
		painter = QPainter(self)
		painter.setPen(QPen(QColor(255, 255, 255, 30), 2))
		start_x = self.viewport.translate_x % spacing
		start_y = self.viewport.translate_y % spacing
		x = start_x
		while x < self.width():
			y = start_y
			while y < self.height():
				painter.drawPoint(round(x), round(y))
				y += spacing
			x += spacing
	
	def mousePressEvent(self, event):
		"""Clicks on empty board deselect and start a pan"""
		if event.button() == Qt.LeftButton:
			self.selection.clear()
		if self._handle_pan_mouse_press(event):
			event.accept()
			return
		super().mousePressEvent(event)
	
	def mouseMoveEvent(self, event):
		if self._handle_pan_mouse_move(event):
			event.accept()
			return
		super().mouseMoveEvent(event)
	
	def mouseReleaseEvent(self, event):
		if self._handle_pan_mouse_release(event):
			event.accept()
			return
		super().mouseReleaseEvent(event)
