"""
Card Widget - On-board presentation of a single card

Renders text, image and link cards and exposes the narrow element
capability the pointer controllers drive during a gesture:
canvas_position(), set_visual_position(), set_visual_size(),
rendered_size() and set_affordance(). Visual state set through those
methods is transient; sync_from_card() snaps back to the committed card.
"""

from PyQt5.QtWidgets import QFrame, QVBoxLayout, QLabel, QPlainTextEdit
from PyQt5.QtCore import Qt, QEvent, pyqtSignal
from PyQt5.QtGui import QPixmap, QFont

from constants import DEFAULT_CARD_WIDTH, DEFAULT_CARD_HEIGHT
from models.card import CardType
from models.geometry import Vec2, Size
from services.card_factory import decode_data_url
from services.card_store import current_font_size
from utils.coordinate_transforms import viewport_canvas_to_screen


CARD_STYLESHEET = """
CardWidget { background-color: #2b2b2b; border: 1px solid #3c3c3c; border-radius: 4px; }
CardWidget[selected="true"] { border: 2px solid #5a8dbf; }
CardWidget[dragging="true"] { border: 2px dashed #5a8dbf; }
CardWidget[resizing="true"] { border: 2px dotted #5a8dbf; }
QLabel { color: #e0e0e0; background: transparent; border: none; }
QLabel#placeholder { color: #808080; font-style: italic; }
"""


class CardWidget(QFrame):
	"""Interactive element for one card"""
	
	# Signals
	selectRequested = pyqtSignal(str)  # card_id
	deleteRequested = pyqtSignal(str)  # card_id
	contentEdited = pyqtSignal(str, str)  # card_id, new content
	
	def __init__(self, card, get_viewport, parent=None):
		"""
		Args:
			card: Card this widget presents
			get_viewport: callable() -> CanvasViewport of the board
			parent: Board widget
		"""
		super().__init__(parent)
		self.card_id = card.id
		self.card_type = card.type
		self._get_viewport = get_viewport
		self._card = card
		self._canvas_pos = Vec2(card.position.x, card.position.y)
		self._canvas_size = self._committed_size(card)
		self._pixmap = None
		self._editor = None
		
		self.setStyleSheet(CARD_STYLESHEET)
		self.setProperty('selected', False)
		self.setContextMenuPolicy(Qt.PreventContextMenu)
		
		self._layout = QVBoxLayout(self)
		self._layout.setContentsMargins(6, 6, 6, 6)
		self.content_label = QLabel(self)
		self.content_label.setWordWrap(True)
		self.content_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
		self.content_label.setAttribute(Qt.WA_TransparentForMouseEvents, True)
		self._layout.addWidget(self.content_label)
		
		self._load_content()
		self.apply_geometry()
	
	# ========================================
	# Element capability (driven by controllers)
	# ========================================
	
	def canvas_position(self):
		"""Current visual top-left in canvas units"""
		return Vec2(self._canvas_pos.x, self._canvas_pos.y)
	
	def canvas_size(self):
		return Size(self._canvas_size.w, self._canvas_size.h)
	
	def set_visual_position(self, x, y):
		"""Move the widget without touching the store"""
		self._canvas_pos = Vec2(x, y)
		self.apply_geometry()
	
	def set_visual_size(self, w, h):
		"""Resize the widget without touching the store"""
		self._canvas_size = Size(w, h)
		self.apply_geometry()
	
	def rendered_size(self):
		"""On-screen size in pixels (unrounded, like a bounding client rect)"""
		scale = self._get_viewport().scale
		return Size(self._canvas_size.w * scale, self._canvas_size.h * scale)
	
	def set_affordance(self, name, on):
		"""Toggle a transient gesture style (dynamic property + repolish)"""
		self.setProperty(name, bool(on))
		self._repolish()
	
	def has_affordance(self, name):
		return bool(self.property(name))
	
	def set_selected(self, selected):
		self.setProperty('selected', bool(selected))
		self._repolish()
	
	# ========================================
	# Layout and content
	# ========================================
	
	def sync_from_card(self, card):
		"""Reset visual state to the committed card values"""
		self._card = card
		self._canvas_pos = Vec2(card.position.x, card.position.y)
		self._canvas_size = self._committed_size(card)
		self._load_content()
		self.apply_geometry()
	
	def apply_geometry(self):
		"""Place the widget on the board for the current viewport"""
		viewport = self._get_viewport()
		screen_x, screen_y = viewport_canvas_to_screen(self._canvas_pos.x, self._canvas_pos.y, viewport)
		self.setGeometry(round(screen_x), round(screen_y),
		                 max(1, round(self._canvas_size.w * viewport.scale)),
		                 max(1, round(self._canvas_size.h * viewport.scale)))
		self._update_font()
		if self._pixmap is not None:
			self._update_image()
	
	@staticmethod
	def _committed_size(card):
		if card.size:
			return Size(card.size.w, card.size.h)
		return Size(DEFAULT_CARD_WIDTH, DEFAULT_CARD_HEIGHT)
	
	def _repolish(self):
		self.style().unpolish(self)
		self.style().polish(self)
		self.update()
	
	def _load_content(self):
		card = self._card
		self.content_label.setObjectName('')
		self._pixmap = None
		margin = 0 if card.type == CardType.IMAGE else 6
		self._layout.setContentsMargins(margin, margin, margin, margin)
		if card.type == CardType.TEXT:
			if card.content:
				self.content_label.setTextFormat(Qt.PlainText)
				self.content_label.setText(card.content)
			else:
				self.content_label.setObjectName('placeholder')
				self.content_label.setText("Empty card")
		elif card.type == CardType.IMAGE:
			self._pixmap = self._load_pixmap(card.content)
			if self._pixmap is None:
				self.content_label.setObjectName('placeholder')
				self.content_label.setText("Image unavailable")
		elif card.type == CardType.LINK:
			self.content_label.setTextFormat(Qt.RichText)
			self.content_label.setText(f'<a href="{card.content}">{card.content}</a>')
			self.content_label.setOpenExternalLinks(True)
			self.content_label.setAttribute(Qt.WA_TransparentForMouseEvents, False)
		self.content_label.style().unpolish(self.content_label)
		self.content_label.style().polish(self.content_label)
	
	@staticmethod
	def _load_pixmap(source):
		pixmap = QPixmap()
		try:
			if source.startswith('data:'):
				loaded = pixmap.loadFromData(decode_data_url(source))
			else:
				loaded = pixmap.load(source)
		except ValueError:
			loaded = False
		return pixmap if loaded and not pixmap.isNull() else None
	
	def _update_font(self):
		if self.card_type != CardType.TEXT:
			return
		font = QFont(self.content_label.font())
		font.setPixelSize(max(1, round(current_font_size(self._card) * self._get_viewport().scale)))
		self.content_label.setFont(font)
		if self._editor is not None:
			self._editor.setFont(font)
	
	def _update_image(self):
		"""Scale the natural-size image per axis to the card's visual size"""
		natural = self._card.natural_size
		factors = self._card.image_scale(self._canvas_size)
		if factors is None:
			# No recorded natural size: fit the decoded pixmap
			natural = Size(self._pixmap.width(), self._pixmap.height())
			factors = (self._canvas_size.w / natural.w, self._canvas_size.h / natural.h)
		zoom = self._get_viewport().scale
		width = max(1, round(natural.w * factors[0] * zoom))
		height = max(1, round(natural.h * factors[1] * zoom))
		self.content_label.setPixmap(self._pixmap.scaled(width, height, Qt.IgnoreAspectRatio, Qt.SmoothTransformation))
	
	# ========================================
	# Mouse and editing
	# ========================================
	
	def mousePressEvent(self, event):
		"""Click selects, right click deletes"""
		if event.button() == Qt.LeftButton:
			self.selectRequested.emit(self.card_id)
			event.accept()
			return
		if event.button() == Qt.RightButton:
			self.deleteRequested.emit(self.card_id)
			event.accept()
			return
		super().mousePressEvent(event)
	
	def mouseDoubleClickEvent(self, event):
		if self.card_type == CardType.TEXT and event.button() == Qt.LeftButton:
			self.start_editing()
			event.accept()
			return
		super().mouseDoubleClickEvent(event)
	
	@property
	def is_editing(self):
		return self._editor is not None
	
	def start_editing(self):
		"""Swap the text label for an inline editor"""
		if self._editor is not None or self.card_type != CardType.TEXT:
			return
		self._editor = QPlainTextEdit(self)
		self._editor.setPlaceholderText("Type something...")
		self._editor.setPlainText(self._card.content)
		self._editor.setFont(self.content_label.font())
		self._editor.installEventFilter(self)
		self.content_label.hide()
		self._layout.addWidget(self._editor)
		self._editor.setFocus()
		self._editor.selectAll()
	
	def finish_editing(self, save=True):
		"""Leave edit mode, emitting contentEdited if the text changed"""
		editor, self._editor = self._editor, None
		if editor is None:
			return
		text = editor.toPlainText()
		editor.removeEventFilter(self)
		self._layout.removeWidget(editor)
		editor.hide()
		editor.deleteLater()
		self.content_label.show()
		if save and text != self._card.content:
			self.contentEdited.emit(self.card_id, text)
	
	def eventFilter(self, obj, event):
		"""Enter saves, Shift+Enter adds a newline, Escape reverts, focus loss saves"""
		if obj is self._editor:
			if event.type() == QEvent.KeyPress:
				if event.key() in (Qt.Key_Return, Qt.Key_Enter) and not (event.modifiers() & Qt.ShiftModifier):
					self.finish_editing(save=True)
					return True
				if event.key() == Qt.Key_Escape:
					self.finish_editing(save=False)
					return True
			elif event.type() == QEvent.FocusOut:
				self.finish_editing(save=True)
				return False
		return super().eventFilter(obj, event)
