"""Font size stepper for the selected text card."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel

from constants import FONT_SIZES
from models.card import CardType
from services.card_store import current_font_size, next_font_size, previous_font_size


class FontSizeControl(QWidget):
	"""− / size / + buttons, only shown while a text card is selected"""
	
	def __init__(self, store, parent=None):
		super().__init__(parent)
		self.store = store
		self.card_id = None
		
		layout = QHBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)
		
		self.decrease_btn = QToolButton()
		self.decrease_btn.setText("−")
		self.decrease_btn.setToolTip("Smaller text")
		self.decrease_btn.clicked.connect(self.decrease)
		layout.addWidget(self.decrease_btn)
		
		self.size_label = QLabel()
		self.size_label.setMinimumWidth(24)
		layout.addWidget(self.size_label)
		
		self.increase_btn = QToolButton()
		self.increase_btn.setText("+")
		self.increase_btn.setToolTip("Larger text")
		self.increase_btn.clicked.connect(self.increase)
		layout.addWidget(self.increase_btn)
		
		self.set_card(None)
	
	def set_card(self, card_id):
		"""Follow the selected card (hidden unless it is a text card)"""
		card = self.store.get_card(card_id) if card_id in self.store else None
		if card is None or card.type != CardType.TEXT:
			self.card_id = None
			self.hide()
			return
		self.card_id = card_id
		self._refresh(card)
		self.show()
	
	def on_selection_changed(self, previous_id, card_id):
		self.set_card(card_id)
	
	def _refresh(self, card):
		size = current_font_size(card)
		self.size_label.setText(str(size))
		self.decrease_btn.setEnabled(size > FONT_SIZES[0])
		self.increase_btn.setEnabled(size < FONT_SIZES[-1])
	
	def increase(self):
		self._step(next_font_size)
	
	def decrease(self):
		self._step(previous_font_size)
	
	def _step(self, step_fn):
		if self.card_id is None:
			return
		card = self.store.get_card(self.card_id)
		new_size = step_fn(current_font_size(card))
		if new_size is None:
			return
		self.store.update_card_font_size(self.card_id, new_size)
		self._refresh(card)
