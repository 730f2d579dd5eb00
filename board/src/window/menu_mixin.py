"""Menu and shortcut setup for the board window"""

import logging

from PyQt5.QtWidgets import QAction, QApplication
from PyQt5.QtGui import QKeySequence

from models.card import CardType
from services.card_factory import create_text_card, create_link_card, create_image_card


def _looks_like_url(text):
	return text.startswith(('http://', 'https://')) and ' ' not in text.strip()


class MenuMixin:
	"""Board menu bar, card creation and clipboard paste"""
	
	def _create_menu_bar(self):
		menubar = self.menuBar()
		
		board_menu = menubar.addMenu("&Board")
		self._add_action(board_menu, "New &Text Card", "Ctrl+T", self.add_text_card)
		self._add_action(board_menu, "&Paste", QKeySequence.Paste, self.paste_from_clipboard)
		self._add_action(board_menu, "&Delete Selected", QKeySequence.Delete, self.delete_selected_card)
		board_menu.addSeparator()
		self._add_action(board_menu, "E&xit", "Ctrl+Q", self.close)
		
		view_menu = menubar.addMenu("&View")
		self._add_action(view_menu, "Zoom &In", QKeySequence.ZoomIn, lambda: self.board.zoom_in())
		self._add_action(view_menu, "Zoom &Out", QKeySequence.ZoomOut, lambda: self.board.zoom_out())
		self._add_action(view_menu, "&Reset View", "Ctrl+0", self.board.zoom_reset)
	
	def _add_action(self, menu, text, shortcut, slot):
		action = QAction(text, self)
		action.setShortcut(QKeySequence(shortcut))
		action.triggered.connect(slot)
		menu.addAction(action)
		return action
	
	def _paste_position(self):
		"""Canvas point under the cursor, or the board centre when outside it"""
		pos = self.board.mapFromGlobal(self.cursor().pos())
		if not self.board.rect().contains(pos):
			pos = self.board.rect().center()
		return self.board.screen_to_canvas(pos)
	
	def add_text_card(self):
		x, y = self._paste_position()
		card_id = self.store.add_card(create_text_card(x, y))
		self.board.selection.select(card_id)
		self.board.card_widgets[card_id].start_editing()
	
	def paste_from_clipboard(self):
		"""Image -> image card, URL -> link card, other text -> text card"""
		mime = QApplication.clipboard().mimeData()
		x, y = self._paste_position()
		card = None
		if mime.hasUrls() and mime.urls() and mime.urls()[0].isLocalFile():
			try:
				card = create_image_card(x, y, mime.urls()[0].toLocalFile())
			except (OSError, ValueError) as e:
				logging.getLogger('Board').warning("Pasted file is not an image: %s", e)
		elif mime.hasText() and mime.text().strip():
			text = mime.text().strip()
			card = create_link_card(x, y, text) if _looks_like_url(text) else create_text_card(x, y, text)
		if card is not None:
			self.store.add_card(card)
			self.board.selection.select(card.id)
	
	def delete_selected_card(self):
		card_id = self.board.selection.selected_id
		if card_id is None:
			return
		widget = self.board.card_widgets.get(card_id)
		if widget is not None and widget.card_type == CardType.TEXT and widget.is_editing:
			return
		self.board.delete_card(card_id)
