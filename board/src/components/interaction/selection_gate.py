"""Single-card selection state.

The gate owns the one selected card id. The ResizeHandler listens to it to
show the matching handle; card widgets and the font size control listen to
it for their own selected presentation.
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal


class SelectionGate(QObject):
    """Holds at most one selected card id."""

    # Emitted after the new id is stored: (previous_id, new_id), None = nothing
    selectionChanged = pyqtSignal(object, object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._selected_id = None
        self._logger = logging.getLogger('SelectionGate')

    @property
    def selected_id(self):
        return self._selected_id

    def is_selected(self, card_id):
        return card_id is not None and card_id == self._selected_id

    def select(self, card_id):
        """Select card_id, deselecting the previous card in the same step."""
        if card_id == self._selected_id:
            return
        previous_id, self._selected_id = self._selected_id, card_id
        self._logger.debug("Selection %s -> %s", previous_id, card_id)
        self.selectionChanged.emit(previous_id, card_id)

    def clear(self):
        self.select(None)

    def forget(self, card_id):
        """Clear the selection if it points at a card being removed."""
        if self.is_selected(card_id):
            self.clear()
