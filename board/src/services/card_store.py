"""In-memory card store for the board.

The store is the only owner of Card data. The interaction engine writes
through exactly two entry points, update_card_position and
update_card_size, and only at the end of a gesture.
"""

import logging

from constants import FONT_SIZES, DEFAULT_FONT_SIZE
from models.card import Card, CardType
from models.geometry import Vec2, Size


class CardStore:
    """Ordered card collection with change notification.
    
    Listeners are called as listener(change, card_id) where change is one
    of the CHANGE_* names below.
    """

    CHANGE_ADDED = 'added'
    CHANGE_REMOVED = 'removed'
    CHANGE_POSITION = 'position'
    CHANGE_SIZE = 'size'
    CHANGE_CONTENT = 'content'
    CHANGE_FONT_SIZE = 'font_size'

    def __init__(self):
        self._cards = {}
        self._listeners = []
        self._logger = logging.getLogger('CardStore')

    # ========================================
    # Listeners
    # ========================================

    def subscribe(self, listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change, card_id):
        for listener in list(self._listeners):
            listener(change, card_id)

    # ========================================
    # Queries
    # ========================================

    def __contains__(self, card_id):
        return card_id in self._cards

    def __len__(self):
        return len(self._cards)

    def cards(self):
        """All cards in creation order."""
        return list(self._cards.values())

    def get_card(self, card_id):
        """Get a card by id.
        
        Raises:
            KeyError: unknown card id
        """
        return self._cards[card_id]

    # ========================================
    # Mutations
    # ========================================

    def add_card(self, card):
        if card.id in self._cards:
            raise ValueError(f"Card {card.id} already exists")
        self._cards[card.id] = card
        self._logger.debug("Added %s card %s", card.type, card.id)
        self._notify(self.CHANGE_ADDED, card.id)
        return card.id

    def remove_card(self, card_id):
        card = self._cards.pop(card_id)
        self._logger.debug("Removed card %s", card_id)
        self._notify(self.CHANGE_REMOVED, card_id)
        return card

    def update_card_position(self, card_id, x, y):
        """Commit a card's top-left position (canvas units)."""
        self.get_card(card_id).position = Vec2(x, y)
        self._notify(self.CHANGE_POSITION, card_id)

    def update_card_size(self, card_id, w, h):
        """Commit a card's size (canvas units)."""
        self.get_card(card_id).size = Size(w, h)
        self._notify(self.CHANGE_SIZE, card_id)

    def update_card_content(self, card_id, content):
        card = self.get_card(card_id)
        if card.content == content:
            return
        card.content = content
        self._notify(self.CHANGE_CONTENT, card_id)

    def update_card_font_size(self, card_id, font_size):
        card = self.get_card(card_id)
        if card.type != CardType.TEXT:
            raise ValueError(f"Card {card_id} is not a text card")
        card.font_size = font_size
        self._notify(self.CHANGE_FONT_SIZE, card_id)

    def clear(self):
        for card_id in list(self._cards):
            self.remove_card(card_id)

    # ========================================
    # Serialization
    # ========================================

    def to_dict(self):
        return {'cards': [card.to_dict() for card in self._cards.values()]}

    def load_dict(self, data):
        """Replace all cards with those in data (as produced by to_dict)."""
        self.clear()
        for card_data in data.get('cards', []):
            self.add_card(Card.from_dict(card_data))


# ======================================================================
# Font size stepping (text cards)
# ======================================================================

def current_font_size(card):
    return card.font_size or DEFAULT_FONT_SIZE


def next_font_size(current):
    """Next larger preset, or None at the top of the list.
    
    Sizes off the preset list step to the closest larger preset.
    """
    larger = [size for size in FONT_SIZES if size > current]
    return larger[0] if larger else None


def previous_font_size(current):
    """Next smaller preset, or None at the bottom of the list."""
    smaller = [size for size in FONT_SIZES if size < current]
    return smaller[-1] if smaller else None
