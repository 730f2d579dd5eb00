"""Per-card registration bookkeeping for pointer controllers.

Each controller owns one registry. An entry lives exactly as long as the
card is mounted; every event filter bound for a card is recorded on its
entry so unregistering can uninstall all of them before the element
reference is dropped.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from utils.logger import loggerRaise
from .errors import DuplicateRegistrationError


@dataclass
class Registration:
	"""Bound elements and installed filters for one card."""
	card_id: str
	element: Any
	handle: Optional[Any] = None
	bindings: List[Tuple[Any, Any]] = field(default_factory=list)  # (target, filter)


class RegistrationRegistry:
	"""Mapping of card id -> Registration with scoped filter ownership."""

	def __init__(self, owner_name):
		self.owner_name = owner_name
		self._entries = {}
		self._logger = logging.getLogger(owner_name)

	def __contains__(self, card_id):
		return card_id in self._entries

	def __len__(self):
		return len(self._entries)

	def __iter__(self):
		return iter(list(self._entries.values()))

	def get(self, card_id):
		return self._entries.get(card_id)

	def element(self, card_id):
		entry = self._entries.get(card_id)
		return entry.element if entry else None

	def handle(self, card_id):
		entry = self._entries.get(card_id)
		return entry.handle if entry else None

	def add(self, card_id, element, handle=None):
		"""Create the entry for a newly mounted card.
		
		Raises:
			DuplicateRegistrationError: card_id is still registered
		"""
		if card_id in self._entries:
			loggerRaise(DuplicateRegistrationError(self.owner_name, card_id),
			            f"Card {card_id} registered twice")
		entry = Registration(card_id, element, handle)
		self._entries[card_id] = entry
		return entry

	def bind(self, card_id, target, event_filter):
		"""Install event_filter on target and record it against card_id."""
		entry = self._entries[card_id]
		target.installEventFilter(event_filter)
		entry.bindings.append((target, event_filter))

	def remove(self, card_id):
		"""Uninstall every filter bound for card_id and drop the entry.
		
		Returns:
			The removed Registration, or None if card_id was not registered
		"""
		entry = self._entries.pop(card_id, None)
		if entry is None:
			return None
		self._release(entry)
		return entry

	def clear(self):
		"""Release every entry."""
		entries = list(self._entries.values())
		self._entries.clear()
		for entry in entries:
			self._release(entry)
		return entries

	def _release(self, entry):
		for target, event_filter in entry.bindings:
			target.removeEventFilter(event_filter)
			event_filter.deleteLater()
		entry.bindings.clear()
		self._logger.debug("Released bindings for card %s", entry.card_id)
