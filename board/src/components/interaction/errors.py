"""Exceptions raised for misuse of the interaction engine."""


class InteractionError(Exception):
    """Base class for interaction engine programming errors."""


class DuplicateRegistrationError(InteractionError):
    """A card id was registered twice without unregistering in between."""

    def __init__(self, owner, card_id):
        super().__init__(f"{owner}: card {card_id!r} is already registered")
        self.owner = owner
        self.card_id = card_id


class GestureOwnershipError(InteractionError):
    """The gesture lock was released by something that does not hold it."""
