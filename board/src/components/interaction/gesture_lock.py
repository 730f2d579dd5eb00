"""Exclusive gesture lock shared by every pointer controller.

Only one gesture (card drag, card resize or viewport pan) may be active at
any instant. Whoever sees a press first acquires the lock and receives a
token; only that token releases it.
"""

import logging
from dataclasses import dataclass

from .errors import GestureOwnershipError
from .gesture_context import GestureContext


@dataclass(eq=False)
class GestureToken:
    """Proof of lock ownership handed to the controller that won the press."""
    owner: object
    context: GestureContext


class GestureLock:
    """Single-holder lock for the active gesture."""

    _shared = None

    def __init__(self):
        self._token = None
        self._logger = logging.getLogger('GestureLock')

    @classmethod
    def shared(cls):
        """Process-wide lock used by controllers built without an explicit one."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @property
    def active(self):
        return self._token is not None

    @property
    def token(self):
        return self._token

    def is_held_by(self, owner):
        return self._token is not None and self._token.owner is owner

    def acquire(self, owner, context):
        """Try to start a gesture.
        
        Args:
            owner: Controller starting the gesture
            context: GestureContext describing it
            
        Returns:
            GestureToken, or None if another gesture is already active
        """
        if self._token is not None:
            self._logger.debug("Gesture %s refused, %s already active",
                               context.operation, self._token.context.operation)
            return None
        self._token = GestureToken(owner, context)
        self._logger.debug("Gesture %s started (card=%s)", context.operation, context.card_id)
        return self._token

    def release(self, token):
        """End the gesture represented by token."""
        if token is None or token is not self._token:
            raise GestureOwnershipError("Gesture lock released by a non-holder")
        self._logger.debug("Gesture %s ended (card=%s)",
                           token.context.operation, token.context.card_id)
        self._token = None
