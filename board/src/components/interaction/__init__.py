"""
Infinite Board - Pointer Interaction Engine

This package turns raw mouse events into card gestures:
- drag_handler.py: Card position dragging
- resize_handler.py: Card size dragging from a bottom-right handle
- selection_gate.py: Single selected card
- registry.py: Per-card listener bookkeeping
- gesture_lock.py: The one-gesture-at-a-time lock
- pointer_filters.py: Press and application-wide pointer event filters
"""

from .errors import InteractionError, DuplicateRegistrationError, GestureOwnershipError
from .gesture_context import GestureContext
from .gesture_lock import GestureLock, GestureToken
from .registry import Registration, RegistrationRegistry
from .pointer_filters import PressFilter, PointerTracker
from .handles import ResizeHandle
from .drag_handler import DragHandler
from .resize_handler import ResizeHandler, clamp_card_size
from .selection_gate import SelectionGate

__all__ = [
    'InteractionError', 'DuplicateRegistrationError', 'GestureOwnershipError',
    'GestureContext', 'GestureLock', 'GestureToken',
    'Registration', 'RegistrationRegistry',
    'PressFilter', 'PointerTracker',
    'ResizeHandle', 'DragHandler', 'ResizeHandler', 'clamp_card_size',
    'SelectionGate',
]
