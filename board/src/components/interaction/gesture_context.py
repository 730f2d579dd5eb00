"""Gesture context dataclass for board interactions.

One object per press-to-release gesture, replacing loose start_x/start_y
style attributes on the controllers.
"""

from dataclasses import dataclass
from typing import Any, Optional

from models.geometry import Vec2, Size


@dataclass
class GestureContext:
    """Transient state of the single active gesture.
    
    Created on press, updated on move, dropped on release or cancel.
    """
    operation: str  # 'drag', 'resize', 'pan'
    start_screen: Vec2  # Pointer at press, screen pixels
    card_id: Optional[str] = None
    element: Any = None
    start_canvas_pos: Optional[Vec2] = None  # Card top-left at press (drag)
    start_canvas_size: Optional[Size] = None  # Card size at press (resize)
    current: Any = None  # Last value shown visually (Vec2 or Size)
    button: Any = None  # Mouse button that started the gesture (pan)
