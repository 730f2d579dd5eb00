"""
Infinite Board - Data Models

Card and viewport data owned by the store. The interaction engine only
reads positions and sizes from here and never mutates them directly.
"""

from .geometry import Vec2, Size
from .card import Card, CardType, CanvasViewport

__all__ = ['Vec2', 'Size', 'Card', 'CardType', 'CanvasViewport']
