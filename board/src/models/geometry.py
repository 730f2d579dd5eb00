"""Geometry data structures for coordinate and size representation."""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.
    
    Used for any x/y pair in either space:
    - Screen pixels (pointer positions)
    - Canvas units (card positions)
    """
    x: float
    y: float
    
    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass
class Size:
    """Width/height pair (canvas units unless noted otherwise)."""
    w: float
    h: float

    def __iter__(self):
        return iter((self.w, self.h))
