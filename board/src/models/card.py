"""Card and viewport models.

Cards are plain data owned by the CardStore. Serialization keeps the
same keys the board file has always used (camelCase for the optional
fields) so boards saved by older builds keep loading.
"""
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional

from .geometry import Vec2, Size


class CardType:
    """Card content kinds."""
    TEXT = 'text'
    IMAGE = 'image'
    LINK = 'link'

    ALL = (TEXT, IMAGE, LINK)


def _now_ms():
    return int(time.time() * 1000)


@dataclass
class Card:
    """A freeform content card on the board.
    
    Attributes:
        id: Unique card id
        type: One of CardType.ALL
        content: Text, image file path / data URL, or URL
        position: Top-left corner in canvas units
        size: Card dimensions once resized (None = natural layout size)
        natural_size: Original image dimensions (images only)
        font_size: Font size in pixels (text cards only)
        created_at: Creation timestamp in milliseconds
    """
    type: str
    content: str = ''
    position: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    size: Optional[Size] = None
    natural_size: Optional[Size] = None
    font_size: Optional[int] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: int = field(default_factory=_now_ms)

    def __post_init__(self):
        if self.type not in CardType.ALL:
            raise ValueError(f"Unknown card type: {self.type!r}")

    def image_scale(self, size=None):
        """Per-axis scale from natural image size to card size.
        
        Args:
            size: Size to scale to instead of the committed size (a resize in progress)
        
        Returns:
            (scale_x, scale_y), or None when not an image card with both sizes
        """
        size = size or self.size
        if self.type != CardType.IMAGE or not size or not self.natural_size:
            return None
        return (size.w / self.natural_size.w,
                size.h / self.natural_size.h)

    def to_dict(self):
        data = {
            'id': self.id,
            'type': self.type,
            'content': self.content,
            'position': {'x': self.position.x, 'y': self.position.y},
            'createdAt': self.created_at,
        }
        if self.size:
            data['size'] = {'w': self.size.w, 'h': self.size.h}
        if self.natural_size:
            data['naturalSize'] = {'w': self.natural_size.w, 'h': self.natural_size.h}
        if self.font_size:
            data['fontSize'] = self.font_size
        return data

    @classmethod
    def from_dict(cls, data):
        size = data.get('size')
        natural = data.get('naturalSize')
        return cls(
            id=data['id'],
            type=data['type'],
            content=data.get('content', ''),
            position=Vec2(data['position']['x'], data['position']['y']),
            size=Size(size['w'], size['h']) if size else None,
            natural_size=Size(natural['w'], natural['h']) if natural else None,
            font_size=data.get('fontSize'),
            created_at=data.get('createdAt', _now_ms()),
        )


@dataclass
class CanvasViewport:
    """Pan/zoom state of the single board canvas."""
    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def to_dict(self):
        return {'scale': self.scale, 'translateX': self.translate_x, 'translateY': self.translate_y}

    @classmethod
    def from_dict(cls, data):
        return cls(
            scale=data.get('scale', 1.0),
            translate_x=data.get('translateX', 0.0),
            translate_y=data.get('translateY', 0.0),
        )
