"""Board canvas helpers (mixins used by BoardCanvas)."""

from .board_zoom_pan_mixin import BoardZoomPanMixin

__all__ = ['BoardZoomPanMixin']
