"""UI components for the Infinite Board

This package contains all UI components organized into subpackages:
- interaction: Pointer gesture engine (drag, resize, selection)
- board_widgets: Board canvas mixins (zoom and pan)

Direct imports:
"""

from .card_widget import CardWidget
from .board_canvas import BoardCanvas
from .font_size_control import FontSizeControl
from .zoom_toolbar import ZoomToolbar

__all__ = ['CardWidget', 'BoardCanvas', 'FontSizeControl', 'ZoomToolbar']
