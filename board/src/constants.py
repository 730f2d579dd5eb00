"""
Infinite Board - Constants and Configuration

This module contains all constant values used throughout the application:
- Card size floors and defaults
- Viewport zoom limits and steps
- Resize handle geometry
- Text card font sizes
"""

# ======================================================================
# CARD SIZE CONSTRAINTS (CANVAS UNITS)
# ======================================================================
# Resizing never goes below these, whatever the pointer delta
MIN_CARD_WIDTH = 60
MIN_CARD_HEIGHT = 30

# Size used for cards that have never been resized
DEFAULT_CARD_WIDTH = 200
DEFAULT_CARD_HEIGHT = 120

# Freshly pasted images are capped to this width (aspect ratio kept)
MAX_IMAGE_CARD_WIDTH = 400

# ======================================================================
# VIEWPORT
# ======================================================================
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_STEP = 1.25      # Multiplier per zoom in/out step
WHEEL_PAN_STEP = 0.5  # Screen pixels panned per wheel angle-delta unit

# ======================================================================
# RESIZE HANDLE
# ======================================================================
RESIZE_HANDLE_SIZE = 12  # Screen pixels, square

# Qt dynamic properties used as transient gesture affordances
AFFORDANCE_DRAGGING = 'dragging'
AFFORDANCE_RESIZING = 'resizing'

# ======================================================================
# TEXT CARDS
# ======================================================================
FONT_SIZES = [12, 14, 18, 24, 32, 48]
DEFAULT_FONT_SIZE = 14

# ======================================================================
# CONFIG
# ======================================================================
CONFIG_DIR_NAME = '.infinite_board'
CONFIG_FILE_NAME = 'config.json'
