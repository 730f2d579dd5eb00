"""Coordinate transformation utilities for the board.

Provides conversion between the two coordinate systems:
- Screen space (raw pointer pixels)
- Canvas space (logical board units, independent of zoom)

Gesture math only compensates for zoom magnification. Drags and resizes
work on deltas, so translation cancels out; the viewport_* helpers apply
the full scale + translate for absolute placement.
"""

import math


class InvalidScaleError(ValueError):
	"""Raised when a viewport scale is zero, negative or not a number."""


def _check_scale(scale):
	"""Fail fast on a scale no gesture math can use."""
	if scale is None or math.isnan(scale) or scale <= 0:
		raise InvalidScaleError(f"Viewport scale must be > 0, got {scale!r}")


def screen_to_canvas(screen_x, screen_y, scale):
	"""Convert screen pixels to canvas units.
	
	Args:
		screen_x, screen_y: Pointer position in screen pixels
		scale: Viewport scale factor (> 0)
		
	Returns:
		(canvas_x, canvas_y)
	"""
	_check_scale(scale)
	return screen_x / scale, screen_y / scale


def canvas_to_screen(canvas_x, canvas_y, scale):
	"""Convert canvas units to screen pixels (inverse of screen_to_canvas)."""
	_check_scale(scale)
	return canvas_x * scale, canvas_y * scale


def screen_delta_to_canvas(dx, dy, scale):
	"""Convert a pointer delta to a canvas delta.
	
	Dragging 10 screen pixels at 2x zoom moves 5 canvas units.
	"""
	_check_scale(scale)
	return dx / scale, dy / scale


def viewport_canvas_to_screen(canvas_x, canvas_y, viewport):
	"""Place a canvas point on screen using the viewport's scale and translation.
	
	Args:
		canvas_x, canvas_y: Point in canvas units
		viewport: CanvasViewport (scale, translate_x, translate_y)
		
	Returns:
		(screen_x, screen_y) relative to the board widget origin
	"""
	x, y = canvas_to_screen(canvas_x, canvas_y, viewport.scale)
	return x + viewport.translate_x, y + viewport.translate_y


def viewport_screen_to_canvas(screen_x, screen_y, viewport):
	"""Inverse of viewport_canvas_to_screen."""
	return screen_to_canvas(screen_x - viewport.translate_x,
	                        screen_y - viewport.translate_y,
	                        viewport.scale)


def zoom_translation_for_anchor(anchor_x, anchor_y, viewport, new_scale):
	"""Compute the translation that keeps a screen point fixed across a zoom.
	
	Args:
		anchor_x, anchor_y: Screen point (usually the cursor) to hold still
		viewport: Current CanvasViewport
		new_scale: Scale after the zoom
		
	Returns:
		(translate_x, translate_y) for the new scale
	"""
	_check_scale(new_scale)
	canvas_x, canvas_y = viewport_screen_to_canvas(anchor_x, anchor_y, viewport)
	return anchor_x - canvas_x * new_scale, anchor_y - canvas_y * new_scale
