"""Raster rendering of the keyboard legend."""

from .fonts import FontLoader, read_bundled_font
from .text import main_text_scale, width_factor, estimate_width, centered_x
from .rasterizer import KeyboardRenderer, save_image, render_keyboard_image

__all__ = [
    # Fonts
    "FontLoader",
    "read_bundled_font",
    # Text
    "main_text_scale",
    "width_factor",
    "estimate_width",
    "centered_x",
    # Rasterizer
    "KeyboardRenderer",
    "save_image",
    "render_keyboard_image",
]
