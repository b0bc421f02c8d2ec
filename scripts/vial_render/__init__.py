"""
Vial keymap legend rendering for the YIVU40 keyboard.

Reads a Vial ``.vil`` file and draws the layer-0 key legends to a PNG.

Usage:
    python -m vial_render render -i data/yivu40-250906.vil -o output/keyboard_layout.png
    python -m vial_render render --theme light --style style.yaml
    python -m vial_render info -i data/yivu40-250906.vil
"""

from .config import (
    VialConfig,
    ThemeColors,
    RenderConfig,
    load_vial_config,
    parse_vial_config,
    load_yaml,
    load_render_config,
    theme_colors,
)
from .errors import (
    VialRenderError,
    FileReadError,
    ParseError,
    FontLoadError,
    DirectoryCreateError,
    ImageWriteError,
)
from .geometry import KeyPosition, get_key_positions, canvas_size
from .labels import KeyLabel, classify_token, resolve
from .render import KeyboardRenderer, render_keyboard_image, save_image

__all__ = [
    # Config
    "VialConfig",
    "ThemeColors",
    "RenderConfig",
    "load_vial_config",
    "parse_vial_config",
    "load_yaml",
    "load_render_config",
    "theme_colors",
    # Errors
    "VialRenderError",
    "FileReadError",
    "ParseError",
    "FontLoadError",
    "DirectoryCreateError",
    "ImageWriteError",
    # Geometry
    "KeyPosition",
    "get_key_positions",
    "canvas_size",
    # Labels
    "KeyLabel",
    "classify_token",
    "resolve",
    # Render
    "KeyboardRenderer",
    "render_keyboard_image",
    "save_image",
]
