"""CLI entry point for vial_render package.

Usage:
    python -m vial_render render -i keymap.vil -o output/keyboard_layout.png
    python -m vial_render info -i keymap.vil
"""

from .cli import main

if __name__ == "__main__":
    main()
