"""Legend sizing and approximate text measurement."""

from ..config import RenderConfig


def main_text_scale(text: str, has_sub: bool, config: RenderConfig) -> float:
    """Pick the font scale for a key's main legend.

    Single characters get the largest size and long legends the smallest.
    Keys that also show a sub legend use a slightly larger than default
    size. Length is counted in UTF-8 bytes, so a single non-ASCII
    character is not treated as a single character.
    """
    length = len(text.encode("utf-8"))
    if length == 1:
        return config.single_char_scale
    if length > config.long_text_threshold:
        return config.long_text_scale
    if has_sub:
        return config.with_sub_scale
    return config.default_scale


def width_factor(text: str, config: RenderConfig) -> float:
    """Per-character width as a fraction of the font scale."""
    if all(c.isascii() and (c.isupper() or c.isdigit()) for c in text):
        return config.upper_width
    if all(c.isascii() and c.islower() for c in text):
        return config.lower_width
    return config.mixed_width


def estimate_width(text: str, scale: float, config: RenderConfig) -> float:
    """Estimated rendered width of ``text`` in pixels."""
    return len(text) * scale * width_factor(text, config)


def centered_x(left: float, width: float, text: str, scale: float, config: RenderConfig) -> int:
    """X coordinate that horizontally centers ``text`` within a key."""
    return int(left + (width - estimate_width(text, scale, config)) / 2)
