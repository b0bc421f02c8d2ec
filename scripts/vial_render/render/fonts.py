"""Bundled font loading."""

from importlib import resources
from io import BytesIO

from PIL import ImageFont

from ..errors import FontLoadError

FONT_PACKAGE = "vial_render"
FONT_FILE = "DejaVuSans.ttf"

# Large enough that pixel rounding of the vertical metrics is negligible
_REFERENCE_SIZE = 1000


def read_bundled_font() -> bytes:
    """Return the raw bytes of the font shipped with the package."""
    try:
        return (resources.files(FONT_PACKAGE) / "assets" / "fonts" / FONT_FILE).read_bytes()
    except OSError as err:
        raise FontLoadError(f"Cannot read bundled font {FONT_FILE}: {err}") from err


class FontLoader:
    """Hands out FreeType fonts from one TTF blob, cached per scale.

    A scale is the pixel height from ascender to descender, not the em size
    FreeType expects, so every request is converted with the font's own
    em-to-line-height ratio. The blob is decoded once on construction so a
    corrupt asset fails before any drawing starts.
    """

    def __init__(self, font_data: bytes, name: str = FONT_FILE):
        self.font_data = font_data
        self.name = name
        self._cache: dict[float, ImageFont.FreeTypeFont] = {}

        ascent, descent = self._load(_REFERENCE_SIZE).getmetrics()
        self.em_per_scale = _REFERENCE_SIZE / (ascent + descent)

    @classmethod
    def bundled(cls) -> "FontLoader":
        """Create a loader for the packaged DejaVu Sans font."""
        return cls(read_bundled_font())

    def _load(self, size: float) -> ImageFont.FreeTypeFont:
        try:
            return ImageFont.truetype(BytesIO(self.font_data), size)
        except OSError as err:
            raise FontLoadError(f"Cannot decode font {self.name}: {err}") from err

    def get(self, scale: float) -> ImageFont.FreeTypeFont:
        """Return the font whose ascender-to-descender height is ``scale`` pixels."""
        font = self._cache.get(scale)
        if font is None:
            font = self._load(scale * self.em_per_scale)
            self._cache[scale] = font
        return font
