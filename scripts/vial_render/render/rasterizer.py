"""Raster drawing of the layer-0 keyboard legend."""

from pathlib import Path

from PIL import Image, ImageDraw

from ..config import RenderConfig, VialConfig
from ..errors import DirectoryCreateError, ImageWriteError
from ..geometry import MARGIN, KeyGrid, KeyPosition, canvas_size, get_key_positions, iter_present
from ..labels import KeyLabel, resolve
from .fonts import FontLoader
from .text import centered_x, main_text_scale

RENDERED_LAYER = 0


class KeyboardRenderer:
    """Draws key boxes and legends for one Vial configuration.

    Attributes:
        config: Text metrics and theme colors
        fonts: Source of FreeType fonts by size
        positions: Key rectangles indexed by [row][column]
    """

    def __init__(
        self,
        config: RenderConfig,
        fonts: FontLoader,
        positions: KeyGrid | None = None,
        margin: float = MARGIN,
    ):
        self.config = config
        self.fonts = fonts
        self.margin = margin
        self.positions = positions if positions is not None else get_key_positions(margin)

    @classmethod
    def from_config(cls, config: RenderConfig | None = None) -> "KeyboardRenderer":
        """Create a renderer using the bundled font.

        Raises:
            FontLoadError: if the bundled font cannot be loaded
        """
        return cls(config or RenderConfig(), FontLoader.bundled())

    def key_colors(self, label: KeyLabel) -> tuple[str, str]:
        """Return (fill, border) colors for a key."""
        colors = self.config.colors
        if not label.main_text:
            return colors.key_empty, colors.border_empty
        if label.is_special:
            return colors.key_special, colors.border_special
        return colors.key_normal, colors.border_normal

    def render(self, vial: VialConfig) -> Image.Image:
        """Render the layer-0 legend of ``vial`` to a new RGB image."""
        image = Image.new("RGB", canvas_size(self.margin), self.config.colors.background)
        draw = ImageDraw.Draw(image)

        if vial.layout:
            grid = vial.layout[RENDERED_LAYER]
            for _row, _col, token, pos in iter_present(grid, self.positions):
                self.draw_key(draw, pos, resolve(token, vial))

        return image

    def draw_key(self, draw: ImageDraw.ImageDraw, pos: KeyPosition, label: KeyLabel) -> None:
        """Draw one key: inset fill, 1px border, then its legends."""
        fill, border = self.key_colors(label)

        x, y = int(pos.x), int(pos.y)
        w, h = int(pos.width), int(pos.height)

        inner_x, inner_y = int(pos.x + 1), int(pos.y + 1)
        inner_w, inner_h = int(pos.width - 2), int(pos.height - 2)
        draw.rectangle(
            [inner_x, inner_y, inner_x + inner_w - 1, inner_y + inner_h - 1], fill=fill
        )

        bottom = int(pos.y + pos.height - 1)
        right = int(pos.x + pos.width - 1)
        draw.rectangle([x, y, x + w - 1, y], fill=border)
        draw.rectangle([x, bottom, x + w - 1, bottom], fill=border)
        draw.rectangle([x, y, x, y + h - 1], fill=border)
        draw.rectangle([right, y, right, y + h - 1], fill=border)

        if label.main_text:
            self.draw_legends(draw, pos, label)

    def draw_legends(self, draw: ImageDraw.ImageDraw, pos: KeyPosition, label: KeyLabel) -> None:
        """Draw the main legend lines and the optional sub legend."""
        cfg = self.config
        main_color = cfg.colors.text_special if label.is_special else cfg.colors.text_normal
        scale = main_text_scale(label.main_text, label.sub_text is not None, cfg)
        font = self.fonts.get(scale)

        start_y = pos.y + cfg.text_top
        for i, line in enumerate(label.main_text.split("\n")):
            text_x = centered_x(pos.x, pos.width, line, scale, cfg)
            text_y = int(start_y + i * cfg.line_height)
            draw.text((text_x, text_y), line, fill=main_color, font=font)

        if label.sub_text is not None:
            sub_font = self.fonts.get(cfg.sub_scale)
            sub_x = centered_x(pos.x, pos.width, label.sub_text, cfg.sub_scale, cfg)
            sub_y = int(pos.y + pos.height * cfg.sub_y_ratio)
            draw.text((sub_x, sub_y), label.sub_text, fill=cfg.colors.text_sub, font=sub_font)


def save_image(image: Image.Image, path: Path) -> None:
    """Write ``image`` as PNG, creating the parent directory if needed.

    Raises:
        DirectoryCreateError: if the output directory cannot be created
        ImageWriteError: if the image cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise DirectoryCreateError(f"Cannot create directory {path.parent}: {err}") from err

    try:
        image.save(path, "PNG")
    except (OSError, ValueError) as err:
        raise ImageWriteError(f"Cannot write image {path}: {err}") from err


def render_keyboard_image(
    vial: VialConfig,
    output_path: Path,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Render ``vial`` and save it to ``output_path``.

    Args:
        vial: Loaded Vial configuration
        output_path: PNG file to write
        config: Text metrics and colors (defaults to the dark theme)

    Returns:
        The rendered image
    """
    renderer = KeyboardRenderer.from_config(config)
    image = renderer.render(vial)
    save_image(image, output_path)
    return image
