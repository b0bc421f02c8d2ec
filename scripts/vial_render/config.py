"""Configuration models and loaders for Vial keyboard rendering."""

from pathlib import Path
from typing import Any

import yaml
from PIL import ImageColor
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError, field_validator

from .errors import FileReadError, ParseError


class VialConfig(BaseModel):
    """Contents of a Vial ``.vil`` keymap file.

    Only ``layout`` and ``tap_dance`` are used for rendering. The remaining
    fields are kept so a file is accepted with the same shape Vial writes.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    version: NonNegativeInt
    uid: NonNegativeInt
    layout: list[list[list[Any]]]
    encoder_layout: list[list[list[Any]]] = Field(default_factory=list)
    layout_options: NonNegativeInt
    macro: list[Any] = Field(default_factory=list)
    vial_protocol: NonNegativeInt
    via_protocol: NonNegativeInt
    tap_dance: list[list[Any]] = Field(default_factory=list)
    combo: list[list[Any]] = Field(default_factory=list)
    key_override: list[Any] = Field(default_factory=list)
    settings: Any = Field(default_factory=dict)


class ThemeColors(BaseModel):
    """Color scheme for key fills, borders and legends."""

    background: str = Field("#1c1c20", description="Canvas background")
    key_empty: str = Field("#282a30", description="Fill for keys with no legend")
    key_special: str = Field("#2d3446", description="Fill for layer/tap-dance keys")
    key_normal: str = Field("#343a46", description="Fill for plain keys")
    border_empty: str = Field("#32353d", description="Border for keys with no legend")
    border_special: str = Field("#414960", description="Border for layer/tap-dance keys")
    border_normal: str = Field("#444c5c", description="Border for plain keys")
    text_normal: str = Field("#f0f6fc", description="Main legend color")
    text_special: str = Field("#9cdcfe", description="Main legend color on special keys")
    text_sub: str = Field("#9ca3af", description="Hold/layer legend color")

    @field_validator("*")
    @classmethod
    def check_color(cls, value: str) -> str:
        """Reject strings Pillow cannot turn into a color."""
        ImageColor.getrgb(value)
        return value


LIGHT_THEME = ThemeColors(
    background="#f5f5f5",
    key_empty="#eeeeee",
    key_special="#e3f2fd",
    key_normal="#ffffff",
    border_empty="#c6c6c6",
    border_special="#90caf9",
    border_normal="#d0d7de",
    text_normal="#212529",
    text_special="#1976d2",
    text_sub="#343a40",
)

THEMES: dict[str, ThemeColors] = {
    "dark": ThemeColors(),
    "light": LIGHT_THEME,
}


class RenderConfig(BaseModel):
    """Text metrics and colors for one render.

    Key geometry is fixed for the keyboard and is not part of this config.
    """

    # Main legend scale per case; sub legends always use sub_scale
    single_char_scale: float = Field(24.0, ge=6, le=64)
    long_text_scale: float = Field(14.0, ge=6, le=64)
    with_sub_scale: float = Field(20.0, ge=6, le=64)
    default_scale: float = Field(18.0, ge=6, le=64)
    sub_scale: float = Field(18.0, ge=6, le=64)
    long_text_threshold: int = Field(8, ge=1)

    line_height: float = Field(16.0, gt=0)
    text_top: float = Field(12.0, ge=0)
    sub_y_ratio: float = Field(0.75, ge=0, le=1)

    # Empirical glyph width factors (fraction of the font scale per char)
    upper_width: float = Field(0.65, gt=0, le=2)
    lower_width: float = Field(0.55, gt=0, le=2)
    mixed_width: float = Field(0.6, gt=0, le=2)

    colors: ThemeColors = Field(default_factory=ThemeColors)


def theme_colors(name: str) -> ThemeColors:
    """Return a built-in theme by name."""
    if name not in THEMES:
        raise ValueError(f"Unknown theme '{name}', expected one of {sorted(THEMES)}")
    return THEMES[name]


def parse_vial_config(text: str | bytes) -> VialConfig:
    """Parse ``.vil`` JSON text into a VialConfig.

    Raises:
        ParseError: if the text is not valid JSON or a required field is
            missing or of the wrong type
    """
    try:
        return VialConfig.model_validate_json(text)
    except ValidationError as err:
        raise ParseError(f"Invalid Vial configuration: {err}") from err


def load_vial_config(path: Path) -> VialConfig:
    """Read and parse a ``.vil`` file.

    Raises:
        FileReadError: if the file cannot be read
        ParseError: if its contents cannot be parsed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise FileReadError(f"Cannot read {path}: {err}") from err
    return parse_vial_config(text)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_render_config(path: Path | None = None, theme: str = "dark") -> RenderConfig:
    """Build a RenderConfig from a theme name and an optional YAML style file.

    The style file may contain a ``draw_config`` mapping with RenderConfig
    numbers and a ``colors`` mapping overriding entries of the chosen theme.

    Raises:
        FileReadError: if the style file exists but cannot be read
        ParseError: if the style file is not valid YAML or has invalid values
    """
    base_colors = theme_colors(theme)
    if path is None or not Path(path).exists():
        return RenderConfig(colors=base_colors)

    try:
        data = load_yaml(path)
    except OSError as err:
        raise FileReadError(f"Cannot read {path}: {err}") from err
    except yaml.YAMLError as err:
        raise ParseError(f"Invalid style file {path}: {err}") from err
    if not isinstance(data, dict):
        raise ParseError(f"Invalid style file {path}: expected a mapping")

    draw_config = data.get("draw_config") or {}
    color_overrides = data.get("colors") or {}
    try:
        colors = ThemeColors.model_validate({**base_colors.model_dump(), **color_overrides})
        return RenderConfig(**draw_config, colors=colors)
    except (TypeError, ValidationError) as err:
        raise ParseError(f"Invalid style file {path}: {err}") from err
