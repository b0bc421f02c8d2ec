"""Key token classification and legend resolution.

Vial stores each key as a JSON value: a keycode string such as ``KC_A``,
a tap-dance reference ``TD(3)``, a layer-tap ``LT1(KC_SPACE)``, a layer
switch ``TO(0)``, the number ``-1`` for a missing key, or occasionally
something else entirely. Tokens are classified once into one of the
variants below and each variant is resolved on its own. Resolution never
fails: anything unrecognised is shown as its raw text.
"""

import re
from dataclasses import dataclass
from typing import Any, Union

from .config import VialConfig
from .keycodes import KEYCODE_PREFIX, keycode_label, tap_dance_label

TAP_DANCE_PREFIX = "TD("
LAYER_TAP_PREFIX = "LT"
LAYER_SWITCH_PREFIX = "TO("
ABSENT_KEY = -1

_LAYER_TAP_SEPARATOR = "|"
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class KeyLabel:
    """Legend drawn on one key."""

    main_text: str
    sub_text: str | None = None
    is_special: bool = False


@dataclass(frozen=True)
class PlainCode:
    code: str


@dataclass(frozen=True)
class TapDance:
    raw: str
    index: int | None


@dataclass(frozen=True)
class LayerTap:
    raw: str


@dataclass(frozen=True)
class LayerSwitch:
    raw: str


@dataclass(frozen=True)
class Opaque:
    raw: str


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Number:
    value: int | float


@dataclass(frozen=True)
class Empty:
    pass


Token = Union[PlainCode, TapDance, LayerTap, LayerSwitch, Opaque, Absent, Number, Empty]


def _strip_repeated(text: str, prefix: str = "", suffix: str = "") -> str:
    """Remove every leading ``prefix`` and trailing ``suffix`` occurrence."""
    if prefix:
        while text.startswith(prefix):
            text = text[len(prefix):]
    if suffix:
        while text.endswith(suffix):
            text = text[: -len(suffix)]
    return text


def parse_tap_dance_index(token: str) -> int | None:
    """Extract ``n`` from ``TD(n)``, or None if it is not a plain integer."""
    inner = _strip_repeated(token, TAP_DANCE_PREFIX, ")")
    if not _DIGITS.fullmatch(inner):
        return None
    return int(inner)


def classify_token(token: Any) -> Token:
    """Classify a raw layout value into a token variant."""
    # bool is an int subclass; JSON true/false are not key numbers
    if isinstance(token, bool) or token is None:
        return Empty()
    if isinstance(token, int):
        return Absent() if token == ABSENT_KEY else Number(token)
    if isinstance(token, float):
        return Number(token)
    if not isinstance(token, str):
        return Empty()

    if token.startswith(KEYCODE_PREFIX):
        return PlainCode(token)
    if token.startswith(TAP_DANCE_PREFIX):
        return TapDance(token, parse_tap_dance_index(token))
    if token.startswith(LAYER_TAP_PREFIX):
        return LayerTap(token)
    if token.startswith(LAYER_SWITCH_PREFIX):
        return LayerSwitch(token)
    return Opaque(token)


def get_tap_dance_info(config: VialConfig, index: int) -> tuple[str, str] | None:
    """Return (tap, hold) legends for a tap-dance entry.

    Args:
        config: Loaded Vial configuration
        index: Tap-dance slot number

    Returns:
        Tuple of legend strings, or None if the slot does not exist or has
        fewer than two actions
    """
    if index >= len(config.tap_dance):
        return None
    entry = config.tap_dance[index]
    if len(entry) < 2:
        return None

    tap = entry[0] if isinstance(entry[0], str) else ""
    hold = entry[1] if isinstance(entry[1], str) else ""
    return tap_dance_label(tap), tap_dance_label(hold)


def _resolve_tap_dance(token: TapDance, config: VialConfig) -> KeyLabel:
    if token.index is None:
        return KeyLabel(token.raw, is_special=True)

    info = get_tap_dance_info(config, token.index)
    if info is None:
        return KeyLabel(token.raw, is_special=True)

    tap, hold = info
    if tap and hold:
        return KeyLabel(tap, hold, is_special=True)
    return KeyLabel(f"TD({token.index})", is_special=True)


def _resolve_layer_tap(token: LayerTap) -> KeyLabel:
    # LT1(KC_SPACE) -> "LT1|SPACE" -> key "SPACE", layer "LT1"
    formatted = token.raw.replace("(" + KEYCODE_PREFIX, _LAYER_TAP_SEPARATOR).replace(")", "")
    parts = formatted.split(_LAYER_TAP_SEPARATOR)
    if len(parts) == 2:
        return KeyLabel(parts[1], parts[0], is_special=True)
    return KeyLabel(token.raw, is_special=True)


def resolve_token(token: Token, config: VialConfig) -> KeyLabel:
    """Resolve a classified token into the legend to draw."""
    if isinstance(token, PlainCode):
        return KeyLabel(keycode_label(token.code))
    if isinstance(token, TapDance):
        return _resolve_tap_dance(token, config)
    if isinstance(token, LayerTap):
        return _resolve_layer_tap(token)
    if isinstance(token, LayerSwitch):
        return KeyLabel(token.raw, is_special=True)
    if isinstance(token, Opaque):
        return KeyLabel(token.raw)
    if isinstance(token, Number):
        return KeyLabel(str(token.value))
    return KeyLabel("")


def resolve(token: Any, config: VialConfig) -> KeyLabel:
    """Resolve a raw layout value into the legend to draw.

    Args:
        token: Value taken straight from ``config.layout``
        config: Loaded Vial configuration (for tap-dance lookups)

    Returns:
        KeyLabel with main text, optional sub text and the special flag
    """
    return resolve_token(classify_token(token), config)
