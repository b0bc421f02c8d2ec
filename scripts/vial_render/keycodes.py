"""QMK keycode display tables."""

KEYCODE_PREFIX = "KC_"
NO_KEY = "KC_NO"

# Legends for basic keycodes on the main layer
KEYCODE_LABELS: dict[str, str] = {
    # Letters
    "KC_Q": "Q",
    "KC_W": "W",
    "KC_E": "E",
    "KC_R": "R",
    "KC_T": "T",
    "KC_Y": "Y",
    "KC_U": "U",
    "KC_I": "I",
    "KC_O": "O",
    "KC_P": "P",
    "KC_A": "A",
    "KC_S": "S",
    "KC_D": "D",
    "KC_F": "F",
    "KC_G": "G",
    "KC_H": "H",
    "KC_J": "J",
    "KC_K": "K",
    "KC_L": "L",
    "KC_Z": "Z",
    "KC_X": "X",
    "KC_C": "C",
    "KC_V": "V",
    "KC_B": "B",
    "KC_N": "N",
    "KC_M": "M",
    # Whitespace and editing
    "KC_SPACE": "Space",
    "KC_ENTER": "Enter",
    "KC_TAB": "Tab",
    "KC_BSPACE": "Bksp",
    "KC_CAPSLOCK": "Caps",
    "KC_PSCREEN": "Print\nScreen",
    "KC_MHEN": "MHEN",
    # Modifiers
    "KC_LSHIFT": "LShift",
    "KC_RSHIFT": "RShift",
    "KC_LCTRL": "LCtrl",
    "KC_RCTRL": "RCtrl",
    "KC_LALT": "LAlt",
    "KC_RALT": "RAlt",
    "KC_LGUI": "LGui",
    "KC_RGUI": "RGui",
    # Punctuation
    "KC_SLASH": "?/",
    "KC_COMMA": ",",
    "KC_DOT": ".",
    "KC_MINUS": "-",
    NO_KEY: "",
}

# Reduced table for tap-dance tap/hold actions
TAP_DANCE_LABELS: dict[str, str] = {
    "KC_MINUS": "-",
    "KC_RSHIFT": "RShift",
    "KC_TAB": "Tab",
    "MO(3)": "MO3",
    "KC_Z": "Z",
    "KC_LALT": "LAlt",
    "KC_X": "X",
    "KC_LGUI": "LGui",
    "KC_C": "C",
    "KC_LCTRL": "LCtrl",
    "KC_V": "V",
    "KC_LSHIFT": "LShift",
    "KC_M": "M",
    "KC_COMMA": ",",
    "KC_RCTRL": "RCtrl",
    "KC_DOT": ".",
    "KC_RGUI": "RGui",
    NO_KEY: "",
}


def strip_prefix(keycode: str) -> str:
    """Drop every ``KC_`` marker, e.g. ``KC_F1`` -> ``F1``."""
    return keycode.replace(KEYCODE_PREFIX, "")


def keycode_label(keycode: str) -> str:
    """Legend text for a basic keycode."""
    return KEYCODE_LABELS.get(keycode, strip_prefix(keycode))


def tap_dance_label(keycode: str) -> str:
    """Legend text for a tap-dance action."""
    return TAP_DANCE_LABELS.get(keycode, strip_prefix(keycode))
