"""Physical key placement for the YIVU40 split keyboard.

The layout grid from Vial is 8 rows x 7 columns: rows 0-3 are the left
half (three alpha rows and the thumb cluster), rows 4-7 the right half,
whose columns run from the outer edge inwards.
"""

from typing import Any, Iterator, NamedTuple

KEY_W = 78.0
KEY_H = 60.0
KEY_GAP = 4.0
UNIT_X = KEY_W + KEY_GAP
UNIT_Y = KEY_H + KEY_GAP

MARGIN = 10.0

# Horizontal offsets for the inner column and the split between halves
INNER_OFFSET = 15.0
SPLIT_OFFSET = 30.0
# Rightmost key of the right half, in units from the left edge
RIGHT_EDGE_UNITS = 14


class KeyPosition(NamedTuple):
    """Key rectangle in image pixels. Rotation is reserved and always 0."""

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0


KeyGrid = list[list[KeyPosition | None]]


def get_key_positions(margin: float) -> KeyGrid:
    """Return the fixed key rectangles indexed by [row][column].

    Args:
        margin: Blank border around the keyboard in pixels

    Returns:
        8x7 grid of KeyPosition, with None where no physical key exists
    """

    def key(units_x: float, row: int, extra_x: float = 0.0, width_units: float = 1.0) -> KeyPosition:
        return KeyPosition(
            x=margin + UNIT_X * units_x + extra_x,
            y=margin + UNIT_Y * row,
            width=KEY_W * width_units,
            height=KEY_H,
        )

    def right(units_x: float, row: int) -> KeyPosition:
        return key(units_x, row, SPLIT_OFFSET)

    return [
        # Left top
        [key(0, 0), key(1, 0), key(2, 0), key(3, 0), key(4, 0), key(5, 0),
         key(6, 0, INNER_OFFSET)],
        # Left home
        [key(0, 1), key(1, 1), key(2, 1), key(3, 1), key(4, 1), key(5, 1),
         key(6, 1, INNER_OFFSET)],
        # Left bottom
        [key(0, 2), key(1, 2), key(2, 2), key(3, 2), key(4, 2), key(5, 2),
         None],
        # Left thumbs, last one 1.5u wide
        [None, None, None, key(2, 3), key(3, 3), key(4, 3, width_units=1.5),
         None],
        # Right top
        [right(14, 0), right(13, 0), right(12, 0), right(11, 0), right(10, 0), right(9, 0),
         key(8, 0, INNER_OFFSET)],
        # Right home
        [right(14, 1), right(13, 1), right(12, 1), right(11, 1), right(10, 1), right(9, 1),
         key(8, 1, INNER_OFFSET)],
        # Right bottom
        [right(14, 2), right(13, 2), right(12, 2), right(11, 2), right(10, 2), right(9, 2),
         None],
        # Right thumbs, last one 1.5u wide and shifted half a key left
        [None, None, None, right(11, 3), right(10, 3),
         key(9, 3, SPLIT_OFFSET - KEY_W * 0.5, width_units=1.5),
         None],
    ]


def canvas_size(margin: float) -> tuple[int, int]:
    """Image (width, height) covering every key plus the margin on all sides."""
    content_w = UNIT_X * RIGHT_EDGE_UNITS + SPLIT_OFFSET + KEY_W
    content_h = UNIT_Y * 3 + KEY_H
    return int(content_w + margin * 2), int(content_h + margin * 2)


def iter_present(grid: list[list[Any]], positions: KeyGrid) -> Iterator[tuple[int, int, Any, KeyPosition]]:
    """Yield (row, col, token, position) for cells with a physical key.

    Rows or columns of ``grid`` beyond the position table are ignored.
    """
    for row_idx, row in enumerate(grid):
        if row_idx >= len(positions):
            continue
        for col_idx, token in enumerate(row):
            if col_idx >= len(positions[row_idx]):
                continue
            pos = positions[row_idx][col_idx]
            if pos is not None:
                yield row_idx, col_idx, token, pos
