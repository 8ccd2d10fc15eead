"""
Box grammar shared by the formatter and the parser.

The character set is fixed. The parser recognizes exactly these
characters, so they are constants, not options.

Layout of one table (widths [4, 3]):

    ┌──────┬─────┐
    │ Date │ Mon │
    ├──────┼─────┤
    │ Temp │ 21  │
    └──────┴─────┘

Every cell is "│" + " " + content padded to the column width + " ".
A row with fewer cells than the widest row lets its last cell span
the remaining columns; junctions show where boundaries start and stop:

    ┌──────┬─────┐
    │ Date │ Mon │
    ├──────┴─────┤
    │ spanning   │
    └────────────┘

Leaf text may not contain any of these characters.
"""

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
HORIZONTAL = "─"
VERTICAL = "│"
TEE_DOWN = "┬"
TEE_UP = "┴"
CROSS = "┼"
TEE_RIGHT = "├"
TEE_LEFT = "┤"

FRAME_CHARACTERS = frozenset(
    TOP_LEFT + TOP_RIGHT + BOTTOM_LEFT + BOTTOM_RIGHT + HORIZONTAL + VERTICAL
    + TEE_DOWN + TEE_UP + CROSS + TEE_RIGHT + TEE_LEFT
)

# Spaces between a vertical bar and cell content, each side.
PADDING = 1

EMPTY_TABLE = (TOP_LEFT + TOP_RIGHT, BOTTOM_LEFT + BOTTOM_RIGHT)


def junction(above: bool, below: bool) -> str:
    """Character on a horizontal rule where boundaries meet it."""
    if above and below:
        return CROSS
    if above:
        return TEE_UP
    if below:
        return TEE_DOWN
    return HORIZONTAL


def contains_frame_character(text: str) -> bool:
    return any(ch in FRAME_CHARACTERS for ch in text)
