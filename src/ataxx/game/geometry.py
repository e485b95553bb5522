"""
Square addressing for the Ataxx board.

The 7x7 playing area is embedded in an 11x11 grid whose two outer rings are
permanently blocked. Every square is addressed by a single linear index in
row-major order, so a scan of radius 2 around any playable square never
leaves the array and never needs a bounds check.

Columns and rows are 0-based here: column 0 is 'a', row 0 is '1'.
"""

SIDE = 7
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER  # 11
GRID_SIZE = EXTENDED_SIDE * EXTENDED_SIDE  # 121

COLUMNS = 'abcdefg'
ROWS = '1234567'


def index(col: int, row: int) -> int:
    """Return the linear index of (col, row).

    Coordinates in -2..8 fall in the blocked border instead of raising.
    """
    return (row + BORDER) * EXTENDED_SIDE + (col + BORDER)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def col_row(sq: int) -> tuple:
    """Inverse of index(): (col, row) of linear index SQ."""
    row, col = divmod(sq, EXTENDED_SIDE)
    return (col - BORDER, row - BORDER)


def in_bounds(col: int, row: int) -> bool:
    """Check if (col, row) lies inside the 7x7 playing area."""
    return 0 <= col < SIDE and 0 <= row < SIDE


def square_name(col: int, row: int) -> str:
    """Text name of a playable square, e.g. (0, 0) -> 'a1'."""
    return f'{COLUMNS[col]}{ROWS[row]}'


def parse_square(text: str) -> tuple:
    """Parse a square name such as 'c3' into (col, row)."""
    if len(text) != 2 or text[0] not in COLUMNS or text[1] not in ROWS:
        raise ValueError(f"invalid square: {text!r}")
    return (COLUMNS.index(text[0]), ROWS.index(text[1]))


def chebyshev(col0: int, row0: int, col1: int, row1: int) -> int:
    """Chebyshev distance (max of column/row difference)."""
    return max(abs(col1 - col0), abs(row1 - row0))


# Linear indices of the 49 playable squares, row-major from a1
PLAYABLE = tuple(index(c, r) for r in range(SIDE) for c in range(SIDE))
