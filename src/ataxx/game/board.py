"""
Ataxx board: cell contents, piece counts, move history and undo log.

The 7x7 board lives inside an 11x11 array whose outer two rings are always
BLOCKED (see geometry.py), so neighbourhood scans never need bounds checks.
Every cell write made by a move is logged as (index, previous value) so the
most recent move can be reverted exactly.
"""

import logging
from typing import Callable, Optional, Union

from ..errors import IllegalBlockError, IllegalMoveError, UndoUnderflowError
from .geometry import (
    GRID_SIZE, PLAYABLE, ROWS, SIDE, in_bounds, index, neighbor, parse_square,
    square_name
)
from .move import Move

logger = logging.getLogger(__name__)

EMPTY = 0
RED = 1
BLUE = 2
BLOCKED = 3

# Winner value for a tied game
DRAW = EMPTY

# Consecutive jumps (no intervening extend) that end the game
JUMP_LIMIT = 25

COLOR_NAMES = {RED: 'Red', BLUE: 'Blue', EMPTY: 'Draw'}
SYMBOLS = {EMPTY: '-', RED: 'r', BLUE: 'b', BLOCKED: 'X'}

# Offsets of the 24 squares within distance 2 of a square (5x5 minus centre)
NEIGHBORHOOD = tuple(
    neighbor(0, dc, dr)
    for dr in range(-2, 3)
    for dc in range(-2, 3)
    if (dc, dr) != (0, 0)
)

# Offsets of the 8 squares adjacent to a square (the conversion ring)
ADJACENT = tuple(
    neighbor(0, dc, dr)
    for dr in range(-1, 2)
    for dc in range(-1, 2)
    if (dc, dr) != (0, 0)
)

_START_PIECES = (
    (0, 0, RED),   # a1
    (6, 6, RED),   # g7
    (0, 6, BLUE),  # a7
    (6, 0, BLUE),  # g1
)


def opposite(color: int) -> int:
    """Get the opposite player color."""
    return BLUE if color == RED else RED


def _nop(board: 'Board') -> None:
    pass


class Board:
    """
    Ataxx board with reversible moves.

    The undo log is a single stack. Each move (passes included) pushes a
    marker (None, streak-before-move) followed by one (index, prior value)
    entry per cell it overwrote.
    """

    def __init__(self):
        self._cells = [BLOCKED] * GRID_SIZE
        self._counts = {EMPTY: 0, RED: 0, BLUE: 0, BLOCKED: GRID_SIZE}
        self._notifier: Callable[['Board'], None] = _nop
        self.clear()

    def clear(self):
        """Reset to the starting position: four corner pieces, no blocks."""
        for sq in PLAYABLE:
            self._write(sq, EMPTY)
        for col, row, color in _START_PIECES:
            self._write(index(col, row), color)
        self._to_move = RED
        self._jumps = 0
        self._moves: list[Move] = []
        self._undo: list[tuple] = []
        self._winner: Optional[int] = None
        self._announce()

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        History and undo log are copied so the copy can undo moves made
        before it was taken. The notifier is not copied.
        """
        new_board = Board()
        new_board._cells = self._cells.copy()
        new_board._counts = self._counts.copy()
        new_board._to_move = self._to_move
        new_board._jumps = self._jumps
        new_board._moves = self._moves.copy()
        new_board._undo = self._undo.copy()
        new_board._winner = self._winner
        return new_board

    # ==================== ACCESSORS ====================

    def get(self, col: int, row: int) -> int:
        """Contents of (col, row); squares outside a1-g7 read as BLOCKED."""
        return self._cells[index(col, row)]

    def get_square(self, sq: int) -> int:
        """Contents of the square with linear index SQ."""
        return self._cells[sq]

    def num_pieces(self, color: int) -> int:
        """Number of cells holding COLOR (EMPTY and BLOCKED included)."""
        return self._counts[color]

    def red_pieces(self) -> int:
        return self._counts[RED]

    def blue_pieces(self) -> int:
        return self._counts[BLUE]

    def total_open(self) -> int:
        """Number of empty squares."""
        return self._counts[EMPTY]

    def whose_move(self) -> int:
        return self._to_move

    def num_moves(self) -> int:
        """Moves and passes made since the last clear."""
        return len(self._moves)

    def num_jumps(self) -> int:
        """Consecutive jumps since the last extend (or the start)."""
        return self._jumps

    def all_moves(self) -> list:
        return list(self._moves)

    @property
    def winner(self) -> Optional[int]:
        """RED, BLUE, DRAW, or None while the game is undecided."""
        return self._winner

    @property
    def game_over(self) -> bool:
        return self._winner is not None

    # ==================== LEGALITY ====================

    def legal_move(self, move: Optional[Move]) -> bool:
        """Return True iff MOVE is legal for the side to move."""
        if move is None:
            return False
        if move.is_pass():
            if self.can_move(self._to_move):
                return False
            return self._counts[self._to_move] > 0
        if not in_bounds(move.col1, move.row1):
            return False
        if abs(move.col1 - move.col0) > 2 or abs(move.row1 - move.row0) > 2:
            return False
        if self._cells[move.from_index()] != self._to_move:
            return False
        return self._cells[move.to_index()] == EMPTY

    def can_move(self, color: int) -> bool:
        """
        Return True iff COLOR has any extend or jump available, ignoring
        whose turn it is and whether the game is over.
        """
        if self._counts[EMPTY] == 0 or self._counts[color] == 0:
            return False
        cells = self._cells
        for sq in PLAYABLE:
            if cells[sq] == color:
                for offset in NEIGHBORHOOD:
                    if cells[sq + offset] == EMPTY:
                        return True
        return False

    # ==================== MOVES ====================

    def make_move(self, move: Union[Move, str]):
        """
        Apply MOVE for the side to move.

        Accepts a Move or its text form ('-', 'a1-b2'). Raises
        IllegalMoveError, leaving the board untouched, if the move is not
        legal.
        """
        if isinstance(move, str):
            try:
                move = Move.parse(move)
            except ValueError as exc:
                raise IllegalMoveError(str(exc), context={'move': move}) from exc

        if not self.legal_move(move):
            raise IllegalMoveError(
                f"Illegal move: {move}",
                context={'move': str(move), 'to_move': COLOR_NAMES[self._to_move]}
            )

        mover = self._to_move
        opponent = opposite(mover)
        self._undo.append((None, self._jumps))
        self._moves.append(move)

        if not move.is_pass():
            dest = move.to_index()
            if move.is_extend():
                self._set(dest, mover)
                self._jumps = 0
            else:
                self._set(move.from_index(), EMPTY)
                self._set(dest, mover)
                self._jumps += 1

            # Convert enemy pieces adjacent to the destination
            cells = self._cells
            for offset in ADJACENT:
                sq = dest + offset
                if cells[sq] == opponent:
                    self._set(sq, mover)

        self._to_move = opponent
        self.check_winner()
        self._announce()

    def undo(self):
        """Revert the most recent move or pass."""
        if not self._moves:
            raise UndoUnderflowError("No move to undo")

        self._moves.pop()
        self._to_move = opposite(self._to_move)
        self._winner = None

        while True:
            sq, prior = self._undo.pop()
            if sq is None:
                self._jumps = prior
                break
            self._write(sq, prior)

        self._announce()

    def check_winner(self) -> Optional[int]:
        """Set and return the winner if the game has ended."""
        to_move = self._to_move
        other = opposite(to_move)
        mobile = self.can_move(to_move)

        if not mobile and not self.can_move(other):
            self._winner = self._majority()
        elif self._jumps >= JUMP_LIMIT:
            self._winner = self._majority()
        elif not mobile and self._counts[to_move] == 0:
            # Side to move was wiped out
            self._winner = other
        return self._winner

    def _majority(self) -> int:
        red, blue = self._counts[RED], self._counts[BLUE]
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return DRAW

    # ==================== BLOCKS ====================

    @staticmethod
    def _reflections(col: int, row: int) -> set:
        """(col, row) and its mirror images across the middle row/column."""
        mirror_col = SIDE - 1 - col
        mirror_row = SIDE - 1 - row
        return {(col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)}

    def legal_block(self, col: int, row: int) -> bool:
        """Return True iff a block may be placed at (col, row)."""
        if self._moves or not in_bounds(col, row):
            return False
        return all(self.get(c, r) == EMPTY for c, r in self._reflections(col, row))

    def set_block(self, col: Union[int, str], row: Optional[int] = None) -> int:
        """
        Block (col, row) and its reflections; also accepts 'c3' text.

        Only allowed before the first move. Not undoable.
        Returns the number of squares blocked (1, 2 or 4).
        """
        if isinstance(col, str):
            try:
                col, row = parse_square(col)
            except ValueError as exc:
                raise IllegalBlockError(str(exc), context={'square': col}) from exc

        if not self.legal_block(col, row):
            name = square_name(col, row) if in_bounds(col, row) else f'({col}, {row})'
            raise IllegalBlockError(
                f"Illegal block placement at {name}",
                context={'moves_made': len(self._moves)}
            )

        squares = self._reflections(col, row)
        for c, r in squares:
            self._write(index(c, r), BLOCKED)
        logger.info(f"Blocked {', '.join(sorted(square_name(c, r) for c, r in squares))}")

        self.check_winner()
        self._announce()
        return len(squares)

    # ==================== CELL WRITES ====================

    def _set(self, sq: int, value: int):
        """Undoable write of VALUE to square SQ."""
        self._undo.append((sq, self._cells[sq]))
        self._write(sq, value)

    def _write(self, sq: int, value: int):
        """Unrecorded write that keeps the counts in step."""
        self._counts[self._cells[sq]] -= 1
        self._counts[value] += 1
        self._cells[sq] = value

    # ==================== NOTIFICATION ====================

    def set_notifier(self, notify: Optional[Callable[['Board'], None]]):
        """Replace the change observer; None installs a no-op."""
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    # ==================== DISPLAY ====================

    def to_string(self, legend: bool = False) -> str:
        """
        Text depiction, row 7 at the top. With LEGEND, row numbers on the
        left and column letters underneath.
        """
        lines = []
        for row in range(SIDE - 1, -1, -1):
            prefix = ROWS[row] if legend else ''
            cells = ''.join(f' {SYMBOLS[self.get(col, row)]}' for col in range(SIDE))
            lines.append(f'{prefix} {cells}')
        if legend:
            lines.append('   a b c d e f g')
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (f'Board(red={self.red_pieces()}, blue={self.blue_pieces()}, '
                f'to_move={COLOR_NAMES[self._to_move]}, moves={len(self._moves)})')

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(tuple(self._cells))
