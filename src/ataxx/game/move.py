"""
Move value type for Ataxx.

A move is a pass, an extend (clone a piece to a square at distance 1) or a
jump (relocate a piece to a square at distance 2). Text form is '-' for a
pass and 'a1-b2' otherwise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from .geometry import (
    COLUMNS, ROWS, chebyshev, in_bounds, index, parse_square, square_name
)


class MoveKind(Enum):
    """Move classification by distance."""
    PASS = "pass"
    EXTEND = "extend"  # Chebyshev distance 1
    JUMP = "jump"      # Chebyshev distance 2


@dataclass(frozen=True)
class Move:
    """
    Immutable move between two playable squares, or a pass.

    All four coordinates are None for the pass (Move.PASS). Otherwise both
    squares must be on the board and the destination at distance 1
    (extend) or 2 (jump); anything else raises ValueError.
    """
    col0: Optional[int] = None
    row0: Optional[int] = None
    col1: Optional[int] = None
    row1: Optional[int] = None

    PASS: ClassVar['Move']

    def __post_init__(self):
        coords = (self.col0, self.row0, self.col1, self.row1)
        if all(c is None for c in coords):
            return
        if any(c is None for c in coords):
            raise ValueError(f"incomplete move: {coords}")
        if not (in_bounds(self.col0, self.row0) and in_bounds(self.col1, self.row1)):
            raise ValueError(
                f"move off the board: ({self.col0}, {self.row0}) -> ({self.col1}, {self.row1})"
            )
        if chebyshev(*coords) not in (1, 2):
            raise ValueError(
                f"not an extend or jump: {square_name(self.col0, self.row0)}"
                f" -> {square_name(self.col1, self.row1)}"
            )

    @classmethod
    def create(cls, col0: int, row0: int, col1: int, row1: int) -> 'Move':
        """Build a non-pass move from column/row pairs."""
        return cls(col0, row0, col1, row1)

    @classmethod
    def parse(cls, text: str) -> 'Move':
        """Parse '-', 'a1b2' or 'a1-b2'."""
        text = text.strip().lower()
        if text == '-':
            return cls.PASS
        if len(text) == 5 and text[2] == '-':
            text = text[:2] + text[3:]
        if len(text) != 4:
            raise ValueError(f"invalid move: {text!r}")
        col0, row0 = parse_square(text[:2])
        col1, row1 = parse_square(text[2:])
        return cls.create(col0, row0, col1, row1)

    @property
    def kind(self) -> MoveKind:
        if self.col0 is None:
            return MoveKind.PASS
        if chebyshev(self.col0, self.row0, self.col1, self.row1) == 1:
            return MoveKind.EXTEND
        return MoveKind.JUMP

    def is_pass(self) -> bool:
        return self.col0 is None

    def is_extend(self) -> bool:
        return self.kind is MoveKind.EXTEND

    def is_jump(self) -> bool:
        return self.kind is MoveKind.JUMP

    def from_index(self) -> int:
        """Linear index of the origin square."""
        return index(self.col0, self.row0)

    def to_index(self) -> int:
        """Linear index of the destination square."""
        return index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass():
            return '-'
        return (f'{COLUMNS[self.col0]}{ROWS[self.row0]}-'
                f'{COLUMNS[self.col1]}{ROWS[self.row1]}')


Move.PASS = Move()
