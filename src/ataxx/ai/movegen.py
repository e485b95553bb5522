"""
Move generation for the Ataxx AI.

Moves come out in board-scan order and are never sorted, so the search is
reproducible from the position alone.
"""

from ..game.board import Board
from ..game.geometry import SIDE, in_bounds
from ..game.move import Move


def legal_moves(board: Board) -> list:
    """
    All legal non-pass moves for the side to move.

    Origins are scanned column a..g, and within a column row 7..1.
    For each origin, destinations run column c-2..c+2, row r+2..r-2.
    """
    color = board.whose_move()
    moves = []

    for col in range(SIDE):
        for row in range(SIDE - 1, -1, -1):
            if board.get(col, row) != color:
                continue
            for col1 in range(col - 2, col + 3):
                for row1 in range(row + 2, row - 3, -1):
                    if (col1, row1) == (col, row) or not in_bounds(col1, row1):
                        continue
                    move = Move.create(col, row, col1, row1)
                    if board.legal_move(move):
                        moves.append(move)

    return moves


def has_moves(board: Board) -> bool:
    """Check if the side to move has any non-pass move."""
    return board.can_move(board.whose_move())
