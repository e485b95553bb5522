"""
Static evaluation for the Ataxx AI.
Scores are from Red's point of view: positive favours Red.
"""

from ..game.board import Board, RED, BLUE


class Heuristic:
    """
    Material evaluation with win/loss detection.

    Decided games score +/- a winning value; the search passes in a value
    that grows with remaining depth so faster wins rank higher.
    """

    WIN_SCORE = 1_000_000

    def evaluate(self, board: Board, winning_value: int = WIN_SCORE) -> int:
        """Score BOARD; 0 for a draw, red - blue while undecided."""
        winner = board.winner
        if winner is not None:
            if winner == RED:
                return winning_value
            if winner == BLUE:
                return -winning_value
            return 0
        return board.red_pieces() - board.blue_pieces()
