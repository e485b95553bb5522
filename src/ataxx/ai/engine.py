"""
AI Engine for Ataxx.
Implements fixed-depth minimax with alpha-beta pruning.

A single recursive routine serves both players: SENSE is +1 when the side
to move is maximizing (Red) and -1 when it is minimizing (Blue), and the
alpha/beta window is shared between the two.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from ..game.board import Board, RED, COLOR_NAMES
from ..game.move import Move
from .heuristic import Heuristic
from .movegen import has_moves, legal_moves

logger = logging.getLogger(__name__)


@dataclass
class AIDebugInfo:
    """Debug information from AI search."""
    thinking_time: float = 0.0
    search_depth: int = 0
    nodes_evaluated: int = 0
    nodes_per_second: float = 0.0
    best_move: Optional[Move] = None
    best_score: int = 0
    cutoffs: int = 0
    forced_passes: int = 0


class AIEngine:
    """
    Ataxx AI using minimax with alpha-beta pruning.

    The engine searches a private copy of the board, making and undoing
    moves in place; the caller's board is never touched.
    """

    # Score bounds
    INF = 10_000_000
    WINNING_VALUE = Heuristic.WIN_SCORE

    DEFAULT_MAX_DEPTH = 4

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, seed: Optional[int] = None):
        self.heuristic = Heuristic()
        self.max_depth = max_depth

        # Not consulted by the search; identical seeds give identical engines
        self.random = random.Random(seed)

        # Search state
        self.node_count = 0
        self.cutoffs = 0
        self.forced_passes = 0
        self._last_found_move: Optional[Move] = None

        # Debug info
        self.debug_info = AIDebugInfo()

    def set_difficulty(self, max_depth: int):
        """Set AI search depth."""
        self.max_depth = max_depth

    def get_move(self, board: Board) -> Move:
        """
        Get the best move for the side to move on BOARD.

        Returns Move.PASS without searching if that side cannot move.
        """
        if not has_moves(board):
            return Move.PASS

        start_time = time.time()
        self.node_count = 0
        self.cutoffs = 0
        self.forced_passes = 0
        self._last_found_move = None

        work = board.copy()
        sense = 1 if work.whose_move() == RED else -1
        score = self._min_max(work, self.max_depth, True, sense, -self.INF, self.INF)
        best_move = self._last_found_move

        # Fallback: a decided board is not searched, take any legal move
        if best_move is None:
            moves = legal_moves(board)
            best_move = moves[0] if moves else Move.PASS

        elapsed = time.time() - start_time
        self.debug_info = AIDebugInfo(
            thinking_time=elapsed,
            search_depth=self.max_depth,
            nodes_evaluated=self.node_count,
            nodes_per_second=self.node_count / elapsed if elapsed > 0 else 0,
            best_move=best_move,
            best_score=score,
            cutoffs=self.cutoffs,
            forced_passes=self.forced_passes,
        )
        logger.debug(
            f"{COLOR_NAMES[board.whose_move()]} plays {best_move} "
            f"(score={score}, nodes={self.node_count}, cutoffs={self.cutoffs}, "
            f"time={elapsed:.3f}s)"
        )
        return best_move

    def choose_move(self, board: Board) -> Move:
        """Alias of get_move()."""
        return self.get_move(board)

    def _min_max(self, board: Board, depth: int, save_move: bool,
                 sense: int, alpha: int, beta: int) -> int:
        """
        Return the value of BOARD searched DEPTH plies deep.

        With SENSE == 1 the best move has maximal value, with SENSE == -1
        minimal value. The search stops at a node once alpha >= beta.
        The best move found is stored in _last_found_move iff SAVE_MOVE.
        """
        self.node_count += 1

        # WINNING_VALUE + depth ranks wins found nearer the root higher
        if depth == 0 or board.winner is not None:
            return self.heuristic.evaluate(board, self.WINNING_VALUE + depth)

        moves = legal_moves(board)

        if not moves:
            # Forced pass: the game is not over, the opponent moves again
            self.forced_passes += 1
            board.make_move(Move.PASS)
            score = self._min_max(board, depth - 1, False, -sense, alpha, beta)
            board.undo()
            if save_move:
                self._last_found_move = Move.PASS
            return score

        best_move = None
        best_score = -sense * self.INF

        for move in moves:
            board.make_move(move)
            score = self._min_max(board, depth - 1, False, -sense, alpha, beta)
            board.undo()

            if sense * score > sense * best_score:
                best_score = score
                best_move = move
                if sense == 1:
                    alpha = max(alpha, score)
                else:
                    beta = min(beta, score)
                if alpha >= beta:
                    self.cutoffs += 1
                    break

        if save_move:
            self._last_found_move = best_move
        return best_score

    def get_debug_info(self) -> dict:
        """Get debug information as dictionary."""
        return {
            'thinking_time': self.debug_info.thinking_time,
            'search_depth': self.debug_info.search_depth,
            'nodes_evaluated': self.debug_info.nodes_evaluated,
            'nodes_per_second': self.debug_info.nodes_per_second,
            'best_move': str(self.debug_info.best_move) if self.debug_info.best_move else None,
            'best_score': self.debug_info.best_score,
            'cutoffs': self.debug_info.cutoffs,
            'forced_passes': self.debug_info.forced_passes,
        }
