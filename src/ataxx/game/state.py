"""
Game session management for Ataxx.
Tracks which colours are played by the AI, applies moves and blocks, and
reports game status to the front ends.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..ai.engine import AIEngine
from ..ai.movegen import legal_moves
from ..errors import IllegalBlockError, IllegalMoveError
from .board import Board, RED, BLUE, DRAW, COLOR_NAMES
from .move import Move

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Game modes."""
    PVP = "pvp"           # Player vs Player (hotseat)
    PVE = "pve"           # Red human vs Blue AI
    EVE = "eve"           # AI vs AI


class PlayerType(Enum):
    """Player types."""
    HUMAN = "human"
    AI = "ai"


@dataclass
class Player:
    """Player information."""
    color: int
    player_type: PlayerType
    name: str = ""

    def __post_init__(self):
        if not self.name:
            type_name = "Human" if self.player_type == PlayerType.HUMAN else "AI"
            self.name = f"{COLOR_NAMES[self.color]} ({type_name})"


@dataclass
class MoveRecord:
    """Record of a single move."""
    move: Move
    color: int
    thinking_time: float = 0.0


class GameState:
    """
    Manages a complete Ataxx game on a single authoritative board.
    """

    def __init__(self, mode: GameMode = GameMode.PVE,
                 ai_depth: int = AIEngine.DEFAULT_MAX_DEPTH,
                 seed: Optional[int] = None):
        self.board = Board()
        self.mode = mode
        self.ai_engine = AIEngine(max_depth=ai_depth, seed=seed)
        self.move_history: list[MoveRecord] = []
        self.last_move: Optional[Move] = None

        # AI timing
        self.ai_thinking = False
        self.ai_start_time = 0.0
        self.last_ai_time = 0.0

        self._setup_players(mode)

    def _setup_players(self, mode: GameMode):
        """Setup players based on game mode."""
        if mode == GameMode.PVP:
            self.players = {
                RED: Player(RED, PlayerType.HUMAN),
                BLUE: Player(BLUE, PlayerType.HUMAN),
            }
        elif mode == GameMode.PVE:
            self.players = {
                RED: Player(RED, PlayerType.HUMAN),
                BLUE: Player(BLUE, PlayerType.AI),
            }
        else:  # EVE
            self.players = {
                RED: Player(RED, PlayerType.AI),
                BLUE: Player(BLUE, PlayerType.AI),
            }

    def set_player(self, color: int, player_type: PlayerType):
        """Hand COLOR to a human or to the AI."""
        self.players[color] = Player(color, player_type)

    def reset(self, mode: Optional[GameMode] = None):
        """Reset the game to the starting position."""
        if mode is not None:
            self.mode = mode
        # Clear in place so an observer on the board stays registered
        self.board.clear()
        self.move_history = []
        self.last_move = None
        self.ai_thinking = False
        self.last_ai_time = 0.0
        self._setup_players(self.mode)

    @property
    def current_turn(self) -> int:
        return self.board.whose_move()

    @property
    def winner(self) -> Optional[int]:
        return self.board.winner

    @property
    def is_game_over(self) -> bool:
        return self.board.game_over

    def get_current_player(self) -> Player:
        """Get the current player."""
        return self.players[self.current_turn]

    def is_ai_turn(self) -> bool:
        """Check if it's AI's turn."""
        return (not self.is_game_over and
                self.get_current_player().player_type == PlayerType.AI)

    def is_human_turn(self) -> bool:
        """Check if it's human's turn."""
        return (not self.is_game_over and
                self.get_current_player().player_type == PlayerType.HUMAN)

    def make_move(self, move: Union[Move, str], thinking_time: float = 0.0) -> bool:
        """
        Attempt a move for the side to move.
        Returns True if the move was made.
        """
        if self.is_game_over:
            return False

        color = self.current_turn
        try:
            self.board.make_move(move)
        except IllegalMoveError as e:
            logger.warning(f"Rejected move from {COLOR_NAMES[color]}: {e}")
            return False

        applied = self.board.all_moves()[-1]
        self.move_history.append(MoveRecord(applied, color, thinking_time))
        self.last_move = applied

        if self.is_game_over:
            logger.info(f"Game over after {len(self.move_history)} moves: {self.result_message()}")
        return True

    def place_block(self, square: str) -> bool:
        """Block SQUARE and its reflections. Only before the first move."""
        try:
            self.board.set_block(square)
        except IllegalBlockError as e:
            logger.warning(f"Rejected block: {e}")
            return False
        return True

    def ai_move(self) -> Optional[Move]:
        """Let the AI choose and play a move for the side to move."""
        if self.is_game_over:
            return None

        self.start_ai_timer()
        move = self.ai_engine.get_move(self.board)
        self.stop_ai_timer()

        self.make_move(move, self.last_ai_time)
        return move

    def undo_move(self) -> bool:
        """Undo the last move."""
        if not self.move_history:
            return False

        self.board.undo()
        self.move_history.pop()
        self.last_move = self.move_history[-1].move if self.move_history else None
        return True

    def get_valid_moves(self) -> list:
        """Get all legal non-pass moves for the side to move."""
        return legal_moves(self.board)

    def start_ai_timer(self):
        """Start timing AI computation."""
        self.ai_thinking = True
        self.ai_start_time = time.time()

    def stop_ai_timer(self):
        """Stop timing AI computation."""
        self.ai_thinking = False
        self.last_ai_time = time.time() - self.ai_start_time

    def get_move_count(self) -> int:
        """Get total number of moves made."""
        return len(self.move_history)

    def result_message(self) -> str:
        """Describe the outcome; empty while the game is running."""
        if self.winner is None:
            return ""
        if self.winner == DRAW:
            return "Draw."
        return f"{COLOR_NAMES[self.winner]} wins."

    def get_game_info(self) -> dict:
        """Get current game information."""
        return {
            'mode': self.mode.value,
            'turn': COLOR_NAMES[self.current_turn],
            'move_count': self.get_move_count(),
            'pieces': {
                'red': self.board.red_pieces(),
                'blue': self.board.blue_pieces(),
            },
            'jumps': self.board.num_jumps(),
            'is_game_over': self.is_game_over,
            'winner': None if self.winner is None else COLOR_NAMES[self.winner],
            'last_move': str(self.last_move) if self.last_move else None,
            'last_ai_time': self.last_ai_time,
        }

    def __str__(self) -> str:
        info = self.get_game_info()
        lines = [
            f"Mode: {info['mode']}",
            f"Turn: {info['turn']} (Move #{info['move_count'] + 1})",
            f"Pieces - Red: {info['pieces']['red']}, Blue: {info['pieces']['blue']}",
        ]
        if info['is_game_over']:
            lines.append(f"Game Over! {self.result_message()}")
        return '\n'.join(lines)
