from .board import Board, EMPTY, RED, BLUE, BLOCKED, DRAW, JUMP_LIMIT, opposite
from .move import Move, MoveKind

__all__ = [
    'Board', 'Move', 'MoveKind',
    'EMPTY', 'RED', 'BLUE', 'BLOCKED', 'DRAW', 'JUMP_LIMIT', 'opposite',
]
