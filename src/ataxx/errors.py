"""
Exception hierarchy for the Ataxx engine.

All custom exceptions inherit from AtaxxError so callers can catch every
engine failure with a single clause.

Usage:
    from ataxx.errors import IllegalMoveError

    try:
        board.make_move(move)
    except IllegalMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any, Optional

__all__ = [
    "AtaxxError",
    "ConfigurationError",
    "IllegalBlockError",
    "IllegalMoveError",
    "InvalidStateError",
    "RulesViolationError",
    "UndoUnderflowError",
]


class AtaxxError(Exception):
    """Base exception for all Ataxx errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "ATAXX_ERROR"

    def __init__(self, message: str, code: Optional[str] = None,
                 context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or display."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class RulesViolationError(AtaxxError):
    """Operation rejected by the game rules."""
    code: str = "RULES_VIOLATION"


class IllegalMoveError(RulesViolationError):
    """Move that is not legal on the current board.

    Raised before any part of the board is modified.
    """
    code: str = "ILLEGAL_MOVE"


class IllegalBlockError(RulesViolationError):
    """Block placement on an occupied cell or after the game has started."""
    code: str = "ILLEGAL_BLOCK"


class InvalidStateError(AtaxxError):
    """Operation called in a state where its precondition cannot hold."""
    code: str = "INVALID_STATE"


class UndoUnderflowError(InvalidStateError):
    """Undo requested with an empty move history."""
    code: str = "UNDO_UNDERFLOW"


class ConfigurationError(AtaxxError):
    """Settings file is unreadable or holds invalid values."""
    code: str = "CONFIGURATION_ERROR"
