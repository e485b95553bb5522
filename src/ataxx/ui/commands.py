"""
Text command parsing for the terminal front end.
Turns one line of user input into a Command.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..game.board import RED, BLUE
from ..game.geometry import parse_square
from ..game.move import Move


class CommandAction(Enum):
    """Types of text commands."""
    NONE = auto()
    INVALID = auto()
    MOVE = auto()         # includes '-' (pass)
    BLOCK = auto()
    UNDO = auto()
    NEW_GAME = auto()
    AUTO = auto()         # hand a colour to the AI
    MANUAL = auto()       # hand a colour to a human
    SHOW_BOARD = auto()
    HELP = auto()
    QUIT = auto()


@dataclass
class Command:
    """A parsed line of input."""
    action: CommandAction
    move: Optional[Move] = None
    square: Optional[str] = None     # for BLOCK
    color: Optional[int] = None      # for AUTO / MANUAL
    message: str = ""                # for INVALID


HELP_TEXT = """Commands:
  a1-b2 or a1b2   move from a1 to b2
  -               pass (only when you cannot move)
  block c3        block c3 and its reflections (before the first move)
  undo            take back the last move
  new             start a new game
  auto red|blue   let the AI play a colour
  manual red|blue play a colour yourself
  board           show the board
  help            show this text
  quit            leave the game"""

_SIMPLE = {
    'undo': CommandAction.UNDO,
    'new': CommandAction.NEW_GAME,
    'board': CommandAction.SHOW_BOARD,
    'help': CommandAction.HELP,
    '?': CommandAction.HELP,
    'quit': CommandAction.QUIT,
    'exit': CommandAction.QUIT,
}

_COLORS = {'red': RED, 'blue': BLUE}


def parse_command(line: str) -> Command:
    """Parse LINE; malformed input yields an INVALID command, never an error."""
    words = line.strip().lower().split()
    if not words:
        return Command(CommandAction.NONE)

    head, args = words[0], words[1:]

    if head in _SIMPLE and not args:
        return Command(_SIMPLE[head])

    if head == 'block':
        if len(args) != 1:
            return Command(CommandAction.INVALID, message="usage: block <square>")
        try:
            parse_square(args[0])
        except ValueError as e:
            return Command(CommandAction.INVALID, message=str(e))
        return Command(CommandAction.BLOCK, square=args[0])

    if head in ('auto', 'manual'):
        if len(args) != 1 or args[0] not in _COLORS:
            return Command(CommandAction.INVALID, message=f"usage: {head} red|blue")
        action = CommandAction.AUTO if head == 'auto' else CommandAction.MANUAL
        return Command(action, color=_COLORS[args[0]])

    if len(words) == 1:
        try:
            return Command(CommandAction.MOVE, move=Move.parse(head))
        except ValueError as e:
            return Command(CommandAction.INVALID, message=str(e))

    return Command(CommandAction.INVALID, message=f"unknown command: {line.strip()}")
