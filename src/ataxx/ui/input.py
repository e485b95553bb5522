"""
Input handling for the Ataxx pygame window.
Processes mouse and keyboard events.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import pygame


class InputAction(Enum):
    """Types of input actions."""
    NONE = auto()
    QUIT = auto()
    SELECT_SQUARE = auto()
    PASS = auto()
    NEW_GAME = auto()
    UNDO = auto()


@dataclass
class InputEvent:
    """Represents a processed input event."""
    action: InputAction
    square: Optional[tuple] = None  # (col, row) for SELECT_SQUARE


class InputHandler:
    """Handles user input for the game."""

    def __init__(self, renderer):
        self.renderer = renderer

    def process_events(self) -> list[InputEvent]:
        """
        Process all pending pygame events.
        Returns list of InputEvents.
        """
        events = []

        for event in pygame.event.get():
            input_event = self._process_event(event)
            if input_event and input_event.action != InputAction.NONE:
                events.append(input_event)

        return events

    def _process_event(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Process a single pygame event."""
        if event.type == pygame.QUIT:
            return InputEvent(InputAction.QUIT)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            square = self.renderer.screen_to_board(*event.pos)
            if square:
                return InputEvent(InputAction.SELECT_SQUARE, square=square)

        elif event.type == pygame.KEYDOWN:
            key_map = {
                pygame.K_ESCAPE: InputAction.QUIT,
                pygame.K_n: InputAction.NEW_GAME,
                pygame.K_u: InputAction.UNDO,
                pygame.K_z: InputAction.UNDO,
                pygame.K_p: InputAction.PASS,
            }
            return InputEvent(key_map.get(event.key, InputAction.NONE))

        return None
