#!/usr/bin/env python3
"""
Ataxx - AI vs Human Board Game
Main entry point: load settings, wire players, run the text loop or the
pygame window.
"""

import logging
import sys
from pathlib import Path

from ataxx.config import load_settings
from ataxx.errors import ConfigurationError
from ataxx.game.board import COLOR_NAMES
from ataxx.game.move import Move
from ataxx.game.state import GameState, GameMode, PlayerType
from ataxx.ui.commands import CommandAction, HELP_TEXT, parse_command
from ataxx.utils.cli import apply_overrides, parse_args
from ataxx.utils.logger import setup_logging

logger = logging.getLogger("ataxx")

PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path) -> Path:
    """Resolve a repo-relative path when invoked from another directory."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


class TextGame:
    """Terminal game loop."""

    def __init__(self, state: GameState):
        self.state = state
        self.running = True

    def run(self):
        print(self.state.board.to_string(legend=True))
        while self.running:
            if self.state.is_ai_turn():
                color = self.state.current_turn
                move = self.state.ai_move()
                print(f"{COLOR_NAMES[color]} (AI) plays {move}")
                print(self.state.board.to_string(legend=True))
                self._report_end()
                continue

            try:
                line = input(f"{self.state.get_current_player().name}> ")
            except EOFError:
                break
            self._handle(parse_command(line))

    def _handle(self, command):
        action = command.action
        if action == CommandAction.QUIT:
            self.running = False
        elif action == CommandAction.HELP:
            print(HELP_TEXT)
        elif action == CommandAction.SHOW_BOARD:
            print(self.state.board.to_string(legend=True))
        elif action == CommandAction.INVALID:
            print(f"Error: {command.message}")
        elif action == CommandAction.MOVE:
            if self.state.make_move(command.move):
                print(self.state.board.to_string(legend=True))
                self._report_end()
            else:
                print(f"Illegal move: {command.move}")
        elif action == CommandAction.BLOCK:
            if self.state.place_block(command.square):
                print(self.state.board.to_string(legend=True))
            else:
                print(f"Illegal block: {command.square}")
        elif action == CommandAction.UNDO:
            if not self.state.undo_move():
                print("Nothing to undo.")
        elif action == CommandAction.NEW_GAME:
            self.state.reset()
            print(self.state.board.to_string(legend=True))
        elif action == CommandAction.AUTO:
            self.state.set_player(command.color, PlayerType.AI)
        elif action == CommandAction.MANUAL:
            self.state.set_player(command.color, PlayerType.HUMAN)

    def _report_end(self):
        if self.state.is_game_over:
            print(self.state.result_message())
            # Keep the loop alive for 'new', 'undo' or 'quit'
            for color in self.state.players:
                self.state.set_player(color, PlayerType.HUMAN)


class AtaxxGame:
    """Pygame game controller."""

    def __init__(self, state: GameState):
        from ataxx.ui.input import InputHandler
        from ataxx.ui.renderer import Renderer

        self.state = state
        self.renderer = Renderer()
        self.input_handler = InputHandler(self.renderer)
        self.state.board.set_notifier(self.renderer.on_board_changed)
        self.running = True

    def run(self):
        """Main game loop."""
        from ataxx.ui.input import InputAction

        while self.running:
            for event in self.input_handler.process_events():
                if event.action == InputAction.QUIT:
                    self.running = False
                elif event.action == InputAction.NEW_GAME:
                    self.state.reset()
                    self.renderer.select(None)
                elif event.action == InputAction.UNDO:
                    self.state.undo_move()
                    self.renderer.select(None)
                elif event.action == InputAction.PASS and self.state.is_human_turn():
                    self._try_move(Move.PASS)
                elif event.action == InputAction.SELECT_SQUARE and self.state.is_human_turn():
                    self._select(event.square)

            self.renderer.render(self.state)

            if self.state.is_ai_turn():
                self.state.ai_move()

            self.renderer.tick(30)

        self.renderer.quit()

    def _select(self, square: tuple):
        """First click picks an origin, second click a destination."""
        col, row = square
        origin = self.renderer.selected
        if origin is None:
            if self.state.board.get(col, row) == self.state.current_turn:
                self.renderer.select(square)
            return
        self.renderer.select(None)
        try:
            move = Move.create(origin[0], origin[1], col, row)
        except ValueError as e:
            self.renderer.show_error(str(e))
            return
        self._try_move(move)

    def _try_move(self, move: Move):
        if not self.state.make_move(move):
            self.renderer.show_error(f"Illegal move: {move}")


def main(argv=None):
    """Entry point."""
    args = parse_args(argv)
    try:
        settings = apply_overrides(load_settings(resolve_project_path(args.settings)), args)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(2)

    setup_logging(settings.log_level)
    state = GameState(GameMode(settings.mode), ai_depth=settings.search_depth, seed=settings.seed)
    logger.info(f"Starting {settings.mode} game, search depth {settings.search_depth}")

    try:
        game = AtaxxGame(state) if settings.gui else TextGame(state)
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        sys.exit(0)


if __name__ == "__main__":
    main()
