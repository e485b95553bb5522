"""
Pygame renderer for Ataxx.
Redraws whenever the board notifies a change.
"""

import time
from typing import Optional

import pygame

from ..game.board import Board, RED, BLUE, BLOCKED
from ..game.geometry import COLUMNS, ROWS, SIDE
from ..game.state import GameState

# Window settings
WINDOW_WIDTH = 820
WINDOW_HEIGHT = 600

# Board settings
BOARD_MARGIN = 40
CELL_SIZE = 74
BOARD_AREA_SIZE = CELL_SIZE * SIDE
PIECE_RADIUS = CELL_SIZE // 2 - 8

# Panel settings
PANEL_X = BOARD_MARGIN + BOARD_AREA_SIZE + 30

# Colors
COLOR_BG = (40, 44, 52)
COLOR_CELL = (200, 200, 190)
COLOR_LINE = (50, 40, 30)
COLOR_BLOCKED = (80, 80, 80)
COLOR_RED_PIECE = (210, 50, 50)
COLOR_BLUE_PIECE = (50, 90, 210)
COLOR_SELECTED = (255, 200, 100)
COLOR_LAST_MOVE = (100, 200, 100)
COLOR_TEXT = (220, 220, 220)
COLOR_ERROR = (255, 100, 100)

PIECE_COLORS = {RED: COLOR_RED_PIECE, BLUE: COLOR_BLUE_PIECE}


class Renderer:
    """Handles rendering of the Ataxx game."""

    def __init__(self):
        pygame.init()
        pygame.display.set_caption("Ataxx")

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 24)

        self.selected: Optional[tuple] = None
        self.dirty = True

        self.error_message = ""
        self.error_message_time = 0.0

    def on_board_changed(self, board: Board):
        """Board notifier: schedule a redraw."""
        self.dirty = True

    def board_to_screen(self, col: int, row: int) -> tuple:
        """Top-left pixel of square (col, row); row 7 is drawn at the top."""
        x = BOARD_MARGIN + col * CELL_SIZE
        y = BOARD_MARGIN + (SIDE - 1 - row) * CELL_SIZE
        return (x, y)

    def screen_to_board(self, x: int, y: int) -> Optional[tuple]:
        """Convert screen coordinates to (col, row), or None off the board."""
        col = (x - BOARD_MARGIN) // CELL_SIZE
        row = SIDE - 1 - (y - BOARD_MARGIN) // CELL_SIZE
        if x >= BOARD_MARGIN and y >= BOARD_MARGIN and 0 <= col < SIDE and 0 <= row < SIDE:
            return (col, row)
        return None

    def select(self, square: Optional[tuple]):
        self.selected = square
        self.dirty = True

    def show_error(self, message: str):
        """Show an error message temporarily."""
        self.error_message = message
        self.error_message_time = time.time()
        self.dirty = True

    def render(self, state: GameState):
        """Render the complete game state if anything changed."""
        showing_error = self.error_message and time.time() - self.error_message_time < 2.0
        if not self.dirty and not showing_error:
            return
        self.screen.fill(COLOR_BG)
        self._render_board(state)
        self._render_panel(state)
        if showing_error:
            text = self.font_small.render(self.error_message, True, COLOR_ERROR)
            self.screen.blit(text, (BOARD_MARGIN, BOARD_MARGIN + BOARD_AREA_SIZE + 12))
        pygame.display.flip()
        self.dirty = bool(showing_error)

    def _render_board(self, state: GameState):
        board = state.board
        last = state.last_move
        for col in range(SIDE):
            for row in range(SIDE):
                x, y = self.board_to_screen(col, row)
                rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
                cell = board.get(col, row)
                fill = COLOR_BLOCKED if cell == BLOCKED else COLOR_CELL
                pygame.draw.rect(self.screen, fill, rect)
                pygame.draw.rect(self.screen, COLOR_LINE, rect, 1)

                if last is not None and not last.is_pass() and (col, row) == (last.col1, last.row1):
                    pygame.draw.rect(self.screen, COLOR_LAST_MOVE, rect, 3)
                if self.selected == (col, row):
                    pygame.draw.rect(self.screen, COLOR_SELECTED, rect, 4)

                if cell in PIECE_COLORS:
                    center = (x + CELL_SIZE // 2, y + CELL_SIZE // 2)
                    pygame.draw.circle(self.screen, PIECE_COLORS[cell], center, PIECE_RADIUS)

        # Legend
        for i in range(SIDE):
            letter = self.font_small.render(COLUMNS[i], True, COLOR_TEXT)
            x, _ = self.board_to_screen(i, 0)
            self.screen.blit(letter, (x + CELL_SIZE // 2 - 5, BOARD_MARGIN - 24))
            number = self.font_small.render(ROWS[i], True, COLOR_TEXT)
            _, y = self.board_to_screen(0, i)
            self.screen.blit(number, (BOARD_MARGIN - 22, y + CELL_SIZE // 2 - 8))

    def _render_panel(self, state: GameState):
        info = state.get_game_info()
        lines = [
            (self.font_large, "Ataxx"),
            (self.font_medium, f"Red: {info['pieces']['red']}"),
            (self.font_medium, f"Blue: {info['pieces']['blue']}"),
            (self.font_small, f"Turn: {state.get_current_player().name}"),
            (self.font_small, f"Moves: {info['move_count']}  Jumps: {info['jumps']}"),
            (self.font_small, f"AI time: {info['last_ai_time']:.2f}s"),
        ]
        if info['is_game_over']:
            lines.append((self.font_medium, state.result_message()))
        lines.append((self.font_small, "N new  U undo  P pass  Esc quit"))

        y = BOARD_MARGIN
        for font, text in lines:
            surface = font.render(text, True, COLOR_TEXT)
            self.screen.blit(surface, (PANEL_X, y))
            y += surface.get_height() + 14

    def tick(self, fps: int = 30):
        """Limit frame rate."""
        self.clock.tick(fps)

    def quit(self):
        pygame.quit()
