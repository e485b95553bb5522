"""Tests for text command parsing."""

import pytest

from ataxx.game.board import BLUE, RED
from ataxx.game.move import Move
from ataxx.ui.commands import CommandAction, parse_command


class TestParseCommand:
    """Test cases for parse_command."""

    def test_blank_line(self):
        assert parse_command('').action == CommandAction.NONE
        assert parse_command('   ').action == CommandAction.NONE

    @pytest.mark.parametrize('line, action', [
        ('undo', CommandAction.UNDO),
        ('new', CommandAction.NEW_GAME),
        ('board', CommandAction.SHOW_BOARD),
        ('help', CommandAction.HELP),
        ('?', CommandAction.HELP),
        ('quit', CommandAction.QUIT),
        ('EXIT', CommandAction.QUIT),
    ])
    def test_simple_commands(self, line, action):
        assert parse_command(line).action == action

    def test_moves(self):
        command = parse_command(' a1-b2 ')
        assert command.action == CommandAction.MOVE
        assert command.move == Move.parse('a1-b2')
        assert parse_command('A1C3').move == Move.parse('a1-c3')
        assert parse_command('-').move is Move.PASS

    def test_bad_move(self):
        command = parse_command('a1-a5')
        assert command.action == CommandAction.INVALID
        assert command.message

    def test_block(self):
        command = parse_command('block c3')
        assert command.action == CommandAction.BLOCK
        assert command.square == 'c3'
        assert parse_command('block').action == CommandAction.INVALID
        assert parse_command('block x9').action == CommandAction.INVALID

    def test_auto_and_manual(self):
        command = parse_command('auto blue')
        assert command.action == CommandAction.AUTO
        assert command.color == BLUE
        command = parse_command('manual Red')
        assert command.action == CommandAction.MANUAL
        assert command.color == RED
        assert parse_command('auto green').action == CommandAction.INVALID

    def test_unknown(self):
        command = parse_command('fly to the moon')
        assert command.action == CommandAction.INVALID
        assert 'unknown command' in command.message
        assert parse_command('undo 2').action == CommandAction.INVALID
