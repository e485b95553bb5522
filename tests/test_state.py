"""Tests for game session management."""

from ataxx.game.board import Board, BLUE, JUMP_LIMIT, RED
from ataxx.game.move import Move
from ataxx.game.state import GameMode, GameState, MoveRecord, PlayerType


def play_jump_limit(state):
    for i in range(JUMP_LIMIT):
        shuffle = ('a1-a3', 'a3-a1') if i % 2 == 0 else ('g1-g3', 'g3-g1')
        assert state.make_move(shuffle[(i // 2) % 2])


class TestPlayers:
    """Test cases for player setup per mode."""

    def test_pve(self):
        state = GameState(GameMode.PVE, ai_depth=1)
        assert state.players[RED].player_type == PlayerType.HUMAN
        assert state.players[BLUE].player_type == PlayerType.AI
        assert state.players[RED].name == "Red (Human)"
        assert state.players[BLUE].name == "Blue (AI)"
        assert state.is_human_turn()
        assert not state.is_ai_turn()

    def test_pvp_and_eve(self):
        pvp = GameState(GameMode.PVP)
        assert all(p.player_type == PlayerType.HUMAN for p in pvp.players.values())
        eve = GameState(GameMode.EVE)
        assert all(p.player_type == PlayerType.AI for p in eve.players.values())
        assert eve.is_ai_turn()

    def test_set_player(self):
        state = GameState(GameMode.PVP)
        state.set_player(RED, PlayerType.AI)
        assert state.is_ai_turn()
        assert state.get_current_player().name == "Red (AI)"


class TestMoves:
    """Test cases for moves made through the session."""

    def test_make_move_records_history(self):
        state = GameState(GameMode.PVP)
        assert state.make_move('a1-a2', thinking_time=0.5)
        assert state.current_turn == BLUE
        assert state.get_move_count() == 1
        assert state.move_history[0] == MoveRecord(Move.parse('a1-a2'), RED, 0.5)
        assert state.last_move == Move.parse('a1-a2')

    def test_illegal_move_rejected(self):
        state = GameState(GameMode.PVP)
        assert not state.make_move('a1-a4')
        assert not state.make_move('a7-a6')
        assert not state.make_move(Move.PASS)
        assert state.get_move_count() == 0
        assert state.board == Board()

    def test_ai_reply(self):
        state = GameState(GameMode.PVE, ai_depth=1)
        state.make_move('a1-a2')
        assert state.is_ai_turn()

        move = state.ai_move()
        assert move is not None
        assert state.get_move_count() == 2
        assert state.move_history[-1].color == BLUE
        assert state.move_history[-1].move == move
        assert state.current_turn == RED
        assert state.last_ai_time >= 0.0

    def test_undo(self):
        state = GameState(GameMode.PVP)
        assert not state.undo_move()
        state.make_move('a1-a2')
        state.make_move('a7-a6')
        assert state.undo_move()
        assert state.last_move == Move.parse('a1-a2')
        assert state.undo_move()
        assert state.last_move is None
        assert state.board == Board()

    def test_game_over(self):
        state = GameState(GameMode.PVP)
        assert state.result_message() == ""
        play_jump_limit(state)
        assert state.is_game_over
        assert state.result_message() == "Draw."
        assert not state.make_move('g3-g1')
        assert not state.is_human_turn()
        assert state.ai_move() is None

    def test_valid_moves(self):
        state = GameState()
        assert len(state.get_valid_moves()) == 16


class TestBlocksAndReset:
    """Test cases for blocks and new games."""

    def test_place_block(self):
        state = GameState(GameMode.PVP)
        assert state.place_block('d4')
        assert not state.place_block('d4')
        assert not state.place_block('a1')
        state.make_move('a1-a2')
        assert not state.place_block('c3')

    def test_reset_keeps_observer(self):
        state = GameState(GameMode.PVP)
        calls = []
        state.board.set_notifier(calls.append)
        board = state.board
        state.make_move('a1-a2')
        state.reset(GameMode.EVE)

        assert state.board is board
        assert state.board == Board()
        assert state.get_move_count() == 0
        assert state.mode == GameMode.EVE
        assert state.is_ai_turn()
        assert len(calls) == 3


class TestGameInfo:
    """Test cases for status reporting."""

    def test_get_game_info(self):
        state = GameState(GameMode.PVP)
        state.make_move('a1-a3')
        info = state.get_game_info()
        assert info['mode'] == 'pvp'
        assert info['turn'] == 'Blue'
        assert info['move_count'] == 1
        assert info['pieces'] == {'red': 2, 'blue': 2}
        assert info['jumps'] == 1
        assert info['is_game_over'] is False
        assert info['winner'] is None
        assert info['last_move'] == 'a1-a3'

    def test_str(self):
        state = GameState(GameMode.PVP)
        text = str(state)
        assert "Mode: pvp" in text
        assert "Turn: Red (Move #1)" in text
        assert "Pieces - Red: 2, Blue: 2" in text

        play_jump_limit(state)
        assert "Game Over! Draw." in str(state)
        assert state.get_game_info()['winner'] == 'Draw'
