"""Tests for move generation, evaluation and the alpha-beta search."""

import pytest

from ataxx.ai.engine import AIEngine
from ataxx.ai.heuristic import Heuristic
from ataxx.ai.movegen import has_moves, legal_moves
from ataxx.game.board import Board, BLOCKED, BLUE, EMPTY, JUMP_LIMIT, RED
from ataxx.game.geometry import PLAYABLE, index, parse_square
from ataxx.game.move import Move


def make_position(red=(), blue=(), blocked=(), to_move=RED):
    board = Board()
    for sq in PLAYABLE:
        board._write(sq, EMPTY)
    for names, value in ((red, RED), (blue, BLUE), (blocked, BLOCKED)):
        for name in names:
            board._write(index(*parse_square(name)), value)
    board._to_move = to_move
    return board


AROUND_A1 = ['b1', 'c1', 'a2', 'b2', 'c2', 'a3', 'b3', 'c3']
AROUND_G7 = ['e7', 'f7', 'e6', 'f6', 'g6', 'e5', 'f5', 'g5']


def jump_limit_board():
    """Start position after JUMP_LIMIT non-converting jumps (a drawn game)."""
    board = Board()
    for i in range(JUMP_LIMIT):
        shuffle = ('a1-a3', 'a3-a1') if i % 2 == 0 else ('g1-g3', 'g3-g1')
        board.make_move(shuffle[(i // 2) % 2])
    return board


class TestMoveGeneration:
    """Test cases for legal move enumeration."""

    def test_start_position_order(self):
        moves = [str(m) for m in legal_moves(Board())]
        assert moves == [
            'a1-a3', 'a1-a2', 'a1-b3', 'a1-b2', 'a1-b1', 'a1-c3', 'a1-c2', 'a1-c1',
            'g7-e7', 'g7-e6', 'g7-e5', 'g7-f7', 'g7-f6', 'g7-f5', 'g7-g6', 'g7-g5',
        ]

    def test_all_generated_moves_are_legal(self):
        board = Board()
        board.make_move('a1-b2')
        moves = legal_moves(board)
        assert moves
        assert all(board.legal_move(m) for m in moves)
        assert all(board.get(m.col0, m.row0) == BLUE for m in moves)

    def test_no_moves_when_surrounded(self):
        board = make_position(red=['a1'], blue=['g7'], blocked=AROUND_A1)
        assert legal_moves(board) == []
        assert not has_moves(board)
        assert has_moves(Board())


class TestHeuristic:
    """Test cases for static evaluation."""

    def test_material(self):
        heuristic = Heuristic()
        board = Board()
        assert heuristic.evaluate(board) == 0
        board.make_move('a1-a2')
        assert heuristic.evaluate(board) == 1

    def test_decided_games(self):
        heuristic = Heuristic()
        board = make_position(red=['a1'], blue=['c1'])
        board.make_move('a1-b1')
        assert heuristic.evaluate(board, 500) == 500

        board = make_position(red=['c1'], blue=['a1'], to_move=BLUE)
        board.make_move('a1-b1')
        assert heuristic.evaluate(board, 500) == -500

        assert heuristic.evaluate(jump_limit_board(), 500) == 0


class TestAIEngine:
    """Test cases for AI move selection."""

    def test_depth_one_prefers_extend(self):
        """With one ply, growing beats jumping."""
        engine = AIEngine(max_depth=1)
        move = engine.get_move(Board())
        assert move == Move.parse('a1-a2')
        assert move.is_extend()

    def test_returns_pass_when_immobile(self):
        board = make_position(red=['a1'], blue=['g7'], blocked=AROUND_A1)
        assert AIEngine(max_depth=3).get_move(board) is Move.PASS

    def test_search_leaves_board_untouched(self):
        board = Board()
        board.make_move('a1-b2')
        board.make_move('g1-f2')
        snapshot = board.copy()
        calls = []
        board.set_notifier(calls.append)

        AIEngine(max_depth=3).get_move(board)

        assert board == snapshot
        assert board.all_moves() == snapshot.all_moves()
        assert board.whose_move() == snapshot.whose_move()
        assert board.num_jumps() == snapshot.num_jumps()
        assert len(calls) == 1

    def test_moves_are_legal_in_self_play(self):
        board = Board()
        engine = AIEngine(max_depth=2)
        for _ in range(10):
            if board.game_over:
                break
            move = engine.get_move(board)
            assert board.legal_move(move)
            board.make_move(move)

    def test_deterministic(self):
        board = Board()
        board.make_move('a1-a2')
        first = AIEngine(max_depth=3, seed=1).get_move(board)
        second = AIEngine(max_depth=3, seed=99).get_move(board)
        assert first == second
        assert AIEngine(max_depth=3, seed=1).get_move(board) == first

    @pytest.mark.parametrize('depth', [1, 3])
    def test_takes_winning_move_for_red(self, depth):
        """Only the jumps to c1 and c2 land next to d1."""
        board = make_position(red=['a1'], blue=['d1'])
        move = AIEngine(max_depth=depth).get_move(board)
        board.make_move(move)
        assert board.winner == RED

    def test_takes_winning_move_for_blue(self):
        board = make_position(red=['d1'], blue=['a1'], to_move=BLUE)
        move = AIEngine(max_depth=2).get_move(board)
        board.make_move(move)
        assert board.winner == BLUE

    def test_searches_through_forced_pass(self):
        """Every Red move leaves Blue walled in, so Blue must pass."""
        board = make_position(red=['a1'], blue=['g7'], blocked=AROUND_G7)
        engine = AIEngine(max_depth=2)
        move = engine.get_move(board)
        assert board.legal_move(move)
        assert engine.forced_passes > 0
        assert engine.get_debug_info()['forced_passes'] == engine.forced_passes

    def test_decided_board_falls_back_to_first_move(self):
        board = jump_limit_board()
        assert board.game_over
        move = AIEngine(max_depth=2).get_move(board)
        assert move == legal_moves(board)[0]

    def test_debug_info(self):
        engine = AIEngine(max_depth=2)
        move = engine.get_move(Board())
        info = engine.get_debug_info()
        assert info['best_move'] == str(move)
        assert info['search_depth'] == 2
        assert info['nodes_evaluated'] > 0

    def test_win_score_shared_with_heuristic(self):
        assert AIEngine.WINNING_VALUE == Heuristic.WIN_SCORE
        board = make_position(red=['a1'], blue=['d1'])
        engine = AIEngine(max_depth=1)
        engine.get_move(board)
        assert engine.debug_info.best_score == Heuristic.WIN_SCORE

    def test_set_difficulty(self):
        engine = AIEngine()
        assert engine.max_depth == AIEngine.DEFAULT_MAX_DEPTH
        engine.set_difficulty(2)
        assert engine.max_depth == 2
        assert engine.choose_move(Board()) == engine.get_move(Board())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
