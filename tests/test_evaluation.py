"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Mobility counting (White's moves, whoever is to move)
    - Terminal position scoring
    - Score constants and the abstract interface
"""

import pytest

from amazons_engine.board import Board, Piece, parse_move
from amazons_engine.evaluation import INFINITY, WINNING_VALUE, Evaluator, MobilityEvaluator
from amazons_engine.utils.testing import BENCHMARK_POSITIONS, OPENING_MOVE_COUNT


def walled_in_win():
    """AM.03 after White's only move: Black is stuck, White has won."""
    board = BENCHMARK_POSITIONS[2].board()
    board.make_move(parse_move("b2-b3(b2)"))
    return board


class TestMobilityEvaluator:
    """Tests for MobilityEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return MobilityEvaluator()

    def test_opening(self, evaluator):
        assert evaluator.evaluate(Board()) == OPENING_MOVE_COUNT

    def test_counts_white_with_black_to_move(self, evaluator):
        board = Board.from_pieces(
            white=["a1"], black=["c1"], spears=["b1", "b2"], turn=Piece.BLACK
        )
        # c1 is off every line White can use, and Black's own moves do not count
        assert evaluator.evaluate(board) == 231
        assert sum(1 for _ in board.legal_moves()) > 0

    def test_matches_move_count(self, evaluator, room_board):
        expected = sum(1 for _ in room_board.legal_moves(Piece.WHITE))
        assert evaluator.evaluate(room_board) == expected

    def test_white_win(self, evaluator):
        board = walled_in_win()
        assert board.winner() is Piece.WHITE
        assert evaluator.evaluate(board) == WINNING_VALUE

    def test_black_win(self, evaluator):
        board = Board.from_pieces(white=["a1"], black=["c3"], spears=["a2", "b1", "b2"])
        assert board.winner() is Piece.BLACK
        assert evaluator.evaluate(board) == -WINNING_VALUE

    def test_board_unchanged(self, evaluator):
        board = Board()
        before = board.copy()
        evaluator.evaluate(board)
        assert board == before

    def test_repr(self, evaluator):
        assert repr(evaluator) == "MobilityEvaluator()"


class TestEvaluatorInterface:
    def test_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_terminal_none_while_playing(self):
        assert MobilityEvaluator().evaluate_terminal(Board()) is None

    def test_terminal_values(self):
        assert MobilityEvaluator().evaluate_terminal(walled_in_win()) == WINNING_VALUE

    def test_constants(self):
        assert INFINITY == 2**31 - 1
        assert WINNING_VALUE < INFINITY
        assert -INFINITY < -WINNING_VALUE
