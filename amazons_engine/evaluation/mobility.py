"""
Mobility Evaluation

Scores an undecided position by the number of legal moves White has.

This is deliberately one-sided: Black's mobility is not subtracted, and the
count is White's whichever side is to move. Games played with this
evaluator depend on that exact value, so treat it as a tunable policy and
write a new Evaluator rather than changing this one.
"""

from amazons_engine.board.board import Board
from amazons_engine.board.move import Piece
from amazons_engine.evaluation.base import Evaluator


class MobilityEvaluator(Evaluator):
    """White legal-move count, or ±WINNING_VALUE once the game is decided."""

    def evaluate(self, board: Board) -> int:
        terminal = self.evaluate_terminal(board)
        if terminal is not None:
            return terminal
        return sum(1 for _ in board.legal_moves(Piece.WHITE))
