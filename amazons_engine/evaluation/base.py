"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without touching the search.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns a score from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Decided positions return ±WINNING_VALUE

Score Range:
    The search window uses ±INFINITY as its sentinel. A won position scores
    WINNING_VALUE, strictly inside the window, so a forced win still
    compares greater than the initial window bound.
"""

from abc import ABC, abstractmethod
from typing import Optional

from amazons_engine.board.board import Board
from amazons_engine.board.move import Piece

# Evaluation constants
INFINITY = 2**31 - 1  # Search window sentinel
WINNING_VALUE = INFINITY - 1  # Score of a decided game


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Subclasses implement evaluate(); evaluate_terminal() is shared.
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            board: Position to evaluate

        Returns:
            int: Score (positive favours White)
        """
        pass

    def evaluate_terminal(self, board: Board) -> Optional[int]:
        """
        Score a decided position.

        Returns:
            +WINNING_VALUE if White has won, -WINNING_VALUE if Black has won,
            None if the game is still going
        """
        winner = board.winner()
        if winner is Piece.WHITE:
            return WINNING_VALUE
        if winner is Piece.BLACK:
            return -WINNING_VALUE
        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
