"""
Evaluation Module

This module provides position evaluation functions for the search.
Evaluators are SWAPPABLE: the search works with any object implementing
the Evaluator interface.

Key Components:
    - Evaluator (ABC): evaluation interface and decided-game scoring
    - MobilityEvaluator: White legal-move count

Data Flow:
    Board → evaluator.evaluate() → int
                                    Positive = White advantage
                                    Negative = Black advantage
"""

from amazons_engine.evaluation.base import INFINITY, WINNING_VALUE, Evaluator
from amazons_engine.evaluation.mobility import MobilityEvaluator

__all__ = ['Evaluator', 'MobilityEvaluator', 'INFINITY', 'WINNING_VALUE']
