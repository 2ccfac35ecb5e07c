"""
Search Module

This module implements move selection for the automated player: minimax
with alpha-beta pruning over the Board engine's legal-move stream.

Key Components:
    - minimax: Core recursive search
    - find_best_move: Root-level search on a private copy of the board
    - max_depth: Depth schedule driven by the move count
    - SearchAgent: Player object exposing select_move(board)
"""

from amazons_engine.search.minimax import (
    SearchAgent,
    SearchResult,
    find_best_move,
    max_depth,
    minimax,
)

__all__ = ['minimax', 'find_best_move', 'max_depth', 'SearchAgent', 'SearchResult']
