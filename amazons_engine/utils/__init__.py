"""
Utilities Module

This module provides tools for verifying and benchmarking the engine.

Key Components:
    - perft: Move generation verification
    - play_game: Self-play harness between two agents
    - run_benchmark: Timed searches over BENCHMARK_POSITIONS
"""

from amazons_engine.utils.testing import (
    BENCHMARK_POSITIONS,
    GameRecord,
    perft,
    play_game,
    run_benchmark,
)

__all__ = [
    'BENCHMARK_POSITIONS',
    'GameRecord',
    'perft',
    'play_game',
    'run_benchmark',
]
