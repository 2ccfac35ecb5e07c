"""
Text Protocol Interface

This module lets a person or another program play games against the
engine over a line-oriented text protocol.

Protocol Flow:
    User   → "auto white"
    User   → "manual black"
    Engine → "* d1-d7(g7)"
    User   → "a7-b7(c8)"
    Engine → "* g1-g6(b1)"
    ...
    Engine → "White wins."
"""

from amazons_engine.protocol.interface import GameController, setup_logger

__all__ = ['GameController', 'setup_logger']
