"""
Amazons Engine

A rules engine and alpha-beta search player for the Game of the Amazons:
a 10x10 board, four queens per side, and a spear thrown after every move.
The player who cannot move loses.

## Architecture

The engine is organized into several key modules:

1. **board**: Rules of the game
   - Interned squares and queen-move geometry
   - Board state, legality checks, apply/undo, lazy move generation
   - numpy tensor representation of positions

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MobilityEvaluator: White legal-move count

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning
   - Depth schedule driven by the move count
   - SearchAgent: automated player

4. **protocol**: Text command protocol
   - Human vs engine or engine vs engine games from a terminal

5. **utils**: Testing and benchmarking utilities
   - Perft move generation counts
   - Self-play harness and benchmark positions

## Quick Start

### As a Python Library

```python
from amazons_engine import Board, SearchAgent

board = Board()
agent = SearchAgent()
move = agent.select_move(board)
board.make_move(move)
print(move)  # e.g. d1-d7(g7)
```

### From a Terminal

```bash
python -m amazons_engine.protocol
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from amazons_engine.board import Board, Move, Piece, Square, parse_move, parse_square, square_at
from amazons_engine.evaluation import Evaluator, MobilityEvaluator
from amazons_engine.exceptions import (
    AmazonsError,
    EmptyHistoryError,
    IllegalMoveError,
    InvalidMoveFormatError,
    InvalidSquareError,
    NoLegalMoveError,
)
from amazons_engine.search import SearchAgent, find_best_move, max_depth

__all__ = [
    'Board',
    'Move',
    'Piece',
    'Square',
    'parse_move',
    'parse_square',
    'square_at',
    'Evaluator',
    'MobilityEvaluator',
    'SearchAgent',
    'find_best_move',
    'max_depth',
    'AmazonsError',
    'EmptyHistoryError',
    'IllegalMoveError',
    'InvalidMoveFormatError',
    'InvalidSquareError',
    'NoLegalMoveError',
]
