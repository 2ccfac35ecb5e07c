"""
Board Module

This module holds the rules of the Game of the Amazons.

Key Components:
    - Square: interned board coordinates and the 8 queen directions
    - Piece / Move: cell contents and the three-part move value type
    - Board: grid, legality checks, apply/undo, lazy legal-move generation
    - board_to_tensor: numpy plane representation of a position

Data Flow:
    Board → legal_moves() → Move stream → make_move()/undo()
"""

from amazons_engine.board.board import Board
from amazons_engine.board.move import Move, Piece, mv, parse_move
from amazons_engine.board.representation import board_to_tensor, tensor_to_board
from amazons_engine.board.square import (
    ALL_SQUARES,
    DIRECTIONS,
    SIZE,
    Square,
    parse_square,
    square_at,
    square_from_index,
)

__all__ = [
    'Board',
    'Move',
    'Piece',
    'mv',
    'parse_move',
    'Square',
    'ALL_SQUARES',
    'DIRECTIONS',
    'SIZE',
    'parse_square',
    'square_at',
    'square_from_index',
    'board_to_tensor',
    'tensor_to_board',
]
