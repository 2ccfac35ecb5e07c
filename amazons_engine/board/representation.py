"""
Board Representation as Tensors

This module converts Board objects into numpy tensors, for analysis tools
and any learned evaluator fed from board planes.

4-Channel Representation:
    0: White queens
    1: Black queens
    2: Spears
    3: Side to move (all 1s if White, all 0s if Black)

Each channel is a 10*10 plane; 1.0 marks presence.

Board Orientation:
    - Row 0 = board row 10 (top)
    - Row 9 = board row 1 (bottom)
    - Column 0 = a-file
    - Column 9 = j-file
"""

from typing import Tuple

import numpy as np

from amazons_engine.board.board import Board
from amazons_engine.board.move import Piece
from amazons_engine.board.square import ALL_SQUARES, SIZE, Square, square_at

NUM_CHANNELS = 4
TURN_CHANNEL = 3

PIECE_TO_CHANNEL = {
    Piece.WHITE: 0,
    Piece.BLACK: 1,
    Piece.SPEAR: 2,
}


def square_to_coordinates(square: Square) -> Tuple[int, int]:
    """
    Convert a square to tensor (row, column) coordinates.

    Returns:
        (row, col) where row 0 is board row 10 and col 0 is the a-file
    """
    return SIZE - 1 - square.row, square.col


def coordinates_to_square(row: int, col: int) -> Square:
    """Inverse of square_to_coordinates()."""
    return square_at(col, SIZE - 1 - row)


def board_to_tensor(board: Board) -> np.ndarray:
    """
    Convert a board to its 4-channel tensor.

    Args:
        board: Board to convert

    Returns:
        numpy array of shape (4, 10, 10), dtype float32
    """
    tensor = np.zeros((NUM_CHANNELS, SIZE, SIZE), dtype=np.float32)

    for square in ALL_SQUARES:
        piece = board.get(square)
        if piece is Piece.EMPTY:
            continue
        row, col = square_to_coordinates(square)
        tensor[PIECE_TO_CHANNEL[piece], row, col] = 1.0

    if board.turn is Piece.WHITE:
        tensor[TURN_CHANNEL, :, :] = 1.0

    return tensor


def tensor_to_board(tensor: np.ndarray) -> Board:
    """
    Convert a 4-channel tensor back to a Board.

    The grid and side to move are restored; the history is empty and the
    move counter is 0.

    Raises:
        ValueError: If the tensor has the wrong shape or two channels
            claim the same square
    """
    if tensor.shape != (NUM_CHANNELS, SIZE, SIZE):
        raise ValueError(
            f"Invalid tensor shape: {tensor.shape}. Expected {(NUM_CHANNELS, SIZE, SIZE)}"
        )

    occupancy = (tensor[:TURN_CHANNEL] > 0.5).sum(axis=0)
    if np.any(occupancy > 1):
        row, col = np.argwhere(occupancy > 1)[0]
        raise ValueError(
            f"Multiple pieces on square {coordinates_to_square(int(row), int(col))}"
        )

    turn = Piece.WHITE if tensor[TURN_CHANNEL].mean() > 0.5 else Piece.BLACK
    board = Board.empty(turn)

    for piece, channel in PIECE_TO_CHANNEL.items():
        for row, col in np.argwhere(tensor[channel] > 0.5):
            board.put(piece, coordinates_to_square(int(row), int(col)))

    return board


def mobility_map(board: Board, side: Piece) -> np.ndarray:
    """
    Count, for every square, how many queens of `side` can reach it.

    Returns:
        int16 array of shape (10, 10) in tensor orientation
    """
    counts = np.zeros((SIZE, SIZE), dtype=np.int16)
    for start in board.pieces(side):
        for square in board.reachable_from(start):
            row, col = square_to_coordinates(square)
            counts[row, col] += 1
    return counts
