"""Shared fixtures: small walled-in positions where deep search stays cheap."""

import pytest

from amazons_engine.board import ALL_SQUARES, Board, Piece, parse_square


def walled_board(white, black, open_squares, turn=Piece.WHITE):
    """
    Build a position where every square outside `open_squares` (and the
    queen squares) holds a spear.
    """
    keep = {parse_square(name) for name in (*white, *black, *open_squares)}
    spears = [square for square in ALL_SQUARES if square not in keep]
    return Board.from_pieces(white, black, spears, turn)


@pytest.fixture
def corner_board():
    """White a1 and Black c3 inside the a1-c3 block, White to move."""
    return walled_board(["a1"], ["c3"], ["a2", "a3", "b1", "b2", "b3", "c1", "c2"])


@pytest.fixture
def strip_board():
    """White a1 and Black d2 inside the a1-d2 block, Black to move."""
    return walled_board(
        ["a1"], ["d2"], ["a2", "b1", "b2", "c1", "c2", "d1"], turn=Piece.BLACK
    )


@pytest.fixture
def room_board():
    """Two queens each inside the a1-d3 block, White to move."""
    return walled_board(
        ["a1", "d3"], ["d1", "a3"],
        ["a2", "b1", "b2", "b3", "c1", "c2", "c3", "d2"],
    )
