"""
Unit Tests for Board Coordinates

Tests for the interned Square type:
    - Interning: one object per position, factories only
    - Text designations: parsing and formatting
    - Queen-move geometry: is_queen_move, direction, queen_move
"""

import copy
import pickle

import pytest

from amazons_engine.board.square import (
    ALL_SQUARES,
    DIRECTIONS,
    Square,
    iter_squares,
    parse_square,
    square_at,
    square_from_index,
)
from amazons_engine.exceptions import InvalidSquareError


class TestInterning:
    """Squares are unique per position."""

    def test_factories_return_same_object(self):
        assert square_at(3, 4) is parse_square("d5")
        assert square_from_index(43) is square_at(3, 4)

    def test_constructor_is_private(self):
        with pytest.raises(TypeError):
            Square(0)

    def test_copies_are_identical(self):
        square = parse_square("e7")
        assert copy.copy(square) is square
        assert copy.deepcopy(square) is square
        assert pickle.loads(pickle.dumps(square)) is square

    def test_immutable(self):
        with pytest.raises(AttributeError):
            parse_square("a1").col = 4

    def test_stable_index_order(self):
        squares = list(iter_squares())
        assert len(squares) == 100
        assert [s.index for s in squares] == list(range(100))
        assert squares is not ALL_SQUARES
        assert tuple(squares) == ALL_SQUARES


class TestDesignations:
    """Text form of squares."""

    @pytest.mark.parametrize(
        "name,col,row",
        [("a1", 0, 0), ("j1", 9, 0), ("a10", 0, 9), ("j10", 9, 9), ("d4", 3, 3)],
    )
    def test_parse(self, name, col, row):
        square = parse_square(name)
        assert (square.col, square.row) == (col, row)
        assert square.index == row * 10 + col
        assert str(square) == name

    @pytest.mark.parametrize("name", ["k1", "a0", "a11", "A1", "", "a", "1a", "b01", " a1"])
    def test_invalid_designation(self, name):
        with pytest.raises(InvalidSquareError):
            parse_square(name)

    @pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (10, 0), (0, 10)])
    def test_out_of_bounds(self, col, row):
        with pytest.raises(InvalidSquareError):
            square_at(col, row)

    def test_index_out_of_range(self):
        with pytest.raises(InvalidSquareError):
            square_from_index(100)

    def test_invalid_square_is_value_error(self):
        with pytest.raises(ValueError):
            parse_square("z9")


class TestQueenGeometry:
    """Queen-move geometry, independent of board contents."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("d4", "d9", True),
            ("d4", "a4", True),
            ("d4", "g7", True),
            ("d4", "a1", True),
            ("d4", "b6", True),
            ("d4", "e6", False),
            ("d4", "d4", False),
            ("a1", "j10", True),
        ],
    )
    def test_is_queen_move(self, a, b, expected):
        assert parse_square(a).is_queen_move(parse_square(b)) is expected

    def test_is_queen_move_none(self):
        assert parse_square("a1").is_queen_move(None) is False

    @pytest.mark.parametrize(
        "target,direction",
        [("d7", 0), ("g7", 1), ("h4", 2), ("f2", 3), ("d1", 4), ("b2", 5), ("a4", 6), ("a7", 7)],
    )
    def test_direction(self, target, direction):
        assert parse_square("d4").direction(parse_square(target)) == direction

    def test_direction_matches_unit_steps(self):
        origin = parse_square("e5")
        for direction, (dcol, drow) in enumerate(DIRECTIONS):
            neighbour = square_at(origin.col + dcol, origin.row + drow)
            assert origin.direction(neighbour) == direction
            assert origin.queen_move(direction, 1) is neighbour

    def test_queen_move_off_board(self):
        assert parse_square("a1").queen_move(4, 1) is None
        assert parse_square("j10").queen_move(1, 1) is None
        assert parse_square("d4").queen_move(0, 7) is None

    def test_queen_move_bad_direction(self):
        assert parse_square("d4").queen_move(8, 1) is None
        assert parse_square("d4").queen_move(-1, 1) is None

    def test_queen_move_distance(self):
        assert parse_square("a1").queen_move(1, 9) is parse_square("j10")
        assert parse_square("d4").queen_move(6, 3) is parse_square("a4")
