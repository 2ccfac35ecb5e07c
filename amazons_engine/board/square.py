"""
Board Coordinates

Squares are numbered from 0 (a1, lower-left corner) to 99 (j10, upper-right
corner): index = row * 10 + col. There is exactly one Square object per
position, created once at import time. Clients obtain squares through the
factory functions (square_at, square_from_index, parse_square), never through
the constructor, so squares can be compared with `is` and used as cheap
dictionary keys.

Directions:
    0: N   (0, +1)      4: S   (0, -1)
    1: NE  (+1, +1)     5: SW  (-1, -1)
    2: E   (+1, 0)      6: W   (-1, 0)
    3: SE  (+1, -1)     7: NW  (-1, +1)

Each direction is a (delta column, delta row) unit step. North is towards
row 10.
"""

import re
from typing import Iterator, Optional, Tuple

from amazons_engine.exceptions import InvalidSquareError

SIZE = 10  # Squares on a side of the board

NUM_SQUARES = SIZE * SIZE

# Unit steps (dcol, drow), indexed by direction
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
)

DIRECTION_NAMES = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

COLUMNS = "abcdefghij"

# Square designation, grouped so it can be embedded in move patterns
SQ = r"([a-j](?:10|[1-9]))"

_SQUARE_PATTERN = re.compile(SQ)


class Square:
    """
    A position on the board.

    Attributes:
        index: Linear position (0-99)
        col: Column, 0 is the a-file
        row: Row, 0 is the bottom row
    """

    __slots__ = ("index", "col", "row", "_name")

    def __new__(cls, *args, **kwargs):
        raise TypeError("Squares are interned, use square_at() or parse_square()")

    @classmethod
    def _create(cls, index: int) -> "Square":
        square = object.__new__(cls)
        object.__setattr__(square, "index", index)
        object.__setattr__(square, "col", index % SIZE)
        object.__setattr__(square, "row", index // SIZE)
        object.__setattr__(square, "_name", f"{COLUMNS[index % SIZE]}{index // SIZE + 1}")
        return square

    def __setattr__(self, name, value):
        raise AttributeError("Square is immutable")

    def __copy__(self) -> "Square":
        return self

    def __deepcopy__(self, memo) -> "Square":
        return self

    def __reduce__(self):
        return (square_from_index, (self.index,))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Square({self._name})"

    def is_queen_move(self, to: Optional["Square"]) -> bool:
        """
        Return True iff self-to is a queen move.

        Only the geometry is checked (horizontal, vertical or exact
        diagonal); the contents of the board are ignored.
        """
        if to is None or to is self:
            return False
        dcol = to.col - self.col
        drow = to.row - self.row
        return dcol == 0 or drow == 0 or abs(dcol) == abs(drow)

    def direction(self, to: "Square") -> int:
        """
        Return the direction of the queen move self-to.

        Precondition: self.is_queen_move(to). Not checked here, this is
        called on the move generation hot path.
        """
        dcol = to.col - self.col
        drow = to.row - self.row
        if dcol > 0:
            if drow > 0:
                return 1
            if drow == 0:
                return 2
            return 3
        if dcol == 0:
            return 0 if drow > 0 else 4
        if drow < 0:
            return 5
        if drow == 0:
            return 6
        return 7

    def queen_move(self, direction: int, steps: int) -> Optional["Square"]:
        """
        Return the square `steps` away in `direction`.

        Returns None when the result is off the board or the direction is
        not in 0..7.
        """
        if not 0 <= direction < 8:
            return None
        dcol, drow = DIRECTIONS[direction]
        col = self.col + dcol * steps
        row = self.row + drow * steps
        if 0 <= col < SIZE and 0 <= row < SIZE:
            return _SQUARES[row * SIZE + col]
        return None


def exists(col: int, row: int) -> bool:
    """Return True iff (col, row) is on the board."""
    return 0 <= col < SIZE and 0 <= row < SIZE


def square_at(col: int, row: int) -> Square:
    """
    Return the unique square at (col, row).

    Raises:
        InvalidSquareError: If col or row is out of bounds
    """
    if not exists(col, row):
        raise InvalidSquareError(f"row or column out of bounds: ({col}, {row})")
    return _SQUARES[row * SIZE + col]


def square_from_index(index: int) -> Square:
    """Return the unique square with the given linear index."""
    if not 0 <= index < NUM_SQUARES:
        raise InvalidSquareError(f"square index out of range: {index}")
    return _SQUARES[index]


def parse_square(text: str) -> Square:
    """
    Return the square named by `text` in standard notation (e.g. "a4").

    Raises:
        InvalidSquareError: If text is not a valid designation
    """
    if not isinstance(text, str) or _SQUARE_PATTERN.fullmatch(text) is None:
        raise InvalidSquareError(f"invalid square: {text!r}")
    return _SQUARES[(int(text[1:]) - 1) * SIZE + COLUMNS.index(text[0])]


def iter_squares() -> Iterator[Square]:
    """Iterate over all squares in index order."""
    return iter(_SQUARES)


_SQUARES: Tuple[Square, ...] = tuple(Square._create(i) for i in range(NUM_SQUARES))

ALL_SQUARES = _SQUARES
