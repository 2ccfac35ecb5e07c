"""
Pieces and Moves

A Move is one full Amazons turn: the queen on `from_square` relocates to
`to_square`, then throws a spear from `to_square` to `spear`. Both legs are
queen moves.

Notation:
    d1-d7(g7)     canonical form produced by str(move)
    d1 d7 g7      whitespace form, accepted by parse_move
"""

import re
from dataclasses import dataclass
from enum import Enum

from amazons_engine.board.square import SQ, Square, parse_square
from amazons_engine.exceptions import InvalidMoveFormatError


class Piece(Enum):
    """Contents of a cell. WHITE and BLACK also name the two sides."""

    EMPTY = "-"
    WHITE = "W"
    BLACK = "B"
    SPEAR = "S"

    def opponent(self) -> "Piece":
        """Return the other side (WHITE <-> BLACK)."""
        if self is Piece.WHITE:
            return Piece.BLACK
        if self is Piece.BLACK:
            return Piece.WHITE
        raise ValueError(f"{self.name} has no opponent")

    @property
    def is_queen(self) -> bool:
        return self is Piece.WHITE or self is Piece.BLACK

    def __str__(self) -> str:
        return self.value


_MOVE_PATTERN = re.compile(rf"{SQ}-{SQ}\({SQ}\)|{SQ}\s+{SQ}\s+{SQ}")


@dataclass(frozen=True, slots=True)
class Move:
    """
    One turn: queen move from_square-to_square, then a spear thrown to spear.

    Attributes:
        from_square: Square the queen starts on
        to_square: Square the queen ends on
        spear: Square the spear lands on
    """

    from_square: Square
    to_square: Square
    spear: Square

    def __str__(self) -> str:
        return f"{self.from_square}-{self.to_square}({self.spear})"

    def __repr__(self) -> str:
        return f"Move({self})"


def mv(from_square: Square, to_square: Square, spear: Square) -> Move:
    """Shorthand constructor."""
    return Move(from_square, to_square, spear)


def parse_move(text: str) -> Move:
    """
    Parse a move in either notation.

    Args:
        text: "d1-d7(g7)" or "d1 d7 g7" (surrounding whitespace ignored)

    Returns:
        The parsed Move

    Raises:
        InvalidMoveFormatError: If text is not a move
    """
    match = _MOVE_PATTERN.fullmatch(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise InvalidMoveFormatError(f"invalid move: {text!r}")
    names = [group for group in match.groups() if group is not None]
    return Move(*(parse_square(name) for name in names))


def is_move_text(text: str) -> bool:
    """Return True iff text looks like a move in either notation."""
    return _MOVE_PATTERN.fullmatch(text.strip()) is not None
