"""
Amazons Board Engine

This module holds the authoritative rules state of a game: the 10x10 grid,
the side to move, the move counter and the undo stack. It enforces move
legality, applies and undoes moves, and lazily enumerates legal moves.

Move Generation Order:
    origin squares (index order)
      x destinations (direction order, then distance)
        x spear targets (direction order, then distance, origin treated as empty)

The search depends on this order being stable: ties between equally valued
moves are broken by enumeration order.

Apply/Undo Contract:
    Every make_move() done while exploring a tree must be followed by
    exactly one undo() before control returns to the parent frame.
    Board.applied() wraps that pairing in a context manager.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from amazons_engine.board.move import Move, Piece
from amazons_engine.board.square import (
    ALL_SQUARES,
    DIRECTIONS,
    NUM_SQUARES,
    SIZE,
    Square,
    parse_square,
    square_at,
)
from amazons_engine.exceptions import EmptyHistoryError, IllegalMoveError

EMPTY = Piece.EMPTY
WHITE = Piece.WHITE
BLACK = Piece.BLACK
SPEAR = Piece.SPEAR

# Starting squares (standard layout)
INITIAL_WHITE = ("a4", "d1", "g1", "j4")
INITIAL_BLACK = ("a7", "d10", "g10", "j7")

# Winner cache marker: not computed since the last mutation
_UNKNOWN = object()

SquareRef = Union[Square, str]


def _to_square(ref: SquareRef) -> Square:
    return parse_square(ref) if isinstance(ref, str) else ref


class Board:
    """
    The state of an Amazons game.

    Attributes:
        turn: Side to move (Piece.WHITE or Piece.BLACK)
        num_moves: Number of moves played and not undone
        history: Moves played so far, oldest first
    """

    SIZE = SIZE

    def __init__(self, model: Optional["Board"] = None):
        """
        Create a board in the initial position, or a copy of `model`.

        The copy is deep: it owns its grid and its undo stack.
        """
        if model is None:
            self.init()
        else:
            self._grid: List[Piece] = list(model._grid)
            self._turn: Piece = model._turn
            self._num_moves: int = model._num_moves
            self._history: List[Move] = list(model._history)
            self._winner = model._winner

    def init(self) -> None:
        """Reset to the initial position."""
        self._grid = [EMPTY] * NUM_SQUARES
        for name in INITIAL_WHITE:
            self._grid[parse_square(name).index] = WHITE
        for name in INITIAL_BLACK:
            self._grid[parse_square(name).index] = BLACK
        self._turn = WHITE
        self._num_moves = 0
        self._history = []
        self._winner = _UNKNOWN

    @classmethod
    def empty(cls, turn: Piece = WHITE) -> "Board":
        """Return a board with no pieces and `turn` to move."""
        board = cls()
        board._grid = [EMPTY] * NUM_SQUARES
        board._turn = turn
        board._winner = _UNKNOWN
        return board

    @classmethod
    def from_pieces(
        cls,
        white: Iterable[SquareRef] = (),
        black: Iterable[SquareRef] = (),
        spears: Iterable[SquareRef] = (),
        turn: Piece = WHITE,
    ) -> "Board":
        """
        Build a position from piece placements.

        Args:
            white: Squares holding white queens ("a4" or Square)
            black: Squares holding black queens
            spears: Squares holding spears
            turn: Side to move

        Returns:
            Board with an empty history and a move counter of 0
        """
        board = cls.empty(turn)
        for piece, squares in ((WHITE, white), (BLACK, black), (SPEAR, spears)):
            for ref in squares:
                board._grid[_to_square(ref).index] = piece
        return board

    def copy(self) -> "Board":
        return Board(self)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def num_moves(self) -> int:
        return self._num_moves

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    def get(self, *where) -> Piece:
        """
        Return the contents of a square.

        Accepts a Square, a (col, row) pair or a designation such as "a4".
        """
        return self._grid[self._locate(where).index]

    def put(self, piece: Piece, *where) -> None:
        """
        Set a square to `piece`, then recompute the cached winner.

        Accepts the same square forms as get(). This is meant for setting
        up positions; it does not touch the turn, counter or history.
        """
        self._grid[self._locate(where).index] = piece
        self._winner = self._compute_winner()

    def pieces(self, side: Piece) -> List[Square]:
        """Return the squares holding `side`, in index order."""
        grid = self._grid
        return [square for square in ALL_SQUARES if grid[square.index] is side]

    @staticmethod
    def _locate(where) -> Square:
        if len(where) == 1:
            return _to_square(where[0])
        col, row = where
        return square_at(col, row)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def is_unblocked_move(
        self, from_square: Square, to: Square, as_empty: Optional[Square]
    ) -> bool:
        """
        Return True iff from_square-to is an unblocked queen move.

        Every square after from_square up to and including `to` must be
        empty, except `as_empty` (if not None), whose contents are ignored.
        """
        if not from_square.is_queen_move(to):
            return False
        dcol, drow = DIRECTIONS[from_square.direction(to)]
        step = drow * SIZE + dcol
        skip = -1 if as_empty is None else as_empty.index
        grid = self._grid
        index = from_square.index
        target = to.index
        while index != target:
            index += step
            if grid[index] is not EMPTY and index != skip:
                return False
        return True

    def is_legal(self, *args) -> bool:
        """
        Legality check, in four forms:

            is_legal(move)              full move
            is_legal(from)              from holds a piece of the side to move
            is_legal(from, to)          ... and from-to is unblocked
            is_legal(from, to, spear)   ... and to-spear is unblocked with
                                        from treated as empty

        Squares may be given as Square objects or designations ("e5").
        """
        if len(args) == 1:
            arg = args[0]
            if arg is None:
                return False
            if isinstance(arg, Move):
                return self.is_legal(arg.from_square, arg.to_square, arg.spear)
            return self._grid[_to_square(arg).index] is self._turn
        args = [_to_square(arg) for arg in args]
        if len(args) == 2:
            from_square, to = args
            return self.is_legal(from_square) and self.is_unblocked_move(
                from_square, to, None
            )
        from_square, to, spear = args
        return self.is_legal(from_square, to) and self.is_unblocked_move(
            to, spear, from_square
        )

    # ------------------------------------------------------------------
    # Apply / undo
    # ------------------------------------------------------------------

    def make_move(self, *args) -> None:
        """
        Play a move: make_move(move) or make_move(from, to, spear).

        Raises:
            IllegalMoveError: If the move is not legal here. The board is
                left unchanged.
        """
        move = args[0] if len(args) == 1 else Move(*args)
        if not self.is_legal(move):
            raise IllegalMoveError(move)
        grid = self._grid
        grid[move.to_square.index] = grid[move.from_square.index]
        grid[move.from_square.index] = EMPTY
        grid[move.spear.index] = SPEAR
        self._history.append(move)
        self._turn = self._turn.opponent()
        self._num_moves += 1
        self._winner = _UNKNOWN

    def undo(self) -> Move:
        """
        Take back the last move and return it.

        Raises:
            EmptyHistoryError: If no move has been played
        """
        if not self._history:
            raise EmptyHistoryError()
        move = self._history.pop()
        grid = self._grid
        self._turn = self._turn.opponent()
        grid[move.spear.index] = EMPTY
        grid[move.from_square.index] = grid[move.to_square.index]
        grid[move.to_square.index] = EMPTY
        self._num_moves -= 1
        self._winner = _UNKNOWN
        return move

    @contextmanager
    def applied(self, move: Move) -> Iterator["Board"]:
        """Apply `move` for the duration of a with-block, undoing it on exit."""
        self.make_move(move)
        try:
            yield self
        finally:
            self.undo()

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def reachable_from(
        self, from_square: Square, as_empty: Optional[Square] = None
    ) -> Iterator[Square]:
        """
        Iterate over squares reachable by an unblocked queen move.

        The piece on from_square (if any) is ignored, and so is whether
        the game is over. `as_empty` is treated as empty, which is how a
        spear can be thrown back through the square its queen just left.
        Order: direction 0..7, nearest square first.
        """
        grid = self._grid
        skip = -1 if as_empty is None else as_empty.index
        for dcol, drow in DIRECTIONS:
            col = from_square.col + dcol
            row = from_square.row + drow
            while 0 <= col < SIZE and 0 <= row < SIZE:
                index = row * SIZE + col
                if grid[index] is not EMPTY and index != skip:
                    break
                yield ALL_SQUARES[index]
                col += dcol
                row += drow

    def legal_moves(self, side: Optional[Piece] = None) -> Iterator[Move]:
        """
        Return a fresh single-pass iterator over the legal moves of `side`.

        `side` defaults to the side to move; any side may be queried
        regardless of whose turn it is. The board may be changed while
        iterating only if every change is undone before the next item is
        requested.
        """
        return self._generate_moves(self._turn if side is None else side)

    def _generate_moves(self, side: Piece) -> Iterator[Move]:
        grid = self._grid
        for start in ALL_SQUARES:
            if grid[start.index] is not side:
                continue
            for destination in self.reachable_from(start):
                for spear in self.reachable_from(destination, start):
                    yield Move(start, destination, spear)

    def has_legal_move(self, side: Optional[Piece] = None) -> bool:
        """Return True iff `side` (default: side to move) has a legal move."""
        # A queen that can step anywhere can always throw back at its origin.
        side = self._turn if side is None else side
        grid = self._grid
        for start in ALL_SQUARES:
            if grid[start.index] is not side:
                continue
            for dcol, drow in DIRECTIONS:
                col = start.col + dcol
                row = start.row + drow
                if 0 <= col < SIZE and 0 <= row < SIZE and grid[row * SIZE + col] is EMPTY:
                    return True
        return False

    def winner(self) -> Optional[Piece]:
        """
        Return the winner, or None if the game is not over.

        The side to move loses when it has no legal move. The result is
        cached until the board changes.
        """
        if self._winner is _UNKNOWN:
            self._winner = self._compute_winner()
        return self._winner

    def _compute_winner(self) -> Optional[Piece]:
        if self.has_legal_move(self._turn):
            return None
        return self._turn.opponent()

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid == other._grid
            and self._turn is other._turn
            and self._num_moves == other._num_moves
        )

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for row in range(SIZE - 1, -1, -1):
            cells = self._grid[row * SIZE:(row + 1) * SIZE]
            lines.append("   " + " ".join(str(cell) for cell in cells) + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, moves={self._num_moves})"
