"""
Engine Exceptions

All errors raised by the engine derive from AmazonsError. Each one also
derives from the builtin exception a caller would naturally expect
(ValueError for bad input, IndexError for an empty history), so code that
only knows about builtins keeps working.

Errors are always raised to the immediate caller. Nothing is swallowed
inside the engine.
"""


class AmazonsError(Exception):
    """Base class for every engine error."""


class InvalidSquareError(AmazonsError, ValueError):
    """Column/row out of range, or a malformed square designation."""


class InvalidMoveFormatError(AmazonsError, ValueError):
    """Move text that does not follow the move notation."""


class IllegalMoveError(AmazonsError, ValueError):
    """
    A move that is not legal in the position it was applied to.

    Attributes:
        move: The rejected move
    """

    def __init__(self, move, message=None):
        self.move = move
        super().__init__(message or f"illegal move: {move}")


class EmptyHistoryError(AmazonsError, IndexError):
    """Undo requested on a board with no moves played."""

    def __init__(self, message="no move to undo"):
        super().__init__(message)


class NoLegalMoveError(AmazonsError, ValueError):
    """Search requested for a side that has no legal move (game is decided)."""

    def __init__(self, message="No legal moves available"):
        super().__init__(message)


class ConfigError(AmazonsError, ValueError):
    """Invalid configuration value."""
