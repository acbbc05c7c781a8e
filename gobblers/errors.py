from enum import Enum


class ErrorKind(Enum):
    """Why a move or undo was rejected."""

    INVALID_FORMAT = "invalid_format"
    OUT_OF_PIECES = "out_of_pieces"
    SIZE_TOO_SMALL = "size_too_small"
    NOTHING_TO_UNDO = "nothing_to_undo"


class GameError(Exception):
    """Base class for everything the engine refuses to do."""


class MoveError(GameError, ValueError):
    """
    A rejected move or undo.

    The engine state is left untouched, so callers can simply ask for
    another move.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFormat(MoveError):
    kind = ErrorKind.INVALID_FORMAT


class OutOfPieces(MoveError):
    kind = ErrorKind.OUT_OF_PIECES


class SizeTooSmall(MoveError):
    kind = ErrorKind.SIZE_TOO_SMALL


class NothingToUndo(MoveError):
    kind = ErrorKind.NOTHING_TO_UNDO


class GameOverError(GameError):
    """A move was submitted after the game already ended."""


class QuitRequested(GameError):
    """The player asked to leave the game."""
