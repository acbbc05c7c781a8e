# Core game engine for classic Gobblet Gobblers

from gobblers.board import Board
from gobblers.errors import (
    ErrorKind,
    GameError,
    GameOverError,
    InvalidFormat,
    MoveError,
    NothingToUndo,
    OutOfPieces,
    QuitRequested,
    SizeTooSmall,
)
from gobblers.game import CellView, Game, GameResult, TurnResult
from gobblers.moves import Command, CommandType, Move, move_to_notation, parse_command
from gobblers.state import GameState
from gobblers.types import Color, Piece, Position, Size

__all__ = [
    "Board",
    "CellView",
    "Color",
    "Command",
    "CommandType",
    "ErrorKind",
    "Game",
    "GameError",
    "GameOverError",
    "GameResult",
    "GameState",
    "InvalidFormat",
    "Move",
    "MoveError",
    "NothingToUndo",
    "OutOfPieces",
    "Piece",
    "Position",
    "QuitRequested",
    "SizeTooSmall",
    "TurnResult",
    "move_to_notation",
    "new_game",
    "parse_command",
]


def new_game() -> Game:
    """Start a game: empty board, two pieces of each size per color, yellow first."""
    return Game.new_game()
