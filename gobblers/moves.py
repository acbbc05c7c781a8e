from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gobblers.errors import InvalidFormat
from gobblers.types import BOARD_SIZE, SIZE_LETTERS, Color, Piece, Position, Size, cell_to_position

UNDO_TOKEN = "u"
QUIT_TOKEN = "q"

CELL_COUNT = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True)
class Move:
    """
    A placement of a reserve piece on a cell.

    Cells are numbered 1-9 row-major: 1-3 top row, 4-6 middle, 7-9 bottom.
    """

    color: Color
    size: Size
    cell: int

    @property
    def position(self) -> Position:
        return cell_to_position(self.cell)

    @property
    def piece(self) -> Piece:
        return Piece(self.color, self.size)

    @property
    def token(self) -> str:
        return move_to_notation(self)

    def __repr__(self) -> str:
        size_char = {Size.SMALL: "S", Size.MEDIUM: "M", Size.LARGE: "L"}[self.size]
        return f"Place {self.color.name[0]}{size_char} -> {self.cell}"


class CommandType(Enum):
    """What a line of player input asks for."""

    MOVE = "move"
    UNDO = "undo"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    type: CommandType
    size: Size | None = None
    cell: int | None = None


def resolve_size(size_class: Size | str) -> Size:
    """
    Accept either a Size or a size-class letter (a=large, b=medium, c=small).

    Raises InvalidFormat for anything else.
    """
    if isinstance(size_class, Size):
        return size_class
    if isinstance(size_class, str) and size_class in SIZE_LETTERS:
        return SIZE_LETTERS[size_class]
    raise InvalidFormat(f"Unknown size class: {size_class!r}")


def resolve_cell(cell: int | str) -> int:
    """
    Accept a cell number 1-9, as an int or a single digit.

    Raises InvalidFormat for anything else.
    """
    if isinstance(cell, str):
        if len(cell) != 1 or cell not in "0123456789":
            raise InvalidFormat(f"Unknown cell: {cell!r}")
        cell = int(cell)
    if isinstance(cell, bool) or not isinstance(cell, int) or not 1 <= cell <= CELL_COUNT:
        raise InvalidFormat(f"Cell must be between 1 and {CELL_COUNT}, got {cell!r}")
    return cell


def parse_command(token: str) -> Command:
    """
    Parse one line of player input.

    ``u`` is undo, ``q`` is quit, and a move is a size-class letter followed
    by a cell digit, e.g. ``a5`` for a large piece in the centre.

    Raises InvalidFormat if the token is none of these.
    """
    token = token.strip()

    if token == UNDO_TOKEN:
        return Command(CommandType.UNDO)
    if token == QUIT_TOKEN:
        return Command(CommandType.QUIT)

    if len(token) != 2:
        raise InvalidFormat(f"Invalid move token: {token!r}")

    size = resolve_size(token[0])
    cell = resolve_cell(token[1])
    return Command(CommandType.MOVE, size=size, cell=cell)


def move_to_notation(move: Move) -> str:
    """Format a move as its two-character token, e.g. ``b7``."""
    return f"{move.size.letter}{move.cell}"
