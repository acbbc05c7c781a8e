from enum import Enum
from typing import NamedTuple


class Color(Enum):
    """The two player colors. Yellow always moves first."""

    YELLOW = "yellow"
    RED = "red"

    def opponent(self) -> "Color":
        """Return the opposing color."""
        return Color.RED if self == Color.YELLOW else Color.YELLOW


class Size(Enum):
    """Piece sizes, ordered small to large. The value is the covering rank."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    @property
    def rank(self) -> int:
        return self.value

    @property
    def letter(self) -> str:
        """The size-class letter used in move tokens."""
        return SIZE_LETTERS_BY_SIZE[self]

    @staticmethod
    def from_letter(letter: str) -> "Size":
        """Resolve a size-class letter (a, b or c). Raises KeyError if unknown."""
        return SIZE_LETTERS[letter]

    def covers(self, rank: int) -> bool:
        """Return True if a piece of this size can gobble a cell of the given rank."""
        return self.value > rank


class Piece(NamedTuple):
    """A game piece with an owner color and size."""

    color: Color
    size: Size

    @property
    def rank(self) -> int:
        return self.size.rank

    @property
    def glyph(self) -> str:
        """
        Reserve menu glyph: YY/RR for large, Y/R for medium and
        y/r for small.
        """
        initial = "Y" if self.color == Color.YELLOW else "R"
        if self.size == Size.LARGE:
            return initial * 2
        if self.size == Size.MEDIUM:
            return initial
        return initial.lower()

    def cell_glyph(self, cell: int) -> str:
        """
        Glyph shown on the board: large pieces fill both columns, medium and
        small pieces are followed by the number of the cell they sit on.
        """
        if self.size == Size.LARGE:
            return self.glyph
        return f"{self.glyph}{cell}"

    def __repr__(self) -> str:
        c = "Y" if self.color == Color.YELLOW else "R"
        s = {Size.SMALL: "S", Size.MEDIUM: "M", Size.LARGE: "L"}[self.size]
        return f"{c}{s}"


# Board coordinates
Position = tuple[int, int]  # (row, col), 0-indexed

BOARD_SIZE = 3

# Rank recorded for a cell with nothing on it
EMPTY_RANK = 0

# Standard starting pieces for each player
STARTING_PIECES: dict[Size, int] = {
    Size.SMALL: 2,
    Size.MEDIUM: 2,
    Size.LARGE: 2,
}

# Size-class letters of the move tokens
SIZE_LETTERS: dict[str, Size] = {
    "a": Size.LARGE,
    "b": Size.MEDIUM,
    "c": Size.SMALL,
}
SIZE_LETTERS_BY_SIZE: dict[Size, str] = {size: letter for letter, size in SIZE_LETTERS.items()}


def cell_to_position(cell: int) -> Position:
    """Map a 1-based cell number (1-9, row-major) to a (row, col) position."""
    return divmod(cell - 1, BOARD_SIZE)


def position_to_cell(pos: Position) -> int:
    """Map a (row, col) position to its 1-based cell number."""
    row, col = pos
    return row * BOARD_SIZE + col + 1
