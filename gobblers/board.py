from __future__ import annotations

from typing import Iterator

from gobblers.types import BOARD_SIZE, EMPTY_RANK, Color, Piece, Position, position_to_cell


class Board:
    """
    The 3x3 playing grid.

    Each cell holds only its visible piece (or None when empty). A gobbled
    piece is simply overwritten. Next to the pieces the board keeps a rank
    grid with the size rank of every cell's occupant (0 for empty), which is
    what the covering rule compares against.
    """

    # --- Lines of three ---

    WINNING_LINES: list[list[Position]] = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._ranks: list[list[int]] = [[EMPTY_RANK] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def copy(self) -> Board:
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board._grid = [row.copy() for row in self._grid]
        new_board._ranks = [row.copy() for row in self._ranks]
        return new_board

    # --- Access ---

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Get the visible piece on a cell, or None if empty."""
        return self._grid[row][col]

    def rank_at(self, row: int, col: int) -> int:
        """Get the size rank of a cell's occupant (0 if empty)."""
        return self._ranks[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self._grid[row][col] is None

    @staticmethod
    def cells() -> Iterator[Position]:
        """Iterate over all board positions, row-major."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield (row, col)

    # --- Modification ---

    def place(self, row: int, col: int, piece: Piece) -> None:
        """
        Put a piece on a cell, replacing whatever was visible there.

        No legality check happens here; the covering rule is enforced by the
        game before it calls this.
        """
        self._grid[row][col] = piece
        self._ranks[row][col] = piece.rank

    # --- Win detection ---

    def line_owner(self, line: list[Position]) -> Color | None:
        """Return the color holding all three cells of a line, if any."""
        pieces = [self.piece_at(row, col) for row, col in line]
        if any(p is None for p in pieces):
            return None
        colors = {p.color for p in pieces}  # type: ignore[union-attr]
        return colors.pop() if len(colors) == 1 else None

    def winning_lines(self, color: Color) -> list[list[Position]]:
        """All lines fully held by a color. Piece sizes do not matter."""
        return [line for line in self.WINNING_LINES if self.line_owner(line) == color]

    def has_line(self, color: Color) -> bool:
        return any(self.line_owner(line) == color for line in self.WINNING_LINES)

    # --- Display ---

    def cell_label(self, row: int, col: int) -> str:
        """Glyph of the visible piece, or the 1-based cell number when empty."""
        cell = position_to_cell((row, col))
        piece = self.piece_at(row, col)
        if piece is None:
            return str(cell)
        return piece.cell_glyph(cell)

    def render(self, indent: str = "             ") -> str:
        """Text grid with numbered empty cells, as shown to the players."""
        lines = []
        for row in range(BOARD_SIZE):
            labels = [self.cell_label(row, col).rjust(2) for col in range(BOARD_SIZE)]
            lines.append(indent + "|".join(labels))
            if row < BOARD_SIZE - 1:
                lines.append(indent + "--------")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self._ranks == other._ranks

    def __repr__(self) -> str:
        return self.render(indent="")
