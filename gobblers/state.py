from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from gobblers.board import Board
from gobblers.types import STARTING_PIECES, Color, Piece, Size

Reserves = Mapping[tuple[Color, Size], int]


def full_reserves() -> dict[tuple[Color, Size], int]:
    """Reserve counts at the start of a game: two of every size per color."""
    return {(color, size): count for color in Color for size, count in STARTING_PIECES.items()}


@dataclass(frozen=True)
class GameState:
    """
    Immutable capture of a game at one point in the move sequence.

    The snapshot owns private copies of the board and reserves, so later
    moves on the live game never leak into it, and nothing handed out by
    the snapshot can change it. ``current_player`` is the color to move in
    the captured position.
    """

    _board: Board = field(repr=False)
    current_player: Color
    reserves: Reserves = field(default_factory=lambda: MappingProxyType(full_reserves()))

    @classmethod
    def capture(cls, board: Board, current_player: Color, reserves: Reserves) -> GameState:
        """Snapshot live game data, copying everything mutable."""
        return cls(
            _board=board.copy(),
            current_player=current_player,
            reserves=MappingProxyType(dict(reserves)),
        )

    @classmethod
    def initial(cls) -> GameState:
        """Empty board, full reserves, yellow to move."""
        return cls(_board=Board(), current_player=Color.YELLOW)

    @property
    def board(self) -> Board:
        """A copy of the captured board. Changing it leaves the snapshot alone."""
        return self._board.copy()

    def piece_at(self, row: int, col: int) -> Piece | None:
        return self._board.piece_at(row, col)

    def rank_at(self, row: int, col: int) -> int:
        return self._board.rank_at(row, col)

    def restore_board(self) -> Board:
        """A fresh mutable board equal to the captured one."""
        return self._board.copy()

    def restore_reserves(self) -> dict[tuple[Color, Size], int]:
        return dict(self.reserves)

    def get_reserve(self, color: Color, size: Size) -> int:
        return self.reserves[(color, size)]

    def moves_left(self) -> int:
        """Pieces still in both players' reserves."""
        return sum(self.reserves.values())

    def __repr__(self) -> str:
        lines = [f"Current player: {self.current_player.name}", ""]
        for color in Color:
            reserve_str = ", ".join(f"{s.name[0]}:{self.get_reserve(color, s)}" for s in Size)
            lines.append(f"{color.name} reserves: {reserve_str}")
        lines.append("")
        lines.append(self._board.render(indent=""))
        return "\n".join(lines)
