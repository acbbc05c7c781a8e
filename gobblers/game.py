from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from gobblers.board import Board
from gobblers.errors import GameOverError, NothingToUndo, OutOfPieces, QuitRequested, SizeTooSmall
from gobblers.moves import CELL_COUNT, CommandType, Move, parse_command, resolve_cell, resolve_size
from gobblers.state import GameState
from gobblers.types import Color, Piece, Size, cell_to_position

logger = logging.getLogger(__name__)


class GameResult(Enum):
    """Possible game outcomes."""

    IN_PROGRESS = "in_progress"
    YELLOW_WINS = "yellow_wins"
    RED_WINS = "red_wins"
    TIE = "tie"

    @staticmethod
    def winner(color: Color) -> "GameResult":
        """Get the result for a color winning."""
        return GameResult.YELLOW_WINS if color == Color.YELLOW else GameResult.RED_WINS

    @property
    def winning_color(self) -> Color | None:
        if self == GameResult.YELLOW_WINS:
            return Color.YELLOW
        if self == GameResult.RED_WINS:
            return Color.RED
        return None


@dataclass(frozen=True)
class CellView:
    """One cell of the board as shown to the players."""

    cell: int
    piece: Piece | None
    rank: int

    @property
    def label(self) -> str:
        return str(self.cell) if self.piece is None else self.piece.cell_glyph(self.cell)


@dataclass
class TurnResult:
    """Result of playing one line of input."""

    outcome: GameResult
    move: Move | None = None
    undone: bool = False


class Game:
    """
    Manages a game of Gobblet Gobblers.

    The game owns the live board, whose turn it is, both players' reserves
    and the history of snapshots used for undo. The history always holds
    one snapshot per move played plus the initial position.

    The low-level operations follow the turn protocol of the shells:
    ``validate_move`` then ``apply_move`` then ``evaluate_outcome`` and,
    while the game goes on, ``switch_player``. ``play`` runs one whole turn
    from a move token.
    """

    def __init__(self) -> None:
        self.reset()

    @classmethod
    def new_game(cls) -> Game:
        return cls()

    def reset(self) -> None:
        """Throw away the whole game and start again from the empty board."""
        initial = GameState.initial()
        self.board: Board = initial.restore_board()
        self._current_player: Color = initial.current_player
        self._reserves: dict[tuple[Color, Size], int] = initial.restore_reserves()
        self._history: list[GameState] = [initial]

    # --- Turn and reserves ---

    @property
    def current_player(self) -> Color:
        return self._current_player

    def switch_player(self) -> None:
        """Hand the turn to the other color."""
        self._current_player = self._current_player.opponent()

    def remaining(self, color: Color, size: Size) -> int:
        """Pieces of a size the color still has to place."""
        return self._reserves[(color, size)]

    def all_remaining(self, color: Color) -> dict[Size, int]:
        return {size: self._reserves[(color, size)] for size in Size}

    # --- History ---

    @property
    def history(self) -> tuple[GameState, ...]:
        """All snapshots, oldest first."""
        return tuple(self._history)

    @property
    def moves_played(self) -> int:
        return len(self._history) - 1

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 1

    # --- Moves ---

    def validate_move(self, size_class: Size | str, cell: int | str, player: Color | None = None) -> Move:
        """
        Check a placement and return it as a Move.

        ``size_class`` is a Size or its letter (a, b, c); ``cell`` is 1-9.
        ``player`` defaults to the color to move.

        Raises:
            InvalidFormat: unknown size class or cell out of range.
            OutOfPieces: the player has no piece of that size left.
            SizeTooSmall: the cell already holds a piece of equal or larger
                size. Own pieces can be gobbled like any other.
        """
        player = self._current_player if player is None else player
        size = resolve_size(size_class)
        cell = resolve_cell(cell)

        if self._reserves[(player, size)] <= 0:
            raise OutOfPieces(f"{player.value.capitalize()} has no {size.name.lower()} pieces left")

        row, col = cell_to_position(cell)
        if not size.covers(self.board.rank_at(row, col)):
            raise SizeTooSmall(f"A {size.name.lower()} piece cannot cover cell {cell}")

        return Move(color=player, size=size, cell=cell)

    def is_legal(self, size_class: Size | str, cell: int | str, player: Color | None = None) -> bool:
        """Same as validate_move, answering with a bool."""
        try:
            self.validate_move(size_class, cell, player)
        except ValueError:
            return False
        return True

    def legal_moves(self, player: Color | None = None) -> list[Move]:
        """Every placement the player could make right now."""
        player = self._current_player if player is None else player
        moves: list[Move] = []
        for size in Size:
            if self._reserves[(player, size)] <= 0:
                continue
            for cell in range(1, CELL_COUNT + 1):
                row, col = cell_to_position(cell)
                if size.covers(self.board.rank_at(row, col)):
                    moves.append(Move(color=player, size=size, cell=cell))
        return moves

    def apply_move(self, size_class: Size | str, cell: int | str, player: Color | None = None) -> Move:
        """
        Place a piece, take it out of the reserve and record a snapshot.

        The move must have been validated first. The turn is not switched;
        the recorded snapshot already has the opponent to move.
        """
        player = self._current_player if player is None else player
        move = Move(color=player, size=resolve_size(size_class), cell=resolve_cell(cell))

        row, col = move.position
        self.board.place(row, col, move.piece)
        self._reserves[(player, move.size)] -= 1
        self._history.append(GameState.capture(self.board, player.opponent(), self._reserves))

        logger.debug("%s played %s (move %d)", player.value, move.token, self.moves_played)
        return move

    def undo(self) -> None:
        """
        Take back the last move.

        Board, reserves and the color to move come back from the previous
        snapshot, so the player whose move was undone plays again.

        Raises NothingToUndo at the initial position.
        """
        if not self.can_undo:
            raise NothingToUndo("Cannot undo.")

        self._history.pop()
        previous = self._history[-1]
        self.board = previous.restore_board()
        self._reserves = previous.restore_reserves()
        self._current_player = previous.current_player

        logger.debug("Undid a move, %d remaining in history", self.moves_played)

    # --- Outcome ---

    def evaluate_outcome(self, player: Color | None = None) -> GameResult:
        """
        Judge the position from the point of view of the player who just
        moved (by default the color to move, as the shells evaluate before
        switching).

        Only that player's lines are checked: the opponent cannot complete
        a line on a move that was not theirs.
        """
        player = self._current_player if player is None else player

        if self.board.has_line(player):
            return GameResult.winner(player)

        if all(count == 0 for count in self._reserves.values()):
            return GameResult.TIE

        return GameResult.IN_PROGRESS

    def is_over(self) -> bool:
        return self.evaluate_outcome() != GameResult.IN_PROGRESS

    # --- Whole turns ---

    def play(self, token: str) -> TurnResult:
        """
        Play one line of player input for the color to move.

        A move is validated, applied and judged; while the game goes on the
        turn passes to the opponent. ``u`` undoes the last move.

        Raises:
            MoveError: the token is malformed, the move illegal, or there
                is nothing to undo. The game is unchanged.
            GameOverError: the game has already ended.
            QuitRequested: the token is ``q``.
        """
        command = parse_command(token)

        if command.type == CommandType.QUIT:
            raise QuitRequested("Player quit")

        if command.type == CommandType.UNDO:
            self.undo()
            return TurnResult(outcome=GameResult.IN_PROGRESS, undone=True)

        if self.is_over():
            raise GameOverError("Game is already over")

        assert command.size is not None and command.cell is not None
        player = self._current_player
        try:
            self.validate_move(command.size, command.cell, player)
        except ValueError as e:
            logger.info("Rejected %r for %s: %s", token, player.value, e)
            raise

        move = self.apply_move(command.size, command.cell, player)
        outcome = self.evaluate_outcome(player)
        if outcome == GameResult.IN_PROGRESS:
            self.switch_player()
        else:
            logger.info("Game over after %d moves: %s", self.moves_played, outcome.value)

        return TurnResult(outcome=outcome, move=move)

    # --- Display ---

    def renderable_board(self) -> tuple[CellView, ...]:
        """Read-only view of the nine cells, row-major."""
        return tuple(
            CellView(
                cell=cell,
                piece=self.board.piece_at(*cell_to_position(cell)),
                rank=self.board.rank_at(*cell_to_position(cell)),
            )
            for cell in range(1, CELL_COUNT + 1)
        )

    def __repr__(self) -> str:
        return f"Game(player={self._current_player.value}, moves={self.moves_played})\n{self.board!r}"
