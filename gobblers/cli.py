"""
Terminal front end: two players take turns at the same keyboard.

Moves are typed as a size letter and a cell number, e.g. ``a5`` for a
large piece in the centre. ``u`` takes back the last move and ``q`` quits.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from gobblers.errors import MoveError, NothingToUndo, QuitRequested
from gobblers.game import Game, GameResult
from gobblers.types import Color, Piece, Size

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def format_reserves(game: Game, color: Color) -> str:
    """The pieces menu shown before each turn."""
    lines = [""]
    for size in (Size.LARGE, Size.MEDIUM, Size.SMALL):
        glyph = Piece(color, size).glyph
        lines.append(f"{size.letter}. {glyph:<3} {game.remaining(color, size)} remain.")
    lines.append("q to exit.")
    return "\n".join(lines)


def format_prompt(color: Color) -> str:
    return f"\nIt is {color.value}'s turn.\nChoose action and location, for example a2: "


def format_result(result: GameResult) -> str:
    if result == GameResult.TIE:
        return "Tie game."
    winner = result.winning_color
    assert winner is not None
    return f"{winner.value.capitalize()} wins!"


def run(
    game: Game | None = None,
    input_fn: InputFn | None = None,
    output_fn: OutputFn | None = None,
) -> GameResult:
    """
    Play one game until somebody wins, it is a tie or a player quits.

    Returns the final result, IN_PROGRESS when the game was abandoned.
    """
    game = game if game is not None else Game()
    input_fn = input_fn or input
    output_fn = output_fn or print
    output_fn("\n\n" + game.board.render())

    while True:
        output_fn(format_reserves(game, game.current_player))
        try:
            token = input_fn(format_prompt(game.current_player))
        except EOFError:
            logger.info("Input closed, leaving the game")
            return GameResult.IN_PROGRESS

        try:
            turn = game.play(token)
        except QuitRequested:
            return GameResult.IN_PROGRESS
        except NothingToUndo:
            output_fn("Cannot undo.")
            continue
        except MoveError:
            output_fn("Invalid move. Try again.")
            continue

        output_fn("\n\n" + game.board.render())
        if turn.outcome != GameResult.IN_PROGRESS:
            output_fn(format_result(turn.outcome))
            return turn.outcome


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Gobblet Gobblers for two players at one terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
