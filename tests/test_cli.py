"""Tests for the terminal front end."""

import pytest

from gobblers import Color, Game, GameResult, Piece, Size
from gobblers.cli import format_reserves, format_result, main, run


class Console:
    """Feeds scripted input lines and records everything printed."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def run_script(lines: list[str], game: Game | None = None) -> tuple[GameResult, Console]:
    console = Console(lines)
    result = run(game, input_fn=console.input, output_fn=console.print)
    return result, console


class TestFormatting:
    def test_reserves_menu(self) -> None:
        game = Game()
        game.play("a5")

        assert format_reserves(game, Color.YELLOW).splitlines() == [
            "",
            "a. YY  1 remain.",
            "b. Y   2 remain.",
            "c. y   2 remain.",
            "q to exit.",
        ]
        assert "a. RR  2 remain." in format_reserves(game, Color.RED)

    def test_results(self) -> None:
        assert format_result(GameResult.YELLOW_WINS) == "Yellow wins!"
        assert format_result(GameResult.RED_WINS) == "Red wins!"
        assert format_result(GameResult.TIE) == "Tie game."


class TestRun:
    def test_yellow_wins(self) -> None:
        result, console = run_script(["a1", "a2", "a5", "b4", "b9"])

        assert result == GameResult.YELLOW_WINS
        assert console.output[-1] == "Yellow wins!"
        assert "It is yellow's turn." in console.prompts[0]
        assert "It is red's turn." in console.prompts[1]

    def test_invalid_move_reprompts_same_player(self) -> None:
        game = Game()
        result, console = run_script(["z9", "a5", "a5", "q"], game)

        assert result == GameResult.IN_PROGRESS
        assert console.output.count("Invalid move. Try again.") == 2
        assert "yellow" in console.prompts[1]
        assert "red" in console.prompts[2]
        assert "red" in console.prompts[3]
        assert game.board.piece_at(1, 1) == Piece(Color.YELLOW, Size.LARGE)

    def test_cannot_undo_at_start(self) -> None:
        _, console = run_script(["u", "q"])
        assert "Cannot undo." in console.output

    def test_undo_gives_turn_back(self) -> None:
        game = Game()
        _, console = run_script(["c3", "u", "q"], game)

        assert game.moves_played == 0
        assert game.current_player == Color.YELLOW
        assert "yellow" in console.prompts[2]

    def test_board_is_shown(self) -> None:
        _, console = run_script(["b5", "q"])
        assert "Y5" in console.text
        assert " 1| 2| 3" in console.text

    def test_stuck_player_can_only_undo_or_quit(self) -> None:
        game = Game()
        lines = ["c1", "a2", "c3", "a5", "b4", "b6", "b8", "b7", "a9", "c1", "u", "q"]
        result, console = run_script(lines, game)

        assert result == GameResult.IN_PROGRESS
        assert console.output.count("Invalid move. Try again.") == 1
        assert game.moves_played == 8
        assert game.current_player == Color.YELLOW

    def test_end_of_input_abandons_game(self) -> None:
        result, _ = run_script(["a1"])
        assert result == GameResult.IN_PROGRESS

    def test_tie(self) -> None:
        lines = ["c5", "c1", "a1", "c3", "a3", "a5", "b4", "a2", "b8", "b6", "c9", "b7"]
        result, console = run_script(lines)

        assert result == GameResult.TIE
        assert console.output[-1] == "Tie game."


class TestMain:
    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"])

    def test_quits(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt="": "q")
        assert main([]) == 0
        assert "q to exit." in capsys.readouterr().out
