"""
Tests for n_in_a_row.cli

Tests argument parsing and the command entry point.
"""

import pytest

from n_in_a_row.cli import build_parser, main


class TestParser:
    """build_parser tests."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert (args.width, args.height, args.goal) == (6, 6, 4)
        assert args.players is None
        assert args.seed is None
        assert args.verbose is False

    def test_repeated_players(self):
        args = build_parser().parse_args(["-p", "human", "-p", "computer:hard", "-p", "human"])
        assert args.players == ["human", "computer:hard", "human"]


class TestMain:
    """main() entry point tests."""

    def test_computer_game_runs_to_end(self, capsys):
        main([
            "-W", "4", "-H", "4", "-g", "3",
            "-p", "computer:random", "-p", "computer:insane:offensive",
            "--seed", "5",
        ])
        out = capsys.readouterr().out
        assert "wins!" in out or "Draw!" in out

    def test_invalid_settings_exit(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-W", "1"])
        assert exc.value.code == 2
        assert "width must be at least 2" in capsys.readouterr().err

    def test_unknown_player_exit(self):
        with pytest.raises(SystemExit) as exc:
            main(["-p", "robot", "-p", "human"])
        assert exc.value.code == 2

    def test_end_of_input(self, monkeypatch: pytest.MonkeyPatch, capsys):
        def eof(prompt: str) -> str:
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)
        main(["-p", "human", "-p", "human"])
        assert "Game abandoned." in capsys.readouterr().out
