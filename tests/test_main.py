"""Tests for the command-line entry point."""

from truco.config import Config
from truco.main import apply_overrides, generate_log_filename, main, parse_args


def always(answer):
    return lambda prompt: answer


def no_input(prompt):
    raise EOFError


class TestParseArgs:
    """Tests for argument parsing and overrides."""

    def test_defaults(self):
        """Test no arguments leave the config untouched."""
        config = apply_overrides(Config(), parse_args([]))
        assert config == Config()

    def test_overrides(self, tmp_path):
        """Test every flag lands in the config."""
        args = parse_args(
            [
                "-s", "9",
                "-v",
                "--show-hands",
                "--max-retries", "2",
                "--game-log", str(tmp_path),
            ]
        )
        config = apply_overrides(Config(), args)

        assert config.game.seed == 9
        assert config.logging.level == "DEBUG"
        assert config.logging.show_hands
        assert config.input.max_retries == 2
        assert config.game_log.enabled
        assert config.game_log.output_path == str(tmp_path)

    def test_log_filename(self, tmp_path):
        """Test generated log names."""
        name = generate_log_filename(str(tmp_path), 5)
        assert name.startswith(str(tmp_path))
        assert name.endswith("_seed5.jsonl")
        assert generate_log_filename("logs").endswith(".jsonl")


class TestMain:
    """Tests for main function."""

    def test_full_game(self, capsys):
        """Test a scripted game finishes with exit code 0."""
        assert main(["-s", "4"], ask=always("1")) == 0

        out = capsys.readouterr().out
        assert "The vira is:" in out
        assert "Round 1:" in out
        assert "Player 1 played:" in out
        assert "won the game!" in out
        assert "Game over!" in out

    def test_winner_announcement(self, capsys):
        """Test the winning team is described by its seats."""
        main(["-s", "4"], ask=always("1"))

        out = capsys.readouterr().out
        assert "(players 1 and 3)" in out or "(players 2 and 4)" in out

    def test_show_hands(self, capsys):
        """Test computer hands are revealed on request."""
        main(["-s", "4", "--show-hands"], ask=always("1"))
        assert "Hands:" in capsys.readouterr().out

    def test_input_error(self):
        """Test a failure during the game gives exit code 1."""
        assert main(["-s", "4"], ask=no_input) == 1

    def test_retry_cap(self):
        """Test that running out of retries aborts the game."""
        assert main(["-s", "4", "--max-retries", "1"], ask=always("x")) == 1

    def test_game_log(self, tmp_path):
        """Test a game log file is created in the given directory."""
        assert main(["-s", "4", "--game-log", str(tmp_path)], ask=always("1")) == 0

        logs = list(tmp_path.glob("*.jsonl"))
        assert len(logs) == 1
        assert logs[0].read_text().strip()

    def test_config_file(self, tmp_path, capsys):
        """Test settings from a config file."""
        path = tmp_path / "config.yaml"
        path.write_text("input:\n  max_retries: 0\n")

        assert main(["-c", str(path), "-s", "4"], ask=always("nope")) == 1
