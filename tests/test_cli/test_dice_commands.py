"""Tests for dice CLI commands."""

import random

from typer.testing import CliRunner

from src.cli.main import app
from src.dice.parser import parse_dice_set
from src.dice.roller import roll_dice_set


runner = CliRunner()


class TestRollCommand:
    """Tests for 'dice roll'."""

    def test_roll_prints_total(self):
        """A valid roll exits 0 and shows a total."""
        result = runner.invoke(app, ["roll", "2d6+3"])
        assert result.exit_code == 0
        assert "Total:" in result.output
        assert "2d6+3" in result.output

    def test_seeded_roll_matches_library(self):
        """--seed gives the same total as rolling with random.Random(seed)."""
        expected = roll_dice_set(parse_dice_set("3d6 + d4"), random.Random(5))
        result = runner.invoke(app, ["roll", "3d6 + d4", "--seed", "5"])
        assert result.exit_code == 0
        assert f"Total: {expected.total}" in result.output

    def test_roll_shows_each_group(self):
        """Every group of a dice set is listed."""
        result = runner.invoke(app, ["roll", "d20 adv + 1d4", "--seed", "1"])
        assert result.exit_code == 0
        assert "1d20 advantage" in result.output
        assert "1d4" in result.output

    def test_roll_malformed_exits_1(self):
        """Malformed notation prints an error and exits 1."""
        result = runner.invoke(app, ["roll", "2d6++3"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_roll_verbose(self):
        """--verbose is accepted."""
        result = runner.invoke(app, ["roll", "d6", "--verbose"])
        assert result.exit_code == 0


class TestParseCommand:
    """Tests for 'dice parse'."""

    def test_parse_shows_fields(self):
        """Parsed fields are printed."""
        result = runner.invoke(app, ["parse", "1d6 - 1 disadvantage"])
        assert result.exit_code == 0
        assert "disadvantage" in result.output
        assert "1d6-1 disadvantage" in result.output

    def test_parse_keeps_zero_modifier(self):
        """An explicit +0 appears in the canonical form."""
        result = runner.invoke(app, ["parse", "2d6+0"])
        assert result.exit_code == 0
        assert "2d6+0" in result.output

    def test_parse_malformed_exits_1(self):
        """Malformed notation prints an error and exits 1."""
        result = runner.invoke(app, ["parse", "d20 lucky"])
        assert result.exit_code == 1
        assert "Unknown roll type" in result.output


class TestStartupConfiguration:
    """Tests for settings validation when the CLI starts."""

    def test_malformed_seed_exits_1(self):
        """A non-integer DICE_SEED is reported before rolling."""
        result = runner.invoke(app, ["roll", "d6"], env={"DICE_SEED": "abc"})
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_foreign_env_file_is_ignored(self, tmp_path, monkeypatch):
        """Unknown keys in the working directory's .env do not stop the CLI."""
        (tmp_path / ".env").write_text("DATABASE_URL=postgresql://x/y\n")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["roll", "2d6"])
        assert result.exit_code == 0
        assert "Total:" in result.output
