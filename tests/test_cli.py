"""Tests for the command-line interface.

**Feature: post-trade-therapy**
"""

import json

import pytest
from click.testing import CliRunner

from tradetherapy.cli import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner with config and database in a temporary directory."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f'[storage]\ndb_path = "{(tmp_path / "journal.db").as_posix()}"\n\n'
        "[buddy]\nbase_delay = 0.0\njitter = 0.0\n"
    )
    monkeypatch.setenv("TRADETHERAPY_CONFIG", str(config_path))
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def _log_loss(runner: CliRunner, symbol: str = "EURUSD"):
    # revenge, stoploss, emotion, plan, fomo
    answers = "yes\nno\nfrustrated\nno\nyes\n"
    return runner.invoke(
        cli, ["log", symbol, "-o", "loss", "-p", "-1.5", "-n", "", "-t", ""], input=answers
    )


class TestLogCommand:
    def test_log_with_questionnaire(self, runner):
        result = _log_loss(runner)

        assert result.exit_code == 0, result.output
        assert "Logged EURUSD loss" in result.output

    def test_log_without_symbol_fails(self, runner):
        result = runner.invoke(
            cli, ["log", "-o", "win", "-p", "1", "-n", "", "-t", "", "--no-questions"], input="\n"
        )

        assert result.exit_code == 1
        assert "symbol is required" in result.output

    def test_patterns_after_two_revenge_losses(self, runner):
        _log_loss(runner)
        _log_loss(runner, "GBPUSD")

        result = runner.invoke(cli, ["patterns"])

        assert result.exit_code == 0
        assert "Revenge Trading Pattern" in result.output
        assert "FOMO Pattern Detected" in result.output


class TestJournalCommands:
    def test_empty_journal(self, runner):
        result = runner.invoke(cli, ["trades"])

        assert result.exit_code == 0
        assert "No trades logged yet" in result.output

    @pytest.mark.parametrize("limit", ["0", "-2"])
    def test_trades_limit_must_be_positive(self, runner, limit):
        _log_loss(runner)

        result = runner.invoke(cli, ["trades", f"--limit={limit}"])

        assert result.exit_code == 2
        assert "Trade Journal" not in result.output

    def test_trades_limit_shows_most_recent(self, runner):
        _log_loss(runner, "OLDEST")
        _log_loss(runner, "NEWEST")

        result = runner.invoke(cli, ["trades", "--limit", "1"], env={"COLUMNS": "200"})

        assert result.exit_code == 0
        assert "NEWEST" in result.output
        assert "OLDEST" not in result.output

    def test_stats(self, runner):
        runner.invoke(cli, ["log", "AAPL", "-o", "win", "-p", "2", "-n", "", "-t", "", "--no-questions"])
        _log_loss(runner)

        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 0
        assert "50.0%" in result.output
        assert "+0.50%" in result.output

    def test_export_and_import(self, runner, tmp_path):
        _log_loss(runner)

        result = runner.invoke(cli, ["export", "backup.json"])
        assert result.exit_code == 0
        exported = json.loads((tmp_path / "backup.json").read_text())
        assert exported[0]["symbol"] == "EURUSD"

        trade_id = str(exported[0]["id"])
        assert runner.invoke(cli, ["delete", trade_id, "--yes"]).exit_code == 0
        assert "No trades logged yet" in runner.invoke(cli, ["trades"]).output

        result = runner.invoke(cli, ["import", "backup.json", "--yes"])
        assert result.exit_code == 0
        assert "Imported 1 trades" in result.output

    def test_import_rejects_bad_file(self, runner, tmp_path):
        (tmp_path / "bad.json").write_text("{not json")

        result = runner.invoke(cli, ["import", "bad.json", "--yes"])

        assert result.exit_code == 1
        assert "Error importing data" in result.output

    def test_verbose_flag_runs_command(self, runner):
        result = runner.invoke(cli, ["--verbose", "stats"])

        assert result.exit_code == 0
        assert "Total Trades" in result.output

    def test_show_unknown_trade(self, runner):
        result = runner.invoke(cli, ["show", "42"])

        assert result.exit_code == 1


class TestChatCommand:
    def test_chat_replies_and_exits(self, runner):
        _log_loss(runner)

        result = runner.invoke(cli, ["chat"], input="I want to revenge trade EURUSD\n\nexit\n")

        assert result.exit_code == 0
        assert "revenge trading" in result.output
        assert "Trade your plan" in result.output
