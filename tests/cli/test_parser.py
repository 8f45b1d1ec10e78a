"""
Tests for CLI argument parsing and command dispatch.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from ccachekit.cli.parser import CLI, main


@pytest.fixture
def cli():
    return CLI()


class TestParseArgs:
    def test_no_command(self, cli):
        args = cli.parse_args([])

        assert args.command is None
        assert args.verbose is False
        assert args.quiet is False
        assert args.config is None

    def test_save_defaults(self, cli):
        args = cli.parse_args(["save"])

        assert args.command == "save"
        assert args.store_dir is None
        assert args.early_exit is True

    def test_save_options(self, cli):
        args = cli.parse_args(
            ["--config", "state.yaml", "save", "--store-dir", "/srv/cache", "--no-early-exit"]
        )

        assert args.config == Path("state.yaml")
        assert args.store_dir == Path("/srv/cache")
        assert args.early_exit is False

    def test_stats_variant(self, cli):
        assert cli.parse_args(["stats"]).variant == "ccache"
        assert cli.parse_args(["stats", "--variant", "sccache"]).variant == "sccache"

    def test_stats_rejects_unknown_variant(self, cli):
        with pytest.raises(SystemExit):
            cli.parse_args(["stats", "--variant", "distcc"])

    def test_version(self, cli, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "ccachekit" in capsys.readouterr().out


@patch("ccachekit.cli.parser.configure_logging")
class TestRun:
    def test_no_command_prints_help(self, configure, cli, capsys):
        assert cli.run([]) == 1
        assert "usage: ccachekit" in capsys.readouterr().out

    def test_logging_configured_from_flags(self, configure, cli):
        with patch("ccachekit.cli.commands.stats.run", return_value=0):
            cli.run(["-v", "stats"])

        configure.assert_called_once_with(verbose=True, quiet=False)

    def test_dispatch_to_save(self, configure, cli):
        with patch("ccachekit.cli.commands.save.run", return_value=0) as run:
            assert cli.run(["save", "--no-early-exit"]) == 0

        assert run.call_args.args[0].command == "save"

    def test_dispatch_to_stats(self, configure, cli):
        with patch("ccachekit.cli.commands.stats.run", return_value=1) as run:
            assert cli.run(["stats"]) == 1

        run.assert_called_once()

    def test_keyboard_interrupt(self, configure, cli):
        with patch("ccachekit.cli.commands.stats.run", side_effect=KeyboardInterrupt):
            assert cli.run(["stats"]) == 130


class TestMain:
    def test_exits_with_cli_result(self):
        with patch.object(CLI, "run", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
