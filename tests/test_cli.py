"""Tests for the command-line interface"""
import io
from unittest.mock import MagicMock, patch

import pytest

from worktree_keeper.cli.args import build_parser
from worktree_keeper.cli.main import main, run_clean
from worktree_keeper.exceptions import InventoryError, TerminalRequiredError


def parse_args(argv):
    return build_parser().parse_args(argv)


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep main() from reconfiguring the root logger during tests."""
    with patch("worktree_keeper.cli.main.setup_logging"):
        yield


class TestParseArgs:
    """Test argument parsing."""

    def test_clean_defaults(self):
        args = parse_args(["clean"])

        assert args.command == "clean"
        assert args.force is False
        assert args.dry_run is False
        assert args.no_interactive is False
        assert args.workers is None
        assert args.verbose is False

    def test_clean_options(self):
        args = parse_args(["-v", "clean", "-f", "--dry-run", "--no-interactive", "--workers", "4"])

        assert args.verbose is True
        assert args.force is True
        assert args.dry_run is True
        assert args.no_interactive is True
        assert args.workers == 4

    def test_no_command(self):
        assert parse_args([]).command is None

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "worktree-keeper" in capsys.readouterr().out


class TestMain:
    """Test the main entry point."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "clean" in capsys.readouterr().out

    def test_outside_repository(self, temp_dir, monkeypatch):
        plain = temp_dir / "plain"
        plain.mkdir()
        monkeypatch.chdir(plain)

        with patch("worktree_keeper.cli.main.console") as console:
            assert main(["clean", "--no-interactive"]) == 1

        message = console.print.call_args_list[0].args[0]
        assert message.startswith("Error: not in a git repository")

    def test_dry_run_in_repository(self, git_repo, add_worktree, temp_dir, monkeypatch):
        path = add_worktree("feature")
        monkeypatch.chdir(temp_dir / "test_repo")

        assert main(["clean", "--dry-run"]) == 0
        assert path.exists()

    def test_keeper_error_returns_one(self):
        with patch("worktree_keeper.cli.main.run_clean", side_effect=InventoryError("boom")), \
                patch("worktree_keeper.cli.main.console"):
            assert main(["clean"]) == 1

    def test_keyboard_interrupt_returns_one(self):
        with patch("worktree_keeper.cli.main.run_clean", side_effect=KeyboardInterrupt), \
                patch("worktree_keeper.cli.main.console"):
            assert main(["clean"]) == 1

    def test_unexpected_error_returns_one(self):
        with patch("worktree_keeper.cli.main.run_clean", side_effect=RuntimeError("oops")), \
                patch("worktree_keeper.cli.main.console") as console:
            assert main(["clean"]) == 1

        assert console.print.call_args_list[0].args[0] == "Unexpected error: oops"


class TestRunClean:
    """Test translation of arguments into a cleanup run."""

    def test_overrides_passed_to_cleaner(self):
        args = parse_args(["clean", "--force", "--workers", "2", "--no-interactive"])

        with patch("worktree_keeper.cli.main.WorktreeCleaner") as cleaner_cls:
            assert run_clean(args, "/src/repo") == 0

        working_dir, overrides, _ = cleaner_cls.for_directory.call_args.args
        assert working_dir == "/src/repo"
        assert overrides["force"] is True
        assert overrides["workers"] == 2
        assert overrides["interactive"] is False
        cleaner_cls.for_directory.return_value.run.assert_called_once_with()

    @pytest.fixture
    def no_terminal(self):
        stdin = MagicMock()
        stdin.isatty.return_value = False
        with patch("worktree_keeper.cli.main.sys.stdin", stdin):
            yield

    def test_prompt_without_terminal_is_refused(self, no_terminal):
        args = parse_args(["clean"])

        with patch("worktree_keeper.cli.main.WorktreeCleaner") as cleaner_cls:
            with pytest.raises(TerminalRequiredError, match="--no-interactive"):
                run_clean(args, "/src/repo")

        cleaner_cls.for_directory.assert_not_called()

    def test_no_interactive_runs_without_terminal(self, no_terminal):
        args = parse_args(["clean", "--no-interactive"])

        with patch("worktree_keeper.cli.main.WorktreeCleaner") as cleaner_cls:
            assert run_clean(args, "/src/repo") == 0

        assert cleaner_cls.for_directory.call_args.args[1]["interactive"] is False

    def test_dry_run_runs_without_terminal(self, no_terminal):
        args = parse_args(["clean", "--dry-run"])

        with patch("worktree_keeper.cli.main.WorktreeCleaner") as cleaner_cls:
            assert run_clean(args, "/src/repo") == 0

        assert cleaner_cls.for_directory.call_args.args[1]["dry_run"] is True

    def test_interactive_with_terminal(self):
        args = parse_args(["clean"])
        stdin = MagicMock()
        stdin.isatty.return_value = True

        with patch("worktree_keeper.cli.main.WorktreeCleaner") as cleaner_cls, \
                patch("worktree_keeper.cli.main.sys.stdin", stdin):
            run_clean(args, "/src/repo")

        assert cleaner_cls.for_directory.call_args.args[1]["interactive"] is True

    def test_plain_clean_keeps_worktrees_without_terminal(
        self, git_repo, add_worktree, temp_dir, monkeypatch
    ):
        path = add_worktree("feature")
        monkeypatch.chdir(temp_dir / "test_repo")
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        with patch("worktree_keeper.cli.main.console") as console:
            assert main(["clean"]) == 1

        assert path.exists()
        assert "needs a terminal" in console.print.call_args_list[0].args[0]
