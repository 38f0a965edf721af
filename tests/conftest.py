"""Pytest fixtures for worktree-keeper tests"""
import io
import tempfile
from pathlib import Path
from threading import Lock

import git
import pytest
from rich.console import Console

from worktree_keeper.config import Config
from worktree_keeper.services.command_executor import CommandExecutor, CommandResult


class FakeExecutor(CommandExecutor):
    """Scripted command executor that records every command it is given.

    Responses are keyed by argv, optionally narrowed to a working directory.
    Commands without a scripted response fail like an unknown git ref would.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []
        self._lock = Lock()

    def respond(self, *argv, output="", working_dir=None):
        self.responses[(tuple(argv), working_dir)] = (output, None)
        return self

    def fail(self, *argv, stderr="fatal: failed", status=1, working_dir=None):
        error = git.exc.GitCommandError(list(argv), status, stderr=stderr)
        self.responses[(tuple(argv), working_dir)] = ("", error)
        return self

    def commands_named(self, subcommand):
        return [c for c in self.calls if len(c.args) > 0 and c.args[0] == subcommand]

    def execute(self, commands):
        results = []
        for command in commands:
            with self._lock:
                self.calls.append(command)
            key = tuple(command.argv)
            if (key, command.working_dir) in self.responses:
                output, error = self.responses[(key, command.working_dir)]
            elif (key, None) in self.responses:
                output, error = self.responses[(key, None)]
            else:
                output = ""
                error = git.exc.GitCommandError(command.argv, 128, stderr="fatal: not scripted")
            results.append(CommandResult(command, output, error))
        return results


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def fake_executor():
    """Create an empty scripted executor."""
    return FakeExecutor()


@pytest.fixture
def safe_executor(fake_executor):
    """Executor scripted so that branch 'feature' is merged, clean and pushed."""
    fake_executor.respond("git", "rev-parse", "--abbrev-ref", "main", output="main")
    fake_executor.respond("git", "merge-base", "--is-ancestor", "feature", "main")
    fake_executor.respond("git", "status", "--porcelain", output="")
    fake_executor.respond("git", "rev-list", "--count", "origin/feature..feature", output="0")
    return fake_executor


@pytest.fixture
def output():
    """A rich console writing to an in-memory buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None)


@pytest.fixture
def mock_config():
    """Create a configuration rooted at the default worktree directory."""
    return Config(interactive=False)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def add_worktree(git_repo, temp_dir):
    """Factory creating a worktree on a new branch under ../worktrees."""

    def _add(branch, directory=None):
        path = temp_dir / "worktrees" / (directory or branch)
        git_repo.git.worktree("add", "-b", branch, str(path))
        return path

    return _add
