"""Tests for removing selected worktrees"""
import pytest

from worktree_keeper.exceptions import WorktreeNotFoundError
from worktree_keeper.models.worktree import Worktree
from worktree_keeper.services.command_executor import GitCommandExecutor
from worktree_keeper.services.removal import find_worktree_by_name, remove_selected_worktrees


def branch_name(worktree):
    return worktree.branch


@pytest.fixture
def worktrees():
    return [Worktree(f"/worktrees/{name}", name) for name in ("a", "b", "c", "d")]


def script_removals(executor, names, failing=(), force=False):
    for name in names:
        argv = ["git", "worktree", "remove"] + (["--force"] if force else []) + [f"/worktrees/{name}"]
        if name in failing:
            executor.fail(*argv, stderr=f"fatal: '/worktrees/{name}' contains modified files")
        else:
            executor.respond(*argv)


class TestRemoveSelectedWorktrees:
    """Test remove_selected_worktrees."""

    def test_all_succeed(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "abcd")

        outcomes = remove_selected_worktrees(
            output, fake_executor, worktrees, ["a", "c"], branch_name
        )

        assert [(o.name, o.success) for o in outcomes] == [("a", True), ("c", True)]
        assert output.file.getvalue().splitlines() == ["✓ Removed 'a'", "✓ Removed 'c'"]

    def test_one_failure_does_not_stop_batch(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "abcd", failing="b")

        outcomes = remove_selected_worktrees(
            output, fake_executor, worktrees, ["a", "b", "c", "d"], branch_name
        )

        assert [o.success for o in outcomes] == [True, False, True, True]
        lines = output.file.getvalue().splitlines()
        assert len(lines) == 4
        assert lines[0] == "✓ Removed 'a'"
        assert lines[1].startswith("Failed to remove 'b': ")
        assert "contains modified files" in lines[1]
        assert lines[2:] == ["✓ Removed 'c'", "✓ Removed 'd'"]
        assert sum(1 for line in lines if line.startswith("Failed")) == 1

    def test_unknown_name_is_reported_and_skipped(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "abcd")

        outcomes = remove_selected_worktrees(
            output, fake_executor, worktrees, ["ghost", "a"], branch_name
        )

        assert [(o.name, o.success) for o in outcomes] == [("ghost", False), ("a", True)]
        lines = output.file.getvalue().splitlines()
        assert lines[0] == "Failed to find worktree 'ghost': worktree not found: ghost"
        assert lines[1] == "✓ Removed 'a'"
        assert len(fake_executor.commands_named("worktree")) == 1

    def test_selection_order_is_followed(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "abcd")

        remove_selected_worktrees(output, fake_executor, worktrees, ["d", "a"], branch_name)

        removed = [c.args[-1] for c in fake_executor.commands_named("worktree")]
        assert removed == ["/worktrees/d", "/worktrees/a"]

    def test_force_flag(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "abcd", force=True)

        outcomes = remove_selected_worktrees(
            output, fake_executor, worktrees, ["a"], branch_name, force=True
        )

        assert outcomes[0].success is True
        assert fake_executor.calls[0].args == ("worktree", "remove", "--force", "/worktrees/a")

    def test_empty_selection(self, fake_executor, output, worktrees):
        assert remove_selected_worktrees(output, fake_executor, worktrees, [], branch_name) == []
        assert fake_executor.calls == []
        assert output.file.getvalue() == ""

    def test_outcome_records_path_and_error(self, fake_executor, output, worktrees):
        script_removals(fake_executor, "a", failing="a")

        outcome = remove_selected_worktrees(
            output, fake_executor, worktrees, ["a"], branch_name
        )[0]

        assert outcome.path == "/worktrees/a"
        assert "contains modified files" in outcome.error

    def test_removes_real_worktree(self, git_repo, add_worktree, output):
        path = add_worktree("feature")
        executor = GitCommandExecutor(git_repo.working_dir)

        outcomes = remove_selected_worktrees(
            output, executor, [Worktree(str(path), "feature")], ["feature"], branch_name
        )

        assert outcomes[0].success is True
        assert not path.exists()


class TestFindWorktreeByName:
    """Test find_worktree_by_name."""

    def test_found(self, worktrees):
        assert find_worktree_by_name(worktrees, "c", branch_name) is worktrees[2]

    def test_missing(self, worktrees):
        with pytest.raises(WorktreeNotFoundError, match="worktree not found: z"):
            find_worktree_by_name(worktrees, "z", branch_name)
