"""Builders for the git commands used by the cleanup flow."""

from worktree_keeper.constants import DEFAULT_REMOTE
from worktree_keeper.services.command_executor import Command


def worktree_list() -> Command:
    return Command("git", ("worktree", "list", "--porcelain"))


def worktree_remove(path: str, force: bool = False) -> Command:
    args = ["worktree", "remove"]
    if force:
        args.append("--force")
    args.append(path)
    return Command("git", tuple(args))


def abbrev_ref(ref: str) -> Command:
    return Command("git", ("rev-parse", "--abbrev-ref", ref))


def verify_ref(ref: str) -> Command:
    return Command("git", ("rev-parse", "--verify", "--quiet", ref))


def is_ancestor(branch: str, main_branch: str) -> Command:
    """Succeeds only when ``branch`` is contained in ``main_branch``."""
    return Command("git", ("merge-base", "--is-ancestor", branch, main_branch))


def status_porcelain(worktree_path: str) -> Command:
    return Command("git", ("status", "--porcelain"), working_dir=worktree_path)


def count_commits(base: str, branch: str) -> Command:
    """Count commits reachable from ``branch`` but not from ``base``."""
    return Command("git", ("rev-list", "--count", f"{base}..{branch}"))


def count_unpushed(branch: str, remote: str = DEFAULT_REMOTE) -> Command:
    return count_commits(f"{remote}/{branch}", branch)
