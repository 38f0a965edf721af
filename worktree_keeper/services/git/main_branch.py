"""Selection of the branch used as the merge and push baseline."""

from worktree_keeper.constants import MAIN_BRANCH, MASTER_BRANCH
from worktree_keeper.logging_config import get_logger
from worktree_keeper.services.command_executor import CommandExecutor
from worktree_keeper.services.git import commands

logger = get_logger(__name__)


def detect_main_branch(executor: CommandExecutor) -> str:
    """Pick the comparison baseline branch.

    Order: a non-``main`` name returned when resolving ``main``, then
    ``master`` if it exists, else ``main``.

    Resolving the ref ``main`` returns ``main`` itself whenever it exists,
    so the first case only fires for unusual ref setups. It is kept as is.
    """
    result = executor.run(commands.abbrev_ref(MAIN_BRANCH))
    if result.ok:
        branch = result.output.strip()
        if branch and branch != MAIN_BRANCH:
            logger.debug(f"Using resolved main branch: {branch}")
            return branch

    result = executor.run(commands.verify_ref(MASTER_BRANCH))
    if result.ok:
        logger.debug(f"Using {MASTER_BRANCH} as main branch")
        return MASTER_BRANCH

    logger.debug(f"Defaulting to {MAIN_BRANCH} as main branch")
    return MAIN_BRANCH
