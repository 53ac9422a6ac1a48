"""Delete branches that have landed in the default branch."""

from typing import List, Optional, TYPE_CHECKING, Union

from swagit.config import DEFAULT_PROTECTED_BRANCHES
from swagit.exceptions import GitOperationError
from swagit.services.git.parsers import parse_branch_names
from swagit.services.git.runner import GitCommandRunner
from swagit.logging_config import get_logger

if TYPE_CHECKING:
    from swagit.config import Config

logger = get_logger(__name__)


class MergeSweeper:
    """Service for pruning fully merged local branches."""

    def __init__(self, runner: GitCommandRunner, config: Union["Config", dict]):
        self.runner = runner
        self.protected_branches = config.get("protected_branches", DEFAULT_PROTECTED_BRANCHES)

    def merged_branches(self, default_branch: str) -> List[str]:
        """Local branches whose tips are reachable from default_branch."""
        output = self.runner.run(
            "branch", "--merged", default_branch, "--format=%(refname:short)"
        )
        return parse_branch_names(output)

    def candidates(self, default_branch: str, current_branch: Optional[str]) -> List[str]:
        """Merged branches minus the default, protected and current branches."""
        excluded = {default_branch, *DEFAULT_PROTECTED_BRANCHES, *self.protected_branches}
        if current_branch:
            excluded.add(current_branch)
        return [name for name in self.merged_branches(default_branch) if name not in excluded]

    def sweep(self, default_branch: str, current_branch: Optional[str]) -> List[str]:
        """Delete merged branches, returning the names actually deleted in listing order.

        A branch that fails to delete is skipped and left out of the result.

        Raises:
            GitOperationError: If the merged branches can't be listed
        """
        deleted = []
        for name in self.candidates(default_branch, current_branch):
            try:
                # -D: merge status was just confirmed against default_branch,
                # which need not be the branch's upstream
                self.runner.run("branch", "-D", name, branch=name)
            except GitOperationError as e:
                logger.debug(f"Skipping {name}: {e}")
                continue
            logger.info(f"Deleted merged branch {name}")
            deleted.append(name)
        return deleted
