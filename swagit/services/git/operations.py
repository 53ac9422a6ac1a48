"""Branch mutations used by the interactive workflows."""

from typing import List

from swagit.services.git.runner import GitCommandRunner
from swagit.logging_config import get_logger

logger = get_logger(__name__)


class BranchOperations:
    """Service for checking out and deleting branches."""

    def __init__(self, runner: GitCommandRunner):
        self.runner = runner

    def checkout(self, branch_name: str) -> None:
        """Check out branch_name in the current working tree.

        Raises:
            GitOperationError: If git refuses the checkout
        """
        self.runner.run("checkout", branch_name, branch=branch_name)
        logger.info(f"Checked out {branch_name}")

    def delete_branches(self, branch_names: List[str]) -> None:
        """Force-delete the given local branches in one git call.

        Raises:
            GitOperationError: If any branch could not be deleted
        """
        if not branch_names:
            return
        self.runner.run("branch", "-D", *branch_names)
        logger.info(f"Deleted {len(branch_names)} branches: {', '.join(branch_names)}")
