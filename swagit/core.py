"""Core functionality for swagit"""

import sys
from typing import Callable, List, Optional, Sequence, Tuple, Union

from swagit.config import Config
from swagit.constants import CHECKOUT_PROMPT, DELETE_PROMPT
from swagit.exceptions import NoOtherBranchesError
from swagit.formatters import format_branch_label, format_delete_confirmation
from swagit.models.branch import Branch, BranchStatus
from swagit.services.display_service import DisplayService
from swagit.services.git import (
    BranchOperations,
    GitCommandRunner,
    MergeSweeper,
    RefReader,
    RemoteReconciler,
)
from swagit.services.sync_service import SyncService
from swagit.logging_config import get_logger

logger = get_logger(__name__)

Choices = Sequence[Tuple[str, str]]


def _default_pick_branch(prompt: str, choices: Choices) -> Optional[str]:
    from swagit.ui import pick_branch
    return pick_branch(prompt, choices)


def _default_pick_branches(prompt: str, choices: Choices) -> Optional[List[str]]:
    from swagit.ui import pick_branches
    return pick_branches(prompt, choices)


def _default_confirm(message: str) -> bool:
    from swagit.ui import confirm
    return confirm(message)


class Swagit:
    """Entry point for the checkout, delete and sync workflows."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        display_service: Optional[DisplayService] = None,
        pick_branch: Callable[[str, Choices], Optional[str]] = _default_pick_branch,
        pick_branches: Callable[[str, Choices], Optional[List[str]]] = _default_pick_branches,
        confirm: Callable[[str], bool] = _default_confirm,
    ):
        """Initialize swagit.

        Args:
            repo_path: Path inside the git repository
            config: Configuration dict or Config object
            display_service: Output sink, a rich console by default
            pick_branch: Single-choice picker, returns None on cancel
            pick_branches: Multi-choice picker, returns None on cancel
            confirm: Yes/no prompt

        Raises:
            NotAGitRepositoryError: If repo_path is not in a repository
        """
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config

        self.runner = GitCommandRunner(repo_path)
        self.ref_reader = RefReader(self.runner, self.config)
        self.reconciler = RemoteReconciler(self.runner, self.ref_reader)
        self.merge_sweeper = MergeSweeper(self.runner, self.config)
        self.operations = BranchOperations(self.runner)
        self.sync_service = SyncService(
            self.runner, self.ref_reader, self.reconciler, self.merge_sweeper
        )
        self.display = display_service or DisplayService()

        self._pick_branch = pick_branch
        self._pick_branches = pick_branches
        self._confirm = confirm

    def show_banner(self) -> str:
        """Print the current branch and return its name."""
        current = self.ref_reader.current_branch()
        self.display.show_current_branch(current)
        return current

    def _other_branches(self) -> List[Branch]:
        branches = self.ref_reader.local_branches()
        if not branches:
            raise NoOtherBranchesError()
        return branches

    @staticmethod
    def _choices(branches: List[Branch]) -> List[Tuple[str, str]]:
        return [(format_branch_label(branch), branch.name) for branch in branches]

    def checkout(self) -> Optional[str]:
        """Pick a branch and check it out.

        Returns:
            The branch checked out, or None if the user cancelled
        """
        branches = self._other_branches()

        if self.config.interactive and sys.stdin.isatty() and sys.stdout.isatty():
            selected = self._pick_branch(CHECKOUT_PROMPT, self._choices(branches))
            if selected is None:
                logger.debug("Checkout cancelled")
                return None
        else:
            selected = branches[0].name
            logger.warning(f"Not running in a terminal, checking out {selected}")

        self.operations.checkout(selected)
        self.display.show_success(f"Switched to branch {selected}")
        return selected

    def delete(self) -> List[str]:
        """Pick branches, confirm, and delete them.

        Returns:
            The branches deleted; empty when nothing was selected or confirmed
        """
        branches = self._other_branches()

        selected = self._pick_branches(DELETE_PROMPT, self._choices(branches))
        if not selected:
            self.display.show_message("No branches selected, exiting.")
            return []

        if not self._confirm(format_delete_confirmation(selected)):
            logger.debug("Deletion not confirmed")
            return []

        self.operations.delete_branches(selected)
        self.display.show_success(f"Deleted {len(selected)} branches")
        return selected

    def sync(self) -> List[BranchStatus]:
        """Run the sync pipeline and print its results."""
        self.display.show_info("Syncing with remote...")
        statuses = self.sync_service.sync()
        self.display.display_sync_results(statuses)
        return statuses
