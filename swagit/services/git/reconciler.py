"""Reconcile local branches with their remote-tracking refs."""

from typing import Optional

from swagit.exceptions import GitOperationError, MalformedOutputError
from swagit.models.branch import BranchStatus
from swagit.services.git.parsers import parse_ahead_behind
from swagit.services.git.ref_reader import RefReader
from swagit.services.git.runner import GitCommandRunner
from swagit.logging_config import get_logger

logger = get_logger(__name__)


class RemoteReconciler:
    """Classifies a branch against <remote>/<branch> and fast-forwards it when safe."""

    def __init__(self, runner: GitCommandRunner, ref_reader: RefReader):
        self.runner = runner
        self.ref_reader = ref_reader
        self.remote_name = ref_reader.remote_name

    def classify(self, branch_name: str, current_branch: Optional[str] = None) -> BranchStatus:
        """Classify one branch.

        A branch behind its remote-tracking ref is advanced: the checked-out
        branch with a fast-forward merge, any other branch by moving its ref.
        Branches with local commits are never touched.

        Args:
            branch_name: Local branch to classify
            current_branch: Name of the checked-out branch, if known

        Returns:
            The branch's status; remote-state failures degrade instead of raising

        Raises:
            GitOperationError: If the checked-out branch can't be fast-forwarded
        """
        # Must precede counting: without a tracking ref the counts mean nothing
        if not self.ref_reader.has_remote_branch(branch_name):
            logger.debug(f"{branch_name}: no {self.remote_name}/{branch_name}")
            return BranchStatus.local_only(branch_name)

        counts = self._ahead_behind(branch_name)
        if counts is None:
            return BranchStatus.remote_gone(branch_name)

        ahead, behind = counts
        logger.debug(f"{branch_name}: ahead {ahead}, behind {behind}")

        if ahead > 0:
            return BranchStatus.diverged(branch_name)
        if behind == 0:
            return BranchStatus.up_to_date(branch_name)
        if branch_name == current_branch:
            return self._fast_forward_current(branch_name)
        return self._advance_ref(branch_name)

    def _ahead_behind(self, branch_name: str):
        """(ahead, behind) of the local branch, or None when it can't be counted."""
        try:
            output = self.runner.run(
                "rev-list",
                "--left-right",
                "--count",
                f"refs/heads/{branch_name}...{self.ref_reader.remote_ref(branch_name)}",
                branch=branch_name,
            )
            return parse_ahead_behind(output)
        except (GitOperationError, MalformedOutputError) as e:
            logger.debug(f"Could not count commits for {branch_name}: {e}")
            return None

    def _fast_forward_current(self, branch_name: str) -> BranchStatus:
        # Only reached with no local commits, so a failure here is a working
        # tree obstacle and has no truthful status; let it propagate
        self.runner.run(
            "merge", "--ff-only", f"{self.remote_name}/{branch_name}", branch=branch_name
        )
        logger.info(f"Fast-forwarded {branch_name}")
        return BranchStatus.updated(branch_name)

    def _advance_ref(self, branch_name: str) -> BranchStatus:
        remote_ref = self.ref_reader.remote_ref(branch_name)
        target = self.ref_reader.resolve(remote_ref)
        if not target:
            logger.debug(f"{remote_ref} vanished before update")
            return BranchStatus.remote_gone(branch_name)

        local_ref = f"refs/heads/{branch_name}"
        old = self.ref_reader.resolve(local_ref)
        if old == target:
            return BranchStatus.up_to_date(branch_name)

        try:
            args = ["update-ref", "-m", f"swagit: fast-forward to {remote_ref}", local_ref, target]
            if old:
                # Only move the ref if nobody moved it since we looked
                args.append(old)
            self.runner.run(*args, branch=branch_name)
        except GitOperationError as e:
            logger.warning(f"Could not update {branch_name}: {e}")
            return BranchStatus.diverged(branch_name)

        logger.info(f"Updated {branch_name} to {target[:7]}")
        return BranchStatus.updated(branch_name)
