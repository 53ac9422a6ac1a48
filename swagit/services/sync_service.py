"""Service sequencing a full sync run"""

from typing import List

from swagit.exceptions import GitOperationError, MalformedOutputError, NoRemoteConfiguredError
from swagit.models.branch import BranchStatus
from swagit.services.git import GitCommandRunner, MergeSweeper, RefReader, RemoteReconciler
from swagit.services.git.parsers import parse_ahead_behind
from swagit.logging_config import get_logger

logger = get_logger(__name__)


class SyncService:
    """Runs the sync pipeline once and collects one status per branch.

    Steps, in order:
        1. stop with MODIFIED if the working tree has uncommitted changes
        2. fail if no remote is configured
        3. fast-forward the current branch from its upstream
        4. fetch and prune all remotes
        5. delete branches merged into the default branch
        6. classify every other remaining local branch
    """

    def __init__(
        self,
        runner: GitCommandRunner,
        ref_reader: RefReader,
        reconciler: RemoteReconciler,
        merge_sweeper: MergeSweeper,
    ):
        self.runner = runner
        self.ref_reader = ref_reader
        self.reconciler = reconciler
        self.merge_sweeper = merge_sweeper

    def sync(self) -> List[BranchStatus]:
        """Run all steps and return the statuses in the order they were produced.

        Raises:
            NoRemoteConfiguredError: If the repository has no remotes
            NoDefaultBranchError: If the merge sweep has no target
            GitOperationError: If a repository-wide step fails
        """
        current = self.ref_reader.current_branch()

        if not self.ref_reader.is_working_tree_clean():
            logger.info("Working tree has uncommitted changes, skipping sync")
            return [BranchStatus.modified(current)]

        if not self.ref_reader.remotes():
            raise NoRemoteConfiguredError()

        statuses: List[BranchStatus] = []

        current_status = self._pull_current(current)
        if current_status is not None:
            statuses.append(current_status)

        logger.info("Fetching and pruning remote-tracking refs")
        self.runner.run("fetch", "--all", "--prune")

        default_branch = self.ref_reader.default_branch()
        deleted = self.merge_sweeper.sweep(default_branch, current)
        statuses.extend(BranchStatus.merged(name) for name in deleted)

        for branch in self.ref_reader.local_branches():
            if branch.name in deleted or branch.name == current:
                continue
            statuses.append(self.reconciler.classify(branch.name, current))

        return statuses

    def _pull_current(self, current: str):
        """Fast-forward the checked-out branch; None if it has no upstream.

        An attempted pull reports UPDATED, unless it failed and the branch
        holds commits its upstream lacks.
        """
        if not self.ref_reader.has_upstream(current):
            logger.debug(f"{current} has no upstream, not pulling")
            return None

        try:
            self.runner.run("pull", "--ff-only", branch=current)
        except GitOperationError as e:
            logger.warning(f"Could not fast-forward {current}: {e}")
            if self._ahead_of_upstream(current) > 0:
                return BranchStatus.diverged(current)
        return BranchStatus.updated(current)

    def _ahead_of_upstream(self, current: str) -> int:
        try:
            output = self.runner.run(
                "rev-list", "--left-right", "--count", f"{current}...{current}@{{upstream}}",
                branch=current,
            )
            ahead, _ = parse_ahead_behind(output)
        except (GitOperationError, MalformedOutputError) as e:
            logger.debug(f"Could not count unpushed commits on {current}: {e}")
            return 0
        return ahead
