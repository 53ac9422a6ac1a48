"""Read-only queries against the repository's refs."""

from typing import Dict, List, Optional, TYPE_CHECKING, Union

from swagit.exceptions import (
    DetachedHeadError,
    GitOperationError,
    NoDefaultBranchError,
)
from swagit.models.branch import Branch
from swagit.services.git.parsers import (
    parse_branch_list,
    parse_remotes,
    parse_status_porcelain,
    parse_symbolic_ref,
    parse_worktree_list,
)
from swagit.services.git.runner import GitCommandRunner
from swagit.logging_config import get_logger

if TYPE_CHECKING:
    from swagit.config import Config

logger = get_logger(__name__)

DEFAULT_BRANCH_CANDIDATES = ("main", "master")


class RefReader:
    """Service for querying branches, worktrees and remotes."""

    def __init__(self, runner: GitCommandRunner, config: Union["Config", dict]):
        """Initialize the ref reader.

        Args:
            runner: Command runner bound to the repository
            config: Configuration dictionary or Config object
        """
        self.runner = runner
        self.remote_name = config.get("remote_name", "origin")

    def current_branch(self) -> str:
        """Name of the checked-out branch.

        Raises:
            GitOperationError: If the query fails
            DetachedHeadError: If HEAD does not point at a branch
        """
        name = self.runner.run("branch", "--show-current").strip()
        if not name:
            raise DetachedHeadError()
        return name

    def local_branches(self) -> List[Branch]:
        """All local branches except the current one, annotated with worktree paths."""
        output = self.runner.run(
            "for-each-ref",
            "--format=%(refname:short) %(objectname:short)",
            "refs/heads/",
        )
        current = self.current_branch()
        worktrees = self.worktrees()

        branches = []
        for branch in parse_branch_list(output):
            if branch.name == current:
                continue
            path = worktrees.get(branch.name)
            if path:
                branch = Branch(branch.name, branch.commit_id, worktree_path=path)
            branches.append(branch)

        logger.debug(f"Found {len(branches)} local branches besides {current}")
        return branches

    def worktrees(self) -> Dict[str, str]:
        """Mapping of branch name to worktree path; empty if worktrees can't be listed."""
        try:
            output = self.runner.run("worktree", "list", "--porcelain")
        except GitOperationError as e:
            logger.debug(f"Could not list worktrees: {e}")
            return {}
        mapping = parse_worktree_list(output)
        logger.debug(f"Found {len(mapping)} worktree branches")
        return mapping

    def default_branch(self) -> str:
        """Resolve the default branch.

        Uses <remote>/HEAD when set, otherwise the first existing local
        branch among main and master.

        Raises:
            NoDefaultBranchError: If nothing resolves
        """
        try:
            output = self.runner.run("symbolic-ref", f"refs/remotes/{self.remote_name}/HEAD")
            name = parse_symbolic_ref(output, self.remote_name)
            if name:
                return name
        except GitOperationError as e:
            logger.debug(f"{self.remote_name}/HEAD is not set: {e}")

        for candidate in DEFAULT_BRANCH_CANDIDATES:
            if self.ref_exists(f"refs/heads/{candidate}"):
                return candidate

        raise NoDefaultBranchError(self.remote_name)

    def remotes(self) -> List[str]:
        """Names of configured remotes."""
        return parse_remotes(self.runner.run("remote"))

    def ref_exists(self, ref: str) -> bool:
        return self.runner.succeeds("rev-parse", "--verify", "--quiet", ref)

    def has_remote_branch(self, branch_name: str) -> bool:
        """Check if the branch has a remote-tracking ref."""
        return self.ref_exists(self.remote_ref(branch_name))

    def remote_ref(self, branch_name: str) -> str:
        return f"refs/remotes/{self.remote_name}/{branch_name}"

    def resolve(self, ref: str) -> Optional[str]:
        """Full commit hash a ref points at, or None if it doesn't resolve."""
        try:
            return self.runner.run("rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}").strip()
        except GitOperationError:
            return None

    def has_upstream(self, branch_name: str) -> bool:
        return self.runner.succeeds(
            "rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch_name}@{{upstream}}"
        )

    def is_working_tree_clean(self) -> bool:
        """True when nothing is staged or modified. Untracked files are ignored."""
        output = self.runner.run("status", "--porcelain", "--untracked-files=no")
        status = parse_status_porcelain(output)
        return not (status["modified"] or status["staged"])
