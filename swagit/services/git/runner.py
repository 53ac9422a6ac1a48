"""Git command runner for swagit."""

from typing import Optional

import git

from swagit.exceptions import GitOperationError, NotAGitRepositoryError
from swagit.logging_config import get_logger

logger = get_logger(__name__)


class GitCommandRunner:
    """Thin wrapper around GitPython that turns command failures into GitOperationError."""

    def __init__(self, repo_path: str):
        """Open the repository containing repo_path.

        Args:
            repo_path: Any path inside the working tree

        Raises:
            NotAGitRepositoryError: If repo_path is not inside a git repository
        """
        self.repo_path = repo_path
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise NotAGitRepositoryError(repo_path) from e

        logger.debug(f"Opened repository at {self.repo.working_dir}")

    @property
    def working_dir(self) -> str:
        return self.repo.working_dir

    def run(self, *args: str, branch: Optional[str] = None) -> str:
        """Run `git <args>` and return its stdout.

        Args:
            *args: Git subcommand and arguments
            branch: Branch the command concerns, used only for error messages

        Raises:
            GitOperationError: If git exits non-zero, carrying git's stderr
        """
        logger.debug(f"git {' '.join(args)}")
        try:
            return self.repo.git.execute(["git", *args])
        except git.exc.GitCommandError as e:
            stderr = (e.stderr or "").strip()
            # GitPython prefixes captured stderr with "stderr: '...'"
            if stderr.startswith("stderr:"):
                stderr = stderr[len("stderr:"):].strip().strip("'").strip()
            if stderr:
                message = f"exit {e.status}: {stderr}"
            else:
                message = f"exit {e.status}"
            raise GitOperationError(args[0] if args else "git", branch, message) from e

    def succeeds(self, *args: str) -> bool:
        """Run `git <args>` and report whether it exited zero."""
        try:
            self.run(*args)
            return True
        except GitOperationError as e:
            logger.debug(f"{e}")
            return False
