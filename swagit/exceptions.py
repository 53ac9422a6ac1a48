"""Custom exceptions for swagit"""

from typing import Optional


class SwagitError(Exception):
    """Base exception for all swagit errors."""
    pass


class GitOperationError(SwagitError):
    """Exception raised when an underlying git command fails."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class DetachedHeadError(GitOperationError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self):
        super().__init__("current_branch", message="Repository is in detached HEAD state")


class NotAGitRepositoryError(SwagitError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"not a git repository (or any of the parent directories): {path}")


class NoDefaultBranchError(SwagitError):
    """Exception raised when neither origin/HEAD nor main/master can be resolved."""

    def __init__(self, remote_name: str = "origin"):
        self.remote_name = remote_name
        super().__init__(
            f"could not determine default branch ({remote_name}/HEAD is unset and "
            "no local 'main' or 'master' branch exists)"
        )


class NoRemoteConfiguredError(SwagitError):
    """Exception raised when sync is requested in a repository without remotes."""

    def __init__(self):
        super().__init__("no remote configured")


class NoOtherBranchesError(SwagitError):
    """Exception raised when there is nothing to pick besides the current branch."""

    def __init__(self):
        super().__init__("no other branches in the repository")


class MalformedOutputError(SwagitError):
    """Exception raised by parsers when git output has an unexpected shape.

    Consumers always catch this and fall back to a conservative default.
    """

    def __init__(self, query: str, output: str):
        self.query = query
        self.output = output
        super().__init__(f"Unexpected output from '{query}': {output!r}")
