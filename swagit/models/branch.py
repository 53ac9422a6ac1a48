"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Branch:
    """A local branch as read from refs/heads at the start of a command."""
    name: str
    commit_id: str  # Short hash of the tip
    worktree_path: Optional[str] = None  # Set when checked out in a linked worktree


class BranchState(Enum):
    """Outcome of reconciling a local branch with its remote-tracking ref."""
    UP_TO_DATE = "up-to-date"
    UPDATED = "updated"
    DIVERGED = "diverged"
    MERGED = "merged"
    REMOTE_GONE = "remote-gone"
    LOCAL_ONLY = "local-only"
    MODIFIED = "modified"


@dataclass(frozen=True)
class BranchStatus:
    """Status of one branch produced by a sync run."""
    state: BranchState
    branch: str

    @classmethod
    def up_to_date(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.UP_TO_DATE, branch)

    @classmethod
    def updated(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.UPDATED, branch)

    @classmethod
    def diverged(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.DIVERGED, branch)

    @classmethod
    def merged(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.MERGED, branch)

    @classmethod
    def remote_gone(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.REMOTE_GONE, branch)

    @classmethod
    def local_only(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.LOCAL_ONLY, branch)

    @classmethod
    def modified(cls, branch: str) -> "BranchStatus":
        return cls(BranchState.MODIFIED, branch)
