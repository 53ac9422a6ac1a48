"""Data models for swagit."""

from .branch import Branch, BranchState, BranchStatus
from .worktree import BranchRef, OtherLine, WorktreeAccumulator, WorktreePath

__all__ = [
    "Branch",
    "BranchState",
    "BranchStatus",
    "BranchRef",
    "OtherLine",
    "WorktreeAccumulator",
    "WorktreePath",
]
