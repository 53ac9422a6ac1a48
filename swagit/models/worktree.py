"""Worktree data models."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

BRANCH_REF_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class WorktreePath:
    """A `worktree <path>` line; starts a new record."""

    path: str


@dataclass(frozen=True)
class BranchRef:
    """A `branch <ref>` line belonging to the most recent worktree."""

    ref: str

    @property
    def branch_name(self) -> Optional[str]:
        """Local branch name, or None when the ref is not under refs/heads/."""
        if self.ref.startswith(BRANCH_REF_PREFIX):
            return self.ref[len(BRANCH_REF_PREFIX):]
        return None


@dataclass(frozen=True)
class OtherLine:
    """Any other porcelain line (HEAD, detached, bare, locked, blank...)."""

    text: str


WorktreeLine = Union[WorktreePath, BranchRef, OtherLine]


@dataclass
class WorktreeAccumulator:
    """Two-slot accumulator pairing worktree paths with branch names.

    A pair is emitted as soon as both slots are filled; the branch slot is then
    cleared while the path slot stays until the next WorktreePath.
    """

    path: Optional[str] = None
    branch: Optional[str] = None
    mapping: dict = field(default_factory=dict)

    def feed(self, line: WorktreeLine) -> Optional[Tuple[str, str]]:
        """Consume one tagged line, returning a (branch, path) pair when one completes."""
        if isinstance(line, WorktreePath):
            self.path = line.path
        elif isinstance(line, BranchRef):
            self.branch = line.branch_name
        else:
            return None

        if self.path is not None and self.branch is not None:
            pair = (self.branch, self.path)
            self.mapping[self.branch] = self.path
            self.branch = None
            return pair
        return None
