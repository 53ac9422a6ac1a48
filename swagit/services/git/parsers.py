"""Parsers for machine-readable git output.

Each parser turns the text of one query type into typed data. Lines or fields
that do not fit are either skipped (listings) or reported with
MalformedOutputError so the caller can pick its own conservative fallback.
"""

from typing import Dict, List, Optional, Tuple

from swagit.exceptions import MalformedOutputError
from swagit.models.branch import Branch
from swagit.models.worktree import (
    BranchRef,
    OtherLine,
    WorktreeAccumulator,
    WorktreeLine,
    WorktreePath,
)
from swagit.logging_config import get_logger

logger = get_logger(__name__)


def parse_branch_list(output: str) -> List[Branch]:
    """Parse `for-each-ref --format=%(refname:short) %(objectname:short)` output.

    Lines that are not exactly "<name> <hash>" are skipped.
    """
    branches = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) != 2:
            if line.strip():
                logger.debug(f"Skipping unexpected branch line: {line!r}")
            continue
        branches.append(Branch(name=parts[0], commit_id=parts[1]))
    return branches


def parse_branch_names(output: str) -> List[str]:
    """Parse `git branch --format=%(refname:short)` output, one name per line."""
    names = []
    for line in output.splitlines():
        name = line.strip()
        # Detached HEAD shows up as "(HEAD detached at ...)"
        if name and not name.startswith("("):
            names.append(name)
    return names


def tag_worktree_line(line: str) -> WorktreeLine:
    """Classify one line of `git worktree list --porcelain`."""
    if line.startswith("worktree "):
        return WorktreePath(line[len("worktree "):])
    if line.startswith("branch "):
        return BranchRef(line[len("branch "):].strip())
    return OtherLine(line)


def parse_worktree_list(output: str) -> Dict[str, str]:
    """Parse `git worktree list --porcelain` into a branch name -> path mapping."""
    accumulator = WorktreeAccumulator()
    for line in output.splitlines():
        accumulator.feed(tag_worktree_line(line.rstrip("\r")))
    return accumulator.mapping


def _parse_count(field: str) -> int:
    try:
        return int(field)
    except ValueError:
        logger.debug(f"Unparseable commit count {field!r}, using 0")
        return 0


def parse_ahead_behind(output: str) -> Tuple[int, int]:
    """Parse `rev-list --left-right --count a...b` output into (ahead, behind).

    Raises:
        MalformedOutputError: If the output is not exactly two fields
    """
    fields = output.split()
    if len(fields) != 2:
        raise MalformedOutputError("rev-list --left-right --count", output)
    return _parse_count(fields[0]), _parse_count(fields[1])


def parse_symbolic_ref(output: str, remote_name: str) -> Optional[str]:
    """Extract the branch name from `symbolic-ref refs/remotes/<remote>/HEAD` output."""
    ref = output.strip()
    prefix = f"refs/remotes/{remote_name}/"
    if ref.startswith(prefix) and len(ref) > len(prefix):
        return ref[len(prefix):]
    return None


def parse_remotes(output: str) -> List[str]:
    """Parse `git remote` output."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def parse_status_porcelain(output: str) -> Dict[str, bool]:
    """Summarize `git status --porcelain` output.

    Returns:
        Dict with 'modified' and 'staged' flags; untracked entries are ignored
    """
    has_modified = False
    has_staged = False

    for line in output.split("\n"):
        if len(line) < 2:
            continue

        # XY filename: X = index status, Y = working tree status
        if line.startswith("??"):
            continue
        if line[0] != " ":
            has_staged = True
        if line[1] != " ":
            has_modified = True

    return {
        "modified": has_modified,
        "staged": has_staged,
    }
