"""Formatting utilities for swagit output."""

from typing import List

from rich.markup import escape

from swagit.constants import STATUS_SYMBOLS
from swagit.models.branch import Branch, BranchState, BranchStatus


def format_branch_label(branch: Branch) -> str:
    """
    Format a branch for a picker entry.

    Args:
        branch: Branch to label

    Returns:
        "name [hash]", with the worktree path appended when the branch is
        checked out elsewhere
    """
    label = f"{branch.name} [{branch.commit_id}]"
    if branch.worktree_path:
        label += f" (worktree: {branch.worktree_path})"
    return label


def format_status_message(status: BranchStatus) -> str:
    """Plain-text description of a status."""
    name = status.branch
    messages = {
        BranchState.UP_TO_DATE: f"Branch {name} is up to date",
        BranchState.UPDATED: f"Updated branch {name} (fast-forward)",
        BranchState.DIVERGED: f"Branch {name} has unpushed commits",
        BranchState.MERGED: f"Branch {name} was merged to default branch and deleted",
        BranchState.REMOTE_GONE: f"Branch {name} was deleted on remote but not merged",
        BranchState.LOCAL_ONLY: f"Branch {name} exists only locally",
        BranchState.MODIFIED: (
            f"Branch {name} has uncommitted changes, commit or stash them before syncing"
        ),
    }
    return messages[status.state]


def format_status_line(status: BranchStatus) -> str:
    """Rich markup line for a status: colored symbol followed by the message."""
    symbol, color = STATUS_SYMBOLS[status.state]
    return f"[{color}]{symbol}[/{color}] {escape(format_status_message(status))}"


def format_delete_confirmation(branch_names: List[str]) -> str:
    """
    Build the confirmation question for deleting branches.

    Example:
        "Are you sure you want to delete 2 branches?\\n  feature/a, feature/b"
    """
    if len(branch_names) == 1:
        return f"Are you sure you want to delete this branch?\n  {branch_names[0]}"
    return (
        f"Are you sure you want to delete {len(branch_names)} branches?\n"
        f"  {', '.join(branch_names)}"
    )
