"""Shared constants for swagit."""

from swagit.models.branch import BranchState


# Symbol and rich color per status line
STATUS_SYMBOLS = {
    BranchState.UP_TO_DATE: ("✓", "dim"),
    BranchState.UPDATED: ("✓", "green"),
    BranchState.DIVERGED: ("!", "yellow"),
    BranchState.MERGED: ("!", "yellow"),
    BranchState.REMOTE_GONE: ("!", "red"),
    BranchState.LOCAL_ONLY: ("·", "blue"),
    BranchState.MODIFIED: ("✗", "red"),
}

# Prompts
CHECKOUT_PROMPT = "Select the branch to switch to"
DELETE_PROMPT = "Select the branches to delete"
