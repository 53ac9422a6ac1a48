"""Tests for formatting helpers"""
import pytest

from swagit.formatters import (
    format_branch_label,
    format_delete_confirmation,
    format_status_line,
    format_status_message,
)
from swagit.models.branch import Branch, BranchState, BranchStatus


class TestBranchLabel:
    def test_plain(self):
        assert format_branch_label(Branch("feature", "1a2b3c4")) == "feature [1a2b3c4]"

    def test_with_worktree(self):
        branch = Branch("feature", "1a2b3c4", worktree_path="/tmp/wt")
        assert format_branch_label(branch) == "feature [1a2b3c4] (worktree: /tmp/wt)"


class TestStatusMessages:
    @pytest.mark.parametrize("state", list(BranchState))
    def test_every_state_has_a_message(self, state):
        message = format_status_message(BranchStatus(state, "topic"))
        assert "topic" in message

    def test_messages(self):
        assert format_status_message(BranchStatus.updated("a")) == (
            "Updated branch a (fast-forward)"
        )
        assert format_status_message(BranchStatus.diverged("a")) == (
            "Branch a has unpushed commits"
        )
        assert format_status_message(BranchStatus.remote_gone("a")) == (
            "Branch a was deleted on remote but not merged"
        )

    def test_status_line_escapes_markup(self):
        line = format_status_line(BranchStatus.local_only("fix[bold]"))
        assert "fix\\[bold]" in line


class TestDeleteConfirmation:
    def test_single(self):
        assert format_delete_confirmation(["a"]) == (
            "Are you sure you want to delete this branch?\n  a"
        )

    def test_several(self):
        assert format_delete_confirmation(["a", "b", "c"]) == (
            "Are you sure you want to delete 3 branches?\n  a, b, c"
        )
