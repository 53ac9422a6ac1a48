"""Interactive terminal UI for swagit."""

from .picker import confirm, filter_labels, pick_branch, pick_branches

__all__ = ["confirm", "filter_labels", "pick_branch", "pick_branches"]
