"""Git-related services for swagit."""

from .runner import GitCommandRunner
from .ref_reader import RefReader
from .reconciler import RemoteReconciler
from .merge_sweeper import MergeSweeper
from .operations import BranchOperations

__all__ = [
    "GitCommandRunner",
    "RefReader",
    "RemoteReconciler",
    "MergeSweeper",
    "BranchOperations",
]
