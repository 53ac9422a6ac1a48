"""Tests for MergeSweeper"""
import pytest

from swagit.exceptions import GitOperationError
from swagit.services.git import GitCommandRunner, MergeSweeper

from conftest import make_commit


def branch_names(repo):
    return {head.name for head in repo.heads}


@pytest.fixture
def sweeper(git_repo, config):
    return MergeSweeper(GitCommandRunner(git_repo.working_dir), config)


class TestSweep:
    """Test deletion of merged branches."""

    def test_deletes_merged_branch(self, git_repo, sweeper):
        git_repo.git.checkout("-b", "feature")
        make_commit(git_repo, "feature.txt")
        git_repo.git.checkout("main")
        git_repo.git.merge("feature", "--no-ff", "-m", "Merge feature")

        assert sweeper.sweep("main", "main") == ["feature"]
        assert "feature" not in branch_names(git_repo)

    def test_keeps_unmerged_branch(self, git_repo, sweeper):
        git_repo.git.checkout("-b", "wip")
        make_commit(git_repo, "wip.txt")
        git_repo.git.checkout("main")

        assert sweeper.sweep("main", "main") == []
        assert "wip" in branch_names(git_repo)

    def test_never_deletes_current_branch(self, git_repo, sweeper):
        git_repo.git.checkout("-b", "feature")

        assert sweeper.sweep("main", "feature") == []
        assert "feature" in branch_names(git_repo)

    def test_never_deletes_main_or_master(self, git_repo, sweeper):
        git_repo.git.branch("develop")
        git_repo.git.branch("master")
        git_repo.git.checkout("develop")

        deleted = sweeper.sweep("develop", "develop")

        assert deleted == []
        assert {"main", "master", "develop"} <= branch_names(git_repo)

    def test_deletes_in_listing_order(self, git_repo, sweeper):
        for name in ("b-branch", "a-branch", "c-branch"):
            git_repo.git.branch(name)

        assert sweeper.sweep("main", "main") == ["a-branch", "b-branch", "c-branch"]

    def test_configured_protected_branches_are_kept(self, git_repo):
        git_repo.git.branch("release")
        git_repo.git.branch("old")
        sweeper = MergeSweeper(
            GitCommandRunner(git_repo.working_dir), {"protected_branches": ["release"]}
        )

        assert sweeper.sweep("main", "main") == ["old"]


class TestSweepFailures:
    """Test failure handling with a scripted runner."""

    def test_failed_deletion_is_skipped(self, mock_runner, config):
        mock_runner.responses[
            ("branch", "--merged", "main", "--format=%(refname:short)")
        ] = "main\nlocked\nfeature"
        mock_runner.responses[("branch", "-D", "locked")] = GitOperationError(
            "branch", "locked", "checked out at /elsewhere"
        )
        mock_runner.responses[("branch", "-D", "feature")] = "Deleted branch feature"

        assert MergeSweeper(mock_runner, config).sweep("main", "other") == ["feature"]

    def test_listing_failure_propagates(self, mock_runner, config):
        mock_runner.responses[
            ("branch", "--merged", "main", "--format=%(refname:short)")
        ] = GitOperationError("branch", message="malformed object name main")

        with pytest.raises(GitOperationError):
            MergeSweeper(mock_runner, config).sweep("main", "other")
