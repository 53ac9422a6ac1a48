"""Pytest fixtures for swagit tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from swagit.config import Config
from swagit.services.git import GitCommandRunner, MergeSweeper, RefReader, RemoteReconciler
from swagit.services.sync_service import SyncService


def configure_user(repo):
    """Give a repository an identity so commits work anywhere."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


def make_commit(repo, filename, content=None, message=None):
    """Write a file and commit it on the checked-out branch. Returns the new sha."""
    path = Path(repo.working_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content if content is not None else f"{filename}\n")
    repo.git.add(filename)
    repo.git.commit("-m", message or f"Add {filename}")
    return repo.head.commit.hexsha


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def git_repo(temp_dir):
    """A repository with one commit on main and no remote."""
    repo_path = temp_dir / "work"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    configure_user(repo)
    make_commit(repo, "README.md", "# Test Repository\n", "Initial commit")
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def bare_remote(temp_dir):
    """Path of an empty bare repository whose HEAD points at main."""
    remote_path = temp_dir / "origin.git"
    bare = git.Repo.init(remote_path, bare=True)
    bare.git.symbolic_ref("HEAD", "refs/heads/main")
    bare.close()
    return remote_path


@pytest.fixture
def repo_with_remote(git_repo, bare_remote):
    """The work repository with main pushed to origin and tracking it."""
    git_repo.create_remote("origin", str(bare_remote))
    git_repo.git.push("-u", "origin", "main")
    return git_repo


@pytest.fixture
def other_clone(repo_with_remote, bare_remote, temp_dir):
    """A second clone of origin, standing in for another developer."""
    clone = git.Repo.clone_from(str(bare_remote), temp_dir / "other")
    configure_user(clone)
    yield clone
    clone.close()


@pytest.fixture
def runner(git_repo):
    return GitCommandRunner(git_repo.working_dir)


@pytest.fixture
def services(repo_with_remote, config):
    """Real services wired to the work repository."""
    runner = GitCommandRunner(repo_with_remote.working_dir)
    ref_reader = RefReader(runner, config)
    reconciler = RemoteReconciler(runner, ref_reader)
    sweeper = MergeSweeper(runner, config)
    sync_service = SyncService(runner, ref_reader, reconciler, sweeper)
    return Mock(
        runner=runner,
        ref_reader=ref_reader,
        reconciler=reconciler,
        sweeper=sweeper,
        sync_service=sync_service,
    )


@pytest.fixture
def mock_runner():
    """A runner whose `run` answers from a dict keyed by the argument tuple.

    Unknown commands fail the test loudly instead of silently returning Mocks.
    """
    runner = Mock(spec=GitCommandRunner)
    runner.responses = {}

    def run(*args, branch=None):
        response = runner.responses.get(args)
        if response is None:
            raise AssertionError(f"unexpected git call: {args}")
        if isinstance(response, Exception):
            raise response
        return response

    def succeeds(*args):
        try:
            run(*args)
            return True
        except AssertionError:
            raise
        except Exception:
            return False

    runner.run.side_effect = run
    runner.succeeds.side_effect = succeeds
    return runner
