"""Tests for the command-line entry point"""
import importlib
from unittest.mock import Mock

import pytest

from swagit.cli.args import parse_args

# swagit.cli re-exports main(), which shadows the module attribute
cli_main = importlib.import_module("swagit.cli.main")


@pytest.fixture(autouse=True)
def keep_process_state(monkeypatch):
    """Leave SIGINT handling and root logging as pytest configured them."""
    monkeypatch.setattr(cli_main, "signal", Mock())
    monkeypatch.setattr(cli_main, "setup_logging", Mock())


class TestArgs:
    def test_defaults(self):
        args = parse_args([])
        assert not args.delete and not args.sync
        assert args.remote == "origin"

    def test_short_flags(self):
        assert parse_args(["-d"]).delete is True
        assert parse_args(["-s"]).sync is True

    def test_delete_and_sync_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["-d", "-s"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "swagit" in capsys.readouterr().out


class TestMain:
    def test_not_a_repository(self, temp_dir, monkeypatch, capsys):
        monkeypatch.chdir(temp_dir)

        assert cli_main.main([]) == 1
        assert "not a git repository" in capsys.readouterr().err

    def test_sync_without_remote_fails(self, git_repo, monkeypatch, capsys):
        monkeypatch.chdir(git_repo.working_dir)
        git_repo.git.branch("feature")

        assert cli_main.main(["--sync"]) == 1
        assert "no remote configured" in capsys.readouterr().err
        assert "feature" in {h.name for h in git_repo.heads}

    def test_sync_succeeds(self, repo_with_remote, monkeypatch, capsys):
        monkeypatch.chdir(repo_with_remote.working_dir)

        assert cli_main.main(["-s"]) == 0
        assert "Current branch is main" in capsys.readouterr().out

    def test_no_other_branches(self, git_repo, monkeypatch, capsys):
        monkeypatch.chdir(git_repo.working_dir)

        assert cli_main.main(["--no-interactive"]) == 1
        assert "no other branches" in capsys.readouterr().err

    def test_checkout_without_picker(self, git_repo, monkeypatch):
        monkeypatch.chdir(git_repo.working_dir)
        git_repo.git.branch("feature")

        assert cli_main.main(["--no-interactive"]) == 0
        assert git_repo.active_branch.name == "feature"
