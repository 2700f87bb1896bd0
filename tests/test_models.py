"""Tests for repository models and serialization"""
import dataclasses
from dataclasses import replace
from datetime import datetime

import pytest

from git_quest.data.scenarios import SCENARIOS
from git_quest.models.repository import Branch, Commit, GitFile, Repository, empty_repository


class TestRepositoryConsistency:
    """Test the shape of blank repositories."""

    def test_uninitialized_has_no_branches(self):
        repo = empty_repository()
        assert repo.initialized is False
        assert repo.branches == ()
        assert repo.current_branch == ""

    def test_initialized_has_one_current_branch(self):
        repo = empty_repository(initialized=True)
        assert [b.name for b in repo.branches if b.current] == [repo.current_branch]

    def test_snapshots_are_frozen(self):
        repo = empty_repository()
        with pytest.raises(dataclasses.FrozenInstanceError):
            repo.initialized = True

    @pytest.mark.parametrize("scenario_id", sorted(SCENARIOS))
    def test_scenario_repositories_are_consistent(self, scenario_id):
        repo = SCENARIOS[scenario_id].initial_repository
        current = [b.name for b in repo.branches if b.current]
        if repo.initialized:
            assert current == [repo.current_branch]
        else:
            assert repo.branches == () and repo.current_branch == ""


class TestGitFile:
    """Test file presentation categories."""

    def test_untracked_means_neither_flag(self):
        assert GitFile("a").untracked is True
        assert GitFile("a", staged=True).untracked is False
        assert GitFile("a", modified=True).untracked is False


class TestSerialization:
    """Test to_dict/from_dict."""

    def test_round_trip_keeps_state(self):
        commit = Commit("abc123", "msg", "A <a@b>", datetime(2024, 1, 1, 12), ("a.txt",))
        repo = replace(
            empty_repository(initialized=True),
            files=(GitFile("a.txt", "x", staged=True),),
            branches=(Branch("main", (commit,), current=True),),
            commits=(commit,),
        )
        assert Repository.from_dict(repo.to_dict()) == repo

    def test_accepts_browser_camel_case(self):
        data = {
            "initialized": True,
            "files": [{"name": "timeline.txt", "content": "c", "staged": False, "modified": True}],
            "branches": [{"name": "main", "commits": [], "current": True}],
            "currentBranch": "main",
            "commits": [
                {
                    "hash": "abc123",
                    "message": "Initial timeline entry",
                    "author": "Timekeeper",
                    "timestamp": "2024-01-01T12:00:00.000Z",
                    "files": ["timeline.txt"],
                }
            ],
            "config": {"userName": "Ada", "userEmail": "ada@example.com"},
            "workingDirectory": "/timeline-project",
        }
        repo = Repository.from_dict(data)
        assert repo.current_branch == "main"
        assert repo.config.author == "Ada <ada@example.com>"
        assert repo.files[0].modified is True
        assert repo.commits[0].timestamp.year == 2024
        assert repo.working_directory == "/timeline-project"
