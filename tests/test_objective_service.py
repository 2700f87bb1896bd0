"""Tests for ObjectiveEvaluator and the shipped scenarios"""
import pytest

from git_quest.data.scenarios import SCENARIOS
from git_quest.exceptions import ScenarioNotFoundError
from git_quest.models.command import HistoryEntry
from git_quest.models.repository import empty_repository
from git_quest.models.scenario import CommandCheck, Objective, Scenario, StateCheck
from git_quest.services.objective_service import ObjectiveEvaluator


def play(session, scenario_id, *lines):
    session.reset(SCENARIOS[scenario_id].initial_repository)
    for line in lines:
        session.submit(line)
    return session.repository, session.history


@pytest.fixture
def evaluator():
    return ObjectiveEvaluator()


class TestCommandCheck:
    """Test history-based predicates."""

    def test_only_successful_commands_count(self):
        check = CommandCheck(all_of=("git status",))
        failed = [HistoryEntry(command="git status", success=False)]
        passed = [HistoryEntry(command="git status", success=True)]
        repo = empty_repository()
        assert check(repo, failed) is False
        assert check(repo, passed) is True

    def test_all_substrings_must_match_one_entry(self):
        check = CommandCheck(all_of=("git config", "user.name"))
        history = [
            HistoryEntry(command="git config --global user.email a@b", success=True),
            HistoryEntry(command="echo user.name", success=True),
        ]
        assert check(empty_repository(), history) is False

    def test_any_of(self):
        check = CommandCheck(any_of=("git revert", "git reset"))
        history = [HistoryEntry(command="git reset --hard", success=True)]
        assert check(empty_repository(), history) is True


class TestEvaluator:
    """Test completion and progress arithmetic."""

    @pytest.fixture
    def custom(self):
        scenario = Scenario(
            id=99,
            title="Custom",
            story="",
            initial_repository=empty_repository(),
            objectives=(
                Objective("init", CommandCheck(all_of=("git init",)), weight=60),
                Objective("echo", CommandCheck(all_of=("echo",)), weight=60, required=False),
                Objective("state", StateCheck(lambda r: r.initialized)),
            ),
        )
        return ObjectiveEvaluator({99: scenario})

    def test_new_scenarios_need_no_code(self, custom):
        repo = empty_repository(initialized=True)
        history = [HistoryEntry(command="git init", success=True)]
        assert custom.is_complete(99, repo, history) is True
        assert custom.progress(99, repo, history) == 60

    def test_progress_is_capped(self, custom):
        repo = empty_repository(initialized=True)
        history = [
            HistoryEntry(command="git init", success=True),
            HistoryEntry(command="echo hi", success=True),
        ]
        assert custom.progress(99, repo, history) == 100

    def test_unknown_scenario(self, evaluator):
        assert evaluator.is_complete(404, empty_repository(), []) is False
        assert evaluator.progress(404, empty_repository(), []) == 0
        with pytest.raises(ScenarioNotFoundError):
            evaluator.get_scenario(404)

    def test_does_not_mutate_history(self, evaluator):
        history = [HistoryEntry(command="git init", success=True)]
        evaluator.progress(1, empty_repository(), history)
        assert len(history) == 1


class TestScenarioOne:
    """Initialize the Timeline."""

    def test_complete(self, evaluator, session):
        repo, history = play(
            session, 1,
            "git init",
            'git config --global user.name "Test User"',
            "git config --global user.email test@example.com",
            "git status",
        )
        assert evaluator.is_complete(1, repo, history) is True
        assert evaluator.progress(1, repo, history) == 100

    def test_order_does_not_matter(self, evaluator, session):
        repo, history = play(
            session, 1,
            "git init",
            "git status",
            "git config --global user.email test@example.com",
            "git config --global user.name Test",
        )
        assert evaluator.is_complete(1, repo, history) is True

    def test_partial(self, evaluator, session):
        repo, history = play(session, 1, "git init", "git status")
        assert evaluator.is_complete(1, repo, history) is False
        assert evaluator.progress(1, repo, history) == 50

    def test_failed_commands_do_not_count(self, evaluator, session):
        repo, history = play(
            session, 1,
            "git status",
            "git init",
            "git config --global user.name Test",
            "git config --global user.email test@example.com",
        )
        assert evaluator.is_complete(1, repo, history) is False
        assert evaluator.progress(1, repo, history) == 75


class TestScenarioTwo:
    """Secure the Source."""

    def test_complete(self, evaluator, session):
        repo, history = play(
            session, 2,
            "git config --global user.name Test",
            "git config --global user.email test@example.com",
            "git add timeline.txt",
            'git commit -m "Initial timeline entry"',
            "git log",
        )
        assert evaluator.is_complete(2, repo, history) is True
        assert evaluator.progress(2, repo, history) == 100

    def test_commit_without_identity_fails(self, evaluator, session):
        repo, history = play(session, 2, "git add timeline.txt", "git commit -m first", "git log")
        assert evaluator.is_complete(2, repo, history) is False
        assert evaluator.progress(2, repo, history) == 50


class TestScenarioThree:
    """The Forked Realities."""

    def test_complete(self, evaluator, session):
        repo, history = play(
            session, 3,
            "git config --global user.name Test",
            "git config --global user.email test@example.com",
            "git branch feature-fix",
            "git checkout feature-fix",
            "git add fix.txt",
            "git commit -m fix",
            "git checkout main",
            "git merge feature-fix",
        )
        assert evaluator.is_complete(3, repo, history) is True
        assert evaluator.progress(3, repo, history) == 100

    def test_commands_alone_are_not_enough(self, evaluator, session):
        repo, history = play(session, 3, "git branch", "git checkout main", "git merge main")
        assert evaluator.is_complete(3, repo, history) is False


class TestScenarioFour:
    """Undo the Doomsday Commit."""

    def test_revert_completes(self, evaluator, session):
        repo, history = play(session, 4, "git log", "git revert danger789")
        assert evaluator.is_complete(4, repo, history) is True
        assert evaluator.progress(4, repo, history) == 100

    def test_reset_alone_leaves_virus(self, evaluator, session):
        repo, history = play(session, 4, "git log", "git reset --hard def456")
        assert evaluator.is_complete(4, repo, history) is False
        assert evaluator.progress(4, repo, history) == 67

    def test_reset_then_rm(self, evaluator, session):
        repo, history = play(session, 4, "git log", "git reset", "git rm virus.txt")
        assert evaluator.is_complete(4, repo, history) is True


class TestScenarioFive:
    """Merge the Final Timeline."""

    def test_complete(self, evaluator, session):
        repo, history = play(
            session, 5,
            "git merge feature-security",
            "git merge hotfix-stability",
            "git tag v1.0.0",
            "git branch -d feature-security",
            "git push",
        )
        assert len(repo.commits) >= 3
        assert evaluator.is_complete(5, repo, history) is True
        assert evaluator.progress(5, repo, history) == 100

    def test_must_finish_on_main(self, evaluator, session):
        repo, history = play(
            session, 5,
            "git merge feature-security",
            "git tag v1.0.0",
            "git push",
            "git checkout hotfix-stability",
        )
        assert evaluator.is_complete(5, repo, history) is False
