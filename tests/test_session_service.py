"""Tests for TerminalSession"""
import threading
from unittest.mock import Mock

from git_quest.config import Config
from git_quest.models.command import CommandResult
from git_quest.services.session_service import FAILED_EXECUTION, TerminalSession


class TestSubmit:
    """Test line submission and repository adoption."""

    def test_records_history(self, session):
        entry = session.submit("git init")
        assert entry.command == "git init"
        assert entry.args == ("init",)
        assert entry.success is True
        assert session.history == (entry,)

    def test_adopts_new_repository_on_success(self, session):
        session.submit("git init")
        assert session.repository.initialized is True
        assert session.repository.current_branch == "main"

    def test_failure_keeps_repository(self, session):
        before = session.repository
        entry = session.submit("git status")
        assert entry.success is False
        assert session.repository is before

    def test_blank_line_is_ignored(self, session):
        assert session.submit("   ") is None
        assert session.history == ()

    def test_history_is_append_only(self, session):
        session.submit("git init")
        snapshot = session.history
        session.submit("git status")
        assert len(snapshot) == 1
        assert len(session.history) == 2

    def test_reset_and_clear(self, session, initialized_repo):
        session.submit("echo hi")
        session.reset(initialized_repo)
        assert session.history == ()
        assert session.repository is initialized_repo

        session.submit("echo again")
        session.clear_history()
        assert session.history == ()
        assert session.repository is initialized_repo


class TestFaultContainment:
    """Test that interpreter faults never break the loop."""

    def test_unexpected_error_becomes_failed_entry(self, test_config):
        simulator = Mock()
        simulator.execute.side_effect = RuntimeError("boom")
        session = TerminalSession(simulator=simulator, config=test_config)

        entry = session.submit("git init")

        assert entry.success is False
        assert entry.output == FAILED_EXECUTION
        assert session.history == (entry,)
        assert session.is_processing is False

    def test_success_without_new_repository(self, test_config, initialized_repo):
        simulator = Mock()
        simulator.execute.return_value = CommandResult(output="ok", success=True)
        session = TerminalSession(simulator=simulator, repository=initialized_repo, config=test_config)

        session.submit("git status")

        assert session.repository is initialized_repo


class TestProcessingFlag:
    """Test that overlapping submissions are rejected."""

    def test_rejects_while_processing(self, test_config):
        started = threading.Event()
        release = threading.Event()
        nested = []

        def slow_execute(command, args, repository):
            started.set()
            release.wait(timeout=5)
            return CommandResult(output="", success=True)

        simulator = Mock()
        simulator.execute.side_effect = slow_execute
        session = TerminalSession(simulator=simulator, config=test_config)

        worker = threading.Thread(target=session.submit, args=("git status",))
        worker.start()
        assert started.wait(timeout=5)
        assert session.is_processing is True
        nested.append(session.submit("git log"))
        release.set()
        worker.join(timeout=5)

        assert nested == [None]
        assert len(session.history) == 1
        assert session.is_processing is False

    def test_delay_is_applied(self, tmp_path):
        sleep = Mock()
        session = TerminalSession(config=Config(command_delay=0.5, state_dir=tmp_path), sleep=sleep)
        session.submit("pwd")
        sleep.assert_called_once_with(0.5)
