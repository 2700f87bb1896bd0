"""Pytest fixtures for git-quest tests"""
import random
from dataclasses import replace
from datetime import datetime

import pytest

from git_quest.config import Config
from git_quest.models.repository import GitFile, Repository, UserConfig, empty_repository
from git_quest.services.command_service import GitSimulator
from git_quest.services.hash_service import HashGenerator
from git_quest.services.session_service import TerminalSession

FIXED_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_hashes(seed: int = 1234) -> HashGenerator:
    return HashGenerator(rng=random.Random(seed), clock=lambda: FIXED_TIME)


@pytest.fixture
def test_config(tmp_path):
    """Configuration that keeps saved state inside the test's tmp dir."""
    return Config(state_dir=tmp_path / "state", command_delay=0.0)


@pytest.fixture
def hashes():
    return make_hashes()


@pytest.fixture
def simulator(test_config, hashes):
    return GitSimulator(test_config, hashes)


@pytest.fixture
def empty_repo():
    """An uninitialized repository."""
    return empty_repository()


@pytest.fixture
def initialized_repo():
    """A fresh repository after "git init"."""
    return empty_repository(initialized=True)


@pytest.fixture
def configured_repo(initialized_repo):
    """An initialized repository with an identity configured."""
    return replace(initialized_repo, config=UserConfig(user_name="Test User", user_email="test@example.com"))


@pytest.fixture
def staged_repo(configured_repo):
    """A configured repository with one staged file."""
    return replace(
        configured_repo,
        files=(GitFile(name="test.txt", content="test", staged=True, modified=False),),
    )


@pytest.fixture
def run(simulator):
    """Run a whole typed line, e.g. run("git commit -m x", repo)."""
    def _run(line: str, repository: Repository):
        command, *args = line.split()
        return simulator.execute(command, args, repository)
    return _run


@pytest.fixture
def session(simulator, test_config):
    return TerminalSession(simulator=simulator, config=test_config)
