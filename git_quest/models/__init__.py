"""Data models for git-quest."""

from .repository import Repository, GitFile, Commit, Branch, UserConfig, empty_repository
from .command import CommandResult, HistoryEntry
from .scenario import Scenario, Objective, CommandCheck, StateCheck, Achievement
from .progress import GameProgress

__all__ = [
    "Repository",
    "GitFile",
    "Commit",
    "Branch",
    "UserConfig",
    "empty_repository",
    "CommandResult",
    "HistoryEntry",
    "Scenario",
    "Objective",
    "CommandCheck",
    "StateCheck",
    "Achievement",
    "GameProgress",
]
