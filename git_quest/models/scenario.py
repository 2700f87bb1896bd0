"""Scenario (level) and objective models"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from git_quest.models.command import HistoryEntry
from git_quest.models.repository import Repository


@dataclass(frozen=True)
class CommandCheck:
    """Satisfied when a successful history entry contains all of `all_of`.

    When `any_of` is given the entry must also contain at least one of those
    substrings.
    """
    all_of: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()

    def matches(self, line: str) -> bool:
        if not all(text in line for text in self.all_of):
            return False
        return not self.any_of or any(text in line for text in self.any_of)

    def __call__(self, repository: Repository, history: Sequence[HistoryEntry]) -> bool:
        return any(entry.success and self.matches(entry.command) for entry in history)


@dataclass(frozen=True)
class StateCheck:
    """Satisfied when `test` holds for the current repository snapshot."""
    test: Callable[[Repository], bool]

    def __call__(self, repository: Repository, history: Sequence[HistoryEntry]) -> bool:
        return bool(self.test(repository))


Check = Union[CommandCheck, StateCheck]


@dataclass(frozen=True)
class Objective:
    """A weighted predicate that contributes to a scenario's progress score."""
    description: str
    check: Check
    weight: int = 0
    required: bool = True

    def is_met(self, repository: Repository, history: Sequence[HistoryEntry]) -> bool:
        return self.check(repository, history)


@dataclass(frozen=True)
class Scenario:
    """A training level: starting repository plus completion rules."""
    id: int
    title: str
    story: str
    initial_repository: Repository
    objectives: Tuple[Objective, ...]
    briefing: Tuple[str, ...] = ()
    expected_commands: Tuple[str, ...] = ()
    hints: Dict[str, str] = field(default_factory=dict)
    achievement: Optional[str] = None  # Achievement unlocked on completion


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    icon: str
