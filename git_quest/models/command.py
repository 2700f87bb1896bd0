"""Command result and history models"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from git_quest.models.repository import Repository


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one interpreted command.

    new_repository is None when the command leaves state untouched, which
    includes read-only commands that succeed.
    """
    output: str
    success: bool
    new_repository: Optional[Repository] = None


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted line as recorded by the terminal session."""
    command: str  # The raw line as typed
    args: Tuple[str, ...] = ()
    output: str = ""
    success: bool = False
    timestamp: datetime = field(default_factory=datetime.now)
