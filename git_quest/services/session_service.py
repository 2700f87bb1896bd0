"""Terminal session: serializes commands and owns the current repository"""
import time
from threading import Lock
from typing import Callable, List, Optional, Tuple

from git_quest.config import Config
from git_quest.logging_config import get_logger
from git_quest.models.command import HistoryEntry
from git_quest.models.repository import Repository, empty_repository
from git_quest.services.command_service import GitSimulator, parse_command_line

logger = get_logger(__name__)

FAILED_EXECUTION = "Error: Command execution failed"


class TerminalSession:
    """Runs typed lines through the simulator one at a time.

    The session is the only owner of the current repository snapshot. It
    adopts a new snapshot only from successful results, and keeps an
    append-only history of every submitted line.
    """

    def __init__(
        self,
        simulator: Optional[GitSimulator] = None,
        repository: Optional[Repository] = None,
        config: Optional[Config] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or Config()
        self.simulator = simulator or GitSimulator(self.config)
        self.repository = repository or empty_repository(working_directory=self.config.working_directory)
        self._history: List[HistoryEntry] = []
        self._lock = Lock()
        self._sleep = sleep

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def is_processing(self) -> bool:
        return self._lock.locked()

    def submit(self, line: str) -> Optional[HistoryEntry]:
        """Execute one line.

        Returns:
            The recorded history entry, or None when the line is blank or
            another command is still being processed
        """
        if not line.strip():
            return None

        if not self._lock.acquire(blocking=False):
            logger.debug(f"Ignoring '{line}' while another command is processing")
            return None

        try:
            entry = self._run(line)
            self._history.append(entry)
            return entry
        finally:
            self._lock.release()

    def _run(self, line: str) -> HistoryEntry:
        command, args = parse_command_line(line)
        try:
            if self.config.command_delay:
                self._sleep(self.config.command_delay)
            result = self.simulator.execute(command, args, self.repository)
        except Exception:
            logger.exception(f"Command execution error for '{line}'")
            return HistoryEntry(command=line, args=tuple(args), output=FAILED_EXECUTION, success=False)

        if result.success and result.new_repository is not None:
            self.repository = result.new_repository

        return HistoryEntry(command=line, args=tuple(args), output=result.output, success=result.success)

    def reset(self, repository: Repository) -> None:
        """Start over from `repository` with an empty history."""
        self.repository = repository
        self._history = []

    def clear_history(self) -> None:
        self._history = []
