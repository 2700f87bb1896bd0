"""Custom exceptions for git-quest"""

from typing import Optional


class GitQuestError(Exception):
    """Base exception for all git-quest errors."""
    pass


class CommandFailed(GitQuestError):
    """Raised by a command handler when the command cannot be carried out.

    The interpreter turns this into a failed CommandResult; the output is what
    the simulated terminal shows to the player.
    """

    def __init__(self, output: str, verb: Optional[str] = None):
        self.output = output
        self.verb = verb
        super().__init__(output)


class NotARepositoryError(CommandFailed):
    """Raised when a command needs an initialized repository."""

    def __init__(self, verb: Optional[str] = None):
        super().__init__(
            "fatal: not a git repository (or any of the parent directories): .git", verb
        )


class ScenarioNotFoundError(GitQuestError):
    """Exception raised when a scenario id is not registered."""

    def __init__(self, scenario_id: int):
        self.scenario_id = scenario_id
        super().__init__(f"Scenario '{scenario_id}' not found")


class ProgressStoreError(GitQuestError):
    """Exception raised for errors reading or writing saved progress."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Progress store operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
