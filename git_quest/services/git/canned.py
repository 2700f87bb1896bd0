"""Verbs that answer with fixed text and leave the repository alone"""
from typing import Callable, Sequence

from git_quest.constants import CANNED_OUTPUT, GIT_USAGE, GIT_VERSION
from git_quest.models.command import CommandResult
from git_quest.models.repository import Repository

Handler = Callable[[Sequence[str], Repository], CommandResult]


def fixed_output(verb: str) -> Handler:
    """Build a handler that always prints the canned text for `verb`."""
    output = CANNED_OUTPUT[verb]

    def handler(args: Sequence[str], repository: Repository) -> CommandResult:
        return CommandResult(output=output, success=True)

    handler.__name__ = verb.replace("-", "_")
    return handler


def show_usage(args: Sequence[str], repository: Repository) -> CommandResult:
    return CommandResult(output=GIT_USAGE, success=True)


def show_version(args: Sequence[str], repository: Repository) -> CommandResult:
    return CommandResult(output=GIT_VERSION, success=True)
