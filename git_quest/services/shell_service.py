"""Shell commands available in the simulated terminal"""
from typing import Callable, Dict, Sequence

from git_quest.constants import CLEAR_SCREEN, SHELL_HELP
from git_quest.models.command import CommandResult
from git_quest.models.repository import Repository


class ShellService:
    """Handlers for the handful of non-Git commands the terminal understands.

    None of them change the repository.
    """

    def __init__(self):
        self.commands: Dict[str, Callable[[Sequence[str], Repository], CommandResult]] = {
            "ls": self.ls,
            "dir": self.ls,
            "pwd": self.pwd,
            "clear": self.clear,
            "help": self.help,
            "echo": self.echo,
        }

    def handles(self, command: str) -> bool:
        return command.lower() in self.commands

    def run(self, command: str, args: Sequence[str], repository: Repository) -> CommandResult:
        return self.commands[command.lower()](args, repository)

    @staticmethod
    def ls(args: Sequence[str], repository: Repository) -> CommandResult:
        if not repository.files:
            return CommandResult(output="No files found.\n", success=True)
        return CommandResult(output="  ".join(f.name for f in repository.files) + "\n", success=True)

    @staticmethod
    def pwd(args: Sequence[str], repository: Repository) -> CommandResult:
        return CommandResult(output=repository.working_directory, success=True)

    @staticmethod
    def clear(args: Sequence[str], repository: Repository) -> CommandResult:
        return CommandResult(output=CLEAR_SCREEN, success=True)

    @staticmethod
    def help(args: Sequence[str], repository: Repository) -> CommandResult:
        return CommandResult(output=SHELL_HELP, success=True)

    @staticmethod
    def echo(args: Sequence[str], repository: Repository) -> CommandResult:
        return CommandResult(output=" ".join(args), success=True)
