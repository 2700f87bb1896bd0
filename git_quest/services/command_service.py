"""Command interpreter for the simulated terminal"""
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from git_quest.config import Config
from git_quest.constants import GIT_USAGE, GIT_VERBS, SIMILAR_COMMANDS, VERBS_WITHOUT_REPOSITORY
from git_quest.exceptions import CommandFailed, NotARepositoryError
from git_quest.logging_config import get_logger
from git_quest.models.command import CommandResult
from git_quest.models.repository import Repository
from git_quest.services.git import branching, canned, history, repository as setup, staging
from git_quest.services.hash_service import HashGenerator
from git_quest.services.shell_service import ShellService

logger = get_logger(__name__)

Handler = Callable[[Sequence[str], Repository], CommandResult]

COSMETIC_VERBS = [
    "push", "pull", "fetch", "clone", "remote", "stash", "rebase", "cherry-pick",
    "blame", "diff", "show", "restore", "clean", "mv", "bisect", "reflog",
    "worktree", "submodule", "notes", "replace", "gc", "fsck", "prune",
]


def parse_command_line(line: str) -> Tuple[str, List[str]]:
    """Split a typed line on whitespace into command and arguments.

    No quoting rules apply; quotes stay attached to their tokens.
    """
    tokens = line.split()
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def find_similar_command(verb: str) -> str:
    """First reference verb that is a prefix of `verb` or has it as a prefix."""
    return next(
        (cmd for cmd in SIMILAR_COMMANDS if cmd.startswith(verb) or verb.startswith(cmd)),
        "help",
    )


class GitSimulator:
    """Interprets terminal input against a Repository snapshot.

    The simulator keeps no repository state between calls: each call receives
    the full snapshot and returns a CommandResult that may carry a new one.
    """

    def __init__(self, config: Optional[Config] = None, hashes: Optional[HashGenerator] = None):
        self.config = config or Config()
        self.hashes = hashes or HashGenerator()
        self.shell = ShellService()
        self.verbs: Dict[str, Handler] = {}
        self._register_verbs()

    def _register_verbs(self) -> None:
        self.register("init", partial(setup.init, default_branch=self.config.default_branch))
        self.register("config", setup.config)
        self.register("status", staging.status)
        self.register("add", staging.add)
        self.register("rm", staging.rm)
        self.register("commit", partial(history.commit, hashes=self.hashes))
        self.register("log", history.log)
        self.register("revert", partial(history.revert, hashes=self.hashes))
        self.register("reset", history.reset)
        self.register("branch", branching.branch)
        self.register("checkout", branching.checkout)
        self.register("switch", branching.checkout)
        self.register("merge", branching.merge)
        self.register("tag", branching.tag)
        for verb in ("help", "--help"):
            self.register(verb, canned.show_usage)
        for verb in ("version", "--version"):
            self.register(verb, canned.show_version)
        for verb in COSMETIC_VERBS:
            self.register(verb, canned.fixed_output(verb))

    def register(self, verb: str, handler: Handler) -> None:
        """Add or replace the handler for a Git sub-verb."""
        self.verbs[verb] = handler

    def execute(self, command: str, args: Sequence[str], repository: Repository) -> CommandResult:
        """Run one command.

        Args:
            command: First token of the typed line
            args: Remaining tokens
            repository: Current repository snapshot (never modified)

        Returns:
            CommandResult; new_repository is set only when state changed
        """
        lowered = command.lower()

        if lowered == "git":
            return self.run_git(args, repository)

        # Glued input such as "gitinit"
        if lowered.startswith("git"):
            verb = lowered[len("git"):].strip()
            if verb:
                return self.run_git([verb, *args], repository)

        if lowered in GIT_VERBS:
            return self.run_git([command, *args], repository)

        if self.shell.handles(lowered):
            return self.shell.run(lowered, args, repository)

        logger.debug(f"Unrecognised command: {command}")
        return CommandResult(
            output=(
                f"Command not found: {command}. Type 'help' for available commands "
                "or 'git --help' for Git commands."
            ),
            success=False,
        )

    def run_git(self, args: Sequence[str], repository: Repository) -> CommandResult:
        """Dispatch a Git sub-verb and its arguments."""
        if not args:
            return CommandResult(output=GIT_USAGE, success=True)

        verb = args[0].lower()
        handler = self.verbs.get(verb)
        if handler is None:
            return CommandResult(
                output=(
                    f"git: '{verb}' is not a git command. See 'git --help'.\n\n"
                    f"The most similar command is\n\tgit {find_similar_command(verb)}"
                ),
                success=False,
            )

        try:
            if verb not in VERBS_WITHOUT_REPOSITORY and not repository.initialized:
                raise NotARepositoryError(verb)
            result = handler(args[1:], repository)
        except CommandFailed as e:
            logger.debug(f"git {verb} failed: {e.output.splitlines()[0] if e.output else ''}")
            return CommandResult(output=e.output, success=False)

        logger.debug(f"git {verb} succeeded (state changed: {result.new_repository is not None})")
        return result
