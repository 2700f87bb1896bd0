"""Repository setup verbs: init and config"""
from dataclasses import replace
from typing import Sequence

from git_quest.exceptions import CommandFailed
from git_quest.logging_config import get_logger
from git_quest.models.command import CommandResult
from git_quest.models.repository import Branch, Repository

logger = get_logger(__name__)

CONFIG_KEYS = {
    "user.name": "user_name",
    "user.email": "user_email",
}


def strip_quotes(text: str) -> str:
    """Drop every double quote; the input line is never shell-parsed."""
    return text.replace('"', "")


def init(args: Sequence[str], repository: Repository, default_branch: str = "main") -> CommandResult:
    """Create the repository, or report that it already exists."""
    git_dir = f"{repository.working_directory}/.git/"
    if repository.initialized:
        return CommandResult(output=f"Reinitialized existing Git repository in {git_dir}", success=True)

    new_repository = replace(
        repository,
        initialized=True,
        branches=(Branch(name=default_branch, current=True),),
        current_branch=default_branch,
    )
    logger.debug(f"Initialized repository with branch '{default_branch}'")
    return CommandResult(
        output=f"Initialized empty Git repository in {git_dir}",
        success=True,
        new_repository=new_repository,
    )


def config(args: Sequence[str], repository: Repository) -> CommandResult:
    """Set user.name or user.email with ``config --global <key> <value>``.

    Values split by the terminal are joined back together, so
    ``--global user.name "Ada Lovelace"`` stores ``Ada Lovelace``.
    """
    if len(args) < 3:
        raise CommandFailed("usage: git config [<options>] <name> [<value>]", "config")

    flag, key = args[0], args[1]
    if flag != "--global":
        raise CommandFailed("For this tutorial, please use --global flag", "config")

    value = strip_quotes(" ".join(args[2:])).strip()
    field_name = CONFIG_KEYS.get(key)
    if field_name is None or not value:
        raise CommandFailed(f"Unknown config key: {key}", "config")

    new_config = replace(repository.config, **{field_name: value})
    return CommandResult(
        output="",
        success=True,
        new_repository=replace(repository, config=new_config),
    )
