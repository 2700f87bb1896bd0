"""Branch verbs: branch, checkout, switch, merge and tag"""
from dataclasses import replace
from typing import Sequence

from git_quest.exceptions import CommandFailed
from git_quest.formatters import format_branch_list
from git_quest.logging_config import get_logger
from git_quest.models.command import CommandResult
from git_quest.models.repository import Branch, Repository

logger = get_logger(__name__)

DELETE_FLAGS = {"-d", "-D", "--delete"}
CREATE_FLAGS = {"-b", "-c", "--create"}
MERGE_OUTPUT = "Merge made by the 'recursive' strategy.\n 1 file changed, 1 insertion(+)"


def create_branch(name: str, repository: Repository) -> Repository:
    """Add a branch holding a snapshot of the current branch's commits.

    Raises:
        CommandFailed: If a branch with that name already exists
    """
    if repository.find_branch(name) is not None:
        raise CommandFailed(f"fatal: A branch named '{name}' already exists.", "branch")

    source = repository.active_branch
    snapshot = tuple(source.commits) if source is not None else ()
    logger.debug(f"Creating branch '{name}' with {len(snapshot)} commits")
    return replace(repository, branches=repository.branches + (Branch(name=name, commits=snapshot),))


def switch_to(name: str, repository: Repository) -> Repository:
    """Make `name` the only current branch."""
    return replace(
        repository,
        branches=tuple(replace(b, current=b.name == name) for b in repository.branches),
        current_branch=name,
    )


def branch(args: Sequence[str], repository: Repository) -> CommandResult:
    """List branches, create one, or delete one with -d."""
    if not args:
        return CommandResult(output=format_branch_list(repository.branches), success=True)

    if args[0] in DELETE_FLAGS:
        return _delete_branch(args[1:], repository)

    return CommandResult(output="", success=True, new_repository=create_branch(args[0], repository))


def _delete_branch(args: Sequence[str], repository: Repository) -> CommandResult:
    if not args:
        raise CommandFailed("fatal: branch name required", "branch")

    name = args[0]
    target = repository.find_branch(name)
    if target is None:
        raise CommandFailed(f"error: branch '{name}' not found.", "branch")
    if target.current:
        raise CommandFailed(
            f"error: Cannot delete branch '{name}' checked out at '{repository.working_directory}'",
            "branch",
        )

    remaining = tuple(b for b in repository.branches if b.name != name)
    return CommandResult(
        output=f"Deleted branch {name}.",
        success=True,
        new_repository=replace(repository, branches=remaining),
    )


def checkout(args: Sequence[str], repository: Repository) -> CommandResult:
    """Switch to an existing branch, or create one first with -b."""
    if not args:
        raise CommandFailed("usage: git checkout <branch>", "checkout")

    if args[0] in CREATE_FLAGS:
        if len(args) < 2:
            raise CommandFailed(f"error: switch `{args[0].lstrip('-')}' requires a value", "checkout")
        name = args[1]
        updated = switch_to(name, create_branch(name, repository))
        return CommandResult(output=f"Switched to a new branch '{name}'", success=True, new_repository=updated)

    name = args[0]
    if repository.find_branch(name) is None:
        raise CommandFailed(f"error: pathspec '{name}' did not match any file(s) known to git", "checkout")

    return CommandResult(
        output=f"Switched to branch '{name}'",
        success=True,
        new_repository=switch_to(name, repository),
    )


def merge(args: Sequence[str], repository: Repository) -> CommandResult:
    """Bring commits from another branch onto the current one.

    Commits are matched by hash, so merging the same branch twice adds nothing
    the second time.
    """
    if not args:
        raise CommandFailed("usage: git merge <branch>", "merge")

    name = args[0]
    source = repository.find_branch(name)
    if source is None:
        raise CommandFailed(f"merge: {name} - not something we can merge", "merge")
    if source.current:
        raise CommandFailed(f"Already on '{name}'", "merge")

    current = repository.active_branch
    if current is None:
        return CommandResult(output=MERGE_OUTPUT, success=True)

    incoming = tuple(c for c in source.commits if not current.has_commit(c.hash))
    if not incoming:
        return CommandResult(output=MERGE_OUTPUT, success=True)

    logger.debug(f"Merging {len(incoming)} commits from '{name}' into '{current.name}'")
    updated = repository.with_branch(replace(current, commits=current.commits + incoming))
    updated = replace(updated, commits=updated.commits + incoming)
    return CommandResult(output=MERGE_OUTPUT, success=True, new_repository=updated)


def tag(args: Sequence[str], repository: Repository) -> CommandResult:
    # Tags are not tracked, so there is never anything to list.
    if not args:
        return CommandResult(output="", success=True)
    return CommandResult(output=f"Created tag '{args[0]}'", success=True)
