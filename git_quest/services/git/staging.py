"""Working tree verbs: status, add and rm"""
from dataclasses import replace
from typing import Sequence

from git_quest.constants import PLACEHOLDER_CONTENT
from git_quest.exceptions import CommandFailed
from git_quest.formatters import format_status
from git_quest.models.command import CommandResult
from git_quest.models.repository import GitFile, Repository

STAGE_ALL = {".", "-A", "--all"}


def status(args: Sequence[str], repository: Repository) -> CommandResult:
    """Describe the working tree. Never changes state."""
    return CommandResult(output=format_status(repository), success=True)


def add(args: Sequence[str], repository: Repository) -> CommandResult:
    """Stage the named files, creating unknown ones with placeholder content."""
    if not args:
        raise CommandFailed("Nothing specified, nothing added.", "add")

    files = list(repository.files)
    if STAGE_ALL.intersection(args):
        files = [replace(f, staged=True) for f in files]

    for name in args:
        if name in STAGE_ALL:
            continue
        index = next((i for i, f in enumerate(files) if f.name == name), None)
        if index is None:
            files.append(GitFile(name=name, content=PLACEHOLDER_CONTENT, staged=True, modified=False))
        else:
            # Content is left untouched
            files[index] = replace(files[index], staged=True)

    return CommandResult(
        output="",
        success=True,
        new_repository=replace(repository, files=tuple(files)),
    )


def rm(args: Sequence[str], repository: Repository) -> CommandResult:
    """Remove known files from the working tree."""
    paths = [a for a in args if not a.startswith("-")]
    if not paths:
        raise CommandFailed("usage: git rm [<options>] [--] <file>...", "rm")

    for path in paths:
        if repository.find_file(path) is None:
            raise CommandFailed(f"fatal: pathspec '{path}' did not match any files", "rm")

    remaining = tuple(f for f in repository.files if f.name not in paths)
    return CommandResult(
        output="\n".join(f"rm '{path}'" for path in paths),
        success=True,
        new_repository=replace(repository, files=remaining),
    )
