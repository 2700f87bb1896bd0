"""History verbs: commit, log, revert and reset"""
from dataclasses import replace
from typing import Sequence

from git_quest.constants import IDENTITY_UNKNOWN
from git_quest.exceptions import CommandFailed
from git_quest.formatters import format_commit_summary, format_log
from git_quest.logging_config import get_logger
from git_quest.models.command import CommandResult
from git_quest.models.repository import Commit, Repository
from git_quest.services.git.repository import strip_quotes
from git_quest.services.hash_service import HashGenerator

logger = get_logger(__name__)

# Author recorded on reverts made before any identity is configured
FALLBACK_AUTHOR = "Timekeeper <timekeeper@universe.com>"


def _message_after_flag(args: Sequence[str]) -> str:
    """Everything after -m, re-joined and stripped of double quotes."""
    if "-m" not in args:
        return ""
    index = list(args).index("-m")
    return strip_quotes(" ".join(args[index + 1:])).strip()


def _new_commit(hashes: HashGenerator, message: str, files: Sequence[str], author: str) -> Commit:
    return Commit(
        hash=hashes.new_hash(),
        message=message,
        author=author,
        timestamp=hashes.now(),
        files=tuple(files),
    )


def commit(args: Sequence[str], repository: Repository, hashes: HashGenerator) -> CommandResult:
    """Record the staged files as a new commit on the current branch."""
    staged = repository.staged_files
    if not staged:
        raise CommandFailed("nothing to commit, working tree clean", "commit")

    if not repository.config.is_complete:
        raise CommandFailed(IDENTITY_UNKNOWN, "commit")

    message = _message_after_flag(args)
    if not message:
        raise CommandFailed("Aborting commit due to empty commit message.", "commit")

    new_commit = _new_commit(hashes, message, [f.name for f in staged], repository.config.author)
    updated = repository.with_current_commit(new_commit)
    updated = replace(
        updated,
        files=tuple(replace(f, staged=False, modified=False) for f in updated.files),
    )
    logger.debug(f"Committed {new_commit.hash} on {repository.current_branch}")

    return CommandResult(
        output=format_commit_summary(repository.current_branch, new_commit, len(staged)),
        success=True,
        new_repository=updated,
    )


def log(args: Sequence[str], repository: Repository) -> CommandResult:
    if not repository.commits:
        raise CommandFailed(
            f"fatal: your current branch '{repository.current_branch}' does not have any commits yet",
            "log",
        )
    return CommandResult(output=format_log(repository.commits), success=True)


def revert(args: Sequence[str], repository: Repository, hashes: HashGenerator) -> CommandResult:
    """Undo a commit by recording its inverse.

    Files the reverted commit introduced disappear from the working tree.
    """
    if not args:
        raise CommandFailed("usage: git revert <commit>", "revert")

    commit_hash = args[0]
    target = repository.find_commit(commit_hash)
    if target is None:
        raise CommandFailed(f"fatal: bad object {commit_hash}", "revert")

    author = repository.config.author if repository.config.is_complete else FALLBACK_AUTHOR
    message = f'Revert "{target.message}"'
    revert_commit = _new_commit(hashes, message, target.files, author)

    updated = repository.with_current_commit(revert_commit)
    updated = replace(updated, files=tuple(f for f in updated.files if f.name not in target.files))

    return CommandResult(
        output=f"[{repository.current_branch} {revert_commit.hash}] {message}",
        success=True,
        new_repository=updated,
    )


def reset(args: Sequence[str], repository: Repository) -> CommandResult:
    # History is not rewritten; only the message is simulated.
    return CommandResult(output="HEAD is now at previous commit", success=True)
