"""Working tree status formatting utilities."""

from typing import Sequence

from git_quest.models.repository import GitFile, Repository

CLEAN_TREE = "nothing to commit, working tree clean"


def format_file_sections(files: Sequence[GitFile]) -> str:
    """
    Format the staged, modified and untracked sections of a status report.

    A file's section comes from its two flags alone: staged files are
    "to be committed", unstaged modified files are "not staged", and files
    with neither flag are untracked.

    Args:
        files: Files in the working tree, in creation order

    Returns:
        Section text, or the clean-tree message when there are no files
    """
    if not files:
        return CLEAN_TREE

    staged = [f for f in files if f.staged]
    modified = [f for f in files if not f.staged and f.modified]
    untracked = [f for f in files if f.untracked]

    output = ""
    if staged:
        output += "\nChanges to be committed:\n"
        output += "".join(f"  new file:   {f.name}\n" for f in staged)

    if modified:
        output += "\nChanges not staged for commit:\n"
        output += "".join(f"  modified:   {f.name}\n" for f in modified)

    if untracked:
        output += "\nUntracked files:\n"
        output += "".join(f"  {f.name}\n" for f in untracked)

    return output


def format_status(repository: Repository) -> str:
    """
    Format the full "git status" report.

    Args:
        repository: Repository snapshot to describe

    Returns:
        Multi-line status text
    """
    output = f"On branch {repository.current_branch}\n"
    if not repository.commits:
        output += "\nNo commits yet\n"
    output += format_file_sections(repository.files)
    return output
