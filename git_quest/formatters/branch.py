"""Branch listing formatting utilities."""

from typing import Sequence

from git_quest.models.repository import Branch


def format_branch_list(branches: Sequence[Branch]) -> str:
    """
    Format branches for "git branch" with the current one starred.

    Args:
        branches: Branches in creation order

    Returns:
        One branch per line, "* " before the current branch and two spaces otherwise
    """
    return "\n".join(f"{'* ' if b.current else '  '}{b.name}" for b in branches)
