"""Commit history formatting utilities."""

from datetime import datetime
from typing import Sequence

from git_quest.models.repository import Commit


def format_commit_date(timestamp: datetime) -> str:
    """
    Format a commit timestamp as a short calendar date.

    Args:
        timestamp: Commit time

    Returns:
        Date string such as "Mon Jan 01 2024"
    """
    return timestamp.strftime("%a %b %d %Y")


def format_log(commits: Sequence[Commit]) -> str:
    """
    Format commits for "git log", newest first.

    Args:
        commits: Commits in the order they were made

    Returns:
        One block per commit: hash, author, date, blank line, indented message
    """
    blocks = []
    for commit in reversed(commits):
        blocks.append(
            f"commit {commit.hash}\n"
            f"Author: {commit.author}\n"
            f"Date: {format_commit_date(commit.timestamp)}\n"
            "\n"
            f"    {commit.message}"
        )
    return "\n\n".join(blocks)


def format_commit_summary(branch: str, commit: Commit, file_count: int) -> str:
    """
    Format the two-line summary printed after a commit.

    Example:
        "[main a1b2c3] Initial timeline entry\\n 1 file changed"
    """
    noun = "file" if file_count == 1 else "files"
    return f"[{branch} {commit.hash}] {commit.message}\n {file_count} {noun} changed"
