"""Formatting utilities for git-quest.

Output text mimics real Git phrasing, organized into logical modules:
- status: working tree status
- history: commit log and commit summaries
- branch: branch listings
"""

# Status formatters
from .status import format_status, format_file_sections

# History formatters
from .history import format_log, format_commit_summary, format_commit_date

# Branch formatters
from .branch import format_branch_list

__all__ = [
    # Status
    "format_status",
    "format_file_sections",
    # History
    "format_log",
    "format_commit_summary",
    "format_commit_date",
    # Branch
    "format_branch_list",
]
