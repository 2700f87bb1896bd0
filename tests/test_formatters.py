"""Tests for output formatting"""
from dataclasses import replace

from git_quest.formatters import (
    format_branch_list,
    format_commit_summary,
    format_file_sections,
    format_log,
    format_status,
)
from git_quest.formatters.status import CLEAN_TREE
from git_quest.models.repository import Branch, Commit, GitFile
from tests.conftest import FIXED_TIME


def make_commit(hash_: str, message: str) -> Commit:
    return Commit(hash=hash_, message=message, author="Test <t@example.com>", timestamp=FIXED_TIME)


class TestStatusFormatting:
    """Test the sections of a status report."""

    def test_no_files_is_clean(self):
        assert format_file_sections([]) == CLEAN_TREE

    def test_sections_by_flag(self):
        files = [
            GitFile(name="a.txt", staged=True),
            GitFile(name="b.txt", modified=True),
            GitFile(name="c.txt"),
        ]
        output = format_file_sections(files)
        assert "Changes to be committed:\n  new file:   a.txt\n" in output
        assert "Changes not staged for commit:\n  modified:   b.txt\n" in output
        assert "Untracked files:\n  c.txt\n" in output

    def test_staged_and_modified_counts_as_staged(self):
        output = format_file_sections([GitFile(name="a.txt", staged=True, modified=True)])
        assert "new file:   a.txt" in output
        assert "Changes not staged" not in output

    def test_committed_files_are_listed_untracked(self):
        # Files with neither flag after a commit still show up as untracked
        output = format_file_sections([GitFile(name="a.txt")])
        assert output == "\nUntracked files:\n  a.txt\n"

    def test_no_commits_yet(self, initialized_repo):
        output = format_status(initialized_repo)
        assert output == f"On branch main\n\nNo commits yet\n{CLEAN_TREE}"

    def test_with_commits(self, initialized_repo):
        repo = replace(initialized_repo, commits=(make_commit("abc123", "x"),))
        assert "No commits yet" not in format_status(repo)


class TestHistoryFormatting:
    """Test log and commit summary text."""

    def test_log_newest_first(self):
        output = format_log([make_commit("aaa111", "first"), make_commit("bbb222", "second")])
        assert output.index("commit bbb222") < output.index("commit aaa111")
        assert output.startswith(
            "commit bbb222\nAuthor: Test <t@example.com>\nDate: Mon Jan 01 2024\n\n    second\n\n"
        )

    def test_commit_summary(self):
        commit = make_commit("abc123", "msg")
        assert format_commit_summary("main", commit, 1) == "[main abc123] msg\n 1 file changed"
        assert format_commit_summary("main", commit, 2).endswith(" 2 files changed")


class TestBranchFormatting:
    def test_current_branch_starred(self):
        branches = [Branch(name="main", current=True), Branch(name="feature")]
        assert format_branch_list(branches) == "* main\n  feature"
