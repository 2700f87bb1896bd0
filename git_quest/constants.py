"""Shared constants for git-quest."""

from typing import List


# Verbs recognised without a leading "git" token
GIT_VERBS: List[str] = [
    "init", "config", "status", "add", "commit", "log", "branch", "checkout", "merge",
    "revert", "reset", "tag", "push", "pull", "fetch", "clone", "remote", "stash",
    "rebase", "cherry-pick", "blame", "diff", "show", "help", "version", "--help",
    "--version", "switch", "restore", "clean", "mv", "rm", "bisect",
    "reflog", "worktree", "submodule", "notes", "replace", "gc", "fsck", "prune",
]

# Verbs that work before "git init"
VERBS_WITHOUT_REPOSITORY = {"init", "help", "--help", "version", "--version", "clone"}

# Reference list for "did you mean" suggestions, in priority order
SIMILAR_COMMANDS: List[str] = [
    "init", "config", "status", "add", "commit", "log", "branch", "checkout", "merge",
]

GIT_VERSION = "git version 2.39.0"

# Content given to files created by "git add <unknown file>"
PLACEHOLDER_CONTENT = "Timeline entry: Reality stabilization initiated..."

CLEAR_SCREEN = "\n" * 50

STORAGE_KEY = "git-quest-progress"


# Points awarded by the game layer
LEVEL_POINTS = 100
ACHIEVEMENT_POINTS = 50
NEW_COMMAND_POINTS = 10


GIT_USAGE = """usage: git [--version] [--help] [-C <path>] [-c <name>=<value>]
           [--exec-path[=<path>]] [--html-path] [--man-path] [--info-path]
           [-p | --paginate | -P | --no-pager] [--no-replace-objects] [--bare]
           [--git-dir=<path>] [--work-tree=<path>] [--namespace=<name>]
           <command> [<args>]

These are common Git commands used in various situations:

start a working area (see also: git help tutorial)
   clone     Clone a repository into a new directory
   init      Create an empty Git repository or reinitialize an existing one

work on the current change (see also: git help everyday)
   add       Add file contents to the index
   mv        Move or rename a file, a directory, or a symlink
   reset     Reset current HEAD to the specified state
   rm        Remove files from the working tree and from the index

examine the history and state (see also: git help revisions)
   bisect    Use binary search to find the commit that introduced a bug
   grep      Print lines matching a pattern
   log       Show commit logs
   show      Show various types of objects
   status    Show the working tree status

grow, mark and tweak your common history
   branch    List, create, or delete branches
   checkout  Switch branches or restore working tree files
   commit    Record changes to the repository
   diff      Show changes between commits, commit and working tree, etc
   merge     Join two or more development histories together
   rebase    Reapply commits on top of another base tip
   tag       Create, list, delete or verify a tag object signed with GPG"""


SHELL_HELP = """Available commands:
  git [command]     - Git version control commands
  ls, dir          - List files
  pwd              - Show current directory
  clear            - Clear screen
  echo [text]      - Display text
  help             - Show this help

Git commands: init, config, status, add, commit, log, branch, checkout, merge, revert, reset, tag, push, pull, fetch, clone, remote, stash, rebase, cherry-pick, blame, diff, show, help, version, switch, restore, clean, mv, rm, bisect, reflog, worktree, submodule, notes, replace, gc, fsck, prune

Type 'git --help' for detailed Git command information."""


IDENTITY_UNKNOWN = """Please tell me who you are.

Run

  git config --global user.email "you@example.com"
  git config --global user.name "Your Name\""""


# Fixed output of verbs that only pretend to do something
CANNED_OUTPUT = {
    "push": "Everything up-to-date\n\n🌟 Timeline successfully pushed to universal repository! 🌟",
    "pull": "Already up to date.",
    "fetch": "From origin\n * [new branch]     main     -> origin/main",
    "clone": (
        "Cloning into 'timeline-project'...\n"
        "remote: Counting objects: 100, done.\n"
        "remote: Compressing objects: 100% (100/100), done.\n"
        "remote: Total 100 (delta 0), reused 0 (delta 0), pack-reused 100\n"
        "Receiving objects: 100% (100/100), done.\n"
        "Resolving deltas: 100% (0/0), done."
    ),
    "remote": (
        "origin\thttps://github.com/timeline/universe.git (fetch)\n"
        "origin\thttps://github.com/timeline/universe.git (push)"
    ),
    "stash": "Saved working directory and index state WIP on main: abc1234 Initial commit",
    "rebase": "Current branch main is up to date.",
    "cherry-pick": "[main abc1234] Cherry-pick commit",
    "blame": "abc1234 (Timekeeper 2024-01-01 12:00:00 +0000 1) Timeline entry: Reality stabilization initiated...",
    "diff": (
        "diff --git a/timeline.txt b/timeline.txt\n"
        "index abc1234..def5678 100644\n"
        "--- a/timeline.txt\n"
        "+++ b/timeline.txt\n"
        "@@ -1,1 +1,1 @@\n"
        "-Timeline entry: Reality stabilization initiated...\n"
        "+Timeline entry: Reality stabilization completed!"
    ),
    "show": (
        "commit abc1234\n"
        "Author: Timekeeper <timekeeper@universe.com>\n"
        "Date:   Mon Jan 1 12:00:00 2024 +0000\n"
        "\n"
        "    Initial timeline entry\n"
        "\n"
        "diff --git a/timeline.txt b/timeline.txt\n"
        "new file mode 100644\n"
        "index 0000000..abc1234\n"
        "--- /dev/null\n"
        "+++ b/timeline.txt\n"
        "@@ -0,0 +1 @@\n"
        "+Timeline entry: Reality stabilization initiated..."
    ),
    "restore": "Restored timeline.txt",
    "clean": "Would remove virus.txt\n\nNote: This is a dry run. Use -f to force removal.",
    "mv": "Renamed timeline.txt to timeline-backup.txt",
    "bisect": "Bisecting: 0 revisions left to test after this (roughly 0 steps)",
    "reflog": (
        "abc1234 HEAD@{0}: commit: Initial timeline entry\n"
        "abc1234 HEAD@{1}: checkout: moving from feature-fix to main"
    ),
    "worktree": "/timeline-project  abc1234 [main]",
    "submodule": "No submodules found.",
    "notes": "No notes found.",
    "replace": "No replacements found.",
    "gc": (
        "Enumerating objects: 3, done.\n"
        "Counting objects: 100% (3/3), done.\n"
        "Delta compression using up to 8 threads.\n"
        "Compressing objects: 100% (2/2), done.\n"
        "Writing objects: 100% (3/3), done.\n"
        "Total 3 (delta 0), reused 0 (delta 0), pack-reused 3"
    ),
    "fsck": "Checking object directories: 100% (256/256), done.\nChecking objects: 100% (3/3), done.",
    "prune": "No unreferenced objects found.",
}
