"""The five shipped scenarios.

Completion rules are plain data: each scenario lists weighted objectives and
the evaluator needs no per-scenario code.
"""
from dataclasses import replace
from datetime import datetime
from typing import Dict, List

from git_quest.models.repository import Branch, Commit, GitFile, empty_repository
from git_quest.models.scenario import CommandCheck, Objective, Scenario, StateCheck

_EPOCH = datetime(2024, 1, 1, 12, 0, 0)

TIMELINE = GitFile(name="timeline.txt", content="Timeline entry: Reality stabilization initiated...")
CONFIG = GitFile(name="config.txt", content="System configuration: stable")
SECURITY = GitFile(name="security.txt", content="Security protocols: active")
VIRUS = GitFile(name="virus.txt", content="CHAOS VIRUS: CORRUPTING TIMELINE...")

INITIAL_COMMIT = Commit(
    hash="abc123", message="Initial timeline entry", author="Timekeeper",
    timestamp=_EPOCH, files=("timeline.txt",),
)
CONFIG_COMMIT = Commit(
    hash="def456", message="Add configuration", author="Timekeeper",
    timestamp=_EPOCH, files=("config.txt",),
)
DOOMSDAY_COMMIT = Commit(
    hash="danger789", message="DOOMSDAY COMMIT - DO NOT TRUST", author="Chaos Agent",
    timestamp=_EPOCH, files=("virus.txt",),
)
SECURITY_COMMIT = Commit(
    hash="sec321", message="Harden security protocols", author="Timekeeper",
    timestamp=_EPOCH, files=("security.txt",),
)
STABILITY_COMMIT = Commit(
    hash="fix654", message="Stabilize temporal field", author="Timekeeper",
    timestamp=_EPOCH, files=("timeline.txt",),
)


def ran(*substrings: str) -> CommandCheck:
    """A successful command containing every substring."""
    return CommandCheck(all_of=substrings)


def ran_any(*alternatives: str) -> CommandCheck:
    """A successful command containing at least one alternative."""
    return CommandCheck(any_of=alternatives)


def _main_with(*commits: Commit):
    """Initialized repository whose main branch and global log hold `commits`."""
    repository = empty_repository(initialized=True)
    return replace(
        repository,
        branches=(Branch(name="main", commits=commits, current=True),),
        commits=commits,
    )


_scenarios: List[Scenario] = [
    Scenario(
        id=1,
        title="Initialize the Timeline",
        story=(
            "The universe has lost memory of project origins. Reality itself is fragmenting "
            "without a proper foundation. As a Timekeeper Developer, you must create the very "
            "fabric of version control to begin restoring order."
        ),
        briefing=(
            "Initialize a new Git repository with `git init`",
            'Configure your identity with `git config --global user.name "Your Name"`',
            'Configure your email with `git config --global user.email "your.email@example.com"`',
            "Check the repository status with `git status`",
        ),
        expected_commands=("git init", "git config", "git status"),
        initial_repository=empty_repository(initialized=False),
        objectives=(
            Objective("Initialize the repository", ran("git init"), weight=25),
            Objective("Set user.name", ran("git config", "user.name"), weight=25),
            Objective("Set user.email", ran("git config", "user.email"), weight=25),
            Objective("Check the status", ran("git status"), weight=25),
            Objective("Repository exists", StateCheck(lambda r: r.initialized)),
            Objective("Identity configured", StateCheck(lambda r: r.config.is_complete)),
        ),
        hints={
            "git init": "This command creates a new Git repository in the current directory. It's the first step to start tracking changes.",
            "git config": "Use this to set your identity. Git needs to know who you are for every commit. Use --global flag to set it system-wide.",
            "git status": "Shows the current state of your repository - which files are tracked, modified, or staged.",
        },
        achievement="first-steps",
    ),
    Scenario(
        id=2,
        title="Secure the Source",
        story=(
            "Chaotic changes are flying around the repository like temporal anomalies. Files "
            "are appearing and disappearing without warning. You must capture these changes and "
            "secure them in the timeline before they're lost forever."
        ),
        briefing=(
            "Create a new file called `timeline.txt` with some content",
            "Add the file to staging with `git add timeline.txt`",
            'Commit your changes with `git commit -m "Initial timeline entry"`',
            "View the commit history with `git log`",
        ),
        expected_commands=("git add", "git commit", "git log"),
        initial_repository=replace(empty_repository(initialized=True), files=(TIMELINE,)),
        objectives=(
            Objective("Have a file in the working tree", StateCheck(lambda r: len(r.files) > 0), weight=25),
            Objective("Stage a file", ran("git add"), weight=25),
            Objective("Commit it", ran("git commit"), weight=25),
            Objective("Read the log", ran("git log"), weight=25),
            Objective("History is not empty", StateCheck(lambda r: len(r.commits) > 0)),
        ),
        hints={
            "git add": "Stages files for commit. Think of it as preparing files to be 'photographed' in a commit snapshot.",
            "git commit": "Creates a snapshot of your staged changes. Always include a meaningful message with -m flag.",
            "git log": "Shows the history of commits. Each commit is a point in time you can return to.",
        },
    ),
    Scenario(
        id=3,
        title="The Forked Realities",
        story=(
            "Two parallel timelines have developed independently, each containing crucial fixes "
            "for the temporal crisis. You must navigate between these realities and merge them "
            "without causing a paradox that could tear the universe apart."
        ),
        briefing=(
            "Create a new branch called `feature-fix` with `git branch feature-fix`",
            "Switch to the new branch with `git checkout feature-fix`",
            "Make changes and commit them to the feature branch",
            "Switch back to main and merge the feature branch with `git merge feature-fix`",
        ),
        expected_commands=("git branch", "git checkout", "git merge"),
        initial_repository=replace(_main_with(INITIAL_COMMIT), files=(TIMELINE, CONFIG)),
        objectives=(
            Objective("Create a branch", ran("git branch"), weight=33),
            Objective("Switch branches", ran("git checkout"), weight=33),
            Objective("Merge a branch", ran("git merge"), weight=34),
            Objective("More than one branch exists", StateCheck(lambda r: len(r.branches) > 1)),
            Objective("At least two commits recorded", StateCheck(lambda r: len(r.commits) >= 2)),
        ),
        hints={
            "git branch": "Creates a new branch. Branches let you work on features independently without affecting the main timeline.",
            "git checkout": "Switches between branches. You can also use 'git switch' in newer Git versions.",
            "git merge": "Combines changes from one branch into another. This is how separate timelines become unified.",
        },
        achievement="branch-wizard",
    ),
    Scenario(
        id=4,
        title="Undo the Doomsday Commit",
        story=(
            "A malicious commit has corrupted the timeline, introducing chaos that threatens to "
            "cascade through all of history. You must carefully undo this damage without losing "
            "the good changes that came before and after."
        ),
        briefing=(
            "Identify the problematic commit using `git log`",
            "Revert the bad commit with `git revert <commit-hash>`",
            "Alternatively, use `git reset` to undo changes (be careful!)",
            "Verify the timeline is restored with `git status` and `git log`",
        ),
        expected_commands=("git revert", "git reset", "git log"),
        initial_repository=replace(
            _main_with(INITIAL_COMMIT, CONFIG_COMMIT, DOOMSDAY_COMMIT), files=(TIMELINE, VIRUS)
        ),
        objectives=(
            Objective("Inspect the log", ran("git log"), weight=33),
            Objective("Revert or reset the bad commit", ran_any("git revert", "git reset"), weight=34),
            Objective(
                "The virus file is gone",
                StateCheck(lambda r: not any("virus" in f.name for f in r.files)),
                weight=33,
            ),
        ),
        hints={
            "git revert": "Creates a new commit that undoes the changes from a previous commit. Safer than reset for public repositories.",
            "git reset": "Moves the current branch to a different commit. Can be dangerous as it rewrites history.",
            "git log": "Use this to identify commit hashes. Look for suspicious commits that need to be undone.",
        },
        achievement="time-reverter",
    ),
    Scenario(
        id=5,
        title="Merge the Final Timeline",
        story=(
            "All the fixes exist across multiple branches scattered through time and space. This "
            "is the final convergence - you must merge all timelines into one stable reality and "
            "seal it with a release tag to prevent future corruption."
        ),
        briefing=(
            "Merge all remaining feature branches into main",
            "Create a release tag with `git tag v1.0.0`",
            "Clean up merged branches with `git branch -d <branch-name>`",
            "Push the final timeline to establish it as the true reality",
        ),
        expected_commands=("git merge", "git tag", "git branch", "git push"),
        initial_repository=replace(
            _main_with(INITIAL_COMMIT, CONFIG_COMMIT),
            files=(TIMELINE, CONFIG, SECURITY),
            branches=(
                Branch(name="main", commits=(INITIAL_COMMIT, CONFIG_COMMIT), current=True),
                Branch(name="feature-security", commits=(INITIAL_COMMIT, CONFIG_COMMIT, SECURITY_COMMIT)),
                Branch(name="hotfix-stability", commits=(INITIAL_COMMIT, CONFIG_COMMIT, STABILITY_COMMIT)),
            ),
        ),
        objectives=(
            Objective("Merge a branch", ran("git merge"), weight=33),
            Objective("Tag a release", ran("git tag"), weight=33),
            Objective("Push the timeline", ran("git push"), weight=34),
            Objective(
                "Finish on main",
                StateCheck(lambda r: any(b.name == "main" and b.current for b in r.branches)),
            ),
            Objective("At least three commits recorded", StateCheck(lambda r: len(r.commits) >= 3)),
        ),
        hints={
            "git merge": "Combine different branches. Each branch might contain different pieces of the solution.",
            "git tag": "Creates a named reference to a specific commit. Tags are perfect for marking releases.",
            "git branch -d": "Deletes a branch after it's been merged. Keeps your timeline clean and organized.",
            "git push": "In a real scenario, this would upload your changes to a remote repository.",
        },
        achievement="timeline-master",
    ),
]

SCENARIOS: Dict[int, Scenario] = {s.id: s for s in _scenarios}
SCENARIO_ORDER: List[int] = [s.id for s in _scenarios]
