"""Repository snapshot model.

Every value here is frozen. Commands never edit a Repository in place; they
build a new one with dataclasses.replace() and hand it back to the caller.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from git_quest.config import DEFAULT_WORKING_DIRECTORY


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data (snake_case or camelCase spelling)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value)
    if isinstance(value, str) and value:
        # Browser JSON writes a trailing "Z"
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return datetime.now()


@dataclass(frozen=True)
class GitFile:
    """A file in the simulated working tree.

    The two flags are independent: untracked means neither staged nor modified.
    """
    name: str
    content: str = ""
    staged: bool = False
    modified: bool = False

    @property
    def untracked(self) -> bool:
        return not self.staged and not self.modified

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "content": self.content,
            "staged": self.staged,
            "modified": self.modified,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GitFile":
        return cls(
            name=data["name"],
            content=data.get("content", ""),
            staged=bool(data.get("staged", False)),
            modified=bool(data.get("modified", False)),
        )


@dataclass(frozen=True)
class Commit:
    """A synthetic commit. The hash is random, not derived from content."""
    hash: str
    message: str
    author: str
    timestamp: datetime
    files: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "message": self.message,
            "author": self.author,
            "timestamp": self.timestamp.isoformat(),
            "files": list(self.files),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Commit":
        return cls(
            hash=data["hash"],
            message=data.get("message", ""),
            author=data.get("author", ""),
            timestamp=_parse_timestamp(data.get("timestamp")),
            files=tuple(data.get("files", ())),
        )


@dataclass(frozen=True)
class Branch:
    """A branch and the commit list copied onto it when it was created."""
    name: str
    commits: Tuple[Commit, ...] = ()
    current: bool = False

    def has_commit(self, commit_hash: str) -> bool:
        return any(commit.hash == commit_hash for commit in self.commits)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "commits": [commit.to_dict() for commit in self.commits],
            "current": self.current,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Branch":
        return cls(
            name=data["name"],
            commits=tuple(Commit.from_dict(c) for c in data.get("commits", ())),
            current=bool(data.get("current", False)),
        )


@dataclass(frozen=True)
class UserConfig:
    """Identity set through "git config --global"."""
    user_name: Optional[str] = None
    user_email: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.user_name) and bool(self.user_email)

    @property
    def author(self) -> str:
        return f"{self.user_name} <{self.user_email}>"

    def to_dict(self) -> Dict[str, Any]:
        return {"user_name": self.user_name, "user_email": self.user_email}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "UserConfig":
        data = data or {}
        return cls(
            user_name=_pick(data, "user_name", "userName"),
            user_email=_pick(data, "user_email", "userEmail"),
        )


@dataclass(frozen=True)
class Repository:
    """Immutable snapshot of all simulated version-control state."""
    initialized: bool = False
    working_directory: str = DEFAULT_WORKING_DIRECTORY
    config: UserConfig = field(default_factory=UserConfig)
    files: Tuple[GitFile, ...] = ()
    branches: Tuple[Branch, ...] = ()
    current_branch: str = ""
    commits: Tuple[Commit, ...] = ()

    def find_file(self, name: str) -> Optional[GitFile]:
        return next((f for f in self.files if f.name == name), None)

    def find_branch(self, name: str) -> Optional[Branch]:
        return next((b for b in self.branches if b.name == name), None)

    def find_commit(self, commit_hash: str) -> Optional[Commit]:
        return next((c for c in self.commits if c.hash == commit_hash), None)

    @property
    def staged_files(self) -> Tuple[GitFile, ...]:
        return tuple(f for f in self.files if f.staged)

    @property
    def active_branch(self) -> Optional[Branch]:
        """The branch flagged current, if any."""
        return next((b for b in self.branches if b.current), None)

    def with_branch(self, branch: Branch) -> "Repository":
        """Return a copy with the same-named branch swapped for `branch`."""
        return replace(
            self,
            branches=tuple(branch if b.name == branch.name else b for b in self.branches),
        )

    def with_current_commit(self, commit: Commit) -> "Repository":
        """Return a copy with `commit` appended to the global log and the current branch."""
        updated = replace(self, commits=self.commits + (commit,))
        current = self.find_branch(self.current_branch)
        if current is not None:
            updated = updated.with_branch(replace(current, commits=current.commits + (commit,)))
        return updated

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "initialized": self.initialized,
            "working_directory": self.working_directory,
            "config": self.config.to_dict(),
            "files": [f.to_dict() for f in self.files],
            "branches": [b.to_dict() for b in self.branches],
            "current_branch": self.current_branch,
            "commits": [c.to_dict() for c in self.commits],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Repository":
        """Create a Repository from a dictionary.

        Accepts the camelCase keys (currentBranch, workingDirectory, userName,
        userEmail) written by the browser front end as well as snake_case.
        """
        return cls(
            initialized=bool(data.get("initialized", False)),
            working_directory=_pick(
                data, "working_directory", "workingDirectory", default=DEFAULT_WORKING_DIRECTORY
            ),
            config=UserConfig.from_dict(data.get("config")),
            files=tuple(GitFile.from_dict(f) for f in data.get("files", ())),
            branches=tuple(Branch.from_dict(b) for b in data.get("branches", ())),
            current_branch=_pick(data, "current_branch", "currentBranch", default=""),
            commits=tuple(Commit.from_dict(c) for c in data.get("commits", ())),
        )


def empty_repository(
    initialized: bool = False,
    working_directory: str = DEFAULT_WORKING_DIRECTORY,
    default_branch: str = "main",
) -> Repository:
    """Build the blank repository a scenario starts from."""
    if not initialized:
        return Repository(working_directory=working_directory)
    return Repository(
        initialized=True,
        working_directory=working_directory,
        branches=(Branch(name=default_branch, current=True),),
        current_branch=default_branch,
    )
