"""Configuration handling for git-quest"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_WORKING_DIRECTORY = "/timeline-project"


@dataclass
class Config:
    """Configuration for git-quest with validation."""

    # Simulated repository
    working_directory: str = DEFAULT_WORKING_DIRECTORY
    default_branch: str = "main"

    # Session behaviour
    command_delay: float = 0.0  # Seconds to wait before showing a result
    start_level: Optional[int] = None  # None = resume saved progress

    # Persistence
    save_progress: bool = True
    state_dir: Path = field(default_factory=lambda: Path.home() / ".git-quest")

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_working_directory()
        self._validate_default_branch()
        self._validate_command_delay()
        self._validate_start_level()
        self.state_dir = Path(self.state_dir)

    def _validate_working_directory(self):
        """Validate working_directory is an absolute simulated path."""
        if not self.working_directory or not self.working_directory.startswith("/"):
            raise ValueError(
                f"working_directory must be an absolute path, got '{self.working_directory}'"
            )

    def _validate_default_branch(self):
        """Validate default_branch is not empty."""
        if not self.default_branch or not self.default_branch.strip():
            raise ValueError("default_branch cannot be empty")
        self.default_branch = self.default_branch.strip()

    def _validate_command_delay(self):
        """Validate command_delay is not negative."""
        if self.command_delay < 0:
            raise ValueError(f"command_delay cannot be negative, got {self.command_delay}")

    def _validate_start_level(self):
        """Validate start_level is positive when given."""
        if self.start_level is not None and self.start_level <= 0:
            raise ValueError(f"start_level must be positive, got {self.start_level}")

    def to_dict(self) -> dict:
        """Convert config to a plain dictionary."""
        return {
            "working_directory": self.working_directory,
            "default_branch": self.default_branch,
            "command_delay": self.command_delay,
            "start_level": self.start_level,
            "save_progress": self.save_progress,
            "state_dir": str(self.state_dir),
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "working_directory",
            "default_branch",
            "command_delay",
            "start_level",
            "save_progress",
            "state_dir",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
