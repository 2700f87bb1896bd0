"""Version information for git-quest."""

__version__ = "1.0.0"
