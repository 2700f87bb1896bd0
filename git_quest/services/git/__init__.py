"""Simulated Git verb handlers for git-quest.

Every handler takes ``(args, repository)`` and returns a CommandResult.
Handlers signal failures by raising CommandFailed; the interpreter turns
those into failed results.
"""

from . import branching, canned, history, repository, staging

__all__ = ["branching", "canned", "history", "repository", "staging"]
