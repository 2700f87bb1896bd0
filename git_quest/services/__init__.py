"""Services for git-quest."""
