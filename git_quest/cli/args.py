"""Command-line argument parsing for git-quest."""

import argparse
from pathlib import Path

from git_quest.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-quest",
        description="Learn Git by repairing a broken timeline in a simulated terminal",
        epilog="Inside the terminal: 'hint <command>', 'objectives', 'restart', 'levels', 'quit'.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-quest {__version__}")
    parser.add_argument(
        "--level",
        type=int,
        metavar="N",
        help="Start at level N (must already be unlocked)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        metavar="SECONDS",
        help="Pause before each command result is shown (default: 0.5)",
    )
    parser.add_argument(
        "--state-dir",
        type=Path,
        default=Path.home() / ".git-quest",
        help="Directory for saved progress (default: ~/.git-quest)",
    )
    parser.add_argument("--no-save", action="store_true", help="Do not load or save progress")
    parser.add_argument(
        "--reset-progress", action="store_true", help="Forget saved progress before starting"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
