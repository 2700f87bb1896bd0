"""Entry point for the git-quest terminal"""

import sys

from rich.console import Console

from git_quest.cli.args import parse_args
from git_quest.cli.terminal import QuestTerminal
from git_quest.config import Config
from git_quest.logging_config import setup_logging
from git_quest.services.game_service import GameService

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, log_dir=parsed_args.state_dir)

        config = Config(
            command_delay=parsed_args.delay,
            start_level=parsed_args.level,
            save_progress=not parsed_args.no_save,
            state_dir=parsed_args.state_dir,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        game = GameService(config)
        if parsed_args.reset_progress:
            game.reset_progress()
            console.print("[yellow]Progress reset.[/yellow]")

        return QuestTerminal(game, console).run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Timeline paused. Progress is saved.[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
