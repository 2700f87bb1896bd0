"""Interactive rich terminal for playing git-quest"""
from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from git_quest.data.achievements import ACHIEVEMENTS
from git_quest.services.game_service import GameService, TurnResult


EXIT_WORDS = {"quit", "exit"}


class QuestTerminal:
    """Read-eval-print loop around a GameService."""

    def __init__(self, game: GameService, console: Optional[Console] = None):
        self.game = game
        self.console = console or Console()
        self.meta_commands = {
            "hint": self.show_hint,
            "objectives": self.show_objectives,
            "levels": self.show_levels,
            "restart": self.restart,
        }

    def run(self) -> int:
        self.show_briefing()
        while True:
            try:
                line = self.console.input(self._prompt())
            except EOFError:
                self.console.print()
                return 0

            word, _, rest = line.strip().partition(" ")
            if word.lower() in EXIT_WORDS:
                return 0
            if word.lower() in self.meta_commands:
                self.meta_commands[word.lower()](rest)
                continue
            if word.lower() == "clear":
                self.console.clear()
                continue

            turn = self.game.play(line)
            if turn is not None:
                self.show_turn(turn)

    def _prompt(self) -> str:
        repository = self.game.session.repository
        branch = f" [cyan]({repository.current_branch})[/cyan]" if repository.initialized else ""
        return f"[green]{repository.working_directory}[/green]{branch} $ "

    def show_briefing(self) -> None:
        scenario = self.game.scenario
        body = Text(scenario.story + "\n\n")
        for step in scenario.briefing:
            body.append(f"  • {step}\n")
        self.console.print(Panel(body, title=f"Level {scenario.id}: {scenario.title}", border_style="magenta"))

    def show_turn(self, turn: TurnResult) -> None:
        if turn.entry.output:
            style = None if turn.entry.success else "red"
            self.console.print(Text(turn.entry.output, style=style))
        self.console.print(
            Group(ProgressBar(total=100, completed=turn.progress, width=40), Text(f"{turn.progress}% complete", style="dim"))
        )

        for achievement_id in turn.achievements:
            achievement = ACHIEVEMENTS.get(achievement_id)
            if achievement:
                self.console.print(f"[yellow]{achievement.icon} Achievement unlocked: {achievement.title}[/yellow]")

        if turn.level_completed:
            self._celebrate()

    def _celebrate(self) -> None:
        scenario = self.game.scenario
        self.console.print(
            Panel(
                Text(
                    "Excellent work, Timekeeper! You've restored this part of the timeline.\n"
                    f"Score: {self.game.progress.total_score}",
                    justify="center",
                ),
                title=f"LEVEL COMPLETE: {scenario.title}",
                border_style="green",
            )
        )
        following = self.game.progress.next_level(scenario.id)
        if following is None:
            self.console.print("[bold green]All timelines restored. Reality is stable.[/bold green]")
            return
        if Confirm.ask("Continue to the next level?", console=self.console, default=True):
            self.game.advance()
            self.show_briefing()

    def show_hint(self, topic: str) -> None:
        if not topic:
            topics = ", ".join(self.game.scenario.hints)
            self.console.print(f"Hints available for: {topics}")
            return
        text = self.game.hint(topic)
        if text is None:
            self.console.print(f"[yellow]No hint for '{topic}' on this level.[/yellow]")
        else:
            self.console.print(f"[cyan]💡 {text}[/cyan]")

    def show_objectives(self, _: str = "") -> None:
        game = self.game
        table = Table(title=game.scenario.title)
        table.add_column("Objective")
        table.add_column("Done")
        for objective, met in game.evaluator.objective_status(
            game.progress.current_level, game.session.repository, game.session.history
        ):
            table.add_row(objective.description, "✓" if met else "")
        self.console.print(table)

    def show_levels(self, _: str = "") -> None:
        progress = self.game.progress
        table = Table()
        table.add_column("Level")
        table.add_column("Title")
        table.add_column("State")
        for level_id in progress.level_order:
            if progress.is_completed(level_id):
                state = "completed"
            elif progress.is_unlocked(level_id):
                state = "unlocked"
            else:
                state = "locked"
            marker = " *" if level_id == progress.current_level else ""
            table.add_row(f"{level_id}{marker}", self.game.scenarios[level_id].title, state)
        self.console.print(table)
        self.console.print(f"Total score: {progress.total_score}")

    def restart(self, _: str = "") -> None:
        self.game.restart_level()
        self.console.print("[yellow]Level restarted.[/yellow]")
        self.show_briefing()
