"""Game orchestration: levels, scoring, achievements and saving"""
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from git_quest.config import Config
from git_quest.data.scenarios import SCENARIO_ORDER, SCENARIOS
from git_quest.exceptions import ProgressStoreError
from git_quest.logging_config import get_logger
from git_quest.models.command import HistoryEntry
from git_quest.models.progress import GameProgress
from git_quest.models.scenario import Scenario
from git_quest.services.command_service import GitSimulator
from git_quest.services.objective_service import ObjectiveEvaluator
from git_quest.services.progress_store import ProgressStore
from git_quest.services.session_service import TerminalSession

logger = get_logger(__name__)


@dataclass
class TurnResult:
    """What happened after one submitted line."""
    entry: HistoryEntry
    progress: int
    level_completed: bool = False
    achievements: List[str] = field(default_factory=list)


def command_key(line: str) -> str:
    """Normalize a line to the command it used, e.g. "git commit"."""
    tokens = line.lower().split()
    if not tokens:
        return ""
    if tokens[0] == "git" and len(tokens) > 1:
        return f"git {tokens[1]}"
    return tokens[0]


class GameService:
    """Ties a terminal session to the current level and saved progress."""

    def __init__(
        self,
        config: Optional[Config] = None,
        scenarios: Optional[Mapping[int, Scenario]] = None,
        level_order: Optional[Sequence[int]] = None,
        store: Optional[ProgressStore] = None,
        simulator: Optional[GitSimulator] = None,
    ):
        self.config = config or Config()
        self.scenarios = dict(scenarios if scenarios is not None else SCENARIOS)
        self.level_order = list(level_order if level_order is not None else SCENARIO_ORDER)
        self.evaluator = ObjectiveEvaluator(self.scenarios)

        if store is None and self.config.save_progress:
            store = ProgressStore(self.config.state_dir)
        self.store = store

        self.progress = self._load_progress()
        self.session = TerminalSession(simulator=simulator, config=self.config)

        level = self.progress.current_level
        if self.config.start_level is not None:
            if self.progress.is_unlocked(self.config.start_level):
                level = self.config.start_level
            else:
                logger.warning(f"Level {self.config.start_level} is locked, resuming level {level}")
        self.start_level(level)

    def _load_progress(self) -> GameProgress:
        data = self.store.load() if self.store else None
        if data:
            try:
                progress = GameProgress.from_dict(data, self.level_order)
            except (ValueError, TypeError, KeyError) as e:
                logger.warning(f"Could not restore saved progress: {e}")
            else:
                if progress.current_level != data.get("current_level"):
                    logger.warning(
                        f"Saved level {data.get('current_level')} is not unlocked, resuming level {progress.current_level}"
                    )
                return progress
        return GameProgress(level_order=self.level_order)

    @property
    def scenario(self) -> Scenario:
        return self.evaluator.get_scenario(self.progress.current_level)

    def start_level(self, level_id: int) -> Scenario:
        """Switch to a level and load its starting repository.

        Raises:
            ScenarioNotFoundError: If the level does not exist
            ValueError: If the level is still locked
        """
        scenario = self.evaluator.get_scenario(level_id)
        self.progress.start_level(level_id)
        self.session.reset(scenario.initial_repository)
        logger.info(f"Started level {level_id}: {scenario.title}")
        self.save()
        return scenario

    def restart_level(self) -> None:
        self.session.reset(self.scenario.initial_repository)

    def advance(self) -> Optional[Scenario]:
        """Move to the next level if it is unlocked."""
        following = self.progress.next_level(self.progress.current_level)
        if following is None or not self.progress.is_unlocked(following):
            return None
        return self.start_level(following)

    def play(self, line: str) -> Optional[TurnResult]:
        """Submit a line and update score, completion and achievements.

        Returns:
            None when the session ignored the line
        """
        entry = self.session.submit(line)
        if entry is None:
            return None

        if entry.success:
            self.progress.record_command(command_key(entry.command))

        level_id = self.progress.current_level
        repository, history = self.session.repository, self.session.history
        turn = TurnResult(entry=entry, progress=self.evaluator.progress(level_id, repository, history))

        if not self.progress.is_completed(level_id) and self.evaluator.is_complete(level_id, repository, history):
            turn.level_completed = self.progress.complete_level(level_id)
            turn.achievements = self._award_achievements(history)
            logger.info(f"Level {level_id} completed")

        self.save()
        return turn

    def _award_achievements(self, history: Sequence[HistoryEntry]) -> List[str]:
        earned = []
        if self.scenario.achievement:
            earned.append(self.scenario.achievement)
        if all(entry.success for entry in history):
            earned.append("perfectionist")
        return [a for a in earned if self.progress.unlock_achievement(a)]

    def hint(self, topic: str) -> Optional[str]:
        """Look up a hint for the current level ("commit" or "git commit")."""
        topic = topic.strip().lower()
        hints = self.scenario.hints
        text = hints.get(topic) or hints.get(f"git {topic}")
        if text:
            self.progress.unlock_achievement("explorer")
            self.save()
        return text

    def reset_progress(self) -> None:
        """Forget all progress and return to the first level."""
        self.progress = GameProgress(level_order=self.level_order)
        if self.store:
            try:
                self.store.clear()
            except ProgressStoreError as e:
                logger.warning(str(e))
        self.start_level(self.level_order[0])

    def save(self) -> None:
        if not self.store:
            return
        try:
            self.store.save(self.progress.to_dict())
        except ProgressStoreError as e:
            logger.warning(str(e))
