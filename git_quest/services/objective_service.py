"""Objective evaluation for scenarios"""
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from git_quest.exceptions import ScenarioNotFoundError
from git_quest.logging_config import get_logger
from git_quest.models.command import HistoryEntry
from git_quest.models.repository import Repository
from git_quest.models.scenario import Objective, Scenario

logger = get_logger(__name__)


class ObjectiveEvaluator:
    """Decides scenario completion and progress from state and history.

    Every method is a pure function of its arguments; neither the repository
    nor the history is modified.
    """

    def __init__(self, scenarios: Optional[Mapping[int, Scenario]] = None):
        if scenarios is None:
            from git_quest.data.scenarios import SCENARIOS
            scenarios = SCENARIOS
        self.scenarios: Dict[int, Scenario] = dict(scenarios)

    def get_scenario(self, scenario_id: int) -> Scenario:
        try:
            return self.scenarios[scenario_id]
        except KeyError:
            raise ScenarioNotFoundError(scenario_id)

    def _objectives(self, scenario_id: int) -> Tuple[Objective, ...]:
        scenario = self.scenarios.get(scenario_id)
        if scenario is None:
            logger.warning(f"No rules registered for scenario {scenario_id}")
            return ()
        return scenario.objectives

    def is_complete(self, scenario_id: int, repository: Repository, history: Sequence[HistoryEntry]) -> bool:
        """True when every required objective of the scenario is met.

        Unknown scenarios are never complete.
        """
        objectives = [o for o in self._objectives(scenario_id) if o.required]
        if not objectives:
            return False
        return all(o.is_met(repository, history) for o in objectives)

    def progress(self, scenario_id: int, repository: Repository, history: Sequence[HistoryEntry]) -> int:
        """Sum of the weights of met objectives, clamped to 0..100."""
        score = sum(
            o.weight for o in self._objectives(scenario_id) if o.is_met(repository, history)
        )
        return max(0, min(score, 100))

    def objective_status(
        self, scenario_id: int, repository: Repository, history: Sequence[HistoryEntry]
    ) -> List[Tuple[Objective, bool]]:
        """Each objective paired with whether it is currently met."""
        return [(o, o.is_met(repository, history)) for o in self._objectives(scenario_id)]
