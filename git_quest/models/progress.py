"""Saved game progress model"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from git_quest.constants import ACHIEVEMENT_POINTS, LEVEL_POINTS, NEW_COMMAND_POINTS


@dataclass
class GameProgress:
    """Everything the game remembers between runs.

    Unlike repository snapshots this object is mutated in place; it belongs to
    the game layer, never to the interpreter.
    """

    level_order: List[int]
    current_level: int = 1
    unlocked_levels: List[int] = field(default_factory=list)
    completed_levels: List[int] = field(default_factory=list)
    achievements: Dict[str, str] = field(default_factory=dict)  # id -> unlocked-at ISO time
    total_score: int = 0
    completed_commands: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    last_play_time: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.level_order:
            raise ValueError("level_order cannot be empty")
        first = self.level_order[0]
        if first not in self.unlocked_levels:
            self.unlocked_levels.insert(0, first)
        if self.current_level not in self.unlocked_levels:
            self.current_level = first

    def next_level(self, level_id: int) -> Optional[int]:
        """The level after `level_id` in play order, if any."""
        if level_id not in self.level_order:
            return None
        index = self.level_order.index(level_id)
        if index + 1 < len(self.level_order):
            return self.level_order[index + 1]
        return None

    def is_unlocked(self, level_id: int) -> bool:
        return level_id in self.unlocked_levels

    def is_completed(self, level_id: int) -> bool:
        return level_id in self.completed_levels

    def start_level(self, level_id: int) -> None:
        if not self.is_unlocked(level_id):
            raise ValueError(f"Level {level_id} is locked")
        self.current_level = level_id
        self.last_play_time = datetime.now()

    def complete_level(self, level_id: int) -> bool:
        """Mark a level completed and unlock the next one.

        Returns:
            False if the level had already been completed
        """
        if self.is_completed(level_id):
            return False
        self.completed_levels.append(level_id)
        following = self.next_level(level_id)
        if following is not None and following not in self.unlocked_levels:
            self.unlocked_levels.append(following)
        self.total_score += LEVEL_POINTS
        self.last_play_time = datetime.now()
        return True

    def unlock_achievement(self, achievement_id: str) -> bool:
        if achievement_id in self.achievements:
            return False
        self.achievements[achievement_id] = datetime.now().isoformat()
        self.total_score += ACHIEVEMENT_POINTS
        return True

    def record_command(self, command: str) -> bool:
        """Award points the first time a command is used successfully."""
        if command in self.completed_commands:
            return False
        self.completed_commands.append(command)
        self.total_score += NEW_COMMAND_POINTS
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level_order": list(self.level_order),
            "current_level": self.current_level,
            "unlocked_levels": list(self.unlocked_levels),
            "completed_levels": list(self.completed_levels),
            "achievements": dict(self.achievements),
            "total_score": self.total_score,
            "completed_commands": list(self.completed_commands),
            "start_time": self.start_time.isoformat(),
            "last_play_time": self.last_play_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], level_order: List[int]) -> "GameProgress":
        """Restore progress, dropping levels that no longer exist."""
        known = set(level_order)
        return cls(
            level_order=list(level_order),
            current_level=data.get("current_level", level_order[0]),
            unlocked_levels=[i for i in data.get("unlocked_levels", []) if i in known],
            completed_levels=[i for i in data.get("completed_levels", []) if i in known],
            achievements=dict(data.get("achievements", {})),
            total_score=int(data.get("total_score", 0)),
            completed_commands=list(data.get("completed_commands", [])),
            start_time=datetime.fromisoformat(data["start_time"]) if data.get("start_time") else datetime.now(),
            last_play_time=datetime.now(),
        )
