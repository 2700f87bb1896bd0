"""Achievement catalogue"""
from typing import Dict

from git_quest.models.scenario import Achievement

ACHIEVEMENTS: Dict[str, Achievement] = {
    a.id: a
    for a in (
        Achievement(
            id="first-steps",
            title="First Steps",
            description="Successfully initialized your first Git repository and learned the basics.",
            icon="🌟",
        ),
        Achievement(
            id="branch-wizard",
            title="Branch Wizard",
            description="Mastered the art of branching and merging parallel timelines.",
            icon="🔮",
        ),
        Achievement(
            id="time-reverter",
            title="Time Reverter",
            description="Undid dangerous changes and saved the timeline from corruption.",
            icon="⏰",
        ),
        Achievement(
            id="timeline-master",
            title="Timeline Master",
            description="Completed all levels and restored order to the universe.",
            icon="👑",
        ),
        Achievement(
            id="perfectionist",
            title="Perfectionist",
            description="Completed a level without any incorrect commands.",
            icon="💎",
        ),
        Achievement(
            id="explorer",
            title="Explorer",
            description="Used the hint system to learn about Git commands.",
            icon="🔍",
        ),
    )
}
