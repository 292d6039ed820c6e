"""Runtime entity exports."""

from .character import Character, character_from_stats, new_monster, new_player
from .stats import Stats

__all__ = [
    "Character",
    "Stats",
    "character_from_stats",
    "new_monster",
    "new_player",
]
