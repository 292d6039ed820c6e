"""Character models and the stock combatant constructors."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats

PLAYER_STATS = Stats(hp=30, attack=10, defense=2)
MONSTER_STATS = Stats(hp=20, attack=6, defense=1)


@dataclass(slots=True)
class Character:
    """A named combatant with current health and fixed stats.

    ``hp`` is not clamped at zero; a value of zero or below means defeated.
    """

    name: str
    hp: int
    stats: Stats

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    @property
    def hp_percent(self) -> float:
        """Current health as a fraction of maximum; 0.0 when max health is not positive."""
        if self.stats.hp <= 0:
            return 0.0
        return self.hp / self.stats.hp


def character_from_stats(name: str, stats: Stats) -> Character:
    """Create a character at full health for the given stats."""
    return Character(name=name, hp=stats.hp, stats=stats)


def new_player(name: str) -> Character:
    """Create a player character (hp 30, attack 10, defense 2)."""
    return character_from_stats(name, PLAYER_STATS)


def new_monster(name: str) -> Character:
    """Create a monster character (hp 20, attack 6, defense 1)."""
    return character_from_stats(name, MONSTER_STATS)
