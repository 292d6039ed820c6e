"""Character template structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

Role = Literal["player", "monster"]


@dataclass(slots=True)
class LoadoutEntryDef:
    """An ability reference paired with its cooldown."""

    ability_id: str
    cooldown: float


@dataclass(slots=True)
class CharacterDef:
    """Base stats and ability loadouts for a combatant template."""

    id: str
    role: Role
    default_name: str
    hp: int
    attack: int
    defense: int
    # Cooldowns in seconds, ticked by elapsed time.
    loadout: Tuple[LoadoutEntryDef, ...] = ()
    # Cooldowns in turns, ticked once per turn for the AI policy.
    tactics: Tuple[LoadoutEntryDef, ...] = ()
