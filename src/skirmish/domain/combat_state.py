"""Turn states for a duel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class PlayerTurn:
    """Waiting for the player's action trigger."""


@dataclass(frozen=True, slots=True)
class MonsterTurn:
    """The monster acts once its thinking delay has elapsed."""


@dataclass(frozen=True, slots=True)
class GameOver:
    """Terminal state naming the surviving combatant."""

    winner: str


CombatState = Union[PlayerTurn, MonsterTurn, GameOver]


def describe_state(state: CombatState) -> str:
    if isinstance(state, PlayerTurn):
        return "player_turn"
    if isinstance(state, MonsterTurn):
        return "monster_turn"
    return f"game_over:{state.winner}"
