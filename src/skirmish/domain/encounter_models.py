"""Encounter domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from skirmish.domain.ai import AiPolicyConfig
from skirmish.domain.combat import CombatEvent
from skirmish.domain.combat_log import CombatLog
from skirmish.domain.combat_state import CombatState, GameOver, MonsterTurn, PlayerTurn
from skirmish.domain.cooldowns import TURN_TICK, AbilitySet
from skirmish.domain.entities import Character


@dataclass(slots=True)
class Encounter:
    """Tracks one player-versus-monster duel.

    ``state`` is the single source of truth for whose action is valid next.
    """

    player: Character
    monster: Character
    player_abilities: AbilitySet
    monster_abilities: AbilitySet
    log: CombatLog = field(default_factory=CombatLog)
    state: CombatState = field(default_factory=PlayerTurn)
    ai_config: AiPolicyConfig = field(default_factory=AiPolicyConfig)
    monster_think_delay: float = 1.0
    monster_turn_tick: float = TURN_TICK
    think_elapsed: float = 0.0
    turn: int = 1
    last_event: CombatEvent | None = None

    @property
    def is_over(self) -> bool:
        return isinstance(self.state, GameOver)

    @property
    def is_player_turn(self) -> bool:
        return isinstance(self.state, PlayerTurn)

    @property
    def is_monster_turn(self) -> bool:
        return isinstance(self.state, MonsterTurn)

    @property
    def winner(self) -> str | None:
        if isinstance(self.state, GameOver):
            return self.state.winner
        return None


@dataclass(slots=True)
class AbilitySlotView:
    """Display snapshot of a single ability slot."""

    index: int
    name: str
    power: int
    is_ready: bool
    cooldown_remaining: float
    cooldown_progress: float


@dataclass(slots=True)
class CombatantView:
    """Display snapshot of a combatant."""

    name: str
    hp_display: str
    current_hp: int
    max_hp: int
    is_defeated: bool


@dataclass(slots=True)
class EncounterView:
    """Read-only snapshot of an encounter for presentation layers."""

    state: CombatState
    turn: int
    player: CombatantView
    monster: CombatantView
    player_abilities: List[AbilitySlotView]
    last_event: CombatEvent | None
    log_lines: List[str]
