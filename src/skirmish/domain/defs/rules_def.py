"""Encounter rule settings."""
from __future__ import annotations

from dataclasses import dataclass, field

from skirmish.domain.ai import AiPolicyConfig
from skirmish.domain.combat_log import DEFAULT_LOG_CAPACITY
from skirmish.domain.cooldowns import TURN_TICK


@dataclass(slots=True)
class RulesDef:
    """Tunable pacing for an encounter; combat formulas are not configurable."""

    id: str
    log_capacity: int = DEFAULT_LOG_CAPACITY
    monster_think_delay: float = 1.0
    monster_turn_tick: float = TURN_TICK
    ai: AiPolicyConfig = field(default_factory=AiPolicyConfig)
