"""Health-threshold decision policy for computer-controlled combatants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .abilities import BASIC_ATTACK, Ability, AbilityKind
from .cooldowns import AbilitySlot
from .entities import Character


@dataclass(frozen=True, slots=True)
class AiPolicyConfig:
    """Health bands for the monster policy.

    Both bands are strict: a health fraction exactly on a threshold falls in
    the middle band.
    """

    low_health_threshold: float = 0.30
    high_health_threshold: float = 0.70

    def __post_init__(self) -> None:
        if not 0.0 <= self.low_health_threshold <= self.high_health_threshold <= 1.0:
            raise ValueError("AI thresholds must satisfy 0 <= low <= high <= 1.")


DEFAULT_AI_POLICY = AiPolicyConfig()


def _first_of_kind(usable: Iterable[AbilitySlot], kind: AbilityKind) -> AbilitySlot | None:
    for slot in usable:
        if slot.kind == kind:
            return slot
    return None


def _preference_order(hp_percent: float, config: AiPolicyConfig) -> Sequence[AbilityKind]:
    if hp_percent < config.low_health_threshold:
        return ("heal", "basic_attack")
    if hp_percent > config.high_health_threshold:
        return ("powerful_attack", "basic_attack")
    return ("basic_attack",)


def choose_monster_slot(
    actor: Character,
    opponent: Character,
    available: Sequence[AbilitySlot],
    config: AiPolicyConfig = DEFAULT_AI_POLICY,
) -> AbilitySlot | None:
    """Pick the ready slot the actor should use next, or None if none fits.

    Low health prefers a heal, high health prefers a powerful attack, and
    every band falls back to a basic attack. ``opponent`` is accepted for
    strategy parity and currently unused.
    """
    usable: List[AbilitySlot] = [slot for slot in available if slot.is_ready()]
    for kind in _preference_order(actor.hp_percent, config):
        slot = _first_of_kind(usable, kind)
        if slot is not None:
            return slot
    return None


def choose_monster_action(
    actor: Character,
    opponent: Character,
    available: Sequence[AbilitySlot],
    config: AiPolicyConfig = DEFAULT_AI_POLICY,
) -> Ability:
    """Return the ability of the chosen slot, or the stock Basic Attack when no slot fits."""
    slot = choose_monster_slot(actor, opponent, available, config)
    return slot.ability if slot is not None else BASIC_ATTACK
