"""Pure damage and healing resolution."""
from __future__ import annotations

from dataclasses import dataclass

from .abilities import Ability, AbilityEffect
from .entities import Character

MIN_DAMAGE = 1


@dataclass(frozen=True, slots=True)
class CombatEvent:
    """Outcome of one resolved action.

    ``effect`` is copied from the ability, so a zero-power heal is still a heal.
    Healing carries zero or negative ``damage``. The event does not touch
    either character; callers apply ``defender_hp_after`` themselves.
    """

    attacker_name: str
    defender_name: str
    damage: int
    defender_hp_after: int
    ability_used: str
    effect: AbilityEffect = "damage"

    @property
    def is_heal(self) -> bool:
        return self.effect == "heal"

    @property
    def amount(self) -> int:
        """Magnitude of the damage dealt or health restored."""
        return abs(self.damage)


def compute_damage(attacker: Character, defender: Character, ability: Ability) -> int:
    """Return signed damage: the heal power for heals, else the mitigated hit."""
    if ability.is_heal:
        return ability.power
    raw = attacker.stats.attack + ability.power
    return max(MIN_DAMAGE, raw - defender.stats.defense)


def compute_attack(attacker: Character, defender: Character, ability: Ability) -> CombatEvent:
    """Resolve ``ability`` from ``attacker`` against ``defender`` without side effects.

    Heals bypass defense and are not capped at maximum health here.
    """
    damage = compute_damage(attacker, defender, ability)
    return CombatEvent(
        attacker_name=attacker.name,
        defender_name=defender.name,
        damage=damage,
        defender_hp_after=defender.hp - damage,
        ability_used=ability.name,
        effect="heal" if ability.is_heal else "damage",
    )
