"""Ability definitions and the stock ability catalog."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

AbilityEffect = Literal["damage", "heal"]
AbilityKind = Literal["basic_attack", "powerful_attack", "heal", "other"]

VALID_EFFECTS = {"damage", "heal"}
VALID_KINDS = {"basic_attack", "powerful_attack", "heal", "other"}


@dataclass(frozen=True, slots=True)
class Ability:
    """A named action with signed power.

    Healing abilities carry zero or negative power and ignore defense. When
    ``effect`` is omitted it follows the sign of ``power``, so a zero-power
    ability is a plain attack.
    """

    name: str
    power: int
    effect: AbilityEffect | None = None

    def __post_init__(self) -> None:
        if self.effect is None:
            object.__setattr__(self, "effect", "heal" if self.power < 0 else "damage")
        elif self.effect not in VALID_EFFECTS:
            raise ValueError(f"Ability '{self.name}' effect must be one of {sorted(VALID_EFFECTS)}.")
        if self.effect == "heal" and self.power > 0:
            raise ValueError(f"Healing ability '{self.name}' must have zero or negative power.")
        if self.effect == "damage" and self.power < 0:
            raise ValueError(f"Damage ability '{self.name}' cannot have negative power.")

    @property
    def is_heal(self) -> bool:
        return self.effect == "heal"


BASIC_ATTACK = Ability(name="Basic Attack", power=5)
POWERFUL_ATTACK = Ability(name="Powerful Attack", power=12)
HEAL = Ability(name="Heal", power=-8)
QUICK_STRIKE = Ability(name="Quick Strike", power=3)


def basic_attack() -> Ability:
    return BASIC_ATTACK


def powerful_attack() -> Ability:
    return POWERFUL_ATTACK


def heal() -> Ability:
    return HEAL


def quick_strike() -> Ability:
    return QUICK_STRIKE
