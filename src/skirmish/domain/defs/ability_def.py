"""Ability definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.domain.abilities import Ability, AbilityEffect, AbilityKind


@dataclass(slots=True)
class AbilityDef:
    """Describes a catalog ability loaded from definitions."""

    id: str
    name: str
    power: int
    effect: AbilityEffect
    kind: AbilityKind

    def to_ability(self) -> Ability:
        return Ability(name=self.name, power=self.power, effect=self.effect)
