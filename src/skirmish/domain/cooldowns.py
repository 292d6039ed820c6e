"""Cooldown-gated ability slots."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from .abilities import (
    BASIC_ATTACK,
    HEAL,
    POWERFUL_ATTACK,
    QUICK_STRIKE,
    VALID_KINDS,
    Ability,
    AbilityKind,
)

# Turn-denominated cooldowns advance by one unit per turn.
TURN_TICK = 1.0


@dataclass(slots=True)
class AbilitySlot:
    """Wraps an ability with a cooldown timer.

    Keeps ``0 <= cooldown_current <= cooldown_max``. A zero ``cooldown_max``
    means the ability is always ready.
    """

    ability: Ability
    cooldown_max: float
    cooldown_current: float = 0.0
    kind: AbilityKind = "other"

    def __post_init__(self) -> None:
        if self.cooldown_max < 0:
            raise ValueError(f"Ability '{self.ability.name}' cooldown_max cannot be negative.")
        if not 0 <= self.cooldown_current <= self.cooldown_max:
            raise ValueError(
                f"Ability '{self.ability.name}' cooldown_current must be between 0 and {self.cooldown_max}."
            )
        if self.kind not in VALID_KINDS:
            raise ValueError(f"Ability '{self.ability.name}' kind must be one of {sorted(VALID_KINDS)}.")

    def is_ready(self) -> bool:
        return self.cooldown_current <= 0

    def activate(self) -> None:
        """Start the cooldown after the ability has been used."""
        self.cooldown_current = self.cooldown_max

    def tick(self, delta: float) -> None:
        """Advance the cooldown by ``delta``, stopping at zero."""
        if delta < 0:
            raise ValueError("Cooldown delta cannot be negative.")
        self.cooldown_current = max(0.0, self.cooldown_current - delta)

    def cooldown_progress(self) -> float:
        """Return the remaining cooldown as a 0..1 fraction for display."""
        if self.cooldown_max <= 0:
            return 0.0
        return min(1.0, max(0.0, self.cooldown_current / self.cooldown_max))


@dataclass(slots=True)
class AbilitySet:
    """Ordered collection of ability slots with independent cooldowns."""

    slots: List[AbilitySlot] = field(default_factory=list)

    @classmethod
    def player_default(cls) -> AbilitySet:
        """Player loadout with real-time cooldowns in seconds."""
        return cls(
            slots=[
                AbilitySlot(BASIC_ATTACK, 0.5, kind="basic_attack"),
                AbilitySlot(POWERFUL_ATTACK, 3.0, kind="powerful_attack"),
                AbilitySlot(HEAL, 5.0, kind="heal"),
                AbilitySlot(QUICK_STRIKE, 0.2),
            ]
        )

    @classmethod
    def monster_tactics(cls) -> AbilitySet:
        """Monster loadout for the AI policy, with cooldowns counted in turns."""
        return cls(
            slots=[
                AbilitySlot(BASIC_ATTACK, 0.0, kind="basic_attack"),
                AbilitySlot(POWERFUL_ATTACK, 3.0, kind="powerful_attack"),
                AbilitySlot(HEAL, 4.0, kind="heal"),
            ]
        )

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[AbilitySlot]:
        return iter(self.slots)

    def tick_all(self, delta: float) -> None:
        for slot in self.slots:
            slot.tick(delta)

    def get_ready_ability(self, index: int) -> AbilitySlot | None:
        """Return the slot at ``index`` if it exists and is ready, else None."""
        if not 0 <= index < len(self.slots):
            return None
        slot = self.slots[index]
        return slot if slot.is_ready() else None

    def find(self, name: str) -> AbilitySlot | None:
        for slot in self.slots:
            if slot.ability.name == name:
                return slot
        return None

    def activate(self, name: str) -> bool:
        """Start the cooldown of the first slot holding ``name``.

        Returns False when no slot matches.
        """
        slot = self.find(name)
        if slot is None:
            return False
        slot.activate()
        return True
