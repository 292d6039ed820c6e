"""Service layer exports."""

from .errors import EncounterError, FactoryError
from .encounter_service import (
    AbilityResolvedEvent,
    ActionRejectedEvent,
    CombatantDefeatedEvent,
    EncounterEvent,
    EncounterResolvedEvent,
    EncounterService,
    EncounterStartedEvent,
    HealResolvedEvent,
    PlayerAction,
    TurnChangedEvent,
)
from .controllers import EncounterAction, EncounterController
from .simulation_service import SimulationReport, SimulationService

__all__ = [
    "AbilityResolvedEvent",
    "ActionRejectedEvent",
    "CombatantDefeatedEvent",
    "EncounterAction",
    "EncounterController",
    "EncounterError",
    "EncounterEvent",
    "EncounterResolvedEvent",
    "EncounterService",
    "EncounterStartedEvent",
    "FactoryError",
    "HealResolvedEvent",
    "PlayerAction",
    "SimulationReport",
    "SimulationService",
    "TurnChangedEvent",
]
