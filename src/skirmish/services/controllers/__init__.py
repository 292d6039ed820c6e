"""UI-agnostic controllers for encounter flow orchestration."""
from __future__ import annotations

from .encounter_controller import EncounterAction, EncounterActionType, EncounterController

__all__ = [
    "EncounterController",
    "EncounterAction",
    "EncounterActionType",
]
