"""Domain definition exports."""

from .ability_def import AbilityDef
from .character_def import CharacterDef, LoadoutEntryDef
from .rules_def import RulesDef

__all__ = [
    "AbilityDef",
    "CharacterDef",
    "LoadoutEntryDef",
    "RulesDef",
]
