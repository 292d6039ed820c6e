"""Repository exports."""

from .abilities_repo import AbilitiesRepository
from .characters_repo import CharactersRepository
from .rules_repo import RulesRepository

__all__ = [
    "AbilitiesRepository",
    "CharactersRepository",
    "RulesRepository",
]
