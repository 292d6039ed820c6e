"""Factory helpers for runtime entities."""

from .ability_set_factory import build_ability_set
from .character_factory import create_character

__all__ = [
    "build_ability_set",
    "create_character",
]
