"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stats:
    """Maximum health plus base offensive and defensive power."""

    hp: int
    attack: int
    defense: int
