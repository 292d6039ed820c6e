"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "SKIRMISH_DEFINITIONS"


def get_repo_root() -> Path:
    """Return the repository root (src/skirmish/data -> repo)."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files.

    An explicit ``base_path`` wins, then the SKIRMISH_DEFINITIONS environment
    variable, then ``data/definitions`` under the repository root.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.getenv(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
