"""Fixed-capacity log of human-readable combat messages."""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterator, List

logger = logging.getLogger(__name__)

DEFAULT_LOG_CAPACITY = 10


class CombatLog:
    """Strict FIFO of messages; the oldest entry is evicted on overflow."""

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Combat log capacity must be at least 1.")
        self._capacity = capacity
        self._entries: Deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> str | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def add(self, message: str) -> None:
        logger.debug("combat log: %s", message)
        self._entries.append(message)

    def contains(self, text: str) -> bool:
        """Return True if any retained entry contains ``text``."""
        return any(text in entry for entry in self._entries)

    def get_recent(self, count: int) -> List[str]:
        """Return up to ``count`` of the newest entries, oldest first."""
        if count <= 0:
            return []
        return list(self._entries)[-count:]
