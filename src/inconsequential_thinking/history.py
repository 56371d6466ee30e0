"""Bounded thought history. Oldest out first, never by relevance."""

from __future__ import annotations

from collections import deque
from typing import Iterator

import structlog

from inconsequential_thinking.config import DEFAULT_MEMORY_LIMIT
from inconsequential_thinking.models import Thought

logger = structlog.get_logger(__name__)


class History:
    """Secuencia de pensamientos con capacidad fija.

    API:
        history.record(text, n, total)  — añadir, desalojando el más antiguo
        history.recent(n)               — los últimos n
        len(history)                    — cuántos hay
        history.clear()                 — empezar de cero
    """

    def __init__(self, memory_limit: int = DEFAULT_MEMORY_LIMIT) -> None:
        if memory_limit < 1:
            raise ValueError(f"memory_limit must be >= 1, got {memory_limit}")
        self._limit = memory_limit
        self._thoughts: deque[Thought] = deque()

    @property
    def memory_limit(self) -> int:
        return self._limit

    def record(self, text: str, number: int, total_estimate: int) -> Thought:
        """Append a thought stamped now, then evict from the front while over the limit."""
        thought = Thought(text=text, number=number, total_estimate=total_estimate)
        self._thoughts.append(thought)

        while len(self._thoughts) > self._limit:
            evicted = self._thoughts.popleft()
            logger.debug("history.evicted", number=evicted.number,
                         size=len(self._thoughts))
        return thought

    def recent(self, n: int) -> list[Thought]:
        """Most-recent-n window, oldest first."""
        if n <= 0:
            return []
        return list(self._thoughts)[-n:]

    def clear(self) -> None:
        self._thoughts.clear()

    def __len__(self) -> int:
        return len(self._thoughts)

    def __iter__(self) -> Iterator[Thought]:
        return iter(list(self._thoughts))

    def __repr__(self) -> str:
        return f"History(thoughts={len(self)}, limit={self._limit})"
