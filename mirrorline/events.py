"""Bounded in-memory record of game happenings and load diagnostics."""
from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Any


@dataclass
class Event:
    tick: int
    stage: int
    type: str
    data: dict[str, Any]


class EventLog:
    """Keeps the newest ``max_entries`` events (all of them when 0)."""

    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)

    def emit(self, tick: int, stage: int, type: str, **data: Any) -> None:
        self._events.append(Event(tick=tick, stage=stage, type=type, data=data))

    def query(self, type: str | None = None, stage: int | None = None,
              after: int | None = None) -> list[Event]:
        result: list[Event] = list(self._events)
        if type is not None:
            result = [e for e in result if e.type == type]
        if stage is not None:
            result = [e for e in result if e.stage == stage]
        if after is not None:
            result = [e for e in result if e.tick > after]
        return result

    def last(self, type: str) -> Event | None:
        for e in reversed(self._events):
            if e.type == type:
                return e
        return None

    def counts(self) -> Counter[str]:
        """Number of retained events per type."""
        return Counter(e.type for e in self._events)

    def __len__(self) -> int:
        return len(self._events)
