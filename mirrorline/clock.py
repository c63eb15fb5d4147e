"""Fixed-timestep clock producing a TickContext per tick."""

from typing import Callable

from mirrorline.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @classmethod
    def from_interval(cls, interval_ms: int) -> "Clock":
        """Build a clock from a tick interval in milliseconds (50 -> 20 tps)."""
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        return cls(max(1, round(1000 / interval_ms)))

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )
