"""Engine - drives a Game through an ordered pipeline of systems."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from mirrorline.clock import Clock
from mirrorline.types import System

if TYPE_CHECKING:
    from mirrorline.game import Game


class Engine:
    def __init__(self, game: Game, tps: int | None = None) -> None:
        self._game = game
        if tps is None:
            self._clock = Clock.from_interval(game.settings.tick_interval_ms)
        else:
            self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def game(self) -> Game:
        return self._game

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._game, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

    def run_forever(self) -> None:
        """Tick at the clock rate until a system requests a stop."""
        self._stop_requested = False
        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
