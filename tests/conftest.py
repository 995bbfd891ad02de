"""Shared fixtures: a fake-clock scheduler and seeded engines."""

from __future__ import annotations

import itertools
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from neon_grid_snake.engine import SimulationEngine
from neon_grid_snake.storage import MemoryHighScoreStore


class ManualScheduler:
    """Scheduler whose clock only moves when a test calls ``advance``."""

    def __init__(self) -> None:
        self.now = 0
        self.timers: dict[int, list] = {}
        self.history: list[tuple[str, int, int]] = []
        self._ids = itertools.count(1)

    def schedule(self, callback, interval_ms):
        handle = next(self._ids)
        self.timers[handle] = [callback, interval_ms, self.now + interval_ms]
        self.history.append(("schedule", handle, interval_ms))
        return handle

    def cancel(self, handle):
        if self.timers.pop(handle, None) is not None:
            self.history.append(("cancel", handle, self.now))

    @property
    def live_intervals(self) -> list[int]:
        return [timer[1] for timer in self.timers.values()]

    def advance(self, ms: int) -> int:
        """Move the clock forward, firing due timers in order; return fire count."""
        target = self.now + ms
        fired = 0
        while self.timers:
            handle, (callback, interval, due) = min(
                self.timers.items(), key=lambda item: item[1][2]
            )
            if due > target:
                break
            self.now = due
            self.timers[handle][2] = due + interval
            callback()
            fired += 1
        self.now = target
        return fired


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def engine(store):
    return SimulationEngine(store, grid_size=10, rng=random.Random(1234))


@pytest.fixture
def playing(engine):
    engine.start_game()
    return engine


@pytest.fixture
def scheduler():
    return ManualScheduler()
