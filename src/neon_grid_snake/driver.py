"""Keeps one periodic timer in step with the engine's state and cadence."""

from __future__ import annotations

import logging

from .engine import Direction, GameState, SimulationEngine, TickOutcome
from .errors import EngineNotReadyError
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class TickDriver:
    """Owns the timer handle: ticks while playing, silent otherwise.

    Every command goes through :meth:`sync`, which cancels the timer when the
    engine leaves ``playing`` and reschedules it when the cadence changes.
    """

    def __init__(
        self, scheduler: Scheduler, engine: SimulationEngine | None = None
    ) -> None:
        self.scheduler = scheduler
        self._engine = engine
        self._handle: object | None = None
        self._interval_ms: int | None = None
        self._closed = False
        self.sync()

    # --- Wiring ----------------------------------------------------------

    def bind(self, engine: SimulationEngine) -> None:
        self._cancel()
        self._engine = engine
        self.sync()

    @property
    def engine(self) -> SimulationEngine:
        return require_engine(self._engine)

    @property
    def interval_ms(self) -> int | None:
        """Interval of the live timer, or None when no timer is scheduled."""
        return self._interval_ms

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Commands --------------------------------------------------------

    def start(self) -> bool:
        if self._closed:
            return False
        changed = self.engine.start_game()
        self.sync()
        return changed

    def pause(self) -> bool:
        if self._closed:
            return False
        changed = self.engine.pause_game()
        self.sync()
        return changed

    def resume(self) -> bool:
        if self._closed:
            return False
        changed = self.engine.resume_game()
        self.sync()
        return changed

    def request_direction(self, direction: Direction | str) -> bool:
        if self._closed:
            return False
        return self.engine.request_direction(direction)

    def on_tick(self) -> TickOutcome:
        """Timer callback: one engine step, then re-sync the timer."""
        if self._closed:
            return TickOutcome.IGNORED
        outcome = self.engine.tick()
        self.sync()
        return outcome

    # --- Timer bookkeeping -----------------------------------------------

    def sync(self) -> None:
        engine = self._engine
        if self._closed or engine is None or engine.state is not GameState.PLAYING:
            self._cancel()
            return
        interval = engine.tick_interval_ms
        if self._handle is not None and interval == self._interval_ms:
            return
        if self._handle is not None:
            logger.debug("Cadence %s ms -> %s ms", self._interval_ms, interval)
        self._cancel()
        self._handle = self.scheduler.schedule(self.on_tick, interval)
        self._interval_ms = interval

    def _cancel(self) -> None:
        if self._handle is None:
            return
        self.scheduler.cancel(self._handle)
        self._handle = None
        self._interval_ms = None

    def close(self) -> None:
        """Cancel the timer for good; later commands and ticks are ignored."""
        if self._closed:
            return
        self._cancel()
        self._closed = True


def require_engine(engine: SimulationEngine | None) -> SimulationEngine:
    """Fail fast when engine state is read before an engine exists."""
    if engine is None:
        raise EngineNotReadyError("no SimulationEngine has been bound")
    return engine
