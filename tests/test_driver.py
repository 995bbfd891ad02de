"""Tests for the tick driver and its scheduler bookkeeping."""

from __future__ import annotations

import pytest

from neon_grid_snake.driver import TickDriver, require_engine
from neon_grid_snake.engine import Direction, GameState, Position, TickOutcome
from neon_grid_snake.errors import EngineNotReadyError


@pytest.fixture
def driver(scheduler, engine):
    return TickDriver(scheduler, engine)


def start_clear(driver):
    """Start a game with the food parked out of the snake's way."""
    driver.start()
    driver.engine.food = Position(-9, -9)


class TestScheduling:
    def test_idle_engine_has_no_timer(self, driver, scheduler):
        assert scheduler.timers == {}
        assert driver.interval_ms is None

    def test_start_schedules_at_base_cadence(self, driver, scheduler):
        start_clear(driver)
        assert scheduler.live_intervals == [200]
        assert scheduler.advance(199) == 0
        assert scheduler.advance(1) == 1
        assert driver.engine.head == Position(1, 0)

    def test_ticks_keep_firing_at_cadence(self, driver, scheduler):
        start_clear(driver)
        assert scheduler.advance(1000) == 5
        assert driver.engine.head == Position(5, 0)

    def test_pause_stops_ticks_and_resume_restarts(self, driver, scheduler):
        start_clear(driver)
        scheduler.advance(200)
        assert driver.pause() is True
        assert scheduler.timers == {}
        assert scheduler.advance(5000) == 0
        assert driver.engine.head == Position(1, 0)

        assert driver.resume() is True
        assert scheduler.live_intervals == [200]
        scheduler.advance(200)
        assert driver.engine.head == Position(2, 0)

    def test_resume_uses_cadence_for_current_score(self, driver, scheduler):
        start_clear(driver)
        driver.pause()
        driver.engine.score = 150
        driver.resume()
        assert scheduler.live_intervals == [170]

    def test_score_change_reschedules_and_keeps_pending_direction(
        self, driver, scheduler
    ):
        start_clear(driver)
        engine = driver.engine
        engine.score = 40
        engine.food = Position(1, 0)
        assert scheduler.advance(200) == 1
        assert engine.score == 50
        assert scheduler.live_intervals == [190]
        assert driver.interval_ms == 190

        driver.request_direction(Direction.UP)
        assert scheduler.advance(189) == 0
        assert scheduler.advance(1) == 1
        assert engine.head == Position(1, -1)

    def test_unchanged_cadence_keeps_the_same_timer(self, driver, scheduler):
        start_clear(driver)
        scheduler.advance(600)
        schedules = [entry for entry in scheduler.history if entry[0] == "schedule"]
        assert len(schedules) == 1

    def test_gameover_cancels_timer(self, driver, scheduler):
        start_clear(driver)
        driver.engine.snake = [Position(10, 0), Position(9, 0), Position(8, 0)]
        scheduler.advance(200)
        assert driver.engine.state is GameState.GAMEOVER
        assert scheduler.timers == {}

    def test_restart_after_gameover(self, driver, scheduler):
        start_clear(driver)
        driver.engine.snake = [Position(10, 0), Position(9, 0), Position(8, 0)]
        scheduler.advance(200)
        assert driver.start() is True
        assert scheduler.live_intervals == [200]

    def test_never_more_than_one_live_timer(self, driver, scheduler):
        start_clear(driver)
        driver.start()
        driver.pause()
        driver.resume()
        driver.resume()
        assert len(scheduler.timers) == 1


class TestTeardown:
    def test_close_cancels_and_ignores_later_commands(self, driver, scheduler):
        start_clear(driver)
        driver.close()
        assert driver.closed
        assert scheduler.timers == {}
        assert driver.start() is False
        assert driver.resume() is False
        assert driver.request_direction(Direction.UP) is False
        assert driver.on_tick() is TickOutcome.IGNORED
        assert scheduler.timers == {}

    def test_close_is_idempotent(self, driver, scheduler):
        start_clear(driver)
        driver.close()
        driver.close()
        cancels = [entry for entry in scheduler.history if entry[0] == "cancel"]
        assert len(cancels) == 1


class TestEngineBinding:
    def test_reading_unbound_engine_fails_fast(self, scheduler):
        driver = TickDriver(scheduler)
        with pytest.raises(EngineNotReadyError):
            driver.engine
        with pytest.raises(EngineNotReadyError):
            driver.start()

    def test_require_engine(self, engine):
        assert require_engine(engine) is engine
        with pytest.raises(EngineNotReadyError):
            require_engine(None)

    def test_bind_playing_engine_schedules(self, scheduler, playing):
        driver = TickDriver(scheduler)
        driver.bind(playing)
        assert scheduler.live_intervals == [200]
