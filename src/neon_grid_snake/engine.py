"""Deterministic grid simulation: state machine, tick, food, and scoring.

The engine owns all game state and knows nothing about pygame, timers, or
drawing. A host drives it through four commands (``start_game``,
``request_direction``, ``pause_game``, ``resume_game``) plus ``tick`` and
reads it through :meth:`SimulationEngine.snapshot` once per frame.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from .config import (
    BASE_TICK_MS,
    DIRECTIONS,
    FOOD_REWARD,
    FOOD_SPAWN_ATTEMPTS,
    GRID_SIZE,
    INITIAL_DIRECTION,
    INITIAL_FOOD,
    INITIAL_SNAKE,
    MIN_TICK_MS,
    OPPOSITE,
    SPEED_STEP_MS,
    SPEED_STEP_SCORE,
)
from .errors import BoardFullError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> tuple[int, int]:
        return DIRECTIONS[self.value]

    @property
    def opposite(self) -> Direction:
        return Direction(OPPOSITE[self.value])

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Coerce ``"up"``/``"UP"``/``Direction.UP`` to a Direction."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"unknown direction: {value!r}") from None


class GameState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAMEOVER = "gameover"


class TickOutcome(str, Enum):
    """What a single call to :meth:`SimulationEngine.tick` did."""

    IGNORED = "ignored"
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    BOARD_FULL = "board_full"

    @property
    def fatal(self) -> bool:
        return self in (TickOutcome.HIT_WALL, TickOutcome.HIT_SELF)


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    z: int

    def moved(self, direction: Direction) -> Position:
        dx, dz = direction.delta
        return Position(self.x + dx, self.z + dz)

    def in_bounds(self, grid_size: int) -> bool:
        return abs(self.x) <= grid_size and abs(self.z) <= grid_size


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""

    snake: tuple[Position, ...]
    food: Position
    direction: Direction
    game_state: GameState
    score: int
    high_score: int
    grid_size: int


class HighScoreStore(Protocol):
    def read(self) -> int | None: ...

    def write(self, value: int) -> None: ...


def tick_interval(score: int) -> int:
    """Milliseconds between ticks for the given score."""
    steps = score // SPEED_STEP_SCORE
    return max(MIN_TICK_MS, BASE_TICK_MS - steps * SPEED_STEP_MS)


# Smallest half-extent that contains the starting snake.
MIN_GRID_SIZE = max(1, *(max(abs(x), abs(z)) for x, z in INITIAL_SNAKE))


def _initial_snake() -> list[Position]:
    return [Position(x, z) for x, z in INITIAL_SNAKE]


class SimulationEngine:
    """Owns snake, food, score and state; advances one cell per tick."""

    def __init__(
        self,
        high_score_store: HighScoreStore,
        *,
        grid_size: int = GRID_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        if grid_size < MIN_GRID_SIZE:
            raise ValueError(
                f"grid_size must be at least {MIN_GRID_SIZE} to hold the starting "
                f"snake, got {grid_size}"
            )
        self.grid_size = grid_size
        self._store = high_score_store
        self._rng = rng or random.Random()

        stored = high_score_store.read()
        self.high_score: int = max(0, stored) if stored is not None else 0

        self.state = GameState.IDLE
        self.score = 0
        self.snake: list[Position] = _initial_snake()
        # Placeholder until start_game; pulled inside smaller boards.
        self.food = Position(
            *(max(-grid_size, min(c, grid_size)) for c in INITIAL_FOOD)
        )
        self.pending_direction = Direction(INITIAL_DIRECTION)
        self.last_applied_direction = Direction(INITIAL_DIRECTION)

    # --- Read side -------------------------------------------------------

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def tick_interval_ms(self) -> int:
        return tick_interval(self.score)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.pending_direction,
            game_state=self.state,
            score=self.score,
            high_score=self.high_score,
            grid_size=self.grid_size,
        )

    # --- Commands --------------------------------------------------------

    def start_game(self) -> bool:
        """Reset the board and enter ``playing`` (from idle or gameover)."""
        if self.state not in (GameState.IDLE, GameState.GAMEOVER):
            return False
        self.snake = _initial_snake()
        self.food = self.spawn_food(self.snake)
        self.pending_direction = Direction(INITIAL_DIRECTION)
        self.last_applied_direction = Direction(INITIAL_DIRECTION)
        self.score = 0
        self.state = GameState.PLAYING
        logger.info("Game started on a %d-cell half-extent grid", self.grid_size)
        return True

    def pause_game(self) -> bool:
        if self.state is not GameState.PLAYING:
            return False
        self.state = GameState.PAUSED
        return True

    def resume_game(self) -> bool:
        if self.state is not GameState.PAUSED:
            return False
        self.state = GameState.PLAYING
        return True

    def request_direction(self, direction: Direction | str) -> bool:
        """Buffer a turn for the next tick unless it reverses the last move.

        Returns True when the request was accepted as the pending direction.
        """
        new_dir = Direction.parse(direction)
        if self.state is not GameState.PLAYING:
            return False
        if new_dir is self.last_applied_direction.opposite:
            logger.debug(
                "Rejected %s: reverses last applied %s",
                new_dir.value,
                self.last_applied_direction.value,
            )
            return False
        self.pending_direction = new_dir
        return True

    # --- Logic step ------------------------------------------------------

    def tick(self) -> TickOutcome:
        """Advance the game state by exactly one grid cell."""
        if self.state is not GameState.PLAYING:
            return TickOutcome.IGNORED

        direction = self.pending_direction
        self.last_applied_direction = direction
        new_head = self.head.moved(direction)

        if not new_head.in_bounds(self.grid_size):
            self._game_over(TickOutcome.HIT_WALL)
            return TickOutcome.HIT_WALL
        # Old head through old tail; the tail has not moved out of the way yet.
        if new_head in self.snake:
            self._game_over(TickOutcome.HIT_SELF)
            return TickOutcome.HIT_SELF

        grown = [new_head, *self.snake]
        if new_head == self.food:
            self.snake = grown
            self.score += FOOD_REWARD
            if len(grown) >= (2 * self.grid_size + 1) ** 2:
                # Nowhere left for food; the last meal stays under the head.
                self._game_over(TickOutcome.BOARD_FULL)
                return TickOutcome.BOARD_FULL
            self.food = self.spawn_food(grown)
            return TickOutcome.ATE

        grown.pop()
        self.snake = grown
        return TickOutcome.MOVED

    def _game_over(self, reason: TickOutcome) -> None:
        """Freeze play and register the high score."""
        self.state = GameState.GAMEOVER
        logger.info("Game over (%s) with score %d", reason.value, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self._store.write(self.high_score)
            logger.info("New high score: %d", self.high_score)

    # --- Food spawn ------------------------------------------------------

    def spawn_food(self, snake: Sequence[Position]) -> Position:
        """Return a uniformly random cell that does not collide with the snake."""
        occupied = set(snake)
        low, high = -self.grid_size, self.grid_size
        for _ in range(FOOD_SPAWN_ATTEMPTS):
            pos = Position(self._rng.randint(low, high), self._rng.randint(low, high))
            if pos not in occupied:
                return pos

        # Crowded board: pick among the free cells directly.
        free = [
            Position(x, z)
            for x in range(low, high + 1)
            for z in range(low, high + 1)
            if Position(x, z) not in occupied
        ]
        if not free:
            raise BoardFullError(self.grid_size, len(occupied))
        return self._rng.choice(free)
