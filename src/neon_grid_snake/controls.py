"""Translate keyboard and swipe input into engine commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

from .config import KEY_TO_DIRECTION, MIN_SWIPE, PAUSE_KEYS, QUIT_KEYS, START_KEYS
from .engine import Direction, GameState


class Command(str, Enum):
    START = "start"
    DIRECTION = "direction"
    PAUSE = "pause"
    RESUME = "resume"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class Intent:
    command: Command
    direction: Direction | None = None


def key_intent(key: int, state: GameState) -> Intent | None:
    """Map a pressed key to an intent, given the current game state."""
    if key in QUIT_KEYS:
        return Intent(Command.QUIT)
    if key in START_KEYS:
        if state in (GameState.IDLE, GameState.GAMEOVER):
            return Intent(Command.START)
        return None
    if key in PAUSE_KEYS:
        if state is GameState.PLAYING:
            return Intent(Command.PAUSE)
        if state is GameState.PAUSED:
            return Intent(Command.RESUME)
        return None
    name = KEY_TO_DIRECTION.get(key)
    if name and state is GameState.PLAYING:
        return Intent(Command.DIRECTION, Direction(name))
    return None


def swipe_direction(
    dx: float, dy: float, min_swipe: float = MIN_SWIPE
) -> Direction | None:
    """Pick the dominant axis of a drag; short drags are not swipes."""
    if abs(dx) > abs(dy):
        if dx > min_swipe:
            return Direction.RIGHT
        if dx < -min_swipe:
            return Direction.LEFT
    else:
        if dy > min_swipe:
            return Direction.DOWN
        if dy < -min_swipe:
            return Direction.UP
    return None


def tap_intent(state: GameState) -> Intent | None:
    """What a tap (or click) means in each state: start, pause, or resume."""
    if state in (GameState.IDLE, GameState.GAMEOVER):
        return Intent(Command.START)
    if state is GameState.PLAYING:
        return Intent(Command.PAUSE)
    if state is GameState.PAUSED:
        return Intent(Command.RESUME)
    return None


class SwipeTracker:
    """Turns press/release pairs (mouse or touch) into intents.

    A drag past ``MIN_SWIPE`` steers; anything shorter is a tap. Finger
    events report normalized coordinates, so they are scaled by the surface
    size before measuring the drag. Mouse events that SDL synthesizes from
    touches are skipped so one touch is not counted twice.
    """

    def __init__(
        self, surface_size: tuple[int, int], min_swipe: float = MIN_SWIPE
    ) -> None:
        self.surface_size = surface_size
        self.min_swipe = min_swipe
        self._start: tuple[float, float] | None = None

    def _point(self, event: pygame.event.Event) -> tuple[float, float]:
        if event.type in (pygame.FINGERDOWN, pygame.FINGERUP):
            width, height = self.surface_size
            return event.x * width, event.y * height
        return float(event.pos[0]), float(event.pos[1])

    def handle(self, event: pygame.event.Event, state: GameState) -> Intent | None:
        if getattr(event, "touch", False):
            return None
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            self._start = self._point(event)
            return None
        if event.type not in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
            return None
        start, self._start = self._start, None
        if start is None:
            return None
        end = self._point(event)
        dx, dy = end[0] - start[0], end[1] - start[1]
        if abs(dx) <= self.min_swipe and abs(dy) <= self.min_swipe:
            return tap_intent(state)
        if state is not GameState.PLAYING:
            return None
        direction = swipe_direction(dx, dy, self.min_swipe)
        if direction is None:
            return None
        return Intent(Command.DIRECTION, direction)
