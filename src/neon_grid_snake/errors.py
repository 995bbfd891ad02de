"""Exceptions raised on engine contract violations."""

from __future__ import annotations


class SnakeEngineError(Exception):
    """Base class for Neon Grid Snake programming errors."""


class EngineNotReadyError(SnakeEngineError):
    """Engine state was read before an engine was constructed and bound."""


class BoardFullError(SnakeEngineError):
    """No free cell is left to place food on."""

    def __init__(self, grid_size: int, snake_length: int) -> None:
        super().__init__(
            f"no free cell for food on a {2 * grid_size + 1}x{2 * grid_size + 1} "
            f"grid with {snake_length} snake segments"
        )
        self.grid_size = grid_size
        self.snake_length = snake_length
