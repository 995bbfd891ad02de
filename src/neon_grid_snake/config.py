"""Centralized configuration and palette definitions for Neon Grid Snake."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame

BASE_DIR = Path(__file__).resolve().parent


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves/logs."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "neon-grid-snake"


DATA_DIR = Path(os.getenv("NEON_GRID_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("NEON_GRID_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
LOG_LEVEL: str = os.getenv("NEON_GRID_SNAKE_LOG_LEVEL", "INFO").upper()

# --- Simulation ---------------------------------------------------------

GRID_SIZE: int = int(os.getenv("NEON_GRID_SNAKE_GRID_SIZE") or 10)  # half-extent
INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((0, 0), (-1, 0), (-2, 0))
INITIAL_FOOD: tuple[int, int] = (5, 5)
INITIAL_DIRECTION: str = "RIGHT"
FOOD_REWARD: int = 10
FOOD_SPAWN_ATTEMPTS: int = 64

BASE_TICK_MS: int = 200
MIN_TICK_MS: int = 100
SPEED_STEP_SCORE: int = 50  # points per speed-up
SPEED_STEP_MS: int = 10

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
OPPOSITE: dict[str, str] = {
    "UP": "DOWN",
    "DOWN": "UP",
    "LEFT": "RIGHT",
    "RIGHT": "LEFT",
}

# --- Host ---------------------------------------------------------------

CELL: int = 22  # pixels per grid cell
HUD_HEIGHT: int = 40
FONT_NAME: str = "consolas"
FONT_SIZE: int = 22
FPS: int = 60
MIN_SWIPE: int = 30  # pixels

KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)
PAUSE_KEYS = (pygame.K_SPACE,)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)

PALETTE = {
    "bg_top": pygame.Color(10, 0, 21),
    "bg_bottom": pygame.Color(26, 0, 48),
    "grid": pygame.Color(60, 20, 90),
    "border": pygame.Color(0, 255, 255),
    "food": pygame.Color(255, 0, 255),
    "text": pygame.Color(216, 239, 255),
    "hud": pygame.Color(10, 10, 10, 150),
    "snake": [
        pygame.Color(0, 255, 136),
        pygame.Color(0, 230, 120),
        pygame.Color(0, 200, 110),
    ],
    "snake_head": pygame.Color(0, 255, 255),
}
