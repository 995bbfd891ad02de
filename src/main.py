"""Entry point for the Neon Grid Snake game."""

from __future__ import annotations

from neon_grid_snake.app import main

if __name__ == "__main__":
    main()
