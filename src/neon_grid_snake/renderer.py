"""Flat pygame drawing of an engine snapshot."""

from __future__ import annotations

import pygame

from .config import CELL, FONT_NAME, FONT_SIZE, HUD_HEIGHT, PALETTE
from .engine import GameState, Position, Snapshot


def board_pixels(grid_size: int) -> int:
    return (2 * grid_size + 1) * CELL


def window_size(grid_size: int) -> tuple[int, int]:
    side = board_pixels(grid_size)
    return side, side + HUD_HEIGHT


class Renderer:
    """Draws whatever the snapshot says; holds no game state of its own."""

    def __init__(self, grid_size: int) -> None:
        self.grid_size = grid_size
        self.size = window_size(grid_size)
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.background = self._build_background()

    def cell_rect(self, pos: Position) -> pygame.Rect:
        """Pixel rect of a grid cell; (-grid_size, -grid_size) is top-left."""
        left = (pos.x + self.grid_size) * CELL
        top = HUD_HEIGHT + (pos.z + self.grid_size) * CELL
        return pygame.Rect(left, top, CELL, CELL)

    def _build_background(self) -> pygame.Surface:
        """Create a gradient grid background once to keep draw() light."""
        width, height = self.size
        surface = pygame.Surface((width, height))
        top, bottom = PALETTE["bg_top"], PALETTE["bg_bottom"]
        for y in range(height):
            t = y / height
            r = int(top.r + (bottom.r - top.r) * t)
            g = int(top.g + (bottom.g - top.g) * t)
            b = int(top.b + (bottom.b - top.b) * t)
            pygame.draw.line(surface, (r, g, b), (0, y), (width, y))
        for i in range(0, width + 1, CELL):
            pygame.draw.line(surface, PALETTE["grid"], (i, HUD_HEIGHT), (i, height), 1)
        for j in range(HUD_HEIGHT, height + 1, CELL):
            pygame.draw.line(surface, PALETTE["grid"], (0, j), (width, j), 1)
        board = pygame.Rect(0, HUD_HEIGHT, width, height - HUD_HEIGHT)
        pygame.draw.rect(surface, PALETTE["border"], board, width=2)
        return surface

    def _draw_overlay(self, target: pygame.Surface, lines: list[str]) -> None:
        width, height = self.size
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((5, 5, 15, 140))
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect()
            rect.center = (width // 2, height // 2 + idx * (FONT_SIZE + 8))
            overlay.blit(surf, rect)
        target.blit(overlay, (0, 0))

    def _draw_hud(self, target: pygame.Surface, snap: Snapshot) -> None:
        score = self.font.render(f"SCORE {snap.score:04}", True, PALETTE["text"])
        best = self.font.render(f"BEST {snap.high_score:04}", True, PALETTE["text"])
        target.blit(score, (10, (HUD_HEIGHT - score.get_height()) // 2))
        right = self.size[0] - best.get_width() - 10
        target.blit(best, (right, (HUD_HEIGHT - best.get_height()) // 2))

    def draw(self, target: pygame.Surface, snap: Snapshot) -> None:
        """Render one frame (background, food, snake, HUD, state overlay)."""
        target.blit(self.background, (0, 0))

        food_rect = self.cell_rect(snap.food)
        pygame.draw.circle(target, PALETTE["food"], food_rect.center, CELL // 2 - 2)

        body_colors = PALETTE["snake"]
        for idx, pos in enumerate(snap.snake):
            if idx == 0:
                color = PALETTE["snake_head"]
            else:
                color = body_colors[idx % len(body_colors)]
            rect = self.cell_rect(pos).inflate(-2, -2)
            pygame.draw.rect(target, color, rect, border_radius=4)

        self._draw_hud(target, snap)

        if snap.game_state is GameState.IDLE:
            self._draw_overlay(target, ["Neon Grid Snake", "ENTER or tap to start"])
        elif snap.game_state is GameState.PAUSED:
            self._draw_overlay(target, ["Paused", "SPACE or tap to resume"])
        elif snap.game_state is GameState.GAMEOVER:
            self._draw_overlay(
                target,
                [
                    "Game Over",
                    f"Score: {snap.score}",
                    f"Best:  {snap.high_score}",
                    "R or tap to restart, Q to quit",
                ],
            )
