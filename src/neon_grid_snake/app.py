"""pygame host: wires input, timer, engine, and renderer into one loop."""

from __future__ import annotations

import logging

import pygame

from .config import FPS, GRID_SIZE, LOG_LEVEL
from .controls import Command, Intent, SwipeTracker, key_intent
from .driver import TickDriver
from .engine import SimulationEngine
from .renderer import Renderer
from .scheduler import PygameScheduler
from .storage import FileHighScoreStore

logger = logging.getLogger(__name__)


class NeonGridSnake:
    """Encapsulates the window, the main loop, and the engine it drives."""

    def __init__(self, grid_size: int = GRID_SIZE) -> None:
        pygame.init()
        self.renderer = Renderer(grid_size)
        self.window = pygame.display.set_mode(
            self.renderer.size, pygame.DOUBLEBUF | pygame.SCALED
        )
        pygame.display.set_caption("Neon Grid Snake")

        self.engine = SimulationEngine(
            FileHighScoreStore(), grid_size=grid_size
        )
        self.scheduler = PygameScheduler()
        self.driver = TickDriver(self.scheduler, self.engine)
        self.swipes = SwipeTracker(self.renderer.size)

    def apply(self, intent: Intent | None) -> bool:
        """Forward an intent to the driver; return False when asked to quit."""
        if intent is None:
            return True
        if intent.command is Command.QUIT:
            return False
        if intent.command is Command.START:
            self.driver.start()
        elif intent.command is Command.PAUSE:
            self.driver.pause()
        elif intent.command is Command.RESUME:
            self.driver.resume()
        elif intent.command is Command.DIRECTION and intent.direction is not None:
            self.driver.request_direction(intent.direction)
        return True

    def handle_events(self) -> bool:
        """Handle window, timer, keyboard and swipe events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if self.scheduler.dispatch(event):
                continue
            state = self.driver.engine.state
            if event.type == pygame.KEYDOWN:
                if not self.apply(key_intent(event.key, state)):
                    return False
                continue
            self.apply(self.swipes.handle(event, state))
        return True

    def draw(self) -> None:
        self.renderer.draw(self.window, self.driver.engine.snapshot())

    def run(self) -> None:
        """Run the main loop: handle events (ticks included), then render."""
        clock = pygame.time.Clock()
        running = True
        try:
            while running:
                clock.tick(FPS)
                running = self.handle_events()
                self.draw()
                pygame.display.update()
        finally:
            self.driver.close()
            self.scheduler.cancel_all()
            pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Neon Grid Snake")
    game = NeonGridSnake()
    game.run()


if __name__ == "__main__":
    main()
