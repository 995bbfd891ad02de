"""High score persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class FileHighScoreStore:
    """Keeps the best score as a plain integer in a text file."""

    def __init__(self, path: Path = HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def read(self) -> int | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No high score file at %s", self.path)
            return None
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return None
        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return None
        return max(0, value)

    def write(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(value), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    def __init__(self, initial: int | None = None) -> None:
        self.value = initial
        self.writes: list[int] = []

    def read(self) -> int | None:
        return self.value

    def write(self, value: int) -> None:
        self.value = value
        self.writes.append(value)
