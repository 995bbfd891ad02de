"""Periodic timers on top of pygame's event queue."""

from __future__ import annotations

import itertools
from typing import Callable, Protocol

import pygame

TickCallback = Callable[[], object]


class Scheduler(Protocol):
    def schedule(self, callback: TickCallback, interval_ms: int) -> object: ...

    def cancel(self, handle: object) -> None: ...


class PygameScheduler:
    """Fires callbacks through ``pygame.time.set_timer`` user events.

    Each live timer gets its own custom event type; the main loop hands every
    event to :meth:`dispatch`, which runs the matching callback. Event types
    are recycled after cancel, so every timer event carries a ``generation``
    and events left over from a cancelled timer are swallowed, not run.
    """

    def __init__(self) -> None:
        self._live: dict[int, tuple[int, TickCallback]] = {}
        self._owned: set[int] = set()
        self._free_types: list[int] = []
        self._generations = itertools.count(1)

    def schedule(self, callback: TickCallback, interval_ms: int) -> int:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        if self._free_types:
            event_type = self._free_types.pop()
        else:
            event_type = pygame.event.custom_type()
            self._owned.add(event_type)
        generation = next(self._generations)
        self._live[event_type] = (generation, callback)
        pygame.time.set_timer(self.timer_event(event_type), interval_ms)
        return event_type

    def timer_event(self, handle: int) -> pygame.event.Event:
        """The event a live timer posts on every interval."""
        generation, _ = self._live[handle]
        return pygame.event.Event(handle, generation=generation)

    def cancel(self, handle: int) -> None:
        if handle not in self._live:
            return
        pygame.time.set_timer(handle, 0)
        del self._live[handle]
        pygame.event.clear(handle)
        self._free_types.append(handle)

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback owning ``event``; return True if it was a timer event."""
        if event.type not in self._owned:
            return False
        live = self._live.get(event.type)
        if live is None or getattr(event, "generation", None) != live[0]:
            return True
        live[1]()
        return True

    def cancel_all(self) -> None:
        for handle in list(self._live):
            self.cancel(handle)
