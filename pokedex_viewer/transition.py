"""Two-phase visual transition: fade out, run work, fade back in."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from pokedex_viewer.theme import FADE_MS

log = logging.getLogger(__name__)

Schedule = Callable[[int, Callable[[], None]], None]


class TransitionTarget(Protocol):
    def begin_exit(self) -> None: ...

    def begin_enter(self) -> None: ...


class Transition:
    """Wrap a unit of work in exit/enter looks on a target.

    The delay before the work runs is unconditional so the exit look is
    always visible for at least delay_ms, even when the work is instant.
    Overlapping runs are not guarded against.
    """

    def __init__(self, target: TransitionTarget, schedule: Schedule, delay_ms: int = FADE_MS):
        self._target = target
        self._schedule = schedule
        self._delay_ms = delay_ms

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def run(self, work: Callable[[], None], on_done: Callable[[], None] | None = None) -> None:
        self._target.begin_exit()
        self._schedule(self._delay_ms, lambda: self._finish(work, on_done))

    def _finish(self, work: Callable[[], None], on_done: Callable[[], None] | None) -> None:
        try:
            work()
        except Exception:
            log.exception("Transition work failed")
        self._target.begin_enter()
        if on_done:
            on_done()
