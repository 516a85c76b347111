"""Viewer actions: startup, previous/next, random and search (no UI)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from pokedex_viewer import pokeapi
from pokedex_viewer.navigation import Direction, NavControls, NavigationState
from pokedex_viewer.pipeline import FetchRenderPipeline, RecordDisplay, Spawn
from pokedex_viewer.theme import FADE_MS
from pokedex_viewer.transition import Schedule

log = logging.getLogger(__name__)

_ALL_OFF = NavControls(previous=False, next=False)


class ViewerDisplay(RecordDisplay, Protocol):
    def set_lookup_enabled(self, enabled: bool) -> None: ...


class ViewerController:
    """Owns the navigation state and the pipeline; the window calls these actions."""

    def __init__(
        self,
        display: ViewerDisplay,
        schedule: Schedule,
        spawn: Spawn,
        *,
        fetch_record: Callable[[int | str], dict] = pokeapi.fetch_pokemon,
        fetch_count: Callable[[], int] = pokeapi.fetch_count,
        fetch_image: Callable[[str], Any] | None = None,
        nav: NavigationState | None = None,
        discard_stale: bool = True,
        fade_ms: int = FADE_MS,
    ) -> None:
        self.nav = nav or NavigationState()
        self._display = display
        self._schedule = schedule
        self._spawn = spawn
        self._fetch_count = fetch_count
        self.pipeline = FetchRenderPipeline(
            self.nav,
            display,
            schedule,
            spawn,
            fetch_record,
            fetch_image,
            discard_stale=discard_stale,
            fade_ms=fade_ms,
            controls_filter=self._gate_controls,
        )

    def _gate_controls(self, controls: NavControls) -> NavControls:
        # Previous/next stay off until the bound is known
        if not self.nav.ready:
            return _ALL_OFF
        # Ids past the bound (alternate forms found by search) cannot step back into range
        if self.nav.current_id > self.nav.max_id:
            return controls._replace(previous=False)
        return controls

    def start(self) -> None:
        """Disable controls, look up the bound in the background, load the current record."""
        self._display.set_lookup_enabled(False)
        self._display.set_nav_enabled(_ALL_OFF)

        def do_lookup():
            try:
                count = self._fetch_count()
            except pokeapi.PokeApiError as e:
                log.warning("Could not fetch record count, using default %d: %s", self.nav.max_id, e)
                count = None
            self._schedule(0, lambda: self._on_bound_ready(count))

        self._spawn(do_lookup)
        self.pipeline.load(self.nav.current_id)

    def _on_bound_ready(self, count: int | None) -> None:
        self.nav.apply_bound(count)
        log.info("Record bound: %d", self.nav.max_id)
        self._display.set_lookup_enabled(True)
        self.pipeline.refresh_controls()

    def _step(self, direction: Direction) -> None:
        if not self.nav.ready:
            return
        new_id = self.nav.advance(direction)
        if new_id is None:
            return
        self.pipeline.refresh_controls()
        self.pipeline.load(new_id)

    def show_previous(self) -> None:
        self._step(Direction.PREVIOUS)

    def show_next(self) -> None:
        self._step(Direction.NEXT)

    def show_random(self) -> None:
        if not self.nav.ready:
            return
        self.pipeline.load(self.nav.random_target())

    def search(self, raw: str) -> bool:
        """Load a record by id or name. Returns False when ignored (blank or not ready)."""
        if not self.nav.ready or not (raw or "").strip():
            return False
        self.pipeline.load(self.nav.resolve_search_term(raw))
        return True
