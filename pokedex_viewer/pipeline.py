"""Fetch one record in the background and render it through a transition (no UI)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Protocol

from pokedex_viewer.navigation import NavControls, NavigationState
from pokedex_viewer.pokeapi import PokeApiError
from pokedex_viewer.record_view import RecordView, build_record_view
from pokedex_viewer.theme import FADE_MS
from pokedex_viewer.transition import Schedule, Transition

log = logging.getLogger(__name__)

# Expected load failures, logged without a traceback. Any other exception is
# logged with one; both end in the Failure state.
LOAD_ERRORS = (PokeApiError, KeyError, TypeError, ValueError)

Spawn = Callable[[Callable[[], None]], None]


class RecordDisplay(Protocol):
    """What the pipeline needs from the window."""

    def show_loading(self) -> None: ...

    def show_not_found(self) -> None: ...

    def show_record(self, view: RecordView, image: Any | None) -> None: ...

    def begin_exit(self) -> None: ...

    def begin_enter(self) -> None: ...

    def set_nav_enabled(self, controls: NavControls) -> None: ...


class PipelineState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class FetchRenderPipeline:
    """Idle -> Loading -> Success | Failure -> Idle.

    schedule(delay_ms, fn) must run fn on the UI thread; spawn(fn) runs fn off it.
    Every display and state change happens inside a scheduled callback.

    With discard_stale (default) each load gets a generation number and only
    the latest one is ever applied. Without it, whichever load completes last
    wins the display.
    """

    def __init__(
        self,
        nav: NavigationState,
        display: RecordDisplay,
        schedule: Schedule,
        spawn: Spawn,
        fetch_record: Callable[[int | str], dict],
        fetch_image: Callable[[str], Any] | None = None,
        *,
        discard_stale: bool = True,
        fade_ms: int = FADE_MS,
        controls_filter: Callable[[NavControls], NavControls] | None = None,
    ) -> None:
        self._nav = nav
        self._display = display
        self._schedule = schedule
        self._spawn = spawn
        self._fetch_record = fetch_record
        self._fetch_image = fetch_image
        self._discard_stale = discard_stale
        self._controls_filter = controls_filter
        self._transition = Transition(display, schedule, fade_ms)
        self._generation = 0
        self.state = PipelineState.IDLE
        self.last_outcome: PipelineState | None = None
        self.last_view: RecordView | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def load(self, target: int | str) -> None:
        """Start loading a record by id or name. Never raises for fetch errors."""
        self._generation += 1
        gen = self._generation
        self.state = PipelineState.LOADING
        self._display.show_loading()
        log.debug("Loading %r (generation %d)", target, gen)

        def do_fetch():
            try:
                view = build_record_view(self._fetch_record(target))
            except LOAD_ERRORS as e:
                # bind e now; the name is cleared when the except block ends
                self._schedule(0, lambda err=e: self._on_failure(gen, target, err))
                return
            except Exception as e:
                log.exception("Unexpected error loading %r", target)
                self._schedule(0, lambda err=e: self._on_failure(gen, target, err))
                return
            image = self._load_image(view)
            self._schedule(0, lambda: self._on_success(gen, view, image))

        self._spawn(do_fetch)

    def _load_image(self, view: RecordView) -> Any | None:
        if not view.image_url or self._fetch_image is None:
            return None
        try:
            return self._fetch_image(view.image_url)
        except (PokeApiError, OSError, ValueError) as e:
            log.warning("Image for %s unavailable: %s", view.display_name, e)
            return None
        except Exception:
            log.exception("Image for %s could not be loaded", view.display_name)
            return None

    def _is_stale(self, gen: int) -> bool:
        return self._discard_stale and gen != self._generation

    def _on_failure(self, gen: int, target: int | str, error: Exception) -> None:
        if self._is_stale(gen):
            log.debug("Discarding stale failure for %r (generation %d)", target, gen)
            return
        log.error("Could not load %r: %s", target, error)
        self.state = PipelineState.FAILURE
        self.last_outcome = PipelineState.FAILURE
        self._display.show_not_found()
        self.state = PipelineState.IDLE

    def _on_success(self, gen: int, view: RecordView, image: Any | None) -> None:
        if self._is_stale(gen):
            log.debug("Discarding stale result %s (generation %d)", view.display_name, gen)
            return
        self.state = PipelineState.SUCCESS

        def render():
            # A newer load may have started during the fade-out
            if self._is_stale(gen):
                log.debug("Skipping stale render of %s", view.display_name)
                return
            self._display.show_record(view, image)
            if view.id is not None:
                self._nav.set_current_id(view.id)
            self.last_view = view
            self.last_outcome = PipelineState.SUCCESS
            self.refresh_controls()

        self._transition.run(render, on_done=lambda: self._to_idle(gen))

    def _to_idle(self, gen: int) -> None:
        if gen == self._generation:
            self.state = PipelineState.IDLE

    def refresh_controls(self) -> None:
        controls = self._nav.controls_enabled()
        if self._controls_filter:
            controls = self._controls_filter(controls)
        self._display.set_nav_enabled(controls)
