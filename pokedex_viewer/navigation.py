"""Navigation state: current id, upper bound and readiness (no UI)."""

from __future__ import annotations

import random
import re
from enum import Enum
from typing import NamedTuple

# Used until the real count is fetched, or if fetching it fails
DEFAULT_MAX_ID = 1010

_NUMERIC = re.compile(r"[0-9]+")


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1


class NavControls(NamedTuple):
    previous: bool
    next: bool


class NavigationState:
    """Current record id within [1, max_id]; max_id is set once at startup."""

    def __init__(
        self,
        current_id: int = 1,
        max_id: int = DEFAULT_MAX_ID,
        rng: random.Random | None = None,
    ) -> None:
        if current_id < 1 or max_id < 1:
            raise ValueError("current_id and max_id must be >= 1")
        self._current_id = current_id
        self._max_id = max_id
        self._ready = False
        self._rng = rng or random.Random()

    @property
    def current_id(self) -> int:
        return self._current_id

    @property
    def max_id(self) -> int:
        return self._max_id

    @property
    def ready(self) -> bool:
        """True once the bound lookup has finished, whatever its outcome."""
        return self._ready

    def advance(self, direction: Direction) -> int | None:
        """Step one id back or forward. Returns the new id, or None (no change) at a bound."""
        candidate = self._current_id + direction.value
        if candidate < 1 or candidate > self._max_id:
            return None
        self._current_id = candidate
        return candidate

    def random_target(self) -> int:
        """Uniform id in [1, max_id]; may repeat the current one."""
        return self._rng.randint(1, self._max_id)

    @staticmethod
    def resolve_search_term(raw: str) -> int | str:
        """'25' -> 25, ' Pikachu ' -> 'pikachu'. Does not change state."""
        term = (raw or "").strip()
        if _NUMERIC.fullmatch(term):
            return int(term)
        return term.lower()

    def set_current_id(self, record_id: int) -> None:
        """Record the id a successful fetch resolved to (may exceed max_id)."""
        if record_id < 1:
            raise ValueError(f"record id must be >= 1, got {record_id}")
        self._current_id = record_id

    def controls_enabled(self) -> NavControls:
        return NavControls(
            previous=self._current_id > 1,
            next=self._current_id < self._max_id,
        )

    def apply_bound(self, count: int | None) -> None:
        """Finish the bound lookup. A positive count replaces max_id; otherwise the fallback stays."""
        if isinstance(count, int) and not isinstance(count, bool) and count >= 1:
            self._max_id = count
        self._ready = True
