"""Tests for pokedex_viewer.controller: startup, bound lookup, actions."""

import random

from pokedex_viewer.controller import ViewerController
from pokedex_viewer.navigation import DEFAULT_MAX_ID, NavControls, NavigationState
from pokedex_viewer.pokeapi import BoundLookupFailed, RecordNotFound

from conftest import pikachu_payload


class RecordingFetch:
    """fetch_record that returns a payload for any id, or 404 for unknown names."""

    def __init__(self):
        self.requested = []

    def __call__(self, target):
        self.requested.append(target)
        if isinstance(target, int):
            return pikachu_payload(id=target, name=f'mon-{target}')
        if target == 'pikachu':
            return pikachu_payload()
        raise RecordNotFound(target)


def make_controller(display, sched, count=1302, nav=None):
    fetch = RecordingFetch()

    def fetch_count():
        if isinstance(count, Exception):
            raise count
        return count

    ctrl = ViewerController(
        display, sched.schedule, sched.spawn,
        fetch_record=fetch, fetch_count=fetch_count, nav=nav,
    )
    return ctrl, fetch


class TestStart:
    """Test startup: controls disabled, bound lookup, single initial load."""

    def test_controls_disabled_until_bound_known(self, display, manual):
        ctrl, fetch = make_controller(display, manual)
        ctrl.start()
        assert display.lookup_enabled is False
        assert display.nav == NavControls(False, False)
        manual.run_all()
        assert display.lookup_enabled is True
        assert ctrl.nav.ready
        assert ctrl.nav.max_id == 1302
        assert display.nav == NavControls(previous=False, next=True)

    def test_initial_record_loaded_once(self, display, eager):
        ctrl, fetch = make_controller(display, eager)
        ctrl.start()
        assert fetch.requested == [1]
        assert display.name == 'mon-1'

    def test_bound_failure_keeps_default(self, display, eager, caplog):
        ctrl, _ = make_controller(display, eager, count=BoundLookupFailed('HTTP 500'))
        ctrl.start()
        assert ctrl.nav.max_id == DEFAULT_MAX_ID
        assert ctrl.nav.ready
        assert display.lookup_enabled is True
        assert 'Could not fetch record count' in caplog.text

    def test_render_before_bound_keeps_nav_disabled(self, display, manual):
        ctrl, _ = make_controller(display, manual)
        ctrl.start()
        lookup, record_fetch = manual.pending
        manual.pending = []
        record_fetch()
        manual.run_all()
        assert display.name == 'mon-1'
        assert display.nav == NavControls(False, False)
        lookup()
        manual.run_all()
        assert display.nav == NavControls(previous=False, next=True)


class TestActions:
    """Test previous/next/random/search once ready."""

    def started(self, display, eager, **kw):
        ctrl, fetch = make_controller(display, eager, **kw)
        ctrl.start()
        fetch.requested.clear()
        return ctrl, fetch

    def test_next_and_previous(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        ctrl.show_next()
        ctrl.show_next()
        ctrl.show_previous()
        assert fetch.requested == [2, 3, 2]
        assert ctrl.nav.current_id == 2

    def test_previous_at_first_is_noop(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        ctrl.show_previous()
        assert fetch.requested == []
        assert ctrl.nav.current_id == 1

    def test_next_at_last_is_noop(self, display, eager):
        ctrl, fetch = self.started(display, eager, count=3, nav=NavigationState(current_id=3))
        ctrl.show_next()
        assert fetch.requested == []
        assert display.nav == NavControls(previous=True, next=False)

    def test_random_in_range(self, display, eager):
        nav = NavigationState(rng=random.Random(7))
        ctrl, fetch = self.started(display, eager, count=5, nav=nav)
        for _ in range(20):
            ctrl.show_random()
        assert all(1 <= t <= 5 for t in fetch.requested)
        assert len(fetch.requested) == 20

    def test_search_number(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        assert ctrl.search(' 25 ')
        assert fetch.requested == [25]
        assert ctrl.nav.current_id == 25

    def test_search_name(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        assert ctrl.search('Pikachu')
        assert fetch.requested == ['pikachu']
        assert ctrl.nav.current_id == 25
        assert display.name == 'pikachu'

    def test_search_blank_ignored(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        assert not ctrl.search('   ')
        assert fetch.requested == []

    def test_search_past_bound_disables_previous(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        ctrl.search('10001')
        assert ctrl.nav.current_id == 10001
        assert display.nav == NavControls(previous=False, next=False)
        fetch.requested.clear()
        ctrl.show_previous()
        assert fetch.requested == []

    def test_search_at_bound_keeps_previous(self, display, eager):
        ctrl, _ = self.started(display, eager)
        ctrl.search('1302')
        assert display.nav == NavControls(previous=True, next=False)

    def test_search_not_found_keeps_id(self, display, eager):
        ctrl, fetch = self.started(display, eager)
        ctrl.show_next()
        ctrl.search('missingno')
        assert display.name == 'Not found'
        assert ctrl.nav.current_id == 2


class TestNotReady:
    """Test actions before the bound lookup finishes."""

    def test_actions_ignored(self, display, manual):
        ctrl, fetch = make_controller(display, manual)
        ctrl.start()
        manual.pending = []
        ctrl.show_random()
        ctrl.show_next()
        assert not ctrl.search('pikachu')
        assert manual.pending == []
        assert ctrl.nav.current_id == 1
