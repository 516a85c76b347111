"""Shared fakes: synchronous scheduler and a display that records calls."""

import pytest

ARTWORK = 'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork/25.png'
SPRITE = 'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png'


def pikachu_payload(**overrides):
    data = {
        'id': 25,
        'name': 'pikachu',
        'types': [{'slot': 1, 'type': {'name': 'electric', 'url': 'https://pokeapi.co/api/v2/type/13/'}}],
        'sprites': {
            'front_default': SPRITE,
            'other': {'official-artwork': {'front_default': ARTWORK}},
        },
    }
    data.update(overrides)
    return data


class FakeDisplay:
    """Records every display call as (name, args)."""

    def __init__(self):
        self.calls = []
        self.name = ''
        self.view = None
        self.image = None
        self.nav = None
        self.lookup_enabled = None

    def names(self):
        return [c[0] for c in self.calls]

    def show_loading(self):
        self.calls.append(('show_loading',))
        self.name = 'Loading…'

    def show_not_found(self):
        self.calls.append(('show_not_found',))
        self.name = 'Not found'
        self.view = None
        self.image = None

    def show_record(self, view, image):
        self.calls.append(('show_record', view, image))
        self.name = view.display_name
        self.view = view
        self.image = image

    def begin_exit(self):
        self.calls.append(('begin_exit',))

    def begin_enter(self):
        self.calls.append(('begin_enter',))

    def set_nav_enabled(self, controls):
        self.calls.append(('set_nav_enabled', controls))
        self.nav = controls

    def set_lookup_enabled(self, enabled):
        self.calls.append(('set_lookup_enabled', enabled))
        self.lookup_enabled = enabled


class ManualScheduler:
    """schedule/spawn that queue work until run_all() (or run immediately when eager)."""

    def __init__(self, eager=False):
        self.eager = eager
        self.pending = []
        self.delays = []

    def schedule(self, delay_ms, fn):
        self.delays.append(delay_ms)
        if self.eager:
            fn()
        else:
            self.pending.append(fn)

    def spawn(self, fn):
        if self.eager:
            fn()
        else:
            self.pending.append(fn)

    def run_next(self):
        fn = self.pending.pop(0)
        fn()

    def run_all(self):
        while self.pending:
            self.run_next()


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def eager():
    return ManualScheduler(eager=True)


@pytest.fixture
def manual():
    return ManualScheduler()
