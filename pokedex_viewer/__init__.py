"""Pokédex viewer: browse PokeAPI records one at a time."""

from pokedex_viewer.navigation import Direction, NavControls, NavigationState
from pokedex_viewer.record_view import RecordView, build_record_view

__all__ = [
    'Direction',
    'NavControls',
    'NavigationState',
    'RecordView',
    'build_record_view',
]
