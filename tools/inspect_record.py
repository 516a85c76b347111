"""One-off: fetch a record by id or name and print what the viewer would show."""
import sys

from pokedex_viewer.navigation import NavigationState
from pokedex_viewer.pokeapi import PokeApiError, fetch_count, fetch_pokemon
from pokedex_viewer.record_view import build_record_view

term = sys.argv[1] if len(sys.argv) > 1 else "25"
target = NavigationState.resolve_search_term(term)
try:
    view = build_record_view(fetch_pokemon(target))
except PokeApiError as e:
    print(f"{target!r}: {e}")
    sys.exit(1)

print("id:   ", view.id_label)
print("name: ", view.display_name)
print("types:", view.types_label)
print("image:", view.image_url or "(none)")
try:
    print("count:", fetch_count())
except PokeApiError as e:
    print("count: unavailable,", e)
