"""Application version and naming."""

__version__ = "1.0.0"

APP_NAME = "PokedexViewer"

# Shown in the window title and header
WINDOW_TITLE = "Pokédex Viewer"
