"""Application constants and configuration."""

# Application settings
DEFAULT_POKEMON_ID = 1
RANDOM_MAX = 898  # Catalog size snapshot used for random picks
MAX_BASE_STAT = 255
SPRITE_SIZE = (128, 128)
SPRITE_BASE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"

# API configuration
API_BASE_URL = "https://pokeapi.co/api/v2"
API_POKEMON_URL = f"{API_BASE_URL}/pokemon"
REQUEST_TIMEOUT = None  # Transport default

# User agent for API requests
USER_AGENT = "PokemonViewer/1.0"

# UI Configuration
DEFAULT_WINDOW_SIZE = "520x760"
LOGO_TEXT = "Pokémon Viewer"
FOOTER_TEXT = "Data from PokéAPI"
FOOTER_URL = "https://pokeapi.co"
STAT_BAR_WIDTH = 320

# Colors
ACCENT_COLORS = {
    "Normal": "#22c55e",
    "Shiny": "#eab308",
}
COLORS = {
    "background": ("#4ade80", "#166534"),
    "card": ("white", "gray17"),
    "nav": ("#3b82f6", "#2563eb"),
    "random": ("#a855f7", "#9333ea"),
    "shiny_on": ("#eab308", "#ca8a04"),
    "shiny_off": ("gray60", "gray40"),
    "chip": ("gray85", "gray30"),
    "error": ("#ef4444", "#f87171"),
    "bar_track": ("gray85", "gray30"),
}
