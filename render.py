"""Pure mapping from viewer state to what the window shows."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from constants import ACCENT_COLORS, MAX_BASE_STAT, SPRITE_BASE_URL
from models import Failure, Loading, Mode, Stat, Success

STATE_LOADING = "loading"
STATE_ERROR = "error"
STATE_RECORD = "record"
STATE_EMPTY = "empty"

EMPTY_MESSAGE = "No Pokemon data available"
LOADING_MESSAGE = "Loading..."


@dataclass(frozen=True)
class StatBar:
    label: str
    value: int
    percent: float   # 0..100, bar width relative to MAX_BASE_STAT


@dataclass(frozen=True)
class ViewModel:
    """Everything the window needs for one frame; widgets only copy fields."""
    state: str
    selection: int
    accent: str
    shiny_active: bool
    previous_enabled: bool
    next_enabled: bool
    random_enabled: bool = True
    shiny_enabled: bool = True
    message: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    types: Tuple[str, ...] = ()
    stats: Tuple[StatBar, ...] = ()


def sprite_url(pokemon_id: int, mode: Mode) -> str:
    """Sprite URL for a dex number; shiny sprites live under /shiny."""
    if mode == Mode.SHINY:
        return f"{SPRITE_BASE_URL}/shiny/{pokemon_id}.png"
    return f"{SPRITE_BASE_URL}/{pokemon_id}.png"


def stat_percent(base_stat: int) -> float:
    return min(100.0, base_stat / MAX_BASE_STAT * 100)


def stat_bar(stat: Stat) -> StatBar:
    return StatBar(label=stat.label, value=stat.base_stat, percent=stat_percent(stat.base_stat))


def render(selection: int, mode: Mode,
           outcome: Union[Loading, Success, Failure, None]) -> ViewModel:
    loading = isinstance(outcome, Loading)
    common = dict(
        selection=selection,
        accent=ACCENT_COLORS[mode.value],
        shiny_active=mode == Mode.SHINY,
        previous_enabled=not loading and selection > 1,
        next_enabled=not loading,
    )

    if loading:
        return ViewModel(state=STATE_LOADING, message=LOADING_MESSAGE, **common)
    if isinstance(outcome, Failure):
        return ViewModel(state=STATE_ERROR, message=f"Error: {outcome.message}", **common)
    if isinstance(outcome, Success):
        pokemon = outcome.pokemon
        # Sprite follows the selection, not the payload id
        return ViewModel(
            state=STATE_RECORD,
            title=f"#{pokemon.id}: {pokemon.get_display_name()}",
            name=pokemon.name,
            image_url=sprite_url(selection, mode),
            types=pokemon.types,
            stats=tuple(stat_bar(s) for s in pokemon.stats),
            **common,
        )
    return ViewModel(state=STATE_EMPTY, message=EMPTY_MESSAGE, **common)
