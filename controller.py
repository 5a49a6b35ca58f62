"""Selection, display mode and fetch state for the viewer."""

import logging
import random as _random
import threading
from typing import Callable, List, Optional, Union

from api import FetchError, PokeApiClient
from constants import DEFAULT_POKEMON_ID, RANDOM_MAX
from models import Failure, Loading, Mode, Success

logger = logging.getLogger(__name__)

FetchOutcome = Union[Loading, Success, Failure]
Task = Callable[[], None]


def _spawn_thread(task: Task) -> None:
    threading.Thread(target=task, daemon=True).start()


def _call_now(task: Task) -> None:
    task()


def parse_selection(value) -> Optional[int]:
    """Whole-number parse of an int or text; None for anything else ("4.5", "12abc", "")."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ViewerController:
    """
    Owns the current selection, display mode and fetch outcome.

    Every selection change bumps a request generation and spawns one fetch.
    A fetch result is committed only if its generation is still the latest,
    so a slow response for an old selection never overwrites a newer one.

    Args:
        client: object with ``fetch_pokemon(pokemon_id)``
        spawn: runs a task off the UI thread (default: daemon thread)
        dispatch: runs a task back on the UI thread (default: call directly)
        random_max: upper bound for ``random()``
        rng: ``random.Random`` compatible source for ``random()``
    """

    def __init__(self, client: PokeApiClient,
                 spawn: Optional[Callable[[Task], None]] = None,
                 dispatch: Optional[Callable[[Task], None]] = None,
                 random_max: int = RANDOM_MAX,
                 rng: Optional[_random.Random] = None):
        if random_max < 1:
            raise ValueError("random_max must be at least 1")
        self.client = client
        self._spawn = spawn or _spawn_thread
        self._dispatch = dispatch or _call_now
        self.random_max = random_max
        self._rng = rng or _random.Random()

        self.selection = DEFAULT_POKEMON_ID
        self.mode = Mode.NORMAL
        self.outcome: Optional[FetchOutcome] = None

        self._generation = 0
        self._lock = threading.Lock()
        self._listeners: List[Callable[["ViewerController"], None]] = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[["ViewerController"], None]) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self)

    @property
    def is_loading(self) -> bool:
        return isinstance(self.outcome, Loading)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Run the initial fetch for the default selection."""
        self._begin_fetch()

    def set_selection(self, value) -> bool:
        """
        Select a dex number, clamped to at least 1, and fetch it.
        Non-numeric values are ignored. Returns True if a fetch started.
        """
        parsed = parse_selection(value)
        if parsed is None:
            return False
        self.selection = max(1, parsed)
        self._begin_fetch()
        return True

    def submit_entry(self, text: str) -> bool:
        """
        Apply direct numeric input. Non-numeric or non-positive text is ignored.

        Returns True if the selection was changed.
        """
        value = parse_selection(text)
        if value is None or value < 1:
            return False
        self.set_selection(value)
        return True

    def previous(self) -> None:
        self.set_selection(max(1, self.selection - 1))

    def next(self) -> None:
        self.set_selection(self.selection + 1)

    def random(self) -> None:
        self.set_selection(self._rng.randint(1, self.random_max))

    def toggle_shiny(self) -> None:
        """Flip the display mode. The current record is reused as is."""
        self.mode = self.mode.toggled()
        self._notify()

    def refresh(self) -> None:
        """Fetch the current selection again."""
        self._begin_fetch()

    # ------------------------------------------------------------------
    # Fetch cycle
    # ------------------------------------------------------------------

    def _begin_fetch(self) -> None:
        with self._lock:
            self._generation += 1
            generation = self._generation
            pokemon_id = self.selection
            self.outcome = Loading()
        logger.debug("Fetch #%d started for Pokémon %d", generation, pokemon_id)
        self._notify()
        self._spawn(lambda: self._run_fetch(generation, pokemon_id))

    def _run_fetch(self, generation: int, pokemon_id: int) -> None:
        try:
            outcome: FetchOutcome = Success(self.client.fetch_pokemon(pokemon_id))
        except FetchError as e:
            logger.warning("Could not fetch Pokémon %d: %s", pokemon_id, e)
            outcome = Failure(str(e))
        except Exception as e:
            logger.exception("Unexpected error fetching Pokémon %d", pokemon_id)
            outcome = Failure(str(e) or e.__class__.__name__)
        self._dispatch(lambda: self._commit(generation, pokemon_id, outcome))

    def _commit(self, generation: int, pokemon_id: int, outcome: FetchOutcome) -> None:
        with self._lock:
            if generation != self._generation or pokemon_id != self.selection:
                logger.debug("Discarding stale result #%d for Pokémon %d", generation, pokemon_id)
                return
            self.outcome = outcome
        self._notify()
