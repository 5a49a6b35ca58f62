"""Data models and enums for the Pokemon viewer."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class Mode(Enum):
    """Display mode - normal or shiny."""
    NORMAL = "Normal"
    SHINY = "Shiny"

    def toggled(self) -> "Mode":
        return Mode.NORMAL if self == Mode.SHINY else Mode.SHINY


@dataclass(frozen=True)
class Stat:
    """A single base stat as reported by PokéAPI."""
    name: str         # api slug, e.g. "special-attack"
    base_stat: int

    @property
    def label(self) -> str:
        return self.name.replace("-", " ").title()


@dataclass(frozen=True)
class Pokemon:
    """Read-only projection of a PokéAPI pokemon payload."""
    id: int
    name: str
    stats: Tuple[Stat, ...] = ()
    types: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Pokemon":
        """
        Build a record from the JSON body of ``GET /pokemon/{id}``.

        Only id, name, types and stats are kept; ordering follows the payload.
        Raises ValueError if any of those fields is missing or malformed.
        """
        try:
            stats = tuple(
                Stat(name=str(entry["stat"]["name"]), base_stat=int(entry["base_stat"]))
                for entry in payload["stats"]
            )
            types = tuple(str(entry["type"]["name"]) for entry in payload["types"])
            return cls(id=int(payload["id"]), name=str(payload["name"]), stats=stats, types=types)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed Pokémon payload: {e}") from e

    def get_display_name(self) -> str:
        return self.name.replace("-", " ").title()


# Fetch outcomes. Exactly one is active on the controller; None means no fetch yet.

@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    pokemon: Pokemon


@dataclass(frozen=True)
class Failure:
    message: str
