"""Shared fakes for viewer tests: no network, no display."""

from __future__ import annotations

import pytest

from api import FetchError
from models import Pokemon, Stat


def make_payload(pokemon_id=25, name="pikachu", stats=(("hp", 45), ("attack", 49)),
                 types=("electric",)):
    return {
        "id": pokemon_id,
        "name": name,
        "stats": [{"base_stat": value, "effort": 0, "stat": {"name": stat, "url": ""}}
                  for stat, value in stats],
        "types": [{"slot": i + 1, "type": {"name": t, "url": ""}} for i, t in enumerate(types)],
        "sprites": {"front_default": None},
    }


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.headers = {}
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


class FakeClient:
    """fetch_pokemon backed by a dict; missing ids fail like a 404."""

    def __init__(self, records=None):
        self.records = records or {}
        self.requested = []

    def fetch_pokemon(self, pokemon_id):
        self.requested.append(pokemon_id)
        if pokemon_id in self.records:
            return self.records[pokemon_id]
        raise FetchError("Failed to fetch: 404")


class ManualScheduler:
    """Collects spawned tasks so tests decide when (and in what order) they finish."""

    def __init__(self):
        self.tasks = []

    def __call__(self, task):
        self.tasks.append(task)

    def run(self, index=0):
        self.tasks.pop(index)()

    def run_all(self):
        while self.tasks:
            self.run(0)


def pokemon(pokemon_id, name=None):
    return Pokemon(id=pokemon_id, name=name or f"mon-{pokemon_id}",
                   stats=(Stat("hp", 50),), types=("normal",))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def client():
    return FakeClient({i: pokemon(i) for i in range(1, 11)})
