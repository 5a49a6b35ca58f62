"""Tests for main_app – window shutdown without building any widgets."""

from __future__ import annotations

from types import SimpleNamespace

from conftest import FakeSession
from api import PokeApiClient
from main_app import PokemonViewer


class RecordingRoot:
    def __init__(self):
        self.destroyed = False

    def destroy(self):
        self.destroyed = True


class RecordingLoader:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class TestOnClose:
    def test_closes_session_then_window(self):
        session = FakeSession()
        viewer = SimpleNamespace(
            client=PokeApiClient(session=session),
            sprite_loader=RecordingLoader(),
            root=RecordingRoot(),
        )
        PokemonViewer._on_close(viewer)
        assert session.closed
        assert viewer.sprite_loader.cancelled
        assert viewer.root.destroyed
