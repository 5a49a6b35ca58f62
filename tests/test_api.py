"""Tests for api – PokeApiClient against a fake HTTP session."""

from __future__ import annotations

import json

import pytest
import requests

from api import FetchError, PokeApiClient
from conftest import FakeResponse, FakeSession, make_payload
from constants import API_POKEMON_URL, USER_AGENT


class TestUrls:
    def test_pokemon_url(self):
        client = PokeApiClient(session=FakeSession())
        assert client.pokemon_url(25) == f"{API_POKEMON_URL}/25"

    def test_trailing_slash_stripped(self):
        client = PokeApiClient(session=FakeSession(), base_url="http://local/pokemon/")
        assert client.pokemon_url(7) == "http://local/pokemon/7"


class TestSession:
    def test_default_session_has_user_agent(self):
        client = PokeApiClient()
        session = client.get_session()
        assert isinstance(session, requests.Session)
        assert session.headers["User-Agent"] == USER_AGENT
        client.close()

    def test_session_reused(self):
        client = PokeApiClient()
        assert client.get_session() is client.get_session()
        client.close()

    def test_close_closes_injected_session(self):
        session = FakeSession()
        client = PokeApiClient(session=session)
        client.close()
        assert session.closed


class TestFetchPokemon:
    def test_success(self):
        session = FakeSession(FakeResponse(200, make_payload()))
        p = PokeApiClient(session=session).fetch_pokemon(25)
        assert p.id == 25
        assert p.name == "pikachu"
        assert [s.base_stat for s in p.stats] == [45, 49]

    def test_single_get_with_timeout(self):
        session = FakeSession(FakeResponse(200, make_payload()))
        PokeApiClient(session=session, timeout=3).fetch_pokemon(25)
        assert session.calls == [(f"{API_POKEMON_URL}/25", 3)]

    def test_404_raises_fetch_error_with_status(self):
        session = FakeSession(FakeResponse(404, None))
        with pytest.raises(FetchError, match="Failed to fetch: 404"):
            PokeApiClient(session=session).fetch_pokemon(100000)

    def test_500_raises_fetch_error(self):
        session = FakeSession(FakeResponse(500, None))
        with pytest.raises(FetchError, match="500"):
            PokeApiClient(session=session).fetch_pokemon(1)

    def test_transport_error_wrapped(self):
        session = FakeSession(error=requests.ConnectionError("name resolution failed"))
        with pytest.raises(FetchError, match="name resolution failed"):
            PokeApiClient(session=session).fetch_pokemon(1)

    def test_bad_json_wrapped(self):
        bad = json.JSONDecodeError("Expecting value", "<html>", 0)
        session = FakeSession(FakeResponse(200, json_error=bad))
        with pytest.raises(FetchError):
            PokeApiClient(session=session).fetch_pokemon(1)

    def test_malformed_payload_wrapped(self):
        session = FakeSession(FakeResponse(200, {"id": 1}))
        with pytest.raises(FetchError, match="Malformed"):
            PokeApiClient(session=session).fetch_pokemon(1)
