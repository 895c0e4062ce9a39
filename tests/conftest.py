import threading

import pytest

from typegallery import config

TYPE_URL = f"{config.POKEAPI_BASE_URL}/type/"
POKEMON_URL = f"{config.POKEAPI_BASE_URL}/pokemon/"


class DummyResponse:
    def __init__(self, status_code=200, json_data=None):
        self.status_code = status_code
        self._json = json_data if json_data is not None else {}

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class FakeSession:
    """Maps url -> DummyResponse (or an exception to raise); records every call."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.hook = None
        self._lock = threading.Lock()

    def get(self, url, timeout=None):
        with self._lock:
            self.calls.append(url)
        if self.hook:
            self.hook(url)
        if url not in self.routes:
            return DummyResponse(status_code=404)
        resp = self.routes[url]
        if isinstance(resp, Exception):
            raise resp
        return resp


def listing(names):
    return {"pokemon": [{"pokemon": {"name": n, "url": f"{POKEMON_URL}{n}/"}, "slot": 1} for n in names]}


def detail(types, artwork="", front=""):
    return {
        "sprites": {
            "front_default": front or None,
            "other": {"official-artwork": {"front_default": artwork or None}},
        },
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
    }


def artwork_url(n):
    return f"https://img.example/artwork/{n}.png"


@pytest.fixture
def fire_session():
    """charmander / charmeleon / charizard, as the fire listing returns them."""
    session = FakeSession({TYPE_URL + "fire": DummyResponse(json_data=listing(["charmander", "charmeleon", "charizard"]))})
    session.routes[POKEMON_URL + "charmander/"] = DummyResponse(json_data=detail(["fire"], artwork_url("charmander")))
    session.routes[POKEMON_URL + "charmeleon/"] = DummyResponse(json_data=detail(["fire"], artwork_url("charmeleon")))
    session.routes[POKEMON_URL + "charizard/"] = DummyResponse(json_data=detail(["fire", "flying"], artwork_url("charizard")))
    return session
