import io
import json

import pytest

from pokedexcli.client import ApiError, Client, LOCATION_URL
from pokedexcli.models import LocationArea, LocationPage


class FakeOpener:
    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def __call__(self, url, timeout):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return io.BytesIO(self.responses[url])


PAGE = {
    "count": 2,
    "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": "u1"},
        {"name": "eterna-city-area", "url": "u2"},
    ],
}

AREA = {
    "id": 1,
    "name": "canalave-city-area",
    "pokemon_encounters": [
        {"pokemon": {"name": "tentacool", "url": "p1"}},
        {"pokemon": {"name": "tentacruel", "url": "p2"}},
    ],
}

PIKACHU = {
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [{"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "s"}}],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "t"}}],
}

FIRST_PAGE_URL = "https://pokeapi.co/api/v2/location-area"
PIKACHU_URL = "https://pokeapi.co/api/v2/pokemon/pikachu"


def make_client(opener):
    return Client(timeout=5.0, cache_interval=300.0, opener=opener)


def test_list_locations_fetches_first_page_by_default():
    opener = FakeOpener({FIRST_PAGE_URL: json.dumps(PAGE).encode()})
    with make_client(opener) as client:
        page = client.list_locations(None)
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.next == PAGE["next"]
    assert page.previous is None
    assert opener.calls == [(FIRST_PAGE_URL, 5.0)]


def test_list_locations_uses_page_url():
    url = PAGE["next"]
    opener = FakeOpener({url: json.dumps(PAGE).encode()})
    with make_client(opener) as client:
        page = client.list_locations(url)
    assert page.count == 2
    assert opener.calls[0][0] == url


def test_list_locations_is_cached():
    opener = FakeOpener({FIRST_PAGE_URL: json.dumps(PAGE).encode()})
    with make_client(opener) as client:
        first = client.list_locations(None)
        second = client.list_locations(None)
        assert FIRST_PAGE_URL in client.cache
    assert first == second
    assert len(opener.calls) == 1


def test_list_locations_failure_returns_empty_page_uncached():
    opener = FakeOpener(error=OSError("connection refused"))
    with make_client(opener) as client:
        page = client.list_locations(None)
        again = client.list_locations(None)
        assert len(client.cache) == 0
    assert page == LocationPage()
    assert again == LocationPage()
    assert len(opener.calls) == 2


def test_list_locations_bad_json_returns_empty_page():
    opener = FakeOpener({FIRST_PAGE_URL: b"Not Found"})
    with make_client(opener) as client:
        assert client.list_locations(None) == LocationPage()
        assert FIRST_PAGE_URL not in client.cache


def test_list_locations_corrupt_cache_raises():
    opener = FakeOpener()
    with make_client(opener) as client:
        client.cache.add(FIRST_PAGE_URL, b"{broken")
        with pytest.raises(ApiError):
            client.list_locations(None)
    assert opener.calls == []


def test_list_pokemon_builds_location_url():
    url = LOCATION_URL + "/canalave-city-area"
    opener = FakeOpener({url: json.dumps(AREA).encode()})
    with make_client(opener) as client:
        area = client.list_pokemon("canalave-city-area")
    assert area.pokemon_names() == ["tentacool", "tentacruel"]
    assert opener.calls[0][0] == "https://pokeapi.co/api/v2/location-area/canalave-city-area"


def test_list_pokemon_failure_returns_empty_area():
    opener = FakeOpener(error=OSError("timed out"))
    with make_client(opener) as client:
        area = client.list_pokemon("nowhere")
    assert area == LocationArea()
    assert area.pokemon_names() == []


def test_pokemon_details_parses_and_caches():
    opener = FakeOpener({PIKACHU_URL: json.dumps(PIKACHU).encode()})
    with make_client(opener) as client:
        first = client.pokemon_details("pikachu")
        second = client.pokemon_details("pikachu")
    assert first.name == "pikachu"
    assert first.base_experience == 112
    assert first.type_names() == ["electric"]
    assert [(s.name, s.base_stat) for s in first.stats] == [("hp", 35)]
    assert first == second
    assert len(opener.calls) == 1


def test_pokemon_details_request_error_raises():
    opener = FakeOpener(error=OSError("connection refused"))
    with make_client(opener) as client:
        with pytest.raises(ApiError, match="^error completing http request"):
            client.pokemon_details("pikachu")


def test_pokemon_details_bad_json_raises_and_is_not_cached():
    opener = FakeOpener({PIKACHU_URL: b"Not Found"})
    with make_client(opener) as client:
        with pytest.raises(ApiError, match="^error unmarshaling json"):
            client.pokemon_details("pikachu")
        assert PIKACHU_URL not in client.cache


def test_pokemon_details_corrupt_cache_raises():
    opener = FakeOpener()
    with make_client(opener) as client:
        client.cache.add(PIKACHU_URL, b"[1, 2")
        with pytest.raises(ApiError, match="from cache"):
            client.pokemon_details("pikachu")
    assert opener.calls == []