"""HTTP client for the Pokemon API with a response cache."""

from __future__ import annotations

import json
import urllib.request
from collections.abc import Callable
from typing import Any, BinaryIO, TypeVar

from .cache import Cache
from .models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"
LOCATION_URL = "https://pokeapi.co/api/v2/location-area"

Opener = Callable[..., BinaryIO]

_T = TypeVar("_T")


class ApiError(Exception):
    """Raised when the API cannot be reached or returns unusable data."""


def _default_opener(url: str, timeout: float) -> BinaryIO:
    request = urllib.request.Request(url, method="GET")
    return urllib.request.urlopen(request, timeout=timeout)


def _decode(raw: bytes, parse: Callable[[Any], _T]) -> _T:
    return parse(json.loads(raw))


class Client:
    """Fetch location and Pokemon data, caching raw responses by URL.

    ``opener`` is called as ``opener(url, timeout=seconds)`` and must return a
    context manager whose ``read()`` yields the response body; it defaults to
    a plain urllib GET request.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        opener: Opener | None = None,
    ) -> None:
        self.timeout = float(timeout)
        self.cache = Cache(cache_interval)
        self._opener: Opener = opener if opener is not None else _default_opener

    def _fetch(self, url: str) -> bytes:
        with self._opener(url, timeout=self.timeout) as response:
            return response.read()

    def _cached(self, url: str, parse: Callable[[Any], _T], what: str) -> _T | None:
        raw = self.cache.get(url)
        if raw is None:
            return None
        try:
            return _decode(raw, parse)
        except ValueError as exc:
            raise ApiError(f"error unmarshaling {what} from cache: {exc}") from exc

    def _lenient_get(self, url: str, parse: Callable[[Any], _T], empty: _T) -> _T:
        """Fetch ``url``; on network or decoding failure return ``empty``."""
        cached = self._cached(url, parse, "json data")
        if cached is not None:
            return cached
        try:
            raw = self._fetch(url)
            result = _decode(raw, parse)
        except (OSError, ValueError):
            return empty
        self.cache.add(url, raw)
        return result

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas, the first page if ``page_url`` is None.

        A failed request yields an empty page rather than an error.
        """
        url = page_url if page_url is not None else BASE_URL + "/location-area"
        return self._lenient_get(url, LocationPage.from_dict, LocationPage())

    def list_pokemon(self, location: str) -> LocationArea:
        """Return the details of a location area, including its encounters.

        A failed request yields an empty area rather than an error.
        """
        url = LOCATION_URL + "/" + location
        return self._lenient_get(url, LocationArea.from_dict, LocationArea())

    def pokemon_details(self, name: str) -> Pokemon:
        """Return the details of the named Pokemon."""
        url = BASE_URL + "/pokemon/" + name
        cached = self._cached(url, Pokemon.from_dict, "json data")
        if cached is not None:
            return cached
        try:
            raw = self._fetch(url)
        except ValueError as exc:
            raise ApiError(f"error creating http request: {exc}") from exc
        except OSError as exc:
            raise ApiError(f"error completing http request: {exc}") from exc
        try:
            pokemon = _decode(raw, Pokemon.from_dict)
        except ValueError as exc:
            raise ApiError(f"error unmarshaling json: {exc}") from exc
        self.cache.add(url, raw)
        return pokemon

    def close(self) -> None:
        """Release the client's resources."""
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()