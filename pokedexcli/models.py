"""Typed views of the API's JSON documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {what}, got {type(data).__name__}")
    return data


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected an array for {key!r}, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer for {key!r}, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {key!r}, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {key!r}, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name paired with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _mapping(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        obj = _mapping(data, "location page")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(obj, "results")],
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        obj = _mapping(data, "location area")
        encounters = [
            NamedResource.from_dict(_mapping(e, "pokemon encounter").get("pokemon"))
            for e in _list(obj, "pokemon_encounters")
        ]
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_dict(obj.get("location")),
            pokemon_encounters=encounters,
        )

    def pokemon_names(self) -> list[str]:
        """Names of the encountered Pokemon, in listing order."""
        return [p.name for p in self.pokemon_encounters]


@dataclass(frozen=True)
class Stat:
    """A base stat of a Pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Stat:
        obj = _mapping(data, "stat")
        return cls(
            name=NamedResource.from_dict(obj.get("stat")).name,
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
        )


@dataclass(frozen=True)
class Pokemon:
    """The details of a single Pokemon."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    stats: list[Stat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)
    abilities: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        obj = _mapping(data, "pokemon")
        is_default = obj.get("is_default")
        if is_default is not None and not isinstance(is_default, bool):
            raise ValueError(f"expected a boolean for 'is_default', got {is_default!r}")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            order=_int(obj, "order"),
            is_default=bool(is_default),
            species=NamedResource.from_dict(obj.get("species")),
            stats=[Stat.from_dict(s) for s in _list(obj, "stats")],
            types=[
                NamedResource.from_dict(_mapping(t, "type slot").get("type"))
                for t in _list(obj, "types")
            ],
            abilities=[
                NamedResource.from_dict(_mapping(a, "ability slot").get("ability"))
                for a in _list(obj, "abilities")
            ],
        )

    def type_names(self) -> list[str]:
        """Names of the Pokemon's types, in slot order."""
        return [t.name for t in self.types]