"""The commands available at the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from .client import Client
from .models import Pokemon

MAX_CATCH_ATTEMPTS = 3

# Base experience of the hardest Pokemon to catch, and the bounds on the chance.
_MAX_EXPERIENCE = 300.0
_MIN_CATCH_CHANCE = 0.1
_MAX_CATCH_CHANCE = 0.9


class CommandError(Exception):
    """Raised when a command is used wrongly; the message is shown to the user."""


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Config:
    """State shared by the commands of one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught: dict[str, Pokemon] = field(default_factory=dict)
    catch_attempts: dict[str, int] = field(default_factory=dict)
    rng: _RandomSource = field(default_factory=random.Random)
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def say(self, text: str = "", end: str = "\n") -> None:
        """Write a line of output."""
        print(text, end=end, file=self.out)


@dataclass(frozen=True)
class Command:
    """A named command and the function that carries it out."""

    name: str
    description: str
    callback: Callable[..., None]


def attempt_catch(base_experience: int, rng: _RandomSource) -> bool:
    """Roll for a catch; the higher the base experience, the lower the chance."""
    normalized = float(base_experience) / _MAX_EXPERIENCE
    chance = _MAX_CATCH_CHANCE - normalized * (_MAX_CATCH_CHANCE - _MIN_CATCH_CHANCE)
    return rng.random() < chance


def _show_page(config: Config, page_url: str | None) -> None:
    page = config.client.list_locations(page_url)
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous
    for location in page.results:
        config.say(location.name)


def command_map(config: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(config, config.next_locations_url)


def command_mapb(config: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if config.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(config, config.prev_locations_url)


def command_explore(config: Config, *args: str) -> None:
    """List the Pokemon that can be encountered in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    area = config.client.list_pokemon(args[0])
    for name in area.pokemon_names():
        config.say(name)


def command_catch(config: Config, *args: str) -> None:
    """Throw a Pokeball at a Pokemon and add it to the Pokedex if caught."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    target = args[0]
    if target in config.caught:
        config.say(f"you have already caught {target}")
        return

    pokemon = config.client.pokemon_details(target)
    config.say(f"Throwing a Pokeball at {target}...")
    if config.catch_attempts.get(target, 0) >= MAX_CATCH_ATTEMPTS:
        config.say(f"you have attempted catching {target} too many time...", end="")
        return

    if attempt_catch(pokemon.base_experience, config.rng):
        config.caught[target] = pokemon
        config.say(f"{target} was caught!")
        config.say(f"{pokemon.name} added to Pokedex")
    else:
        config.say(f"{target} escaped!")
        config.catch_attempts[target] = config.catch_attempts.get(target, 0) + 1


def command_inspect(config: Config, *args: str) -> None:
    """Show the details of a caught Pokemon."""
    if len(args) != 1:
        raise CommandError("you must provide the name of a pokemon")
    target = args[0]
    pokemon = config.caught.get(target)
    if pokemon is None:
        config.say(f"you have not caught {target}")
        return
    config.say(f"Name: {pokemon.name}")
    config.say(f"Height: {pokemon.height}")
    config.say(f"Weight: {pokemon.weight}")
    config.say("Stats:")
    for stat in pokemon.stats:
        config.say(f"  -{stat.name}: {stat.base_stat}")
    config.say("Types:")
    for type_name in pokemon.type_names():
        config.say(f"  - {type_name}")


def command_pokedex(config: Config, *args: str) -> None:
    """List every caught Pokemon."""
    if len(args) > 1:
        raise CommandError("no additional arguments accepted for pokedex command")
    config.say("Your Pokedex:")
    for name in config.caught:
        config.say(f" - {name}")


def command_help(config: Config, *args: str) -> None:
    """Show the list of commands."""
    config.say("\nWelcome to the Pokedex!\nUsage:\n")
    for command in get_commands().values():
        config.say(f"{command.name}: {command.description}")
    config.say()


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye and end the program."""
    config.say("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return the command registry, keyed by command name."""
    commands = [
        Command("map", "Displays the next set of 20 Pokedex location areas", command_map),
        Command(
            "mapb",
            "Displays the previous set of 20 Pokedex location areas",
            command_mapb,
        ),
        Command(
            "explore",
            "Lists all Pokemon encountered in the target location",
            command_explore,
        ),
        Command("catch", "Attempts to catch the specified Pokemon", command_catch),
        Command(
            "inspect", "Displays information about a caught Pokemon", command_inspect
        ),
        Command("pokedex", "Displays a list of all caught Pokemon", command_pokedex),
        Command("help", "Displays a help message", command_help),
        Command("exit", "Exit the Pokedex", command_exit),
    ]
    return {command.name: command for command in commands}