# pokedexcli

An interactive Pokedex for the terminal. It reads location areas and Pokemon
from the public PokeAPI (`https://pokeapi.co/api/v2`) and keeps the raw
responses in an in-memory cache for five minutes, so pages and Pokemon you have
already looked up are not fetched again.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Running

```
pokedexcli
```

You get a `Pokedex > ` prompt. Input is lower-cased and split on whitespace,
so `  CATCH   Pikachu ` is the same as `catch pikachu`. An unrecognised
command prints `Unknown command`. The session ends with `exit` or at the end
of input. `pokedexcli --help` shows the usage line; the command takes no
options.

Requests time out after five seconds.

## Commands

| Command             | What it does                                             |
|---------------------|----------------------------------------------------------|
| `map`               | Show the next page of location areas                      |
| `mapb`              | Show the previous page of location areas                  |
| `explore <area>`    | List the Pokemon that can be met in a location area       |
| `catch <pokemon>`   | Throw a Pokeball at a Pokemon                             |
| `inspect <pokemon>` | Show height, weight, stats and types of a caught Pokemon  |
| `pokedex`           | List every Pokemon you have caught                        |
| `help`              | Show the list of commands                                 |
| `exit`              | Leave the Pokedex                                         |

`mapb` before any page with a previous link prints `you're on the first page`.
If a location page or area cannot be fetched or decoded, `map`, `mapb` and
`explore` simply print nothing. A Pokemon that cannot be fetched makes `catch`
print the error.

### Catching

How likely a catch is depends on the Pokemon's base experience. A Pokemon with
no base experience is caught nine times out of ten; the chance falls in a
straight line to one in ten at a base experience of 300. Each Pokemon allows
three failed throws; after that, further attempts are refused. Catching a
Pokemon you already have only tells you so.

## Example session

```
Pokedex > catch pikachu
Throwing a Pokeball at pikachu...
pikachu was caught!
pikachu added to Pokedex
Pokedex > inspect pikachu
Name: pikachu
Height: 4
Weight: 60
Stats:
  -hp: 35
  ...
Types:
  - electric
Pokedex > pokedex
Your Pokedex:
 - pikachu
Pokedex > exit
Closing the Pokedex... Goodbye!
```

## Using it as a library

- `pokedexcli.cache.Cache(interval)` is a thread-safe map from keys to bytes.
  `add(key, value)` stores, `get(key)` returns the bytes or `None`, and a
  background thread drops entries older than `interval` seconds until
  `close()` is called. `reap(now)` does one such sweep by hand. It is also a
  context manager.
- `pokedexcli.client.Client(timeout=5.0, cache_interval=300.0, opener=None)`
  fetches and caches API data: `list_locations(page_url=None)` returns a
  `LocationPage`, `list_pokemon(location)` a `LocationArea`, and
  `pokemon_details(name)` a `Pokemon`, raising `ApiError` on failure. `opener`
  replaces the urllib request; it is called as `opener(url, timeout=...)` and
  must return a context manager with a `read()` method. `close()` stops the
  cache's reaper; the client is a context manager too.
- `pokedexcli.models` holds the dataclasses `NamedResource`, `LocationPage`,
  `LocationArea`, `Stat` and `Pokemon`, each built with `from_dict`.
- `pokedexcli.commands` holds the command functions, `get_commands()` and the
  `Config` that carries session state; its `rng` and `out` fields can be
  replaced to control the dice and the output.
- `pokedexcli.repl.run_repl(config, lines)` runs the prompt over any iterable
  of input lines; `clean_input(text)` is the tokenizer it uses.

## Limitations

Caught Pokemon and catch attempts live only in memory: nothing is saved, and
the Pokedex starts empty every session.

## Development

```
pip install -e ".[test]"
pytest
```