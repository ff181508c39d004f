"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .client import ApiError, Client
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def run_repl(config: Config, lines: Iterable[str]) -> None:
    """Prompt for and run one command per line until ``lines`` is exhausted."""
    commands = get_commands()
    config.say(PROMPT, end="")
    config.out.flush()
    for line in lines:
        words = clean_input(line)
        if words:
            name, *args = words
            command = commands.get(name)
            if command is None:
                config.say("Unknown command")
            else:
                try:
                    command.callback(config, *args)
                except (CommandError, ApiError) as exc:
                    config.say(str(exc))
        config.say(PROMPT, end="")
        config.out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the Pokedex prompt on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex."
    )
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        config = Config(client=client)
        run_repl(config, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())