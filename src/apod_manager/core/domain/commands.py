"""Tabla estática de comandos de la CLI.

Por qué un Enum:
- Un único lugar para nombres y descripciones (help, dispatcher, tests).
- `Command.from_name` distingue "no es un comando" sin tocar el parser.
"""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Commands understood by the CLI, in help order."""

    HELP = "help"
    LIST = "list"
    FETCH_SINGLE = "fetch-single"
    FETCH_RANDOM = "fetch-random"
    FETCH_RANGE = "fetch-range"
    DETAILS = "details"

    @classmethod
    def from_name(cls, name: str) -> "Command | None":
        """Return the command called `name`, or None when there is none."""

        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[Command, str] = {
    Command.HELP: "Show help. usage: <command name: optional string>",
    Command.LIST: "List all locally saved APODs.",
    Command.FETCH_SINGLE: "Fetch an apod. usage: <date: YYYY-MM-DD>",
    Command.FETCH_RANDOM: "Fetch a random count of apods. usage: <count: 1-100>",
    Command.FETCH_RANGE: (
        "Fetch a range of apods. usage: <start_date: YYYY-MM-DD> <end_date: YYYY-MM-DD>"
    ),
    Command.DETAILS: "Show details of an APOD that exists locally. usage: <date: YYYY-MM-DD>",
}
