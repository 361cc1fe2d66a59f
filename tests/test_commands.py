from __future__ import annotations

from apod_manager.core.domain.commands import Command


def test_command_table_order_and_names() -> None:
    assert [c.value for c in Command] == [
        "help",
        "list",
        "fetch-single",
        "fetch-random",
        "fetch-range",
        "details",
    ]


def test_from_name() -> None:
    assert Command.from_name("fetch-range") is Command.FETCH_RANGE
    assert Command.from_name("fetch") is None


def test_every_command_has_a_description() -> None:
    assert all(command.description for command in Command)
    assert Command.FETCH_RANDOM.description == "Fetch a random count of apods. usage: <count: 1-100>"
