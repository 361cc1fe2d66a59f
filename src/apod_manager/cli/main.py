"""CLI principal (Typer).

Por qué `run()` y no `app()` directo:
- "Sin comando" y "no es un comando" se resuelven contra la tabla `Command`
  antes de llegar al parser, con el mismo formato de error que el resto.
- Los errores del dominio se reportan una sola vez aquí, con código de salida.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from apod_manager.adapters.apod_api import ApodApiClient
from apod_manager.cli.logging_setup import configure_logging
from apod_manager.cli.ui_components import (
    make_console,
    print_command,
    print_command_table,
    print_details,
    print_error,
    print_summary,
)
from apod_manager.core.config import AppSettings
from apod_manager.core.domain.commands import Command
from apod_manager.core.domain.errors import ApodManagerError, InvalidArgumentError
from apod_manager.core.interfaces.source import ApodSource
from apod_manager.core.services.archive import ArchiveHooks, ArchiveService

PROG_NAME = "apod-manager"

app = typer.Typer(
    add_completion=False,
    help="Fetch, store and inspect NASA Astronomy Picture of the Day records.",
)


@dataclass
class CliState:
    """Estado por invocación, compartido con los comandos vía `ctx.obj`."""

    settings: AppSettings
    out: Console
    err: Console
    source: ApodSource | None = None

    def service(self) -> ArchiveService:
        source = self.source or ApodApiClient(self.settings)
        hooks = ArchiveHooks(saved=lambda path: self.out.print(path.name))
        return ArchiveService(self.settings, source, hooks=hooks)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


@app.command(name=Command.HELP.value, help=Command.HELP.description)
def help_command(
    ctx: typer.Context,
    command_name: Optional[str] = typer.Argument(None, help="Command to describe."),
) -> None:
    state = _state(ctx)
    if command_name is None:
        print_command_table(state.out, PROG_NAME)
        return

    command = Command.from_name(command_name)
    if command is None:
        raise InvalidArgumentError(
            f"'{command_name}' is not a command, use help without arguments to list commands."
        )
    print_command(state.out, command)


@app.command(name=Command.LIST.value, help=Command.LIST.description)
def list_command(ctx: typer.Context) -> None:
    state = _state(ctx)
    for apod in state.service().list_records():
        print_summary(state.out, apod)


@app.command(name=Command.FETCH_SINGLE.value, help=Command.FETCH_SINGLE.description)
def fetch_single(
    ctx: typer.Context,
    date: Optional[str] = typer.Argument(None, help="YYYY-MM-DD"),
) -> None:
    _state(ctx).service().fetch_single(date)


@app.command(name=Command.FETCH_RANDOM.value, help=Command.FETCH_RANDOM.description)
def fetch_random(
    ctx: typer.Context,
    count: Optional[str] = typer.Argument(None, help="1-100"),
) -> None:
    _state(ctx).service().fetch_random(count)


@app.command(name=Command.FETCH_RANGE.value, help=Command.FETCH_RANGE.description)
def fetch_range(
    ctx: typer.Context,
    start_date: Optional[str] = typer.Argument(None, help="YYYY-MM-DD"),
    end_date: Optional[str] = typer.Argument(None, help="YYYY-MM-DD"),
) -> None:
    _state(ctx).service().fetch_range(start_date, end_date)


@app.command(name=Command.DETAILS.value, help=Command.DETAILS.description)
def details(
    ctx: typer.Context,
    date: Optional[str] = typer.Argument(None, help="YYYY-MM-DD"),
) -> None:
    state = _state(ctx)
    print_details(state.out, state.service().details(date))


def run(argv: Sequence[str] | None = None, *, source: ApodSource | None = None) -> int:
    """Ejecuta un comando y devuelve el código de salida.

    0 éxito, 1 error del dominio/configuración, 2 error de uso (parser).
    """

    args = list(sys.argv[1:] if argv is None else argv)
    out = make_console()
    err = make_console(stderr=True)

    if not args:
        print_error(err, "No command specified.")
        return 1
    if Command.from_name(args[0]) is None:
        print_error(err, f"'{args[0]}' is not a command")
        return 1

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(err, f"Invalid configuration: {exc}")
        return 1

    configure_logging(settings.log_level)
    state = CliState(settings=settings, out=out, err=err, source=source)

    try:
        result = app(args=args, prog_name=PROG_NAME, standalone_mode=False, obj=state)
    except ApodManagerError as exc:
        print_error(err, str(exc))
        return 1
    except typer.Abort:
        print_error(err, "Aborted.")
        return 1
    except typer.TyperException as exc:
        print_error(err, exc.format_message())
        return exc.exit_code

    # `--help` and friends end through `typer.Exit` and come back as an int.
    return result if isinstance(result, int) else 0


def main() -> None:
    raise SystemExit(run())
