"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Un registro APOD es una línea: sin markup, sin emoji y sin word-wrap, para
  que títulos con `[...]` o `:foo:` se impriman tal cual.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from apod_manager.core.domain.commands import Command
from apod_manager.core.domain.models import Apod

ERROR_STYLE = "bold white on red"


def make_console(*, stderr: bool = False) -> Console:
    """Crea una consola sobre stdout/stderr.

    Se crea por invocación (no a nivel de módulo) para que la detección de
    terminal/colores vea el stream real del momento (p.ej. capturas en tests).
    """

    return Console(
        stderr=stderr,
        soft_wrap=True,
        markup=False,
        emoji=False,
        highlight=False,
    )


def print_error(console: Console, message: str) -> None:
    """`ERROR` con fondo rojo, seguido de `:` y el mensaje."""

    console.print(Text.assemble(("ERROR", ERROR_STYLE), ":", message))


def print_command_table(console: Console, prog_name: str) -> None:
    console.print(f"{prog_name} help:")
    for command in Command:
        print_command(console, command)


def print_command(console: Console, command: Command) -> None:
    console.print(f"    {command.value}: {command.description}")


def print_summary(console: Console, apod: Apod) -> None:
    console.print(apod.summary_line())


def print_details(console: Console, apod: Apod) -> None:
    console.print(apod.details_block())
