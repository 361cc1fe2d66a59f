"""Logging de la CLI (stdlib `logging` + `RichHandler` en stderr).

stdout queda reservado para la salida de los comandos; los logs nunca se
mezclan con ella. Por defecto solo WARNING o superior.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from apod_manager.cli.ui_components import make_console

PACKAGE_LOGGER = "apod_manager"


def configure_logging(level: str) -> logging.Logger:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=make_console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return logger
