"""Persistencia local: un JSON por APOD.

Por qué JSON plano:
- Un archivo `<YYYY-MM-DD>.json` por fecha, en un directorio sin anidar.
- Legible a mano e interoperable; no hay índice, listar es un scan lineal.

Un registro escrito es inmutable: `save` usa creación exclusiva.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from apod_manager.core.domain.dates import ApodDate
from apod_manager.core.domain.errors import (
    ApodAlreadyExistsError,
    ApodDecodeError,
    ApodNotFoundError,
    StorageError,
)
from apod_manager.core.domain.models import Apod

logger = logging.getLogger(__name__)

EXTENSION = ".json"


class ApodStore:
    """Directorio de registros APOD."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, date: ApodDate) -> Path:
        return self.root / date.file_name

    def ensure_root(self) -> None:
        """Falla con `StorageError` si el directorio no existe o no es un directorio."""

        if not self.root.is_dir():
            raise StorageError(f"Cannot open APODs directory: {self.root}")

    def exists(self, date: ApodDate) -> bool:
        self.ensure_root()
        path = self.path_for(date)
        try:
            path.stat()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Cannot access {path}: {exc.strerror or exc}") from exc
        return True

    def save(self, apod: Apod, date: ApodDate) -> Path:
        """Escribe `apod` en `<date>.json`.

        El nombre sale siempre de un `ApodDate` ya parseado (solo dígitos y
        guiones), nunca del texto crudo que devolvió la API.
        """

        path = self.path_for(date)
        try:
            with path.open("x", encoding="utf-8") as handle:
                handle.write(apod.to_json())
        except FileExistsError as exc:
            raise ApodAlreadyExistsError(date.isoformat()) from exc
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc.strerror or exc}") from exc

        logger.info("Saved %s", path)
        return path

    def load(self, date: ApodDate) -> Apod:
        path = self.path_for(date)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ApodNotFoundError(date.isoformat()) from exc
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc.strerror or exc}") from exc
        return _decode_file(path, raw)

    def iter_records(self) -> Iterator[Apod]:
        """Recorre el directorio (no recursivo, orden del sistema de archivos)."""

        try:
            entries = list(self.root.iterdir())
        except OSError as exc:
            raise StorageError(f"Cannot open APODs directory: {self.root}") from exc

        for entry in entries:
            if not entry.name.endswith(EXTENSION) or not entry.is_file():
                continue
            try:
                raw = entry.read_text(encoding="utf-8")
            except OSError as exc:
                raise StorageError(f"Cannot read {entry}: {exc.strerror or exc}") from exc
            yield _decode_file(entry, raw)


def _decode_file(path: Path, raw: str) -> Apod:
    try:
        return Apod.from_json(raw)
    except ApodDecodeError as exc:
        raise ApodDecodeError(f"{path.name}: {exc}") from exc
