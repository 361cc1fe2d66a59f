"""Contrato de la fuente remota de APODs.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El servicio de archivo depende de esta abstracción; los tests pueden
  inyectar una fuente falsa y contar las llamadas de red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apod_manager.core.domain.dates import ApodDate
from apod_manager.core.domain.models import Apod


@runtime_checkable
class ApodSource(Protocol):
    """Contrato mínimo para obtener APODs.

    Reglas de diseño:
    - Cada método hace exactamente una petición.
    - La API key se valida (longitud) antes de construir la petición.
    """

    def fetch_single(self, api_key: str, date: ApodDate) -> Apod:
        ...

    def fetch_random(self, api_key: str, count: int) -> list[Apod]:
        ...

    def fetch_range(self, api_key: str, start: ApodDate, end: ApodDate) -> list[Apod]:
        ...
