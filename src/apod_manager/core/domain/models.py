"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la respuesta de la API y los archivos locales con el mismo contrato.
- `extra="ignore"` descarta campos desconocidos sin romper la decodificación
  cuando la API agrega campos nuevos.

Nota:
- Estos modelos describen *qué* es un APOD, no *cómo* se obtiene ni dónde vive.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from pydantic.config import ConfigDict

from apod_manager.core.domain.errors import ApodDecodeError


class Apod(BaseModel):
    """Un registro Astronomy Picture of the Day.

    Identidad: `date`. El orden de los campos es el orden de serialización.
    """

    model_config = ConfigDict(extra="ignore")

    date: str = Field(..., description="Fecha del registro (YYYY-MM-DD).")
    title: str = Field(..., description="Título de la imagen/video.")
    explanation: str = Field(..., description="Texto explicativo.")
    url: str = Field(..., description="URL de la imagen o video.")
    media_type: str = Field(
        ...,
        description="Tipo de medio: normalmente 'image' o 'video' (la API también emite 'other').",
    )
    hdurl: str | None = Field(default=None, description="URL en alta resolución.")
    concepts: Any = Field(
        default=None,
        description="Conceptos asociados (string, lista u objeto según la versión de la API).",
    )
    thumbnail_url: str | None = Field(default=None, description="Miniatura para videos.")
    copyright: str | None = Field(default=None)
    service_version: str | None = Field(default=None)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Apod":
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise ApodDecodeError(f"Invalid APOD record: {_first_error(exc)}") from exc

    @classmethod
    def list_from_json(cls, text: str | bytes) -> list["Apod"]:
        try:
            return _APOD_LIST.validate_json(text)
        except ValidationError as exc:
            raise ApodDecodeError(f"Invalid APOD list: {_first_error(exc)}") from exc

    def to_json(self) -> str:
        """JSON con indentación de 4 espacios; los opcionales ausentes quedan en `null`."""

        return json.dumps(self.model_dump(mode="json"), ensure_ascii=False, indent=4)

    @property
    def media_url(self) -> str:
        return self.hdurl or self.url

    def summary_line(self) -> str:
        return f"{self.date} ({self.media_type}) - {self.title}"

    def details_block(self) -> str:
        return (
            f"{self.date} ({self.media_type}) - {self.title} (C) {self.copyright or ''}\n"
            f"{self.explanation}\n"
            f"Media:{self.media_url}"
        )


_APOD_LIST = TypeAdapter(list[Apod])


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', 'invalid value')}"
