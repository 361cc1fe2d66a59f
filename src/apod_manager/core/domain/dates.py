"""Fechas APOD (`YYYY-MM-DD`).

El parser es deliberadamente permisivo:
- Solo exige longitud >= 10 y dígitos en las posiciones [0:4], [5:7], [8:10].
- No valida los separadores ni que la fecha exista en el calendario.
- La salida siempre se normaliza con ceros a la izquierda.
"""

from __future__ import annotations

from dataclasses import dataclass

from apod_manager.core.domain.errors import InvalidDateFormatError

DATE_LENGTH = 10


def _parse_field(text: str, value: str) -> int:
    if not value.isascii() or not value.isdigit():
        raise InvalidDateFormatError(text)
    return int(value)


@dataclass(frozen=True, order=True)
class ApodDate:
    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, text: str) -> "ApodDate":
        if len(text) < DATE_LENGTH:
            raise InvalidDateFormatError(text)
        return cls(
            year=_parse_field(text, text[0:4]),
            month=_parse_field(text, text[5:7]),
            day=_parse_field(text, text[8:10]),
        )

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def file_name(self) -> str:
        return f"{self.isoformat()}.json"

    def __str__(self) -> str:
        return self.isoformat()
