"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI reporta cualquier `ApodManagerError` una sola vez, con el mismo
  prefijo, sin conocer los detalles de cada capa.
- Los adaptadores traducen errores de I/O (httpx, OSError) a estas clases.
"""

from __future__ import annotations

from collections.abc import Mapping


class ApodManagerError(RuntimeError):
    """Base de todos los errores reportables al usuario."""


class MissingArgumentError(ApodManagerError):
    """Falta un argumento posicional obligatorio."""


class InvalidDateFormatError(ApodManagerError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date format: '{value}' (expected YYYY-MM-DD).")
        self.value = value


class MissingApiKeyError(ApodManagerError):
    def __init__(self) -> None:
        super().__init__("An API Key is required for this operation.")


class InvalidApiKeyError(ApodManagerError):
    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid API key: expected 40 characters, got {length}.")
        self.length = length


class InvalidArgumentError(ApodManagerError):
    """Argumento presente pero fuera de rango o no interpretable."""


class FetchError(ApodManagerError):
    """La API respondió con un status no exitoso (o no respondió).

    `status` es `None` cuando el fallo es de transporte (DNS, timeout, TLS).
    """

    def __init__(
        self,
        status: int | None,
        headers: Mapping[str, str] | None = None,
        body: str = "",
        *,
        reason: str | None = None,
    ) -> None:
        self.status = status
        self.headers = dict(headers or {})
        self.body = body
        self.reason = reason

        if status is None:
            message = f"Fetch error ({reason or 'no response'})"
        else:
            rendered = "\n".join(f"{k}: {v}" for k, v in self.headers.items())
            message = f"Fetch error (Status: {status})\nHeaders:\n{rendered}\nContent:{body}"
        super().__init__(message)


class ResponseTooLargeError(ApodManagerError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"Response too large: body exceeds {limit} bytes.")
        self.limit = limit


class ApodDecodeError(ApodManagerError):
    """El JSON no describe un registro APOD (o una lista de ellos)."""


class ApodAlreadyExistsError(ApodManagerError):
    def __init__(self, date: str) -> None:
        super().__init__(f"APOD {date} already exists locally.")
        self.date = date


class ApodNotFoundError(ApodManagerError):
    def __init__(self, date: str) -> None:
        super().__init__(f"APOD {date} not found locally.")
        self.date = date


class StorageError(ApodManagerError):
    """Fallo del sistema de archivos distinto de 'existe' / 'no existe'."""
