"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y el límite de tamaño de las respuestas.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from apod_manager.core.config import AppSettings
from apod_manager.core.domain.errors import ResponseTooLargeError


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las peticiones se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def read_limited(response: httpx.Response, max_bytes: int) -> bytes:
    """Lee el cuerpo de una respuesta en streaming sin superar `max_bytes`.

    Nunca trunca: si el cuerpo excede el límite se lanza `ResponseTooLargeError`.
    """

    buffer = bytearray()
    for chunk in response.iter_bytes():
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise ResponseTooLargeError(max_bytes)
    return bytes(buffer)


def read_prefix(response: httpx.Response, max_bytes: int) -> bytes:
    """Lee como mucho `max_bytes` del cuerpo (cuerpos de error, solo para mensajes)."""

    buffer = bytearray()
    for chunk in response.iter_bytes():
        buffer.extend(chunk[: max_bytes - len(buffer)])
        if len(buffer) >= max_bytes:
            break
    return bytes(buffer)
