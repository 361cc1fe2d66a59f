"""Cliente de la API APOD (api.nasa.gov/planetary/apod).

Tres variantes de consulta sobre el mismo endpoint:
- single: `date`
- random: `count`
- range:  `start_date` + `end_date` (se envía tal cual, aunque esté invertido)

Estos métodos están en adapters porque son I/O puro (HTTP). Cada uno hace
exactamente un GET; no hay reintentos.
"""

from __future__ import annotations

import logging

import httpx

from apod_manager.adapters.http_client import build_client, read_limited, read_prefix
from apod_manager.core.config import API_KEY_LENGTH, AppSettings
from apod_manager.core.domain.dates import ApodDate
from apod_manager.core.domain.errors import FetchError, InvalidApiKeyError
from apod_manager.core.domain.models import Apod

logger = logging.getLogger(__name__)

ERROR_BODY_BYTES = 8 * 1024


def _check_api_key(api_key: str) -> None:
    if len(api_key) != API_KEY_LENGTH:
        raise InvalidApiKeyError(len(api_key))


def single_params(api_key: str, date: ApodDate) -> dict[str, str]:
    _check_api_key(api_key)
    return {"api_key": api_key, "date": date.isoformat()}


def random_params(api_key: str, count: int) -> dict[str, str]:
    _check_api_key(api_key)
    return {"api_key": api_key, "count": str(count)}


def range_params(api_key: str, start: ApodDate, end: ApodDate) -> dict[str, str]:
    _check_api_key(api_key)
    return {
        "api_key": api_key,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
    }


class ApodApiClient:
    """Implementación HTTP de `ApodSource`.

    `client` es opcional: si se inyecta (tests, sesiones compartidas) no se
    cierra aquí; si no, se crea uno por petición con `build_client`.
    """

    def __init__(self, settings: AppSettings | None = None, *, client: httpx.Client | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def fetch_single(self, api_key: str, date: ApodDate) -> Apod:
        body = self._get(single_params(api_key, date))
        return Apod.from_json(body)

    def fetch_random(self, api_key: str, count: int) -> list[Apod]:
        body = self._get(random_params(api_key, count))
        return Apod.list_from_json(body)

    def fetch_range(self, api_key: str, start: ApodDate, end: ApodDate) -> list[Apod]:
        body = self._get(range_params(api_key, start, end))
        return Apod.list_from_json(body)

    def _get(self, params: dict[str, str]) -> bytes:
        if self._client is not None:
            return self._send(self._client, params)
        with build_client(self._settings) as client:
            return self._send(client, params)

    def _send(self, client: httpx.Client, params: dict[str, str]) -> bytes:
        url = self._settings.base_url
        # Nunca loguear la API key.
        logger.debug(
            "GET %s %s",
            url,
            {k: v for k, v in params.items() if k != "api_key"},
        )

        try:
            with client.stream("GET", url, params=params) as response:
                if not response.is_success:
                    # Status primero: una página de error grande sigue siendo un FetchError.
                    error_body = read_prefix(response, ERROR_BODY_BYTES)
                    raise FetchError(
                        response.status_code,
                        headers=response.headers,
                        body=error_body.decode("utf-8", errors="replace"),
                    )
                body = read_limited(response, self._settings.max_response_bytes)
        except httpx.HTTPError as exc:
            raise FetchError(None, reason=str(exc) or exc.__class__.__name__) from exc

        logger.debug("HTTP %s (%d bytes)", response.status_code, len(body))
        return body
