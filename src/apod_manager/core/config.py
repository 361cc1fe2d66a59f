"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/almacenamiento) lean config de forma consistente.

Se resuelve una vez por invocación de comando; nunca se escribe de vuelta.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apod_manager import __version__

DEFAULT_BASE_URL = "https://api.nasa.gov/planetary/apod"
API_KEY_LENGTH = 40


def _cwd() -> Path:
    return Path.cwd().resolve()


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    `APOD_API_KEY` y `APODS_PATH` no llevan prefijo; el resto usa `APOD_MANAGER_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="APOD_MANAGER_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias="APOD_API_KEY",
        description="API key de api.nasa.gov (40 caracteres). Solo la exigen los comandos fetch-*.",
    )
    apods_path: Path = Field(
        default_factory=_cwd,
        validation_alias="APODS_PATH",
        description="Directorio donde se guarda un `<fecha>.json` por APOD.",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Endpoint APOD.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    max_response_bytes: int = Field(
        default=4 * 1024 * 1024,
        ge=1024,
        description="Tamaño máximo aceptado para el cuerpo de una respuesta.",
    )
    user_agent: str = Field(
        default=f"apod-manager/{__version__}",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
