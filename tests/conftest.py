from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from apod_manager.adapters.apod_api import ApodApiClient
from apod_manager.adapters.json_store import ApodStore
from apod_manager.core.config import AppSettings

API_KEY = "a" * 40


def apod_payload(date: str = "2024-01-01", **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": date,
        "title": f"Title {date}",
        "explanation": f"Explanation {date}",
        "url": f"https://apod.nasa.gov/apod/image/{date}.jpg",
        "media_type": "image",
    }
    payload.update(overrides)
    return payload


class RecordingTransport(httpx.MockTransport):
    """MockTransport que guarda cada request para poder contarlas."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Ni el entorno del desarrollador ni un `.env` local deben filtrarse a los tests.
    for name in ("APOD_API_KEY", "APODS_PATH"):
        monkeypatch.delenv(name, raising=False)
    for name in [key for key in os.environ if key.upper().startswith("APOD_MANAGER_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def apods_dir(tmp_path: Path) -> Path:
    path = tmp_path / "apods"
    path.mkdir()
    return path


@pytest.fixture
def settings(apods_dir: Path) -> AppSettings:
    return AppSettings(api_key=API_KEY, apods_path=apods_dir)


@pytest.fixture
def store(apods_dir: Path) -> ApodStore:
    return ApodStore(apods_dir)


@pytest.fixture
def write_record(apods_dir: Path) -> Callable[..., Path]:
    def _write(date: str = "2024-01-01", **overrides: object) -> Path:
        path = apods_dir / f"{date}.json"
        path.write_text(json.dumps(apod_payload(date, **overrides)), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_api_client(settings: AppSettings) -> Callable[..., tuple[ApodApiClient, RecordingTransport]]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        *,
        app_settings: AppSettings | None = None,
    ) -> tuple[ApodApiClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        return ApodApiClient(app_settings or settings, client=client), transport

    return _make
