from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from apod_manager.core.config import DEFAULT_BASE_URL, AppSettings


def test_defaults_use_current_directory(tmp_path: Path) -> None:
    settings = AppSettings()
    assert settings.api_key is None
    assert settings.apods_path == tmp_path.resolve()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.log_level == "WARNING"


def test_reads_unprefixed_environment_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APOD_API_KEY", "k" * 40)
    monkeypatch.setenv("APODS_PATH", str(tmp_path / "store"))

    settings = AppSettings()
    assert settings.api_key == "k" * 40
    assert settings.apods_path == tmp_path / "store"


def test_reads_prefixed_tuning_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APOD_MANAGER_MAX_RESPONSE_BYTES", "2048")
    monkeypatch.setenv("APOD_MANAGER_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("APOD_MANAGER_LOG_LEVEL", "debug")

    settings = AppSettings()
    assert settings.max_response_bytes == 2048
    assert settings.http_timeout_seconds == 5.0
    assert settings.log_level == "debug"


def test_reads_dotenv_in_working_directory(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(f"APOD_API_KEY={'d' * 40}\n", encoding="utf-8")
    assert AppSettings().api_key == "d" * 40


def test_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APOD_MANAGER_HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings()
