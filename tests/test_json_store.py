from __future__ import annotations

import json
from pathlib import Path

import pytest

from apod_manager.adapters.json_store import ApodStore
from apod_manager.core.domain.dates import ApodDate
from apod_manager.core.domain.errors import (
    ApodAlreadyExistsError,
    ApodDecodeError,
    ApodNotFoundError,
    StorageError,
)
from apod_manager.core.domain.models import Apod

from conftest import apod_payload

DAY = ApodDate.parse("2024-01-01")


def _apod(date: str = "2024-01-01", **overrides: object) -> Apod:
    return Apod.model_validate(apod_payload(date, **overrides))


def test_save_writes_indented_json(store: ApodStore, apods_dir: Path) -> None:
    path = store.save(_apod(), DAY)

    assert path == apods_dir / "2024-01-01.json"
    text = path.read_text(encoding="utf-8")
    assert text.splitlines()[1] == '    "date": "2024-01-01",'
    assert json.loads(text)["media_type"] == "image"


def test_save_never_overwrites(store: ApodStore, write_record) -> None:
    path = write_record("2024-01-01", title="Original")
    before = path.read_bytes()

    with pytest.raises(ApodAlreadyExistsError, match="already exists"):
        store.save(_apod(title="Replacement"), DAY)
    assert path.read_bytes() == before


def test_exists(store: ApodStore, write_record) -> None:
    write_record("2024-01-01")
    assert store.exists(ApodDate.parse("2024-01-01"))
    assert not store.exists(ApodDate.parse("2024-01-02"))


def test_exists_requires_the_directory(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        ApodStore(tmp_path / "missing").exists(ApodDate.parse("2024-01-01"))


def test_load_round_trips_a_saved_record(store: ApodStore) -> None:
    original = _apod(hdurl="https://hd", copyright="Someone")
    store.save(original, DAY)
    assert store.load(ApodDate.parse("2024-01-01")) == original


def test_load_missing_date(store: ApodStore) -> None:
    with pytest.raises(ApodNotFoundError, match="2024-01-01"):
        store.load(ApodDate.parse("2024-01-01"))


def test_load_corrupt_file(store: ApodStore, apods_dir: Path) -> None:
    (apods_dir / "2024-01-01.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ApodDecodeError, match="2024-01-01.json"):
        store.load(ApodDate.parse("2024-01-01"))


def test_iter_records_only_reads_json_files(store: ApodStore, apods_dir: Path, write_record) -> None:
    write_record("2024-01-01")
    write_record("2024-01-02")
    (apods_dir / "notes.txt").write_text("ignored", encoding="utf-8")
    (apods_dir / "nested.json").mkdir()
    (apods_dir / "nested.json" / "2024-01-03.json").write_text("{}", encoding="utf-8")

    dates = sorted(apod.date for apod in store.iter_records())
    assert dates == ["2024-01-01", "2024-01-02"]


def test_iter_records_empty_directory(store: ApodStore) -> None:
    assert list(store.iter_records()) == []


def test_iter_records_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        list(ApodStore(tmp_path / "missing").iter_records())


def test_save_names_file_from_parsed_date_not_record_text(store: ApodStore, apods_dir: Path) -> None:
    path = store.save(_apod("2024/03/07 extra"), ApodDate.parse("2024/03/07 extra"))

    assert path == apods_dir / "2024-03-07.json"
    assert [p.name for p in apods_dir.iterdir()] == ["2024-03-07.json"]
