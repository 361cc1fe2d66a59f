"""APOD archive orchestration.

This module owns the fetch/persist workflow behind every CLI command. The
CLI only parses argv and renders output: argument validation, the order of
checks (which decides whether a network call happens at all) and the
writes live here, so the flow is reusable from tests or other entry-points.

Guarantees worth knowing before touching the order of checks:

- `fetch_single` never overwrites: the existence pre-check runs before the
  API key is even looked at, so an existing date costs no network call.
  The record is written under the requested date, the same file the
  pre-check looked at.
- `fetch_random` rejects a bad `count` before any request is built.
- Batch fetches do not pre-check. Each record's own `date` is parsed before
  it names a file; a malformed one aborts the batch. Each record is created
  exclusively, so a date already on disk aborts the batch too; files written
  before the failure stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from apod_manager.adapters.json_store import ApodStore
from apod_manager.core.config import AppSettings
from apod_manager.core.domain.dates import ApodDate
from apod_manager.core.domain.errors import (
    ApodAlreadyExistsError,
    ApodDecodeError,
    InvalidArgumentError,
    InvalidDateFormatError,
    MissingApiKeyError,
    MissingArgumentError,
)
from apod_manager.core.domain.models import Apod
from apod_manager.core.interfaces.source import ApodSource

logger = logging.getLogger(__name__)

MIN_COUNT = 1
MAX_COUNT = 100


@dataclass
class ArchiveHooks:
    """Optional callbacks for UI layers."""

    saved: Callable[[Path], None] | None = None


@dataclass
class FetchResult:
    """Files written by a fetch command, in write order."""

    paths: list[Path] = field(default_factory=list)


class ArchiveService:
    def __init__(
        self,
        settings: AppSettings,
        source: ApodSource,
        store: ApodStore | None = None,
        hooks: ArchiveHooks | None = None,
    ) -> None:
        self._settings = settings
        self._source = source
        self._store = store or ApodStore(settings.apods_path)
        self._hooks = hooks or ArchiveHooks()

    @property
    def store(self) -> ApodStore:
        return self._store

    def fetch_single(self, date_arg: str | None) -> FetchResult:
        if date_arg is None:
            raise MissingArgumentError("Missing required argument: date YYYY-MM-DD")
        date = ApodDate.parse(date_arg)

        if self._store.exists(date):
            raise ApodAlreadyExistsError(date.isoformat())

        api_key = self._require_api_key()
        apod = self._source.fetch_single(api_key, date)
        return self._persist([(apod, date)])

    def fetch_random(self, count_arg: str | None) -> FetchResult:
        api_key = self._require_api_key()
        if count_arg is None:
            raise MissingArgumentError("Missing 'count' argument.")
        count = parse_count(count_arg)

        apods = self._source.fetch_random(api_key, count)
        return self._persist([(apod, record_date(apod)) for apod in apods])

    def fetch_range(self, start_arg: str | None, end_arg: str | None) -> FetchResult:
        api_key = self._require_api_key()
        if start_arg is None:
            raise MissingArgumentError("Missing 'start_date' argument.")
        start = ApodDate.parse(start_arg)
        if end_arg is None:
            raise MissingArgumentError("Missing 'end_date' argument.")
        end = ApodDate.parse(end_arg)

        if start > end:
            # Left to the remote service; only logged.
            logger.info("Inverted range %s > %s sent as-is", start, end)

        apods = self._source.fetch_range(api_key, start, end)
        return self._persist([(apod, record_date(apod)) for apod in apods])

    def list_records(self) -> Iterator[Apod]:
        return self._store.iter_records()

    def details(self, date_arg: str | None) -> Apod:
        if date_arg is None:
            raise MissingArgumentError("Missing required argument: date YYYY-MM-DD")
        return self._store.load(ApodDate.parse(date_arg))

    def _require_api_key(self) -> str:
        if self._settings.api_key is None:
            raise MissingApiKeyError()
        return self._settings.api_key

    def _persist(self, records: list[tuple[Apod, ApodDate]]) -> FetchResult:
        result = FetchResult()
        for apod, date in records:
            path = self._store.save(apod, date)
            result.paths.append(path)
            if self._hooks.saved:
                self._hooks.saved(path)
        return result


def record_date(apod: Apod) -> ApodDate:
    """Date a batch record is filed under, parsed from the record itself."""

    try:
        return ApodDate.parse(apod.date)
    except InvalidDateFormatError as exc:
        raise ApodDecodeError(f"Invalid APOD record: date '{apod.date}' is not YYYY-MM-DD") from exc


def parse_count(value: str) -> int:
    """Parse the `count` argument of `fetch-random` (1..100 inclusive)."""

    if not value.isascii() or not value.isdigit():
        raise InvalidArgumentError(f"'count' must be an integer, got '{value}'.")
    count = int(value)
    if count < MIN_COUNT or count > MAX_COUNT:
        raise InvalidArgumentError(f"'count' must be between {MIN_COUNT} and {MAX_COUNT}.")
    return count
