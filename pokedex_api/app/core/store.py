"""
In-memory record store for the Pokedex.

The store owns the record collection for the lifetime of the process.
It is created once by ``create_app`` (seeded from a JSON file) and
handed to request handlers through a FastAPI dependency rather than
living in a module global, so tests can build isolated stores.

Every read returns a deep copy of the stored record and every write
replaces the stored record with a freshly validated one.  The
find, copy, apply and write-back sequence of a mutation runs under a
re-entrant lock, which keeps ``id`` unique even when handlers are run
from a thread pool.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from pokedex_api.app.schemas.pokemon import Pokemon, normalize_field_names

logger = logging.getLogger(__name__)

CREATED = "created"
UPDATED = "updated"


class RecordConflictError(Exception):
    """Raised by ``insert`` when a record with the same id already exists."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Pokemon {record_id} already exists")
        self.record_id = record_id


class RecordNotFoundError(Exception):
    """Raised when a mutation targets an id that is not in the collection."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Pokemon {record_id} not found")
        self.record_id = record_id


class SeedDataError(Exception):
    """Raised when the seed file cannot be read or does not hold valid records."""


def load_seed(path: str | Path) -> List[Pokemon]:
    """Read and validate the records stored in a JSON seed file.

    The file must contain a JSON array of record objects, or an object
    with such an array under the ``pokemon`` key.  Every id must appear
    at most once.
    """
    seed_path = Path(path)
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SeedDataError(f"Cannot read seed data from {seed_path}: {exc}") from exc
    if isinstance(raw, dict):
        raw = raw.get("pokemon", [])
    if not isinstance(raw, list):
        raise SeedDataError(f"Seed data in {seed_path} must be a list of records")
    try:
        records = [Pokemon.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise SeedDataError(f"Invalid record in {seed_path}: {exc}") from exc
    seen = set()
    for record in records:
        if record.id in seen:
            raise SeedDataError(f"Duplicate pokemon id {record.id} in {seed_path}")
        seen.add(record.id)
    return records


class PokedexStore:
    """Ordered, id-unique collection of ``Pokemon`` records."""

    def __init__(self, records: Optional[Iterable[Pokemon]] = None) -> None:
        self._records: List[Pokemon] = []
        self._lock = threading.RLock()
        for record in records or ():
            self.insert(record)

    @classmethod
    def from_file(cls, path: str | Path) -> "PokedexStore":
        records = load_seed(path)
        store = cls(records)
        logger.info("Loaded %d pokemon from %s", len(store), path)
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def find_by_id(self, record_id: int) -> Optional[Pokemon]:
        """Return a copy of the record with ``record_id`` or ``None``."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return self._records[index].model_copy(deep=True)

    def list_all(self) -> List[Pokemon]:
        """Return copies of all records in insertion order."""
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records]

    def insert(self, record: Pokemon) -> str:
        """Append a new record.

        Raises
        ------
        RecordConflictError
            If a record with the same id is already stored.
        """
        with self._lock:
            if self._index_of(record.id) is not None:
                raise RecordConflictError(record.id)
            self._records.append(record.model_copy(deep=True))
        return CREATED

    def update(self, record_id: int, mutate: Callable[[Dict[str, Any]], Dict[str, Any]]) -> Pokemon:
        """Apply ``mutate`` to the stored attributes of an existing record.

        ``mutate`` receives the current attributes (keyed by model field
        name) and returns the new ones.  The result is validated before
        it replaces the stored record, so a failing update leaves the
        collection unchanged.

        Raises
        ------
        RecordNotFoundError
            If no record has ``record_id``.
        pydantic.ValidationError
            If the mutated attributes do not form a valid record.
        """
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                raise RecordNotFoundError(record_id)
            current = self._records[index].model_dump()
            updated = Pokemon.model_validate(mutate(current))
            if updated.id != record_id:
                raise ValueError("Pokemon id cannot be reassigned")
            self._records[index] = updated
            return updated.model_copy(deep=True)

    def upsert_fields(self, record_id: int, fields: Dict[str, Any]) -> str:
        """Create the record if it is absent, otherwise overwrite the given fields.

        Returns ``"created"`` or ``"updated"``.  Fields not present in
        ``fields`` keep their previous values.
        """
        changes = normalize_field_names(fields)
        changes.pop("id", None)
        with self._lock:
            if self._index_of(record_id) is None:
                record = Pokemon.model_validate({**changes, "id": record_id})
                self._records.append(record)
                return CREATED
            self.update(record_id, lambda current: {**current, **changes})
            return UPDATED

    def add_type(self, record_id: int, types: Iterable[str]) -> Pokemon:
        """Append types to a record, skipping ones it already has.

        A record holding a single type is promoted to a two element
        list, e.g. ``"Grass"`` plus ``"Poison"`` gives
        ``["Grass", "Poison"]``.
        """
        new_types = list(types)

        def append_types(current: Dict[str, Any]) -> Dict[str, Any]:
            merged = list(current["type"])
            for type_name in new_types:
                if type_name not in merged:
                    merged.append(type_name)
            return {**current, "type": merged}

        return self.update(record_id, append_types)
