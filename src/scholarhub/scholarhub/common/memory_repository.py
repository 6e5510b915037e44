from __future__ import annotations

import dataclasses
import threading
from typing import Any, Callable, Generic, Iterable, Mapping, Type, TypeVar

from ..core.exceptions import NotFoundError, ValidationError

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Process-local repository over frozen dataclass records.

    Records are kept in insertion order. Every snapshot is a new list, and the
    records themselves are immutable, so callers never see a half-written row.
    """

    entity_name = "Record"

    def __init__(self, model: Type[T], records: Iterable[T] = ()):
        self._model = model
        self._field_names = {f.name for f in dataclasses.fields(model)} - {"id"}
        self._items: dict[int, T] = {}
        self._last_id = 0
        self._lock = threading.RLock()
        for record in records:
            self._items[record.id] = record
            self._last_id = max(self._last_id, record.id)

    def get_all(self) -> list[T]:
        with self._lock:
            return list(self._items.values())

    def get_by_id(self, record_id: int) -> T:
        with self._lock:
            record = self._items.get(int(record_id))
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    def create(self, fields: Mapping[str, Any]) -> T:
        data = self._known_fields(fields)
        with self._lock:
            self._before_write(data, record_id=None)
            new_id = self._last_id + 1
            record = self._model(id=new_id, **data)
            self._items[new_id] = record
            self._last_id = new_id
        return record

    def update(self, record_id: int, fields: Mapping[str, Any]) -> T:
        changes = self._known_fields(fields)
        with self._lock:
            current = self.get_by_id(record_id)
            updated = dataclasses.replace(current, **changes)
            self._before_write(dataclasses.asdict(updated), record_id=current.id)
            self._items[current.id] = updated
        return updated

    def delete(self, record_id: int) -> T:
        with self._lock:
            record = self.get_by_id(record_id)
            del self._items[record.id]
        return record

    def _filter(self, predicate: Callable[[T], bool]) -> list[T]:
        with self._lock:
            return [r for r in self._items.values() if predicate(r)]

    def _before_write(self, data: Mapping[str, Any], *, record_id: int | None) -> None:
        """Hook for natural-key checks; runs under the collection lock."""

    def _known_fields(self, fields: Mapping[str, Any]) -> dict:
        if "id" in fields:
            raise ValidationError(f"{self.entity_name} id is assigned by the repository", {"id": "Read-only field"})
        unknown = sorted(set(fields) - self._field_names)
        if unknown:
            raise ValidationError(
                f"Unknown {self.entity_name.lower()} field(s): {', '.join(unknown)}",
                {name: "Unknown field" for name in unknown},
            )
        return dict(fields)
