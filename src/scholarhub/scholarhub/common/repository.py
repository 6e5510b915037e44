from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    """CRUD contract shared by every entity collection.

    ``get_by_id``/``update``/``delete`` raise NotFoundError for a missing id.
    ``create`` assigns the next id; ids are never reused.
    ``update`` is a shallow merge: fields absent from ``fields`` keep their values.
    """

    def get_all(self) -> Sequence[T]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> T:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> T:
        raise NotImplementedError

    def update(self, record_id: int, fields: Mapping[str, Any]) -> T:
        raise NotImplementedError

    def delete(self, record_id: int) -> T:
        raise NotImplementedError
