from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Dict, Generic, Mapping, Sequence, Type, TypeVar

from ..core.exceptions import NotFoundError, ValidationError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, dump_ids, fetchall

T = TypeVar("T")


class MySQLRepository(Generic[T]):
    """Generic table-backed repository.

    Subclasses set ``model``, ``table`` and implement ``_from_row``. Column names
    equal dataclass field names; fields listed in ``id_set_fields`` are stored as
    JSON text.
    """

    entity_name = "Record"
    model: Type[T]
    table = ""
    order_by = "id ASC"
    id_set_fields: frozenset = frozenset()

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._columns = [f.name for f in dataclasses.fields(self.model) if f.name != "id"]

    def _from_row(self, row: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _to_db(self, name: str, value: Any) -> Any:
        if name in self.id_set_fields:
            return dump_ids(value)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, bool):
            return int(value)
        return value

    def _select(self, where: str = "", params: Sequence[Any] = (), *, order_by: str | None = None) -> list[T]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT id, {', '.join(self._columns)} FROM {self.table} {where} ORDER BY {order_by or self.order_by}",
                tuple(params),
            )
            return [self._from_row(r) for r in fetchall(cur)]

    def get_all(self) -> list[T]:
        return self._select()

    def get_by_id(self, record_id: int) -> T:
        rows = self._select("WHERE id=%s", (int(record_id),))
        if not rows:
            raise NotFoundError(self.entity_name, record_id)
        return rows[0]

    def create(self, fields: Mapping[str, Any]) -> T:
        data = self._known_fields(fields)
        names = [c for c in self._columns if c in data]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self.table}({', '.join(names)}) VALUES({', '.join(['%s'] * len(names))})",
                tuple(self._to_db(n, data[n]) for n in names),
            )
            new_id = int(cur.lastrowid)
        return self.get_by_id(new_id)

    def update(self, record_id: int, fields: Mapping[str, Any]) -> T:
        changes = self._known_fields(fields)
        current = self.get_by_id(record_id)
        if not changes:
            return current
        names = [c for c in self._columns if c in changes]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self.table} SET {', '.join(f'{n}=%s' for n in names)} WHERE id=%s",
                tuple(self._to_db(n, changes[n]) for n in names) + (current.id,),
            )
        return self.get_by_id(current.id)

    def delete(self, record_id: int) -> T:
        current = self.get_by_id(record_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table} WHERE id=%s", (current.id,))
            if cur.rowcount == 0:
                raise NotFoundError(self.entity_name, record_id)
        return current

    def _known_fields(self, fields: Mapping[str, Any]) -> dict:
        if "id" in fields:
            raise ValidationError(f"{self.entity_name} id is assigned by the repository", {"id": "Read-only field"})
        unknown = sorted(set(fields) - set(self._columns))
        if unknown:
            raise ValidationError(
                f"Unknown {self.entity_name.lower()} field(s): {', '.join(unknown)}",
                {name: "Unknown field" for name in unknown},
            )
        return dict(fields)
