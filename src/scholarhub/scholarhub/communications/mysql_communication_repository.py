from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import to_iso_date
from ..core.enums import CommunicationType
from ..database.mysql_base import load_ids
from ..database.mysql_repository import MySQLRepository
from .model import Communication


def _iso_datetime(value: Any) -> str:
    if isinstance(value, datetime):
        return value.replace(microsecond=0).isoformat()
    return str(value)


class MySQLCommunicationRepository(MySQLRepository[Communication]):
    entity_name = "Communication"
    model = Communication
    table = "communications"
    order_by = "created_at DESC, id DESC"
    id_set_fields = frozenset({"student_ids"})

    def _from_row(self, r: Dict[str, Any]) -> Communication:
        follow_up_date = r.get("follow_up_date")
        return Communication(
            id=int(r["id"]),
            parent_id=int(r["parent_id"]),
            teacher_id=int(r["teacher_id"]),
            student_ids=load_ids(r.get("student_ids")),
            type=CommunicationType(r["type"]),
            subject=r["subject"],
            notes=r["notes"],
            created_at=_iso_datetime(r["created_at"]),
            updated_at=_iso_datetime(r["updated_at"]),
            follow_up_required=bool(r.get("follow_up_required")),
            follow_up_date=to_iso_date(follow_up_date) if follow_up_date else None,
        )

    def get_by_parent_id(self, parent_id: int) -> list[Communication]:
        return self._select("WHERE parent_id=%s", (int(parent_id),))

    def get_by_student_id(self, student_id: int) -> list[Communication]:
        return self._select("WHERE JSON_CONTAINS(student_ids, %s)", (str(int(student_id)),))
