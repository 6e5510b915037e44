from __future__ import annotations

from typing import Any, Dict

from ..core.enums import ParentRelationship
from ..database.mysql_base import load_ids
from ..database.mysql_repository import MySQLRepository
from .model import Parent


class MySQLParentRepository(MySQLRepository[Parent]):
    entity_name = "Parent"
    model = Parent
    table = "parents"
    id_set_fields = frozenset({"student_ids"})

    def _from_row(self, r: Dict[str, Any]) -> Parent:
        return Parent(
            id=int(r["id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            email=r["email"],
            phone=r["phone"],
            relationship=ParentRelationship(r["relationship"]),
            student_ids=load_ids(r.get("student_ids")),
            address=r.get("address") or "",
            occupation=r.get("occupation") or "",
            work_phone=r.get("work_phone") or "",
            is_primary=bool(r.get("is_primary")),
            emergency_contact=bool(r.get("emergency_contact")),
        )

    def get_by_student_id(self, student_id: int) -> list[Parent]:
        return self._select("WHERE JSON_CONTAINS(student_ids, %s)", (str(int(student_id)),))
