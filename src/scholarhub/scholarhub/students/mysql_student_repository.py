from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso_date
from ..core.enums import GradeLevel, StudentStatus
from ..database.mysql_repository import MySQLRepository
from .model import Student


class MySQLStudentRepository(MySQLRepository[Student]):
    entity_name = "Student"
    model = Student
    table = "students"

    def _from_row(self, r: Dict[str, Any]) -> Student:
        return Student(
            id=int(r["id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            date_of_birth=to_iso_date(r["date_of_birth"]),
            grade=GradeLevel(r["grade"]),
            enrollment_date=to_iso_date(r["enrollment_date"]),
            email=r["email"],
            phone=r["phone"],
            guardian_name=r["guardian_name"],
            guardian_phone=r["guardian_phone"],
            emergency_contact_name=r["emergency_contact_name"],
            emergency_contact_phone=r["emergency_contact_phone"],
            emergency_contact_relationship=r["emergency_contact_relationship"],
            address=r.get("address") or "",
            guardian_email=r.get("guardian_email") or "",
            status=StudentStatus(r["status"]),
        )
