from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import (
    FormValidator,
    merged_fields,
    optional_email,
    optional_text,
    require_choice,
    require_email,
    require_iso_date,
    require_non_empty,
)
from ..core.enums import EmergencyRelationship, GradeLevel, StudentStatus
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = (
    "first_name",
    "last_name",
    "phone",
    "guardian_name",
    "guardian_phone",
    "emergency_contact_name",
    "emergency_contact_phone",
)


class StudentService:
    """Use cases for the student roster: validated CRUD, search, active listing."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_all(self) -> list[Student]:
        return list(self._students.get_all())

    def list_active(self) -> list[Student]:
        return [s for s in self._students.get_all() if s.status == StudentStatus.ACTIVE]

    def search(self, query: str) -> list[Student]:
        """Case-insensitive match on first/last name, email and grade label."""
        term = (query or "").strip().lower()
        students = self._students.get_all()
        if not term:
            return list(students)
        return [
            s
            for s in students
            if term in s.first_name.lower()
            or term in s.last_name.lower()
            or term in s.email.lower()
            or term in s.grade.value.lower()
        ]

    def get(self, student_id: int) -> Student:
        return self._students.get_by_id(student_id)

    def create(self, data: Mapping[str, Any]) -> Student:
        fields = self.validate(data)
        student = self._students.create(fields)
        logger.info("Created student %s (%s)", student.id, student.full_name)
        return student

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Student:
        current = self._students.get_by_id(student_id)
        fields = self.validate(merged_fields(current, changes, "Student"))
        student = self._students.update(current.id, {k: fields[k] for k in changes})
        logger.info("Updated student %s fields=%s", student.id, sorted(changes))
        return student

    def delete(self, student_id: int) -> Student:
        # Grades, attendance and parent links that reference the student are kept.
        student = self._students.delete(student_id)
        logger.info("Deleted student %s", student.id)
        return student

    @staticmethod
    def validate(data: Mapping[str, Any]) -> dict:
        v = FormValidator("Student")
        fields: dict[str, Any] = {}

        for name in _REQUIRED_TEXT:
            fields[name] = v.check(require_non_empty, data.get(name), name)
        fields["date_of_birth"] = v.check(require_iso_date, data.get("date_of_birth"), "date_of_birth")
        fields["enrollment_date"] = v.check(require_iso_date, data.get("enrollment_date"), "enrollment_date")
        fields["grade"] = v.check(require_choice, data.get("grade"), GradeLevel, "grade")
        fields["email"] = v.check(require_email, data.get("email"), "email")
        fields["guardian_email"] = v.check(optional_email, data.get("guardian_email"), "guardian_email")
        relationship = v.check(
            require_choice, data.get("emergency_contact_relationship"), EmergencyRelationship, "emergency_contact_relationship"
        )
        fields["emergency_contact_relationship"] = relationship.value if relationship else None
        fields["address"] = optional_text(data.get("address"))
        fields["status"] = v.check(
            require_choice, data.get("status") or StudentStatus.ACTIVE, StudentStatus, "status"
        )

        v.raise_if_errors()
        return fields
