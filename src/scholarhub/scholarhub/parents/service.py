from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import (
    FormValidator,
    exists,
    merged_fields,
    optional_text,
    parse_bool,
    parse_id_list,
    require_choice,
    require_email,
    require_non_empty,
)
from ..core.enums import ParentRelationship
from ..students.repository import StudentRepository
from .model import Parent
from .repository import ParentRepository

logger = logging.getLogger(__name__)


class ParentService:
    """Use cases for parent/guardian contacts.

    Student links are checked against the roster when a contact is saved; the
    parent store itself does not enforce them, and deleting a student leaves
    existing links untouched.
    """

    def __init__(self, parents: ParentRepository, students: StudentRepository):
        self._parents = parents
        self._students = students

    def list_all(self) -> list[Parent]:
        return list(self._parents.get_all())

    def search(self, query: str) -> list[Parent]:
        term = (query or "").strip()
        parents = self._parents.get_all()
        if not term:
            return list(parents)
        lowered = term.lower()
        return [
            p
            for p in parents
            if lowered in p.first_name.lower()
            or lowered in p.last_name.lower()
            or lowered in p.email.lower()
            or term in p.phone
        ]

    def get(self, parent_id: int) -> Parent:
        return self._parents.get_by_id(parent_id)

    def get_by_student_id(self, student_id: int) -> list[Parent]:
        return list(self._parents.get_by_student_id(int(student_id)))

    def create(self, data: Mapping[str, Any]) -> Parent:
        fields = self.validate(data)
        parent = self._parents.create(fields)
        logger.info("Created parent %s linked to students %s", parent.id, list(parent.student_ids))
        return parent

    def update(self, parent_id: int, changes: Mapping[str, Any]) -> Parent:
        current = self._parents.get_by_id(parent_id)
        fields = self.validate(merged_fields(current, changes, "Parent"))
        parent = self._parents.update(current.id, {k: fields[k] for k in changes})
        logger.info("Updated parent %s fields=%s", parent.id, sorted(changes))
        return parent

    def delete(self, parent_id: int) -> Parent:
        parent = self._parents.delete(parent_id)
        logger.info("Deleted parent %s", parent.id)
        return parent

    def validate(self, data: Mapping[str, Any]) -> dict:
        v = FormValidator("Parent")
        fields: dict[str, Any] = {}

        fields["first_name"] = v.check(require_non_empty, data.get("first_name"), "first_name")
        fields["last_name"] = v.check(require_non_empty, data.get("last_name"), "last_name")
        fields["email"] = v.check(require_email, data.get("email"), "email")
        fields["phone"] = v.check(require_non_empty, data.get("phone"), "phone")
        fields["relationship"] = v.check(require_choice, data.get("relationship"), ParentRelationship, "relationship")
        fields["address"] = optional_text(data.get("address"))
        fields["occupation"] = optional_text(data.get("occupation"))
        fields["work_phone"] = optional_text(data.get("work_phone"))
        fields["is_primary"] = parse_bool(data.get("is_primary", False))
        fields["emergency_contact"] = parse_bool(data.get("emergency_contact", False))

        student_ids = v.check(parse_id_list, data.get("student_ids"), "student_ids")
        if student_ids is not None:
            if not student_ids:
                v.add("student_ids", "At least one student must be selected")
            else:
                missing = [sid for sid in student_ids if not exists(self._students, sid)]
                if missing:
                    v.add("student_ids", f"Unknown student id(s): {', '.join(map(str, missing))}")
        fields["student_ids"] = student_ids

        v.raise_if_errors()
        return fields
