from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.datetime_utils import now_iso
from ..common.validators import (
    FormValidator,
    merged_fields,
    parse_bool,
    parse_id_list,
    parse_positive_int,
    require_choice,
    require_iso_date,
    require_non_empty,
)
from ..core.enums import CommunicationType
from ..core.exceptions import NotFoundError, ValidationError
from ..parents.repository import ParentRepository
from .model import Communication
from .repository import CommunicationRepository

logger = logging.getLogger(__name__)


class CommunicationService:
    """Parent-teacher communication log."""

    def __init__(self, communications: CommunicationRepository, parents: ParentRepository):
        self._communications = communications
        self._parents = parents

    def get(self, communication_id: int) -> Communication:
        return self._communications.get_by_id(communication_id)

    def get_by_parent_id(self, parent_id: int) -> list[Communication]:
        return list(self._communications.get_by_parent_id(int(parent_id)))

    def get_by_student_id(self, student_id: int) -> list[Communication]:
        return list(self._communications.get_by_student_id(int(student_id)))

    def create(self, data: Mapping[str, Any]) -> Communication:
        fields = self.validate(data)
        stamp = now_iso()
        fields["created_at"] = stamp
        fields["updated_at"] = stamp
        communication = self._communications.create(fields)
        logger.info("Logged %s communication %s for parent %s", communication.type.value, communication.id, communication.parent_id)
        return communication

    def update(self, communication_id: int, changes: Mapping[str, Any]) -> Communication:
        current = self._communications.get_by_id(communication_id)
        if "created_at" in changes or "updated_at" in changes:
            # Timestamps are owned by the service.
            changes = {k: v for k, v in changes.items() if k not in ("created_at", "updated_at")}
        fields = self.validate(merged_fields(current, changes, "Communication"))
        if changes.get("follow_up_date") and not fields["follow_up_required"]:
            raise ValidationError(
                "Invalid communication data",
                {"follow_up_date": "Follow-up date can only be set when follow-up is needed"},
            )
        update = {k: fields[k] for k in changes}
        if "follow_up_required" in update and not fields["follow_up_required"]:
            update["follow_up_date"] = None
        update["updated_at"] = now_iso()
        communication = self._communications.update(current.id, update)
        logger.info("Updated communication %s fields=%s", communication.id, sorted(changes))
        return communication

    def delete(self, communication_id: int) -> Communication:
        communication = self._communications.delete(communication_id)
        logger.info("Deleted communication %s", communication.id)
        return communication

    def validate(self, data: Mapping[str, Any]) -> dict:
        v = FormValidator("Communication")
        fields: dict[str, Any] = {}

        fields["type"] = v.check(require_choice, data.get("type"), CommunicationType, "type")
        fields["subject"] = v.check(require_non_empty, data.get("subject"), "subject")
        fields["notes"] = v.check(require_non_empty, data.get("notes"), "notes")
        fields["teacher_id"] = v.check(parse_positive_int, data.get("teacher_id"), "teacher_id")

        follow_up = parse_bool(data.get("follow_up_required", False))
        fields["follow_up_required"] = follow_up
        fields["follow_up_date"] = None
        if follow_up:
            if not data.get("follow_up_date"):
                v.add("follow_up_date", "Follow-up date is required when follow-up is needed")
            else:
                fields["follow_up_date"] = v.check(require_iso_date, data.get("follow_up_date"), "follow_up_date")

        parent = None
        parent_id = v.check(parse_positive_int, data.get("parent_id"), "parent_id")
        if parent_id is not None:
            try:
                parent = self._parents.get_by_id(parent_id)
            except NotFoundError:
                v.add("parent_id", f"Parent {parent_id} does not exist")
        fields["parent_id"] = parent_id

        student_ids = v.check(parse_id_list, data.get("student_ids"), "student_ids")
        if parent is not None and student_ids is not None:
            if not student_ids:
                student_ids = tuple(parent.student_ids)
            outside = [sid for sid in student_ids if sid not in parent.student_ids]
            if outside:
                v.add("student_ids", f"Student id(s) {', '.join(map(str, outside))} are not linked to parent {parent.id}")
        fields["student_ids"] = student_ids

        v.raise_if_errors()
        return fields
