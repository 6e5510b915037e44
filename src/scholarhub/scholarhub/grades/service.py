from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import (
    FormValidator,
    exists,
    merged_fields,
    parse_number,
    parse_positive_int,
    require_choice,
    require_iso_date,
    require_non_empty,
)
from ..core.enums import Term
from ..students.repository import StudentRepository
from .aggregator import GradeStats, grade_stats
from .model import Grade
from .repository import GradeRepository

logger = logging.getLogger(__name__)


class GradeService:
    def __init__(self, grades: GradeRepository, students: StudentRepository):
        self._grades = grades
        self._students = students

    def list_all(self) -> list[Grade]:
        return list(self._grades.get_all())

    def get(self, grade_id: int) -> Grade:
        return self._grades.get_by_id(grade_id)

    def get_by_student(self, student_id: int) -> list[Grade]:
        return list(self._grades.get_by_student(int(student_id)))

    def get_by_subject(self, subject: str) -> list[Grade]:
        return list(self._grades.get_by_subject(subject))

    def get_stats(self) -> GradeStats:
        return grade_stats(self._grades.get_all())

    def create(self, data: Mapping[str, Any]) -> Grade:
        fields = self.validate(data)
        grade = self._grades.create(fields)
        logger.info("Recorded grade %s for student %s (%s)", grade.id, grade.student_id, grade.subject)
        return grade

    def update(self, grade_id: int, changes: Mapping[str, Any]) -> Grade:
        current = self._grades.get_by_id(grade_id)
        fields = self.validate(merged_fields(current, changes, "Grade"))
        grade = self._grades.update(current.id, {k: fields[k] for k in changes})
        logger.info("Updated grade %s fields=%s", grade.id, sorted(changes))
        return grade

    def delete(self, grade_id: int) -> Grade:
        grade = self._grades.delete(grade_id)
        logger.info("Deleted grade %s", grade.id)
        return grade

    def validate(self, data: Mapping[str, Any]) -> dict:
        v = FormValidator("Grade")
        fields: dict[str, Any] = {}

        student_id = v.check(parse_positive_int, data.get("student_id"), "student_id")
        if student_id is not None and not exists(self._students, student_id):
            v.add("student_id", f"Student {student_id} does not exist")
        fields["student_id"] = student_id
        fields["subject"] = v.check(require_non_empty, data.get("subject"), "subject")
        fields["term"] = v.check(require_choice, data.get("term"), Term, "term")
        fields["date"] = v.check(require_iso_date, data.get("date"), "date")

        max_score = v.check(parse_number, data.get("max_score"), "max_score")
        if max_score is not None and max_score <= 0:
            v.add("max_score", "Maximum score must be a positive number")
            max_score = None
        score = v.check(parse_number, data.get("score"), "score")
        if score is not None:
            if score < 0:
                v.add("score", "Score must be a valid number")
            elif max_score is not None and score > max_score:
                v.add("score", "Score cannot exceed maximum score")
        fields["score"] = score
        fields["max_score"] = max_score

        v.raise_if_errors()
        return fields
