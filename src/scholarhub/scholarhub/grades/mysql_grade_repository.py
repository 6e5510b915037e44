from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso_date
from ..core.enums import Term
from ..database.mysql_repository import MySQLRepository
from .model import Grade


class MySQLGradeRepository(MySQLRepository[Grade]):
    entity_name = "Grade"
    model = Grade
    table = "grades"

    def _from_row(self, r: Dict[str, Any]) -> Grade:
        return Grade(
            id=int(r["id"]),
            student_id=int(r["student_id"]),
            subject=r["subject"],
            score=float(r["score"]),
            max_score=float(r["max_score"]),
            term=Term(r["term"]),
            date=to_iso_date(r["date"]),
        )

    def get_by_student(self, student_id: int) -> list[Grade]:
        return self._select("WHERE student_id=%s", (int(student_id),))

    def get_by_subject(self, subject: str) -> list[Grade]:
        # BINARY keeps subject matching case-sensitive under a ci collation.
        return self._select("WHERE BINARY subject=%s", (subject,))
