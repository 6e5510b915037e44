from __future__ import annotations

from typing import Any, Dict

from ..common.datetime_utils import to_iso_date
from ..core.enums import AttendanceStatus
from ..database.mysql_repository import MySQLRepository
from .model import AttendanceRecord


class MySQLAttendanceRepository(MySQLRepository[AttendanceRecord]):
    """attendance_records carries UNIQUE(student_id, date); duplicates raise ConflictError."""

    entity_name = "Attendance record"
    model = AttendanceRecord
    table = "attendance_records"
    order_by = "date DESC, id ASC"

    def _from_row(self, r: Dict[str, Any]) -> AttendanceRecord:
        return AttendanceRecord(
            id=int(r["id"]),
            student_id=int(r["student_id"]),
            date=to_iso_date(r["date"]),
            status=AttendanceStatus(r["status"]),
            notes=r.get("notes") or "",
        )

    def get_by_date(self, day: str) -> list[AttendanceRecord]:
        return self._select("WHERE date=%s", (day,))

    def get_by_student(self, student_id: int) -> list[AttendanceRecord]:
        return self._select("WHERE student_id=%s", (int(student_id),))

    def get_for_student_and_date(self, student_id: int, day: str) -> AttendanceRecord | None:
        rows = self._select("WHERE student_id=%s AND date=%s", (int(student_id), day))
        return rows[0] if rows else None

    def get_in_range(self, start: str, end: str) -> list[AttendanceRecord]:
        return self._select("WHERE date BETWEEN %s AND %s", (start, end))
