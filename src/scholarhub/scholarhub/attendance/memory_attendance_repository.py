from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..common.memory_repository import InMemoryRepository
from ..core.exceptions import ConflictError
from .model import AttendanceRecord


class InMemoryAttendanceRepository(InMemoryRepository[AttendanceRecord]):
    entity_name = "Attendance record"

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        super().__init__(AttendanceRecord, records)

    def get_by_date(self, day: str) -> list[AttendanceRecord]:
        return self._filter(lambda r: r.date == day)

    def get_by_student(self, student_id: int) -> list[AttendanceRecord]:
        items = self._filter(lambda r: r.student_id == int(student_id))
        items.sort(key=lambda r: r.date, reverse=True)
        return items

    def get_for_student_and_date(self, student_id: int, day: str) -> AttendanceRecord | None:
        found = self._filter(lambda r: r.student_id == int(student_id) and r.date == day)
        return found[0] if found else None

    def get_in_range(self, start: str, end: str) -> list[AttendanceRecord]:
        return self._filter(lambda r: start <= r.date <= end)

    def _before_write(self, data: Mapping[str, Any], *, record_id: int | None) -> None:
        student_id = data.get("student_id")
        day = data.get("date")
        for r in self._items.values():
            if r.id != record_id and r.student_id == student_id and r.date == day:
                raise ConflictError(f"Attendance for student {student_id} on {day} already exists (id={r.id})")
