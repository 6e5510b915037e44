from __future__ import annotations

from typing import Protocol, Sequence

from ..common.repository import Repository
from .model import AttendanceRecord


class AttendanceRepository(Repository[AttendanceRecord], Protocol):
    """Attendance persistence.

    ``create``/``update`` raise ConflictError when another record already holds
    the same (student_id, date).
    """

    def get_by_date(self, day: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, day: str) -> AttendanceRecord | None:
        raise NotImplementedError

    def get_in_range(self, start: str, end: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
