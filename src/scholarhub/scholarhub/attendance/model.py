from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark; (student_id, date) is the natural key."""

    id: int
    student_id: int
    date: str
    status: AttendanceStatus
    notes: str = ""


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of ISO dates (YYYY-MM-DD)."""

    start: str
    end: str

    def contains(self, day: str) -> bool:
        return self.start <= day <= self.end
