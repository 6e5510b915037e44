from __future__ import annotations

import logging

from ..common.locks import KeyedLock
from ..common.validators import FormValidator, exists, optional_text, parse_positive_int, require_choice, require_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError
from ..students.repository import StudentRepository
from .aggregator import AttendanceStats, daily_stats, stats_for
from .model import AttendanceRecord, DateRange
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Attendance marking (upsert by student and date) and attendance statistics."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        locks: KeyedLock | None = None,
    ):
        self._attendance = attendance
        self._students = students
        self._locks = locks or KeyedLock()

    def mark_attendance(self, student_id, day, status, notes: str = "") -> AttendanceRecord:
        """Create the (student, date) record, or update its status/notes in place.

        Marks for the same key are serialized in-process; a create that loses a
        race in the store (ConflictError) is retried once as an update.
        """
        v = FormValidator("Attendance")
        sid = v.check(parse_positive_int, student_id, "student_id")
        if sid is not None and not exists(self._students, sid):
            v.add("student_id", f"Student {sid} does not exist")
        day = v.check(require_iso_date, day, "date")
        status = v.check(require_choice, status, AttendanceStatus, "status")
        v.raise_if_errors()
        notes = optional_text(notes)

        with self._locks.hold((sid, day)):
            existing = self._attendance.get_for_student_and_date(sid, day)
            if existing is None:
                try:
                    record = self._attendance.create(
                        {"student_id": sid, "date": day, "status": status, "notes": notes}
                    )
                    logger.debug("Attendance created id=%s student=%s date=%s", record.id, sid, day)
                    return record
                except ConflictError:
                    existing = self._attendance.get_for_student_and_date(sid, day)
                    if existing is None:
                        raise
                    logger.info("Attendance for student=%s date=%s created concurrently; updating", sid, day)

            record = self._attendance.update(existing.id, {"status": status, "notes": notes})
            logger.debug("Attendance updated id=%s student=%s date=%s", record.id, sid, day)
            return record

    def list_all(self) -> list[AttendanceRecord]:
        return list(self._attendance.get_all())

    def get(self, record_id: int) -> AttendanceRecord:
        return self._attendance.get_by_id(record_id)

    def get_by_date(self, day: str) -> list[AttendanceRecord]:
        return list(self._attendance.get_by_date(require_iso_date(day, "date")))

    def get_by_student(self, student_id: int) -> list[AttendanceRecord]:
        return list(self._attendance.get_by_student(int(student_id)))

    def delete(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.delete(record_id)
        logger.info("Deleted attendance record %s", record.id)
        return record

    def get_stats(self, date_range: DateRange | None = None) -> AttendanceStats:
        if date_range is None:
            return stats_for(self._attendance.get_all())
        return stats_for(self._attendance.get_in_range(date_range.start, date_range.end), date_range)

    def get_daily_stats(self, day: str) -> AttendanceStats:
        day = require_iso_date(day, "date")
        return daily_stats(self._attendance.get_by_date(day), day)

    @staticmethod
    def parse_range(start: str | None, end: str | None) -> DateRange | None:
        """Both bounds or neither; each must be an ISO date."""
        if not start and not end:
            return None
        v = FormValidator("Date range")
        start = v.check(require_iso_date, start, "start")
        end = v.check(require_iso_date, end, "end")
        if start and end and start > end:
            v.add("end", "End date must not be before start date")
        v.raise_if_errors()
        return DateRange(start, end)
