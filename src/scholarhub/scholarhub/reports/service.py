from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ..attendance.aggregator import AttendanceStats, stats_for
from ..attendance.model import AttendanceRecord, DateRange
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import trailing_window
from ..core.constants import DEFAULT_DASHBOARD_DAYS
from ..core.enums import StudentStatus
from ..grades.aggregator import GradeStats, distribution_percentages, grade_stats, subject_breakdown
from ..grades.model import Grade, SubjectAverage
from ..grades.repository import GradeRepository
from ..students.model import Student
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class RecordTotals:
    total_students: int = 0
    active_students: int = 0
    total_grades: int = 0
    total_attendance_records: int = 0
    total_records: int = 0


@dataclass(frozen=True)
class GradeLevelCount:
    grade: str
    count: int


@dataclass(frozen=True)
class SchoolReport:
    """Read-model behind the reports page."""

    totals: RecordTotals
    attendance: AttendanceStats
    grades: GradeStats
    grade_distribution_pct: dict[str, float]
    grade_levels: list[GradeLevelCount] = field(default_factory=list)
    subject_ranking: list[SubjectAverage] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardSummary:
    as_of: str
    window: DateRange
    totals: RecordTotals
    attendance: AttendanceStats
    grades: GradeStats


@dataclass(frozen=True)
class StudentSummary:
    student: Student
    grades: GradeStats
    attendance: AttendanceStats
    subjects: list[SubjectAverage] = field(default_factory=list)


def record_totals(
    students: Sequence[Student], grades: Sequence[Grade], attendance: Sequence[AttendanceRecord]
) -> RecordTotals:
    return RecordTotals(
        total_students=len(students),
        active_students=sum(1 for s in students if s.status == StudentStatus.ACTIVE),
        total_grades=len(grades),
        total_attendance_records=len(attendance),
        total_records=len(grades) + len(attendance),
    )


def grade_level_breakdown(students: Sequence[Student]) -> list[GradeLevelCount]:
    counts: dict[str, int] = {}
    for s in students:
        label = s.grade.value
        counts[label] = counts.get(label, 0) + 1
    return [GradeLevelCount(grade=label, count=counts[label]) for label in sorted(counts)]


def rank_subjects(subjects: Sequence[SubjectAverage]) -> list[SubjectAverage]:
    # sorted() is stable, so equal averages keep first-seen order.
    return sorted(subjects, key=lambda s: s.average, reverse=True)


class ReportService:
    """Composes repository snapshots and aggregator outputs; performs no writes."""

    def __init__(
        self,
        students: StudentRepository,
        grades: GradeRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._grades = grades
        self._attendance = attendance

    def build_report(self, date_range: DateRange | None = None) -> SchoolReport:
        students = list(self._students.get_all())
        grades = list(self._grades.get_all())
        attendance = list(self._attendance.get_all())

        g_stats = grade_stats(grades)
        return SchoolReport(
            totals=record_totals(students, grades, attendance),
            attendance=stats_for(attendance, date_range),
            grades=g_stats,
            grade_distribution_pct=distribution_percentages(g_stats.distribution),
            grade_levels=grade_level_breakdown(students),
            subject_ranking=rank_subjects(subject_breakdown(grades)),
        )

    def build_dashboard(self, today: date, *, days: int = DEFAULT_DASHBOARD_DAYS) -> DashboardSummary:
        start, end = trailing_window(today, days)
        window = DateRange(start, end)
        students = list(self._students.get_all())
        grades = list(self._grades.get_all())
        attendance = list(self._attendance.get_all())

        return DashboardSummary(
            as_of=today.isoformat(),
            window=window,
            totals=record_totals(students, grades, attendance),
            attendance=stats_for(attendance, window),
            grades=grade_stats(grades),
        )

    def student_summary(self, student_id: int) -> StudentSummary:
        student = self._students.get_by_id(student_id)
        grades = list(self._grades.get_by_student(student.id))
        return StudentSummary(
            student=student,
            grades=grade_stats(grades),
            attendance=stats_for(self._attendance.get_by_student(student.id)),
            subjects=rank_subjects(subject_breakdown(grades)),
        )
