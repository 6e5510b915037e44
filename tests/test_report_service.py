from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.scholarhub.scholarhub.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.scholarhub.scholarhub.attendance.model import AttendanceRecord, DateRange
from src.scholarhub.scholarhub.core.enums import AttendanceStatus, GradeLevel, StudentStatus, Term
from src.scholarhub.scholarhub.core.exceptions import NotFoundError
from src.scholarhub.scholarhub.grades.memory_grade_repository import InMemoryGradeRepository
from src.scholarhub.scholarhub.grades.model import Grade, SubjectAverage
from src.scholarhub.scholarhub.reports.service import ReportService, rank_subjects
from src.scholarhub.scholarhub.students.memory_student_repository import InMemoryStudentRepository
from src.scholarhub.scholarhub.students.model import Student

_BASE = Student(
    id=1,
    first_name="Emma",
    last_name="Johnson",
    date_of_birth="2015-03-14",
    grade=GradeLevel.GRADE_3,
    enrollment_date="2021-09-01",
    email="emma@school.edu",
    phone="555-0101",
    guardian_name="Sarah Johnson",
    guardian_phone="555-0102",
    emergency_contact_name="Tom Johnson",
    emergency_contact_phone="555-0103",
    emergency_contact_relationship="Parent",
)


def _student(sid: int, grade: GradeLevel, status: StudentStatus = StudentStatus.ACTIVE) -> Student:
    return replace(_BASE, id=sid, grade=grade, status=status, email=f"s{sid}@school.edu")


def _grade(gid: int, student_id: int, subject: str, score: float) -> Grade:
    return Grade(gid, student_id, subject, score, 100, Term.FIRST_QUARTER, "2024-10-01")


def _mark(rid: int, student_id: int, day: str, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(id=rid, student_id=student_id, date=day, status=status)


@pytest.fixture
def service():
    students = InMemoryStudentRepository(
        [
            _student(1, GradeLevel.GRADE_3),
            _student(2, GradeLevel.GRADE_10),
            _student(3, GradeLevel.KINDERGARTEN, StudentStatus.GRADUATED),
            _student(4, GradeLevel.GRADE_3),
        ]
    )
    grades = InMemoryGradeRepository(
        [
            _grade(1, 1, "Science", 80),
            _grade(2, 1, "Math", 90),
            _grade(3, 2, "Art", 80),
            _grade(4, 2, "Math", 70),
        ]
    )
    attendance = InMemoryAttendanceRepository(
        [
            _mark(1, 1, "2024-09-01", AttendanceStatus.ABSENT),
            _mark(2, 1, "2024-10-10", AttendanceStatus.PRESENT),
            _mark(3, 2, "2024-10-10", AttendanceStatus.LATE),
            _mark(4, 2, "2024-10-15", AttendanceStatus.ABSENT),
        ]
    )
    return ReportService(students, grades, attendance)


def test_totals(service):
    totals = service.build_report().totals

    assert totals.total_students == 4
    assert totals.active_students == 3
    assert totals.total_grades == 4
    assert totals.total_attendance_records == 4
    assert totals.total_records == 8


def test_grade_levels_sorted_by_label(service):
    levels = service.build_report().grade_levels

    assert [(g.grade, g.count) for g in levels] == [("10th Grade", 1), ("3rd Grade", 2), ("Kindergarten", 1)]


def test_subject_ranking_descending_with_ties_in_first_seen_order(service):
    ranking = service.build_report().subject_ranking

    assert [(s.subject, s.average) for s in ranking] == [("Science", 80.0), ("Math", 80.0), ("Art", 80.0)]


def test_rank_subjects_orders_by_average():
    ranked = rank_subjects(
        [SubjectAverage("Art", 61.5, 2), SubjectAverage("Math", 92.0, 1), SubjectAverage("Music", 61.5, 1)]
    )

    assert [s.subject for s in ranked] == ["Math", "Art", "Music"]


def test_report_attendance_honours_range(service):
    report = service.build_report(DateRange("2024-10-01", "2024-10-31"))

    assert report.attendance.total == 3
    assert report.attendance.attendance_rate == 66.7
    assert service.build_report().attendance.total == 4


def test_empty_store_gives_zeroed_report():
    empty = ReportService(InMemoryStudentRepository(), InMemoryGradeRepository(), InMemoryAttendanceRepository())

    report = empty.build_report()

    assert report.totals.total_records == 0
    assert report.attendance.attendance_rate == 0.0
    assert report.grades.average_gpa == 0.0
    assert report.grade_levels == []
    assert report.subject_ranking == []
    assert set(report.grade_distribution_pct.values()) == {0.0}


def test_dashboard_uses_trailing_window(service):
    summary = service.build_dashboard(date(2024, 10, 15), days=30)

    assert summary.window == DateRange("2024-09-16", "2024-10-15")
    assert summary.as_of == "2024-10-15"
    assert summary.attendance.total == 3
    assert summary.totals.total_students == 4


def test_student_summary(service):
    summary = service.student_summary(1)

    assert summary.student.id == 1
    assert summary.grades.total_grades == 2
    assert summary.attendance.total == 2
    assert summary.attendance.attendance_rate == 50.0
    assert [s.subject for s in summary.subjects] == ["Math", "Science"]


def test_student_summary_unknown_student(service):
    with pytest.raises(NotFoundError):
        service.student_summary(99)
