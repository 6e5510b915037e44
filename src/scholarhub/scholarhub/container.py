from __future__ import annotations

from dataclasses import dataclass

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .communications.memory_communication_repository import InMemoryCommunicationRepository
from .communications.mysql_communication_repository import MySQLCommunicationRepository
from .communications.repository import CommunicationRepository
from .communications.service import CommunicationService
from .database.connection import DatabaseConnection, DBConfig
from .grades.memory_grade_repository import InMemoryGradeRepository
from .grades.mysql_grade_repository import MySQLGradeRepository
from .grades.repository import GradeRepository
from .grades.service import GradeService
from .parents.memory_parent_repository import InMemoryParentRepository
from .parents.mysql_parent_repository import MySQLParentRepository
from .parents.repository import ParentRepository
from .parents.service import ParentService
from .reports.service import ReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService

BACKENDS = ("mysql", "memory")


@dataclass(frozen=True)
class Container:
    backend: str

    students_repo: StudentRepository
    parents_repo: ParentRepository
    grades_repo: GradeRepository
    attendance_repo: AttendanceRepository
    communications_repo: CommunicationRepository

    student_service: StudentService
    parent_service: ParentService
    grade_service: GradeService
    attendance_service: AttendanceService
    communication_service: CommunicationService
    report_service: ReportService

    conn: DatabaseConnection | None = None


def build_container(*, db_config: dict | None = None, backend: str = "mysql") -> Container:
    """Wire repositories and services once; callers own the returned container."""
    backend = (backend or "mysql").lower()
    if backend not in BACKENDS:
        raise ValueError(f"Unknown storage backend {backend!r}; expected one of {BACKENDS}")

    conn = None
    if backend == "mysql":
        if db_config is None:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection(DBConfig.from_mapping(db_config))
        students_repo = MySQLStudentRepository(conn)
        parents_repo = MySQLParentRepository(conn)
        grades_repo = MySQLGradeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        communications_repo = MySQLCommunicationRepository(conn)
    else:
        students_repo = InMemoryStudentRepository()
        parents_repo = InMemoryParentRepository()
        grades_repo = InMemoryGradeRepository()
        attendance_repo = InMemoryAttendanceRepository()
        communications_repo = InMemoryCommunicationRepository()

    return Container(
        backend=backend,
        conn=conn,
        students_repo=students_repo,
        parents_repo=parents_repo,
        grades_repo=grades_repo,
        attendance_repo=attendance_repo,
        communications_repo=communications_repo,
        student_service=StudentService(students_repo),
        parent_service=ParentService(parents_repo, students_repo),
        grade_service=GradeService(grades_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        communication_service=CommunicationService(communications_repo, parents_repo),
        report_service=ReportService(students_repo, grades_repo, attendance_repo),
    )
