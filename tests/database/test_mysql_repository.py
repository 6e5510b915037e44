from __future__ import annotations

import datetime

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.scholarhub.scholarhub.core.enums import ParentRelationship, Term
from src.scholarhub.scholarhub.core.exceptions import ConflictError, NotFoundError, TransportError
from src.scholarhub.scholarhub.grades.mysql_grade_repository import MySQLGradeRepository
from src.scholarhub.scholarhub.parents.mysql_parent_repository import MySQLParentRepository

GRADE_ROW = {
    "id": 5,
    "student_id": 1,
    "subject": "Mathematics",
    "score": 88,
    "max_score": 100,
    "term": "First Quarter",
    "date": datetime.date(2024, 10, 1),
}


class FakeCursor:
    def __init__(self, rows=(), error=None, batches=None):
        self.rows = list(rows)
        self.batches = list(batches or [])
        self.error = error
        self.executed = []
        self.lastrowid = 5
        self.rowcount = 1

    def execute(self, sql, params=()):
        self.executed.append((sql, params))
        if self.error is not None:
            raise self.error

    def fetchall(self):
        if self.batches:
            return self.batches.pop(0)
        return self.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed += 1


class FakeFactory:
    def __init__(self, cursor=None, connect_error=None):
        self.cursor = cursor or FakeCursor()
        self.connection = FakeConnection(self.cursor)
        self.connect_error = connect_error

    def connect(self, *, with_database=True):
        if self.connect_error is not None:
            raise self.connect_error
        return self.connection


def test_rows_are_mapped_to_domain_types():
    factory = FakeFactory(FakeCursor(rows=[GRADE_ROW]))

    grade = MySQLGradeRepository(factory).get_by_id(5)

    assert grade.score == 88.0
    assert grade.term == Term.FIRST_QUARTER
    assert grade.date == "2024-10-01"
    sql, params = factory.cursor.executed[0]
    assert "FROM grades WHERE id=%s" in sql
    assert params == (5,)
    assert factory.connection.commits == 1
    assert factory.connection.closed == 1


def test_missing_row_is_not_found():
    with pytest.raises(NotFoundError):
        MySQLGradeRepository(FakeFactory(FakeCursor(rows=[]))).get_by_id(9)


def test_create_inserts_plain_values_and_reads_back():
    factory = FakeFactory(FakeCursor(rows=[GRADE_ROW]))

    grade = MySQLGradeRepository(factory).create(
        {
            "student_id": 1,
            "subject": "Mathematics",
            "score": 88.0,
            "max_score": 100.0,
            "term": Term.FIRST_QUARTER,
            "date": "2024-10-01",
        }
    )

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("INSERT INTO grades(student_id, subject, score, max_score, term, date)")
    assert params == (1, "Mathematics", 88.0, 100.0, "First Quarter", "2024-10-01")
    assert grade.id == 5


def test_update_only_touches_changed_columns_and_reads_back():
    factory = FakeFactory(FakeCursor(batches=[[GRADE_ROW], [{**GRADE_ROW, "score": 91}]]))

    grade = MySQLGradeRepository(factory).update(5, {"score": 91.0})

    sql, params = factory.cursor.executed[1]
    assert sql == "UPDATE grades SET score=%s WHERE id=%s"
    assert params == (91.0, 5)
    assert "FROM grades WHERE id=%s" in factory.cursor.executed[2][0]
    assert grade.score == 91.0


def test_update_of_row_deleted_meanwhile_is_not_found():
    factory = FakeFactory(FakeCursor(batches=[[GRADE_ROW], []]))

    with pytest.raises(NotFoundError):
        MySQLGradeRepository(factory).update(5, {"score": 91.0})


def test_id_sets_round_trip_as_json_text():
    row = {
        "id": 2,
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah@mail.com",
        "phone": "555-0102",
        "relationship": "mother",
        "student_ids": "[1, 3]",
        "address": None,
        "occupation": "Nurse",
        "work_phone": None,
        "is_primary": 1,
        "emergency_contact": 0,
    }
    factory = FakeFactory(FakeCursor(rows=[row]))
    repo = MySQLParentRepository(factory)

    parents = repo.get_by_student_id(3)
    repo.update(2, {"student_ids": (1, 3, 4), "is_primary": False})

    assert parents[0].student_ids == (1, 3)
    assert parents[0].relationship == ParentRelationship.MOTHER
    assert parents[0].is_primary is True
    assert parents[0].address == ""
    assert factory.cursor.executed[0][1] == ("3",)
    assert factory.cursor.executed[-2][1] == ("[1, 3, 4]", 0, 2)


def test_unreachable_database_is_a_transport_error():
    factory = FakeFactory(connect_error=mysql.connector.InterfaceError("Can't connect to MySQL server"))

    with pytest.raises(TransportError):
        MySQLGradeRepository(factory).get_all()


def test_duplicate_key_is_a_conflict():
    error = mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)
    factory = FakeFactory(FakeCursor(error=error))

    with pytest.raises(ConflictError):
        MySQLGradeRepository(factory).create(
            {"student_id": 1, "subject": "Art", "score": 1, "max_score": 2, "term": Term.FINAL_EXAM, "date": "2024-06-01"}
        )

    assert factory.connection.rollbacks == 1
    assert factory.connection.commits == 0


def test_other_driver_errors_are_transport_errors():
    factory = FakeFactory(FakeCursor(error=mysql.connector.ProgrammingError(msg="Table missing", errno=1146)))

    with pytest.raises(TransportError):
        MySQLGradeRepository(factory).get_all()

    assert factory.connection.rollbacks == 1
    assert factory.connection.closed == 1
