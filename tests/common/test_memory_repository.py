from __future__ import annotations

import pytest

from src.scholarhub.scholarhub.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.scholarhub.scholarhub.attendance.model import AttendanceRecord
from src.scholarhub.scholarhub.core.enums import AttendanceStatus
from src.scholarhub.scholarhub.core.exceptions import ConflictError, NotFoundError, ValidationError


def _fields(student_id: int, day: str = "2024-10-15", status=AttendanceStatus.PRESENT, notes: str = "") -> dict:
    return {"student_id": student_id, "date": day, "status": status, "notes": notes}


def test_sequential_creates_get_ids_one_to_n():
    repo = InMemoryAttendanceRepository()

    ids = [repo.create(_fields(student_id=i)).id for i in range(1, 6)]

    assert ids == [1, 2, 3, 4, 5]
    assert [r.id for r in repo.get_all()] == [1, 2, 3, 4, 5]


def test_deleted_ids_are_never_reused():
    repo = InMemoryAttendanceRepository()
    for i in range(1, 4):
        repo.create(_fields(student_id=i))

    repo.delete(2)
    repo.delete(3)
    created = repo.create(_fields(student_id=9))

    assert created.id == 4
    assert [r.id for r in repo.get_all()] == [1, 4]


def test_seeded_records_continue_after_highest_id():
    seeded = [
        AttendanceRecord(id=7, student_id=1, date="2024-10-14", status=AttendanceStatus.LATE),
        AttendanceRecord(id=3, student_id=2, date="2024-10-14", status=AttendanceStatus.ABSENT),
    ]
    repo = InMemoryAttendanceRepository(seeded)

    assert repo.create(_fields(student_id=3)).id == 8


def test_update_is_a_partial_merge():
    repo = InMemoryAttendanceRepository()
    original = repo.create(_fields(student_id=1, status=AttendanceStatus.LATE, notes="bus"))

    updated = repo.update(original.id, {"notes": "x"})

    assert updated.notes == "x"
    assert updated.id == original.id
    assert updated.student_id == original.student_id
    assert updated.date == original.date
    assert updated.status == AttendanceStatus.LATE
    assert repo.get_by_id(original.id) == updated


def test_delete_returns_removed_record():
    repo = InMemoryAttendanceRepository()
    created = repo.create(_fields(student_id=1))

    removed = repo.delete(created.id)

    assert removed == created
    assert repo.get_all() == []


@pytest.mark.parametrize("op", ["get", "update", "delete"])
def test_missing_id_raises_not_found(op):
    repo = InMemoryAttendanceRepository()
    repo.create(_fields(student_id=1))

    with pytest.raises(NotFoundError):
        if op == "get":
            repo.get_by_id(42)
        elif op == "update":
            repo.update(42, {"notes": "x"})
        else:
            repo.delete(42)


def test_get_all_returns_a_snapshot():
    repo = InMemoryAttendanceRepository()
    repo.create(_fields(student_id=1))

    snapshot = repo.get_all()
    snapshot.clear()
    repo.create(_fields(student_id=2))

    assert snapshot == []
    assert len(repo.get_all()) == 2


def test_unknown_fields_and_id_are_rejected():
    repo = InMemoryAttendanceRepository()
    rec = repo.create(_fields(student_id=1))

    with pytest.raises(ValidationError) as exc:
        repo.update(rec.id, {"colour": "red"})
    assert "colour" in exc.value.errors

    with pytest.raises(ValidationError):
        repo.update(rec.id, {"id": 99})

    with pytest.raises(ValidationError):
        repo.create({"id": 5, **_fields(student_id=2)})


def test_natural_key_is_unique():
    repo = InMemoryAttendanceRepository()
    repo.create(_fields(student_id=1, day="2024-10-15"))
    other = repo.create(_fields(student_id=1, day="2024-10-16"))

    with pytest.raises(ConflictError):
        repo.create(_fields(student_id=1, day="2024-10-15"))
    with pytest.raises(ConflictError):
        repo.update(other.id, {"date": "2024-10-15"})

    assert len(repo.get_all()) == 2
