from __future__ import annotations

import pytest

from src.scholarhub.scholarhub.core.enums import Term
from src.scholarhub.scholarhub.core.exceptions import ValidationError


def _grade_data(**overrides) -> dict:
    data = {
        "student_id": 1,
        "subject": "Mathematics",
        "score": "88",
        "max_score": "100",
        "term": "First Quarter",
        "date": "2024-10-01",
    }
    data.update(overrides)
    return data


@pytest.fixture
def svc(container, make_student):
    container.student_service.create(make_student())
    return container.grade_service


def test_create_parses_numbers(svc):
    grade = svc.create(_grade_data())

    assert grade.score == 88.0
    assert grade.max_score == 100.0
    assert grade.term == Term.FIRST_QUARTER


@pytest.mark.parametrize(
    "override,field",
    [
        ({"score": "abc"}, "score"),
        ({"score": ""}, "score"),
        ({"score": "-1"}, "score"),
        ({"score": "101"}, "score"),
        ({"max_score": "0"}, "max_score"),
        ({"student_id": 42}, "student_id"),
        ({"term": "Summer"}, "term"),
        ({"subject": " "}, "subject"),
    ],
)
def test_invalid_grades_are_rejected(svc, override, field):
    with pytest.raises(ValidationError) as exc:
        svc.create(_grade_data(**override))

    assert field in exc.value.errors
    assert svc.list_all() == []


def test_update_revalidates_against_stored_max(svc):
    grade = svc.create(_grade_data(score="40", max_score="50"))

    with pytest.raises(ValidationError):
        svc.update(grade.id, {"score": "60"})

    assert svc.update(grade.id, {"score": "45"}).score == 45.0


def test_stats_and_lookups(svc):
    svc.create(_grade_data(score="95"))
    svc.create(_grade_data(score="72", subject="Science"))
    svc.create(_grade_data(score="50", subject="Science"))

    stats = svc.get_stats()

    assert stats.distribution == {"A": 1, "B": 0, "C": 1, "D": 0, "F": 1}
    assert stats.average_gpa == 2.0
    assert stats.subject_averages == {"Mathematics": 95.0, "Science": 61.0}
    assert len(svc.get_by_subject("Science")) == 2
    assert len(svc.get_by_student(1)) == 3
