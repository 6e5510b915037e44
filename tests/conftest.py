from __future__ import annotations

import pytest

from src.scholarhub.scholarhub.container import build_container


def student_data(**overrides) -> dict:
    data = {
        "first_name": "Emma",
        "last_name": "Johnson",
        "date_of_birth": "2015-03-14",
        "grade": "3rd Grade",
        "enrollment_date": "2021-09-01",
        "email": "emma.johnson@school.edu",
        "phone": "555-0101",
        "address": "12 Oak St",
        "guardian_name": "Sarah Johnson",
        "guardian_phone": "555-0102",
        "guardian_email": "",
        "emergency_contact_name": "Tom Johnson",
        "emergency_contact_phone": "555-0103",
        "emergency_contact_relationship": "Parent",
    }
    data.update(overrides)
    return data


def parent_data(student_ids, **overrides) -> dict:
    data = {
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah.johnson@mail.com",
        "phone": "555-0102",
        "relationship": "mother",
        "student_ids": list(student_ids),
    }
    data.update(overrides)
    return data


@pytest.fixture
def container():
    return build_container(backend="memory")


@pytest.fixture
def make_student():
    return student_data


@pytest.fixture
def make_parent():
    return parent_data
