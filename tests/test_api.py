from __future__ import annotations

import pytest

from src.scholarhub.scholarhub.core.exceptions import TransportError
from src.scholarhub.scholarhub.main import create_app


@pytest.fixture
def client(container):
    app = create_app(settings_module="config.testing", container=container)
    return app.test_client()


@pytest.fixture
def student_id(client, make_student):
    return client.post("/api/students", json=make_student()).get_json()["id"]


def test_health_reports_backend(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "backend": "memory"}


def test_student_crud_flow(client, make_student):
    created = client.post("/api/students", json=make_student())
    assert created.status_code == 201
    body = created.get_json()
    assert body["id"] == 1
    assert body["grade"] == "3rd Grade"
    assert body["status"] == "active"

    assert client.get("/api/students/1").get_json()["email"] == "emma.johnson@school.edu"
    assert client.patch("/api/students/1", json={"phone": "555-1111"}).get_json()["phone"] == "555-1111"
    assert [s["id"] for s in client.get("/api/students?q=emma").get_json()] == [1]
    assert client.get("/api/students?q=zzz").get_json() == []


def test_invalid_student_returns_field_errors(client, make_student):
    resp = client.post("/api/students", json=make_student(email="nope"))

    assert resp.status_code == 400
    assert "email" in resp.get_json()["errors"]


def test_missing_records_return_404(client):
    assert client.get("/api/students/99").status_code == 404
    assert client.get("/api/grades/99").status_code == 404
    assert client.get("/api/reports/students/99").status_code == 404


def test_delete_requires_confirmation(client, student_id):
    refused = client.delete(f"/api/students/{student_id}")
    assert refused.status_code == 400
    assert "confirm" in refused.get_json()["errors"]
    assert client.get(f"/api/students/{student_id}").status_code == 200

    assert client.delete(f"/api/students/{student_id}?confirm=true").status_code == 200
    assert client.get(f"/api/students/{student_id}").status_code == 404


def test_mark_attendance_is_an_upsert(client, student_id):
    payload = {"student_id": student_id, "date": "2024-10-15", "status": "present"}
    first = client.post("/api/attendance/mark", json=payload).get_json()
    second = client.post("/api/attendance/mark", json={**payload, "status": "late"}).get_json()

    assert first["id"] == second["id"]
    assert second["status"] == "late"
    assert len(client.get("/api/attendance?date=2024-10-15").get_json()) == 1

    stats = client.get("/api/attendance/stats?start=2024-10-01&end=2024-10-31").get_json()
    assert stats["total"] == 1
    assert stats["attendance_rate"] == 100.0


def test_attendance_stats_rejects_half_open_range(client):
    resp = client.get("/api/attendance/stats?start=2024-10-01")

    assert resp.status_code == 400
    assert "end" in resp.get_json()["errors"]


def test_grades_and_reports(client, student_id):
    for score in ("95", "72", "50"):
        resp = client.post(
            "/api/grades",
            json={
                "student_id": student_id,
                "subject": "Mathematics",
                "score": score,
                "max_score": "100",
                "term": "Mid-term Exam",
                "date": "2024-10-01",
            },
        )
        assert resp.status_code == 201

    stats = client.get("/api/grades/stats").get_json()
    assert stats["distribution"] == {"A": 1, "B": 0, "C": 1, "D": 0, "F": 1}
    assert stats["average_gpa"] == 2.0

    report = client.get("/api/reports/summary").get_json()
    assert report["totals"]["total_grades"] == 3
    assert report["grade_levels"] == [{"grade": "3rd Grade", "count": 1}]

    dashboard = client.get("/api/reports/dashboard?as_of=2024-10-15&days=7").get_json()
    assert dashboard["window"] == {"start": "2024-10-09", "end": "2024-10-15"}


def test_parent_communication_flow(client, student_id, make_parent):
    parent = client.post("/api/parents", json=make_parent([student_id])).get_json()

    created = client.post(
        f"/api/parents/{parent['id']}/communications",
        json={"type": "meeting", "subject": "Conference", "notes": "Went well."},
    )
    assert created.status_code == 201
    assert created.get_json()["student_ids"] == [student_id]
    assert created.get_json()["teacher_id"] == 1

    listed = client.get(f"/api/parents/{parent['id']}/communications").get_json()
    assert [c["subject"] for c in listed] == ["Conference"]
    assert client.get("/api/parents/42/communications").status_code == 404


def test_storage_failure_maps_to_502(client, container, monkeypatch):
    def boom(*args, **kwargs):
        raise TransportError("Lost connection to MySQL server")

    monkeypatch.setattr(container.student_service, "search", boom)

    resp = client.get("/api/students")

    assert resp.status_code == 502
    assert "MySQL" not in resp.get_json()["error"]
