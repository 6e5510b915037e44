"""Example: drive the service layer directly (no Flask), on the in-memory backend."""

from src.scholarhub.scholarhub.container import build_container


def main():
    container = build_container(backend="memory")

    emma = container.student_service.create(
        {
            "first_name": "Emma",
            "last_name": "Johnson",
            "date_of_birth": "2015-03-14",
            "grade": "3rd Grade",
            "enrollment_date": "2021-09-01",
            "email": "emma.johnson@school.edu",
            "phone": "555-0101",
            "guardian_name": "Sarah Johnson",
            "guardian_phone": "555-0102",
            "emergency_contact_name": "Tom Johnson",
            "emergency_contact_phone": "555-0103",
            "emergency_contact_relationship": "Parent",
        }
    )
    container.grade_service.create(
        {"student_id": emma.id, "subject": "Mathematics", "score": "95", "max_score": "100",
         "term": "First Quarter", "date": "2024-10-15"}
    )
    container.attendance_service.mark_attendance(emma.id, "2024-10-15", "present")
    container.attendance_service.mark_attendance(emma.id, "2024-10-15", "late", "Bus delay")

    print(container.report_service.build_report())


if __name__ == "__main__":
    main()
