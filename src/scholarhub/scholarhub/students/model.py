from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import GradeLevel, StudentStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a student's identity and enrollment record."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: str
    grade: GradeLevel
    enrollment_date: str
    email: str
    phone: str
    guardian_name: str
    guardian_phone: str
    emergency_contact_name: str
    emergency_contact_phone: str
    emergency_contact_relationship: str
    address: str = ""
    guardian_email: str = ""
    status: StudentStatus = StudentStatus.ACTIVE

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
