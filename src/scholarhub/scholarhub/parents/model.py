from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ParentRelationship


@dataclass(frozen=True)
class Parent:
    """Domain entity: a parent/guardian contact linked to one or more students."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    relationship: ParentRelationship
    student_ids: tuple[int, ...]
    address: str = ""
    occupation: str = ""
    work_phone: str = ""
    is_primary: bool = False
    emergency_contact: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
