from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CommunicationType


@dataclass(frozen=True)
class Communication:
    """Domain entity: a logged parent-teacher interaction."""

    id: int
    parent_id: int
    teacher_id: int
    student_ids: tuple[int, ...]
    type: CommunicationType
    subject: str
    notes: str
    created_at: str
    updated_at: str
    follow_up_required: bool = False
    follow_up_date: str | None = None
