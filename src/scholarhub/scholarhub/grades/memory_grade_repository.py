from __future__ import annotations

from typing import Iterable

from ..common.memory_repository import InMemoryRepository
from .model import Grade


class InMemoryGradeRepository(InMemoryRepository[Grade]):
    entity_name = "Grade"

    def __init__(self, records: Iterable[Grade] = ()):
        super().__init__(Grade, records)

    def get_by_student(self, student_id: int) -> list[Grade]:
        return self._filter(lambda g: g.student_id == int(student_id))

    def get_by_subject(self, subject: str) -> list[Grade]:
        return self._filter(lambda g: g.subject == subject)
