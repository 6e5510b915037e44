from __future__ import annotations

from typing import Iterable

from ..common.memory_repository import InMemoryRepository
from .model import Parent


class InMemoryParentRepository(InMemoryRepository[Parent]):
    entity_name = "Parent"

    def __init__(self, records: Iterable[Parent] = ()):
        super().__init__(Parent, records)

    def get_by_student_id(self, student_id: int) -> list[Parent]:
        return self._filter(lambda p: int(student_id) in p.student_ids)
