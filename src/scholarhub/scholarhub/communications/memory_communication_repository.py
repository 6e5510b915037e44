from __future__ import annotations

from typing import Callable, Iterable

from ..common.memory_repository import InMemoryRepository
from .model import Communication


class InMemoryCommunicationRepository(InMemoryRepository[Communication]):
    entity_name = "Communication"

    def __init__(self, records: Iterable[Communication] = ()):
        super().__init__(Communication, records)

    def _newest_first(self, predicate: Callable[[Communication], bool]) -> list[Communication]:
        items = self._filter(predicate)
        items.sort(key=lambda c: c.created_at, reverse=True)
        return items

    def get_by_parent_id(self, parent_id: int) -> list[Communication]:
        return self._newest_first(lambda c: c.parent_id == int(parent_id))

    def get_by_student_id(self, student_id: int) -> list[Communication]:
        return self._newest_first(lambda c: int(student_id) in c.student_ids)
