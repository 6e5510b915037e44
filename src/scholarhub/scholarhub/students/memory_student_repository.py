from __future__ import annotations

from typing import Iterable

from ..common.memory_repository import InMemoryRepository
from .model import Student


class InMemoryStudentRepository(InMemoryRepository[Student]):
    entity_name = "Student"

    def __init__(self, records: Iterable[Student] = ()):
        super().__init__(Student, records)
