from __future__ import annotations

from typing import Protocol, Sequence

from ..common.repository import Repository
from .model import Grade


class GradeRepository(Repository[Grade], Protocol):
    def get_by_student(self, student_id: int) -> Sequence[Grade]:
        raise NotImplementedError

    def get_by_subject(self, subject: str) -> Sequence[Grade]:
        raise NotImplementedError
