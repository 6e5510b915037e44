from __future__ import annotations

from typing import Protocol, Sequence

from ..common.repository import Repository
from .model import Parent


class ParentRepository(Repository[Parent], Protocol):
    def get_by_student_id(self, student_id: int) -> Sequence[Parent]:
        raise NotImplementedError
