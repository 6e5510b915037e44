from __future__ import annotations

from typing import Protocol, Sequence

from ..common.repository import Repository
from .model import Communication


class CommunicationRepository(Repository[Communication], Protocol):
    """Lookups return newest first (by created_at)."""

    def get_by_parent_id(self, parent_id: int) -> Sequence[Communication]:
        raise NotImplementedError

    def get_by_student_id(self, student_id: int) -> Sequence[Communication]:
        raise NotImplementedError
