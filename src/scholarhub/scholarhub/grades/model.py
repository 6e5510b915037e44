from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Term


@dataclass(frozen=True)
class Grade:
    """Domain entity: one scored assessment for a student."""

    id: int
    student_id: int
    subject: str
    score: float
    max_score: float
    term: Term
    date: str


@dataclass(frozen=True)
class SubjectAverage:
    """Read-model: average percentage of one subject's grades."""

    subject: str
    average: float
    count: int
