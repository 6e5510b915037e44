from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import LetterGrade


class GradingScale(ABC):
    """Grading scale interface (Strategy Pattern for letter grades)."""

    @abstractmethod
    def letter_for(self, percentage: float) -> LetterGrade:
        raise NotImplementedError

    @abstractmethod
    def points_for(self, letter: LetterGrade) -> int:
        raise NotImplementedError
