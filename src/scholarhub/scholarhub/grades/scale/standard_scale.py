from __future__ import annotations

from ...core.enums import LetterGrade
from .base import GradingScale

# Lower bounds are inclusive: 90.0 is an A, 89.999 is a B.
_BANDS = (
    (90.0, LetterGrade.A),
    (80.0, LetterGrade.B),
    (70.0, LetterGrade.C),
    (60.0, LetterGrade.D),
)

_POINTS = {
    LetterGrade.A: 4,
    LetterGrade.B: 3,
    LetterGrade.C: 2,
    LetterGrade.D: 1,
    LetterGrade.F: 0,
}


class StandardGradingScale(GradingScale):
    """Standard rule: 90/80/70/60 bands, A=4 down to F=0."""

    def letter_for(self, percentage: float) -> LetterGrade:
        for lower_bound, letter in _BANDS:
            if percentage >= lower_bound:
                return letter
        return LetterGrade.F

    def points_for(self, letter: LetterGrade) -> int:
        return _POINTS[LetterGrade(letter)]
