"""Single-grade calculations.

Callers validate ``max_score > 0`` upstream; a zero maximum is not corrected
here and surfaces as ``ZeroDivisionError``.
"""

from __future__ import annotations


from ..core.enums import LetterGrade
from .scale.base import GradingScale
from .scale.standard_scale import StandardGradingScale

STANDARD_SCALE = StandardGradingScale()


def percentage(score: float, max_score: float) -> float:
    return score / max_score * 100


def letter_grade(score: float, max_score: float, *, scale: GradingScale | None = None) -> LetterGrade:
    return (scale or STANDARD_SCALE).letter_for(percentage(score, max_score))


def gpa_points(letter: LetterGrade, *, scale: GradingScale | None = None) -> int:
    return (scale or STANDARD_SCALE).points_for(letter)
