from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from ..common.rounding import round_half_up
from ..core.enums import LetterGrade
from .calculator import STANDARD_SCALE, percentage
from .model import Grade, SubjectAverage
from .scale.base import GradingScale


def empty_distribution() -> dict[str, int]:
    return {letter.value: 0 for letter in LetterGrade}


@dataclass(frozen=True)
class GradeStats:
    distribution: dict[str, int] = field(default_factory=empty_distribution)
    average_gpa: float = 0.0
    total_grades: int = 0
    subject_averages: dict[str, float] = field(default_factory=dict)
    average_percentage: float = 0.0


def _group_by_subject(grades: Iterable[Grade]) -> dict[str, list[float]]:
    # Subjects are case-sensitive keys kept in first-seen order.
    groups: dict[str, list[float]] = {}
    for g in grades:
        groups.setdefault(g.subject, []).append(percentage(g.score, g.max_score))
    return groups


def subject_breakdown(grades: Sequence[Grade]) -> list[SubjectAverage]:
    return [
        SubjectAverage(subject=subject, average=round_half_up(sum(pcts) / len(pcts), 1), count=len(pcts))
        for subject, pcts in _group_by_subject(grades).items()
    ]


def grade_stats(grades: Sequence[Grade], *, scale: GradingScale | None = None) -> GradeStats:
    """Distribution, average GPA and subject averages; zeroed for no grades."""
    grades = list(grades)
    if not grades:
        return GradeStats()

    scale = scale or STANDARD_SCALE
    distribution = empty_distribution()
    total_points = 0
    total_pct = 0.0
    for g in grades:
        pct = percentage(g.score, g.max_score)
        letter = scale.letter_for(pct)
        distribution[letter.value] += 1
        total_points += scale.points_for(letter)
        total_pct += pct

    return GradeStats(
        distribution=distribution,
        average_gpa=round_half_up(total_points / len(grades), 2),
        total_grades=len(grades),
        subject_averages={s.subject: s.average for s in subject_breakdown(grades)},
        average_percentage=round_half_up(total_pct / len(grades), 1),
    )


def distribution_percentages(distribution: Mapping[str, int]) -> dict[str, float]:
    total = sum(distribution.values())
    return {
        letter: (round_half_up(count / total * 100, 1) if total > 0 else 0.0)
        for letter, count in distribution.items()
    }
