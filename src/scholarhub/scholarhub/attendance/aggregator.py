from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..common.rounding import round_half_up
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, DateRange


@dataclass(frozen=True)
class AttendanceStats:
    total: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0
    attendance_rate: float = 0.0


def stats_for(records: Iterable[AttendanceRecord], date_range: DateRange | None = None) -> AttendanceStats:
    """Status counts and attendance rate over recorded entries.

    The rate is (present + late + excused) / total, in percent with one decimal.
    Students without a record in the period are not counted.
    """
    counts = {status: 0 for status in AttendanceStatus}
    total = 0
    for r in records:
        if date_range is not None and not date_range.contains(r.date):
            continue
        counts[AttendanceStatus(r.status)] += 1
        total += 1

    attended = counts[AttendanceStatus.PRESENT] + counts[AttendanceStatus.LATE] + counts[AttendanceStatus.EXCUSED]
    return AttendanceStats(
        total=total,
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        excused=counts[AttendanceStatus.EXCUSED],
        attendance_rate=round_half_up(attended / total * 100, 1) if total > 0 else 0.0,
    )


def daily_stats(records: Iterable[AttendanceRecord], day: str) -> AttendanceStats:
    return stats_for(records, DateRange(day, day))
