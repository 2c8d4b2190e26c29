"""Pure attendance arithmetic shared by every statistics source."""

from __future__ import annotations

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..attendance.model import AttendanceEntry
from ..core.constants import AT_RISK_THRESHOLD, AVERAGE_THRESHOLD, EXCELLENT_THRESHOLD, GOOD_THRESHOLD
from ..core.enums import AttendanceStatus
from .model import AttendanceStats, ReportSummary, StudentReport


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def attendance_percentage(present: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(present / total * 100)


def stats_from_counts(*, present: int, absent: int, late: int) -> AttendanceStats:
    total = present + absent + late
    return AttendanceStats(
        total_days=total,
        present_days=present,
        absent_days=absent,
        late_days=late,
        attendance_percentage=attendance_percentage(present, total),
    )


def stats_by_student(entries: Iterable[AttendanceEntry]) -> dict[int, AttendanceStats]:
    """Count marks by status for each student."""
    counts: dict[int, dict[AttendanceStatus, int]] = defaultdict(lambda: defaultdict(int))
    for e in entries:
        counts[e.student_id][e.status] += 1

    return {
        student_id: stats_from_counts(
            present=c[AttendanceStatus.PRESENT],
            absent=c[AttendanceStatus.ABSENT],
            late=c[AttendanceStatus.LATE],
        )
        for student_id, c in counts.items()
    }


def bucket(percentage: int) -> str:
    if percentage >= EXCELLENT_THRESHOLD:
        return "excellent"
    if percentage >= GOOD_THRESHOLD:
        return "good"
    if percentage >= AVERAGE_THRESHOLD:
        return "average"
    return "poor"


def average_percentage(rows: Sequence[StudentReport]) -> int:
    if not rows:
        return 0
    return round_half_up(sum(r.stats.attendance_percentage for r in rows) / len(rows))


def summarize(rows: Sequence[StudentReport]) -> ReportSummary:
    buckets = {"excellent": 0, "good": 0, "average": 0, "poor": 0}
    for r in rows:
        buckets[bucket(r.stats.attendance_percentage)] += 1

    return ReportSummary(
        total_students=len(rows),
        average_attendance=average_percentage(rows),
        at_risk=sum(1 for r in rows if r.stats.attendance_percentage < AT_RISK_THRESHOLD),
        **buckets,
    )
