from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...attendance.repository import AttendanceRepository
from ...students.model import Student
from ..model import AttendanceStats
from ..statistics import stats_by_student, stats_from_counts
from .base import StatisticsSource


class RecordedStatisticsSource(StatisticsSource):
    """Statistics counted from the marks saved in the API for [start, end]."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def stats_for(
        self,
        students: Sequence[Student],
        *,
        start: date,
        end: date,
        class_id: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> dict[int, AttendanceStats]:
        entries = [
            e
            for e in self._attendance.list_range(start_date=start, end_date=end, class_id=class_id)
            if start <= e.work_date <= end
        ]
        counted = stats_by_student(entries)
        empty = stats_from_counts(present=0, absent=0, late=0)
        return {s.student_id: counted.get(s.student_id, empty) for s in students}
