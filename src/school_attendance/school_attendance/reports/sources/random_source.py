from __future__ import annotations

import random
from datetime import date
from typing import Optional, Sequence

from ...students.model import Student
from ..model import AttendanceStats
from ..statistics import attendance_percentage
from .base import StatisticsSource


class RandomStatisticsSource(StatisticsSource):
    """Synthetic statistics for demos while no attendance is persisted.

    The same seed always yields the same numbers, so a report and its CSV
    export agree.
    """

    def stats_for(
        self,
        students: Sequence[Student],
        *,
        start: date,
        end: date,
        class_id: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> dict[int, AttendanceStats]:
        rng = random.Random(seed)
        return {s.student_id: self._one(rng) for s in students}

    @staticmethod
    def _one(rng: random.Random) -> AttendanceStats:
        total = rng.randint(20, 49)
        present = int(total * (0.7 + rng.random() * 0.3))
        late = min(rng.randint(0, 4), total - present)
        absent = total - present - late
        return AttendanceStats(
            total_days=total,
            present_days=present,
            absent_days=absent,
            late_days=late,
            attendance_percentage=attendance_percentage(present, total),
        )
