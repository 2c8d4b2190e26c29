from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...students.model import Student
from ..model import AttendanceStats


class StatisticsSource(ABC):
    """Strategy Pattern: where per-student attendance statistics come from."""

    @abstractmethod
    def stats_for(
        self,
        students: Sequence[Student],
        *,
        start: date,
        end: date,
        class_id: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> dict[int, AttendanceStats]:
        raise NotImplementedError
