from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry, AttendanceRecord


class AttendanceRepository(Protocol):
    def save_day(self, *, class_id: int, work_date: date, records: Sequence[AttendanceRecord]) -> None:
        """Upsert one mark per (student, class, date)."""

        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        raise NotImplementedError
