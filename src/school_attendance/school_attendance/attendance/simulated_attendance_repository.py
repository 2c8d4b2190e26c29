from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class SimulatedAttendanceRepository(AttendanceRepository):
    """Stand-in used while the API has no attendance endpoint.

    Saving only logs the payload; nothing is kept, so reading returns nothing.
    """

    def save_day(self, *, class_id: int, work_date: date, records: Sequence[AttendanceRecord]) -> None:
        logger.info(
            "Attendance for class %s on %s not persisted (simulated backend): %d records",
            class_id,
            work_date.isoformat(),
            len(records),
        )

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        return []
