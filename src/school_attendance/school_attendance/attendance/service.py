from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional

from ..classes.repository import ClassRepository
from ..core.exceptions import PreconditionError
from ..students.repository import StudentRepository
from .repository import AttendanceRepository
from .sheet import AttendanceSheet, build_roster

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases of the Attendance Marking screen."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        classes: ClassRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._classes = classes

    def list_classes(self):
        return list(self._classes.list_all())

    def open_sheet(
        self,
        *,
        work_date: date,
        class_id: Optional[int] = None,
        draft: Optional[Mapping[str, str]] = None,
    ) -> AttendanceSheet:
        """Load the roster and build the sheet.

        A fresh sheet starts all Present (or with the marks already saved for
        that day); a posted draft then overrides it.
        """

        roster = build_roster(self._students.list_all(), class_id)
        sheet = AttendanceSheet(roster=roster, work_date=work_date, class_id=class_id)
        if draft is None:
            if class_id:
                sheet.apply_entries(
                    self._attendance.list_range(start_date=work_date, end_date=work_date, class_id=class_id)
                )
        else:
            sheet.apply_draft(draft)
        return sheet

    def save(self, sheet: AttendanceSheet) -> int:
        if not sheet.class_id:
            raise PreconditionError("Please select a class")

        records = sheet.records
        self._attendance.save_day(class_id=sheet.class_id, work_date=sheet.work_date, records=records)
        logger.info("Saved attendance for class %s on %s (%d students)", sheet.class_id, sheet.work_date, len(records))
        return len(records)
