from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import AttendanceEntry, AttendanceRecord, AttendanceSummary


def build_roster(students: Iterable[Student], class_id: Optional[int]) -> list[Student]:
    """Students marked for a class: its members plus anyone not assigned to a class.

    Without a class every student is on the roster.
    """

    if not class_id:
        return list(students)
    return [s for s in students if s.class_id in (None, class_id)]


def status_field(student_id: int) -> str:
    return f"status-{student_id}"


def remarks_field(student_id: int) -> str:
    return f"remarks-{student_id}"


class AttendanceSheet:
    """State of one marking session: one record per roster student.

    Records are created once, all Present, when the roster loads. Afterwards
    only their status/remarks change; none is ever added or removed.
    """

    def __init__(self, *, roster: Sequence[Student], work_date: date, class_id: Optional[int] = None):
        self.roster = list(roster)
        self.work_date = work_date
        self.class_id = class_id
        self._records = {s.student_id: AttendanceRecord(student_id=s.student_id) for s in self.roster}

    @property
    def records(self) -> list[AttendanceRecord]:
        return [self._records[s.student_id] for s in self.roster]

    def record(self, student_id: int) -> AttendanceRecord:
        return self._records[int(student_id)]

    def set_status(self, student_id: int, status: AttendanceStatus) -> None:
        rec = self._records.get(int(student_id))
        if rec is not None:
            rec.status = AttendanceStatus(status)

    def set_remarks(self, student_id: int, remarks: str) -> None:
        rec = self._records.get(int(student_id))
        if rec is not None:
            rec.remarks = (remarks or "").strip()

    def mark_all(self, status: AttendanceStatus) -> None:
        status = AttendanceStatus(status)
        for rec in self._records.values():
            rec.status = status

    def apply_entries(self, entries: Iterable[AttendanceEntry]) -> None:
        """Prefill from marks already saved for this day."""
        for e in entries:
            if e.work_date != self.work_date:
                continue
            self.set_status(e.student_id, e.status)
            self.set_remarks(e.student_id, e.remarks)

    def apply_draft(self, form: Mapping[str, str]) -> None:
        """Restore the draft posted back by the marking form.

        Unknown or missing values leave the record as it is.
        """

        for student_id in self._records:
            raw_status = form.get(status_field(student_id))
            if raw_status:
                try:
                    self.set_status(student_id, AttendanceStatus(raw_status))
                except ValueError:
                    pass
            raw_remarks = form.get(remarks_field(student_id))
            if raw_remarks is not None:
                self.set_remarks(student_id, raw_remarks)

    def summary(self) -> AttendanceSummary:
        records = self.records
        return AttendanceSummary(
            total=len(self.roster),
            present=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
            absent=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
            late=sum(1 for r in records if r.status == AttendanceStatus.LATE),
        )
