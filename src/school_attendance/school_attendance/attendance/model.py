from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass
class AttendanceRecord:
    """One student's mark inside a marking session. Only its fields change."""

    student_id: int
    status: AttendanceStatus = AttendanceStatus.PRESENT
    remarks: str = ""


@dataclass(frozen=True)
class AttendanceEntry:
    """A persisted mark as read back from the API (student, class, day)."""

    student_id: int
    class_id: Optional[int]
    work_date: date
    status: AttendanceStatus
    remarks: str = ""


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int
    late: int
