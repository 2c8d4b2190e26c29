from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..classes.model import SchoolClass
from ..core.constants import AT_RISK_THRESHOLD
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceStats:
    total_days: int
    present_days: int
    absent_days: int
    late_days: int
    attendance_percentage: int


@dataclass(frozen=True)
class StudentReport:
    """Read-model: a student joined with their statistics for the report window."""

    student: Student
    stats: AttendanceStats

    @property
    def at_risk(self) -> bool:
        return self.stats.attendance_percentage < AT_RISK_THRESHOLD


@dataclass(frozen=True)
class ReportSummary:
    total_students: int
    average_attendance: int
    at_risk: int
    excellent: int
    good: int
    average: int
    poor: int


@dataclass(frozen=True)
class ClassSummary:
    school_class: SchoolClass
    student_count: int
    average_attendance: Optional[int]


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    class_id: Optional[int]
    seed: Optional[int]
    rows: list[StudentReport]
    summary: ReportSummary
    class_summaries: list[ClassSummary]
