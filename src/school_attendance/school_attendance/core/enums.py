from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of one student on one day, as sent to the API."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class Tab(str, Enum):
    """Screens of the navigation shell."""

    STUDENTS = "students"
    CLASSES = "classes"
    ATTENDANCE = "attendance"
    REPORTS = "reports"


class ReportView(str, Enum):
    OVERVIEW = "overview"
    DETAILED = "detailed"
    CLASS = "class"


class AttendanceBackend(str, Enum):
    SIMULATED = "simulated"
    HTTP = "http"


class StatisticsBackend(str, Enum):
    RANDOM = "random"
    HTTP = "http"
