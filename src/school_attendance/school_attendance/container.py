from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .api.connection import ApiConfig, ApiConnection
from .attendance.factory import build_attendance_repository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.http_class_repository import HttpClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.enums import AttendanceBackend, StatisticsBackend
from .reports.factory import build_statistics_source
from .reports.service import ReportService
from .students.http_student_repository import HttpStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    classes_repo: ClassRepository
    attendance_repo: AttendanceRepository

    student_service: StudentService
    class_service: ClassService
    attendance_service: AttendanceService
    report_service: ReportService


def build_services(
    *,
    students_repo: StudentRepository,
    classes_repo: ClassRepository,
    attendance_repo: AttendanceRepository,
    report_source: StatisticsBackend = StatisticsBackend.RANDOM,
) -> Container:
    """Wire services over the given repositories (tests pass in-memory fakes)."""
    return Container(
        students_repo=students_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        student_service=StudentService(students_repo),
        class_service=ClassService(classes_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, classes_repo),
        report_service=ReportService(
            students_repo,
            classes_repo,
            build_statistics_source(report_source, attendance_repo),
        ),
    )


def build_container(
    *,
    api_base_url: str,
    api_timeout: Optional[float] = None,
    attendance_backend: AttendanceBackend = AttendanceBackend.SIMULATED,
    report_source: StatisticsBackend = StatisticsBackend.RANDOM,
) -> Container:
    conn = ApiConnection.get_instance(ApiConfig(base_url=api_base_url, timeout=api_timeout))

    return build_services(
        students_repo=HttpStudentRepository(conn),
        classes_repo=HttpClassRepository(conn),
        attendance_repo=build_attendance_repository(attendance_backend, conn),
        report_source=report_source,
    )
