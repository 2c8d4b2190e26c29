from __future__ import annotations

from ..api.connection import ApiConnection
from ..core.enums import AttendanceBackend
from .http_attendance_repository import HttpAttendanceRepository
from .repository import AttendanceRepository
from .simulated_attendance_repository import SimulatedAttendanceRepository


def build_attendance_repository(backend: AttendanceBackend, conn: ApiConnection) -> AttendanceRepository:
    """Factory Pattern: choose where marks are saved."""
    if AttendanceBackend(backend) == AttendanceBackend.HTTP:
        return HttpAttendanceRepository(conn)
    return SimulatedAttendanceRepository()
