from __future__ import annotations

from ..attendance.repository import AttendanceRepository
from ..core.enums import StatisticsBackend
from .sources.base import StatisticsSource
from .sources.random_source import RandomStatisticsSource
from .sources.recorded_source import RecordedStatisticsSource


def build_statistics_source(backend: StatisticsBackend, attendance: AttendanceRepository) -> StatisticsSource:
    """Factory Pattern: choose where report statistics come from."""
    if StatisticsBackend(backend) == StatisticsBackend.HTTP:
        return RecordedStatisticsSource(attendance)
    return RandomStatisticsSource()
